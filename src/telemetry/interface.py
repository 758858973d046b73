"""Abstract base class for telemetry initializers."""

from abc import ABC, abstractmethod
from typing import Any


class TelemetryInitializer(ABC):  # pylint: disable=too-few-public-methods
    """Base class for hooks run by the host pipeline on every record."""

    @abstractmethod
    def enrich(self, record: Any) -> None:
        """Mutate the telemetry record in place before it is emitted.

        Parameters:
            record: Telemetry record exposing ``context.cloud.role_name``,
                ``context.component.version`` and ``context.properties``.
        """
