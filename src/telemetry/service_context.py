"""Service context telemetry initializer.

This module reads the service identity (role name and component version) and
an arbitrary property bag from APPINSIGHTS_APP_* environment variables, once,
when the initializer is constructed. The resulting snapshot is immutable and
is applied to every telemetry record handed to ``enrich``.

Values coming from the environment take precedence over values the host SDK
has already put on the record. When the environment is silent for a given
slot, the value on the record is left untouched.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Optional

from constants import (
    APP_CONTEXT_ENV_VAR_PREFIX,
    APP_NAME_ENV_VAR,
    APP_VERSION_ENV_VAR,
)
from log import get_logger
from telemetry.interface import TelemetryInitializer

logger = get_logger(__name__)

CONTEXT_PREFIX_LENGTH = len(APP_CONTEXT_ENV_VAR_PREFIX)


@dataclass(frozen=True)
class ServiceContextSnapshot:
    """Service context read from the environment.

    Attributes:
        name: Role name to apply to records, None when not configured.
        version: Component version to apply to records, None when not configured.
        context: Read-only property bag entries to apply to records.
    """

    name: Optional[str] = None
    version: Optional[str] = None
    context: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def is_empty(self) -> bool:
        """Check whether enrichment with this snapshot is a no-op.

        Returns:
            bool: True when neither name, version nor any context entry is set.
        """
        return self.name is None and self.version is None and not self.context


def normalize_value(value: Optional[str]) -> Optional[str]:
    """Treat an unset or empty value as absent.

    Parameters:
        value: Raw value, possibly None or empty.

    Returns:
        The value verbatim, or None when it is None or empty.
    """
    if not value:
        return None
    return value


def is_context_variable(variable: str) -> bool:
    """Check whether an environment variable contributes to the property bag.

    The prefix is compared case-insensitively, ASCII letters only, so that
    characters such as the dotless i never fold onto the prefix.

    Parameters:
        variable: Name of the environment variable.

    Returns:
        bool: True when the name starts with the context prefix.
    """
    prefix = variable[:CONTEXT_PREFIX_LENGTH]
    return prefix.isascii() and prefix.upper() == APP_CONTEXT_ENV_VAR_PREFIX


def parse_context(environment: Optional[Mapping[Any, Any]]) -> dict[str, str]:
    """Collect property bag entries from environment variables.

    Every variable whose name starts with the context prefix contributes one
    entry keyed by the rest of its name, with its original case kept. When two
    variables end up with the same key, the first one enumerated wins.
    Variables holding None are unset and contribute nothing.

    Parameters:
        environment: Mapping of variable names to values, or None.

    Returns:
        A new dict of stripped variable names to their values.
    """
    context: dict[str, str] = {}
    if environment is None:
        return context

    for variable, value in environment.items():
        variable_name = str(variable)
        if not is_context_variable(variable_name):
            continue
        if value is None:
            logger.debug("Ignoring %s, variable is unset", variable_name)
            continue
        key = variable_name[CONTEXT_PREFIX_LENGTH:]
        if key in context:
            logger.debug(
                "Ignoring %s, context key '%s' is already set", variable_name, key
            )
            continue
        context[key] = str(value)

    return context


def build_snapshot(
    name: Optional[str],
    version: Optional[str],
    environment: Optional[Mapping[Any, Any]],
) -> ServiceContextSnapshot:
    """Build an immutable service context snapshot.

    Parameters:
        name: Role name, None or empty when not configured.
        version: Component version, None or empty when not configured.
        environment: Mapping scanned for context variables.

    Returns:
        ServiceContextSnapshot: The frozen snapshot.
    """
    snapshot = ServiceContextSnapshot(
        name=normalize_value(name),
        version=normalize_value(version),
        context=MappingProxyType(parse_context(environment)),
    )
    if snapshot.is_empty:
        logger.debug("No service context configured, records are left as is")
        return snapshot

    logger.debug(
        "Service context: name=%s, version=%s, context keys=%s",
        snapshot.name,
        snapshot.version,
        sorted(snapshot.context),
    )
    return snapshot


class ServiceContextTelemetryInitializer(TelemetryInitializer):
    """Telemetry initializer applying the service context to every record."""

    def __init__(
        self,
        name: Optional[str] = None,
        version: Optional[str] = None,
        environment: Optional[Mapping[Any, Any]] = None,
    ) -> None:
        """Initialize the initializer from explicit values.

        Use ``from_environment`` to read the process environment instead.

        Parameters:
            name: Role name, None or empty when not configured.
            version: Component version, None or empty when not configured.
            environment: Mapping scanned for context variables.
        """
        self._snapshot = build_snapshot(name, version, environment)

    @classmethod
    def from_environment(cls) -> "ServiceContextTelemetryInitializer":
        """Create the initializer from the process environment.

        Name and version are looked up by their exact (case-sensitive)
        variable names, context variables by case-insensitive prefix.

        Returns:
            ServiceContextTelemetryInitializer: Initializer holding the
            snapshot of the environment taken at this call.
        """
        environment = dict(os.environ)
        return cls(
            environment.get(APP_NAME_ENV_VAR),
            environment.get(APP_VERSION_ENV_VAR),
            environment,
        )

    @property
    def snapshot(self) -> ServiceContextSnapshot:
        """Service context applied by this initializer."""
        return self._snapshot

    def enrich(self, record: Any) -> None:
        """Apply the service context to a telemetry record in place.

        Environment-supplied values override whatever the SDK already set;
        slots the environment does not configure are left as they are.

        Parameters:
            record: Telemetry record to enrich.
        """
        snapshot = self._snapshot
        context = record.context

        if snapshot.version is not None:
            context.component.version = snapshot.version

        if snapshot.name is not None:
            context.cloud.role_name = snapshot.name

        properties = context.properties
        for key, value in snapshot.context.items():
            properties[key] = value
