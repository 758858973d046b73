"""Models describing a telemetry record as handed over by the host SDK."""

from datetime import UTC, datetime
from typing import Optional

from pydantic import BaseModel, Field


class CloudContext(BaseModel):
    """Cloud-related part of the telemetry context.

    Attributes:
        role_name: Logical name of the service producing the record.
    """

    role_name: Optional[str] = Field(
        None,
        description="Logical name of the service producing the record",
        examples=["checkout"],
    )


class ComponentContext(BaseModel):
    """Component-related part of the telemetry context.

    Attributes:
        version: Software version of the producing component.
    """

    version: Optional[str] = Field(
        None,
        description="Software version of the producing component",
        examples=["1.2.3"],
    )


class TelemetryContext(BaseModel):
    """Context attached to every telemetry record.

    Attributes:
        cloud: Cloud context carrying the role name.
        component: Component context carrying the version.
        properties: Arbitrary string dimensions attached to the record.
    """

    cloud: CloudContext = Field(default_factory=CloudContext)
    component: ComponentContext = Field(default_factory=ComponentContext)
    properties: dict[str, str] = Field(
        default_factory=dict,
        description="Arbitrary string dimensions attached to the record",
        examples=[{"Region": "eu-west"}],
    )


class TelemetryRecord(BaseModel):
    """A single unit of telemetry (event, metric, span...) about to be emitted.

    Attributes:
        name: Name of the event or operation.
        timestamp: When the record was created.
        context: Context enriched by telemetry initializers.
    """

    name: str = Field(..., description="Name of the event or operation")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    context: TelemetryContext = Field(default_factory=TelemetryContext)
