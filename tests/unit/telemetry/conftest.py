"""Shared fixtures for telemetry unit tests."""

from typing import Optional

import pytest

from models.telemetry import (
    CloudContext,
    ComponentContext,
    TelemetryContext,
    TelemetryRecord,
)

SAMPLE_ENVIRONMENT: dict[str, str] = {
    "APPINSIGHTS_APP_NAME": "checkout",
    "APPINSIGHTS_APP_VERSION": "1.2.3",
    "APPINSIGHTS_APP_CONTEXT_Region": "eu-west",
    "appinsights_app_context_Tier": "prod",
    "PATH": "/usr/bin:/bin",
    "HOME": "/home/service",
}


def build_record(
    role_name: Optional[str] = None,
    version: Optional[str] = None,
    properties: Optional[dict[str, str]] = None,
) -> TelemetryRecord:
    """Build a telemetry record with the given pre-set slots."""
    return TelemetryRecord(
        name="request",
        context=TelemetryContext(
            cloud=CloudContext(role_name=role_name),
            component=ComponentContext(version=version),
            properties=dict(properties or {}),
        ),
    )


@pytest.fixture(name="empty_record")
def empty_record_fixture() -> TelemetryRecord:
    """Record with no role name, no version and no properties."""
    return build_record()


@pytest.fixture(name="preset_record")
def preset_record_fixture() -> TelemetryRecord:
    """Record already populated by the SDK."""
    return build_record(role_name="r", version="v", properties={"k": "w"})
