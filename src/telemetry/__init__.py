"""Telemetry module for service context enrichment.

This module provides a telemetry initializer that stamps every record with
the service role name, the component version and a property bag, all read
once from APPINSIGHTS_APP_* environment variables.
"""
