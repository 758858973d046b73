"""Constants used in business logic."""

from typing import Final

# Environment variable holding the role name applied to every record
APP_NAME_ENV_VAR: Final[str] = "APPINSIGHTS_APP_NAME"

# Environment variable holding the component version applied to every record
APP_VERSION_ENV_VAR: Final[str] = "APPINSIGHTS_APP_VERSION"

# Variables starting with this prefix (compared case-insensitively) contribute
# to the record's property bag, keyed by the remainder of their name
APP_CONTEXT_ENV_VAR_PREFIX: Final[str] = "APPINSIGHTS_APP_CONTEXT_"

# Logging
SERVICE_CONTEXT_LOG_LEVEL_ENV_VAR: Final[str] = "SERVICE_CONTEXT_LOG_LEVEL"
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
