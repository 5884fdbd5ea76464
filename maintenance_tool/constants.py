"""Global constants for maintenance-tool"""

from enum import Enum

APP_NAME = "maintenance-tool"
CONFIG_VERSION = "1.0"

# Project identification
PROJECT_CONFIG_FILE = ".maintenance-tool.yaml"

# Maintenance bundle (relative to project root)
DEFAULT_MAINTENANCE_DOCUMENT = "web/maintenance.html"
DEFAULT_ICON = "web/favicon.png"

# Publish directory served by the hosting provider
DEFAULT_PUBLISH_DIR = "build/web"
DEFAULT_DOCUMENT_NAME = "index.html"
DEFAULT_ICON_NAME = "favicon.png"

# External commands
DEFAULT_BUILD_COMMAND = "flutter build web"
DEFAULT_DEPLOY_COMMAND = "firebase deploy --only hosting"

# Push notification fallbacks
DEFAULT_NOTIFICATION_TITLE = "Nobblet Message"
DEFAULT_NOTIFICATION_BODY = "You have a new message"
DEFAULT_NOTIFICATION_ICON = "/favicon.png"

# Staging directory prefix inside the publish directory
STAGING_DIR_PREFIX = ".maintenance-staging-"

# Logging
LOG_FORMAT = "%(message)s"

# Environment variables
ENV_CONFIG_PATH = "MAINTENANCE_TOOL_CONFIG"
ENV_PROJECT_ROOT = "MAINTENANCE_TOOL_PROJECT_ROOT"
ENV_LOG_LEVEL = "MAINTENANCE_TOOL_LOG_LEVEL"


class SiteState(Enum):
    """Externally observed state of the publish directory"""
    MAINTENANCE = "maintenance"
    LIVE = "live"
    EMPTY = "empty"


# Error codes
class ErrorCode:
    CONFIG_FORMAT_ERROR = "MT001"
    PROJECT_NOT_FOUND = "MT002"
    ASSET_NOT_FOUND = "MT003"
    COPY_FAILED = "MT004"
    COMMAND_FAILED = "MT005"


# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"
EMOJI_WARNING = "⚠"
EMOJI_ROCKET = "🚀"

# Messages templates
MSG_RESTORE_SUCCESS = f"{EMOJI_SUCCESS} Your application has been restored to normal operation!"
MSG_RECOVERY_STEPS = "Please try again or manually run:\n1. {build_command}\n2. {deploy_command}"
