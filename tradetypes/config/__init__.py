from .settings import (
    Environment,
    ErrorPolicySettings,
    LoggingSettings,
    Settings,
    ValidationSettings,
    get_settings,
)

__all__ = [
    "Environment",
    "ErrorPolicySettings",
    "LoggingSettings",
    "Settings",
    "ValidationSettings",
    "get_settings",
]
