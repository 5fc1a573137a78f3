"""Exceptions raised by WiFi Connector."""


class WifiConnectorError(Exception):
    """Base class for WiFi Connector errors."""


class ConfigError(WifiConnectorError):
    """Configuration file could not be loaded."""


class PasswordSuggestionError(WifiConnectorError):
    """The password provider failed or returned an unusable response."""
