"""
WiFi Connector - send WiFi credentials to a Bluetooth device.

A single-page form that collects WiFi credentials and a target device,
can ask a language model for a strong password, and simulates sending
the credentials with a random outcome.
"""

__version__ = "1.0.0"
__author__ = "WiFi Connector Contributors"

from wificonnector.config import ConnectorConfig, load_config
from wificonnector.controller import ActionState, FormController, Notification
from wificonnector.devices import DEVICES
from wificonnector.exceptions import PasswordSuggestionError, WifiConnectorError
from wificonnector.form import CredentialForm, validate_credentials, validate_field
from wificonnector.sender import CredentialSender, SendOutcome, SendStatus
from wificonnector.suggestion import PasswordSuggestionService, SuggestedPassword

__all__ = [
    # Version
    "__version__",
    # Config
    "ConnectorConfig",
    "load_config",
    # Form
    "DEVICES",
    "CredentialForm",
    "validate_credentials",
    "validate_field",
    # Actions
    "ActionState",
    "FormController",
    "Notification",
    "CredentialSender",
    "SendOutcome",
    "SendStatus",
    "PasswordSuggestionService",
    "SuggestedPassword",
    # Errors
    "WifiConnectorError",
    "PasswordSuggestionError",
]
