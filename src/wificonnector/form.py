"""
Credential form schema and validation rules.

Each field has a single rule with a fixed, user-facing message. The same
checks back both the per-field validation used while the user types and
the CredentialForm model the form is submitted as.
"""

from typing import Any, Callable, Optional

from pydantic import BaseModel, ValidationError, ValidationInfo, field_validator

from wificonnector.devices import is_known_device

FIELDS = ("ssid", "password", "device")

PASSWORD_MIN_LENGTH = 8

SSID_REQUIRED = "SSID is required."
PASSWORD_TOO_SHORT = f"Password must be at least {PASSWORD_MIN_LENGTH} characters."
DEVICE_REQUIRED = "Please select a device."
DEVICE_UNKNOWN = "Please select a valid device."


def _check_ssid(value: Any) -> Optional[str]:
    if not value:
        return SSID_REQUIRED
    return None


def _check_password(value: Any) -> Optional[str]:
    if not isinstance(value, str) or len(value) < PASSWORD_MIN_LENGTH:
        return PASSWORD_TOO_SHORT
    return None


def _check_device(value: Any) -> Optional[str]:
    if not value:
        return DEVICE_REQUIRED
    if not isinstance(value, str) or not is_known_device(value):
        return DEVICE_UNKNOWN
    return None


_CHECKS: dict[str, Callable[[Any], Optional[str]]] = {
    "ssid": _check_ssid,
    "password": _check_password,
    "device": _check_device,
}


def validate_field(name: str, value: Any) -> Optional[str]:
    """Validate a single form field.

    Args:
        name: Field name (ssid, password or device)
        value: Current field value

    Returns:
        Validation message, or None if the value is valid

    Raises:
        KeyError: If the field name is unknown
    """
    return _CHECKS[name](value)


def validate_credentials(values: dict[str, Any]) -> dict[str, str]:
    """Validate all form fields at once.

    Missing fields are validated as empty.

    Args:
        values: Mapping of field name to value

    Returns:
        Mapping of field name to message for every invalid field
    """
    errors = {}
    for name in FIELDS:
        message = validate_field(name, values.get(name, ""))
        if message:
            errors[name] = message
    return errors


class CredentialForm(BaseModel):
    """WiFi credentials and the device they are meant for."""

    ssid: str = ""
    password: str = ""
    device: str = ""

    model_config = {
        "extra": "ignore",
        "validate_default": True,
    }

    @field_validator("ssid", "password", "device", mode="before")
    @classmethod
    def validate_rule(cls, v: Any, info: ValidationInfo) -> Any:
        """Apply the field's form rule."""
        message = validate_field(info.field_name, v)
        if message:
            raise ValueError(message)
        return v


def form_errors(exc: ValidationError) -> dict[str, str]:
    """Map a CredentialForm validation error to per-field messages.

    Args:
        exc: Error raised while building a CredentialForm

    Returns:
        Mapping of field name to the first message for that field
    """
    errors: dict[str, str] = {}
    for error in exc.errors():
        if not error["loc"]:
            continue
        field = str(error["loc"][0])
        ctx_error = error.get("ctx", {}).get("error")
        message = str(ctx_error) if ctx_error is not None else error["msg"]
        errors.setdefault(field, message)
    return errors
