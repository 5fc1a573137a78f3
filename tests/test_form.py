"""Tests for form validation rules."""

import pytest
from pydantic import ValidationError

from wificonnector.devices import DEVICES, is_known_device
from wificonnector.form import (
    DEVICE_REQUIRED,
    DEVICE_UNKNOWN,
    PASSWORD_TOO_SHORT,
    SSID_REQUIRED,
    CredentialForm,
    form_errors,
    validate_credentials,
    validate_field,
)

VALID = {"ssid": "Home", "password": "Password123!", "device": "RPi"}


class TestDevices:
    """Tests for the device list."""

    def test_four_devices_in_display_order(self):
        """The select box offers exactly four devices."""
        assert DEVICES == ("RPi", "My Laptop", "Smart TV", "Bluetooth Speaker")

    @pytest.mark.parametrize("name", DEVICES)
    def test_known_devices(self, name: str):
        assert is_known_device(name)

    @pytest.mark.parametrize("name", ["", "rpi", "Toaster", "RPi "])
    def test_unknown_devices(self, name: str):
        assert not is_known_device(name)


class TestValidateField:
    """Tests for per-field validation."""

    def test_ssid_required(self):
        assert validate_field("ssid", "") == SSID_REQUIRED
        assert validate_field("ssid", None) == SSID_REQUIRED

    def test_ssid_single_character_is_valid(self):
        assert validate_field("ssid", "x") is None

    def test_password_minimum_length(self):
        """Passwords shorter than 8 characters are rejected."""
        assert validate_field("password", "1234567") == PASSWORD_TOO_SHORT
        assert validate_field("password", "12345678") is None

    def test_password_character_classes_not_checked(self):
        """Only the length rule applies locally."""
        assert validate_field("password", "aaaaaaaa") is None

    def test_device_required(self):
        assert validate_field("device", "") == DEVICE_REQUIRED

    def test_device_outside_closed_set(self):
        assert validate_field("device", "Toaster") == DEVICE_UNKNOWN

    def test_unknown_field(self):
        with pytest.raises(KeyError):
            validate_field("bssid", "x")


class TestValidateCredentials:
    """Tests for whole-form validation."""

    def test_valid_input_has_no_errors(self):
        assert validate_credentials(VALID) == {}

    @pytest.mark.parametrize("device", DEVICES)
    def test_every_device_is_accepted(self, device: str):
        assert validate_credentials({**VALID, "device": device}) == {}

    def test_each_rule_reports_its_message(self):
        errors = validate_credentials({"ssid": "", "password": "short", "device": ""})
        assert errors == {
            "ssid": SSID_REQUIRED,
            "password": PASSWORD_TOO_SHORT,
            "device": DEVICE_REQUIRED,
        }

    def test_missing_fields_are_empty(self):
        assert set(validate_credentials({})) == {"ssid", "password", "device"}

    def test_only_invalid_fields_reported(self):
        errors = validate_credentials({**VALID, "password": "abc"})
        assert errors == {"password": PASSWORD_TOO_SHORT}


class TestCredentialForm:
    """Tests for the CredentialForm model."""

    def test_valid_form(self):
        form = CredentialForm(**VALID)
        assert form.ssid == "Home"
        assert form.password == "Password123!"
        assert form.device == "RPi"

    def test_empty_form_is_invalid(self):
        with pytest.raises(ValidationError) as exc_info:
            CredentialForm()
        assert form_errors(exc_info.value) == {
            "ssid": SSID_REQUIRED,
            "password": PASSWORD_TOO_SHORT,
            "device": DEVICE_REQUIRED,
        }

    def test_unknown_device_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            CredentialForm(**{**VALID, "device": "Smart Fridge"})
        assert form_errors(exc_info.value) == {"device": DEVICE_UNKNOWN}

    def test_non_string_ssid_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            CredentialForm(**{**VALID, "ssid": 42})
        assert "ssid" in form_errors(exc_info.value)

    def test_extra_fields_ignored(self):
        form = CredentialForm.model_validate({**VALID, "remember": True})
        assert not hasattr(form, "remember")
