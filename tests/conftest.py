"""Pytest configuration and fixtures."""

import asyncio
from pathlib import Path
from tempfile import TemporaryDirectory
from typing import Optional
from unittest.mock import MagicMock

import pytest

from wificonnector.config import ConnectorConfig
from wificonnector.controller import FormController
from wificonnector.exceptions import PasswordSuggestionError
from wificonnector.sender import CredentialSender

STRONG_PASSWORD = "q7#Vt!2mZ@x9Lp"


class FakeSuggestionService:
    """Stand-in for PasswordSuggestionService that never calls a provider."""

    def __init__(self, password: str = STRONG_PASSWORD):
        self.password = password
        self.error: Optional[Exception] = None
        self.calls = 0
        self.release: Optional[asyncio.Event] = None

    async def suggest_password(self) -> str:
        self.calls += 1
        if self.release is not None:
            await self.release.wait()
        if self.error is not None:
            raise self.error
        return self.password


def _fixed_rng(value: float) -> MagicMock:
    """Random source whose random() always returns value."""
    rng = MagicMock()
    rng.random.return_value = value
    return rng


@pytest.fixture
def fixed_rng():
    """Factory for random sources with a fixed random() value."""
    return _fixed_rng


@pytest.fixture
def default_config() -> ConnectorConfig:
    """Provide default configuration for tests."""
    return ConnectorConfig()


@pytest.fixture
def temp_dir():
    """Provide a temporary directory."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def suggestion_service() -> FakeSuggestionService:
    """Suggestion service returning a fixed strong password."""
    return FakeSuggestionService()


@pytest.fixture
def failing_suggestion_service() -> FakeSuggestionService:
    """Suggestion service that always fails."""
    service = FakeSuggestionService()
    service.error = PasswordSuggestionError("provider unavailable")
    return service


@pytest.fixture
def succeeding_sender() -> CredentialSender:
    """Sender that resolves immediately with success."""
    return CredentialSender(delay_seconds=0, rng=_fixed_rng(0.0))


@pytest.fixture
def failing_sender() -> CredentialSender:
    """Sender that resolves immediately with failure."""
    return CredentialSender(delay_seconds=0, rng=_fixed_rng(0.99))


@pytest.fixture
def slow_sender() -> CredentialSender:
    """Sender that stays pending for the length of a test."""
    return CredentialSender(delay_seconds=60, rng=_fixed_rng(0.0))


@pytest.fixture
def controller(suggestion_service, succeeding_sender) -> FormController:
    """Form controller whose send always succeeds."""
    return FormController(suggestion_service, succeeding_sender)
