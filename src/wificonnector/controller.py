"""
Form controller for the WiFi credential form.

Owns the field values and their validation messages, the password
visibility toggle, and the two asynchronous actions the form can run:
suggesting a password and sending the credentials. Each action has an
idle/pending state; a pending action ignores further triggers.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections import deque
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Optional

from wificonnector.config import ConnectorConfig
from wificonnector.form import FIELDS, CredentialForm, validate_field
from wificonnector.sender import CredentialSender, SendOutcome
from wificonnector.suggestion import PasswordSuggestionService

logger = logging.getLogger(__name__)


class ActionState(str, Enum):
    """State of one asynchronous form action."""

    IDLE = "idle"
    PENDING = "pending"


@dataclass(frozen=True)
class Notification:
    """Transient message shown to the user."""

    title: str
    description: str
    variant: str = "default"
    """Either "default" or "destructive"."""

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


class FormController:
    """State and actions of a single credential form."""

    def __init__(self, suggestion_service: PasswordSuggestionService, sender: CredentialSender):
        """Initialize the controller with empty fields.

        Args:
            suggestion_service: Service used by generate_password()
            sender: Simulated transport used by submit()
        """
        self.suggestion_service = suggestion_service
        self.sender = sender
        self.values: dict[str, str] = {}
        self.errors: dict[str, str] = {}
        self.password_visible = False
        self.suggestion_state = ActionState.IDLE
        self.send_state = ActionState.IDLE
        self._notifications: deque[Notification] = deque()
        self._send_task: Optional[asyncio.Task[SendOutcome]] = None
        self.reset()

    @classmethod
    def from_config(cls, config: ConnectorConfig) -> FormController:
        """Create a controller wired to the configured provider and sender."""
        return cls(
            suggestion_service=PasswordSuggestionService(config),
            sender=CredentialSender.from_config(config),
        )

    def reset(self) -> None:
        """Restore empty field values and clear validation messages."""
        self.values = {name: "" for name in FIELDS}
        self.errors = {}

    def set_field(self, name: str, value: Any, validate: bool = True) -> Optional[str]:
        """Update a field value.

        Args:
            name: Field name
            value: New value
            validate: Revalidate the field after the update

        Returns:
            The field's validation message, if any

        Raises:
            KeyError: If the field name is unknown
        """
        if name not in self.values:
            raise KeyError(name)
        self.values[name] = value
        if not validate:
            return self.errors.get(name)
        message = validate_field(name, value)
        if message:
            self.errors[name] = message
        else:
            self.errors.pop(name, None)
        return message

    def toggle_password_visibility(self) -> bool:
        """Switch the password input between obscured and plain text.

        Returns:
            True if the password is now visible
        """
        self.password_visible = not self.password_visible
        return self.password_visible

    def notify(self, notification: Notification) -> None:
        self._notifications.append(notification)

    def drain_notifications(self) -> list[Notification]:
        """Return queued notifications and clear the queue."""
        notifications = list(self._notifications)
        self._notifications.clear()
        return notifications

    async def generate_password(self) -> bool:
        """Fill the password field with a suggested password.

        Does nothing if a suggestion is already pending. Any failure of the
        suggestion call is reported with the same generic notification and
        the password field keeps its previous value.

        Returns:
            True if a suggestion was written into the password field
        """
        if self.suggestion_state == ActionState.PENDING:
            return False

        self.suggestion_state = ActionState.PENDING
        try:
            password = await self.suggestion_service.suggest_password()
        except Exception:
            logger.exception("Password generation failed")
            self.notify(
                Notification(
                    title="Error",
                    description="Failed to generate a password. Please try again.",
                    variant="destructive",
                )
            )
            return False
        finally:
            self.suggestion_state = ActionState.IDLE

        self.set_field("password", password)
        self.notify(
            Notification(
                title="Password Generated",
                description="A new strong password has been generated.",
            )
        )
        return True

    def submit(self, form: CredentialForm) -> Optional[asyncio.Task[SendOutcome]]:
        """Start a simulated send of validated credentials.

        Must be called from a running event loop. Does nothing if a send
        is already pending.

        Args:
            form: Credentials that already passed validation

        Returns:
            Task resolving to the send outcome, or None if a send is pending
        """
        if self.send_state == ActionState.PENDING:
            return None

        for name in FIELDS:
            self.set_field(name, getattr(form, name))
        self.send_state = ActionState.PENDING
        self._send_task = asyncio.create_task(self._run_send(form))
        return self._send_task

    async def _run_send(self, form: CredentialForm) -> SendOutcome:
        try:
            outcome = await self.sender.send(form)
        finally:
            self.send_state = ActionState.IDLE
            self._send_task = None

        if outcome.succeeded:
            self.notify(
                Notification(
                    title="Success!",
                    description=f"WiFi credentials sent to {outcome.device}.",
                )
            )
            self.reset()
        else:
            self.notify(
                Notification(
                    title="Failed to Send",
                    description=f"Could not establish a connection to {outcome.device}.",
                    variant="destructive",
                )
            )
        return outcome

    async def close(self) -> None:
        """Cancel a pending send so it cannot fire after teardown."""
        task = self._send_task
        if task is None or task.done():
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        self.send_state = ActionState.IDLE
        self._send_task = None
        logger.info("Cancelled pending send on shutdown")

    def snapshot(self) -> dict[str, Any]:
        """Get the form state as plain data for the UI."""
        return {
            "values": dict(self.values),
            "errors": dict(self.errors),
            "password_visible": self.password_visible,
            "suggestion_state": self.suggestion_state.value,
            "send_state": self.send_state.value,
        }
