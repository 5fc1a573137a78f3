"""
Simulated credential sending.

Nothing is transmitted: a send waits a fixed delay and then succeeds or
fails at random. It stands in for a real Bluetooth transport.
"""

import asyncio
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from wificonnector.config import ConnectorConfig
from wificonnector.form import CredentialForm

logger = logging.getLogger(__name__)


class SendStatus(str, Enum):
    """Result of a simulated send."""

    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class SendOutcome:
    """Outcome of sending credentials to a device."""

    status: SendStatus
    device: str

    @property
    def succeeded(self) -> bool:
        return self.status == SendStatus.SUCCESS


class CredentialSender:
    """Fake transport that resolves after a delay with a random outcome."""

    def __init__(
        self,
        delay_seconds: float = 2.0,
        success_probability: float = 0.7,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the sender.

        Args:
            delay_seconds: Seconds to wait before resolving
            success_probability: Chance (0-1) that a send succeeds
            rng: Random source, seedable for tests
        """
        if delay_seconds < 0:
            raise ValueError("delay_seconds cannot be negative")
        if not 0 <= success_probability <= 1:
            raise ValueError("success_probability must be between 0 and 1")
        self.delay_seconds = delay_seconds
        self.success_probability = success_probability
        self.rng = rng or random.Random()

    @classmethod
    def from_config(
        cls, config: ConnectorConfig, rng: Optional[random.Random] = None
    ) -> "CredentialSender":
        """Create a sender using the configured delay and probability."""
        return cls(
            delay_seconds=config.send_delay_seconds,
            success_probability=config.send_success_probability,
            rng=rng,
        )

    async def send(self, form: CredentialForm) -> SendOutcome:
        """Pretend to send credentials to the selected device.

        Args:
            form: Validated credentials

        Returns:
            Success or failure outcome naming the device
        """
        await asyncio.sleep(self.delay_seconds)
        if self.rng.random() < self.success_probability:
            status = SendStatus.SUCCESS
        else:
            status = SendStatus.FAILURE
        logger.info("Simulated send of %r to %s: %s", form.ssid, form.device, status.value)
        return SendOutcome(status=status, device=form.device)
