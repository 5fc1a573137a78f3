"""
Password suggestion through a hosted language model.

The model is asked for a single strong password returned as a JSON
object with one field, ``password``. The response is parsed into
SuggestedPassword; anything else counts as a failed suggestion.
"""

import logging
from typing import Optional

from openai import AsyncOpenAI, OpenAIError
from pydantic import BaseModel, Field, ValidationError

from wificonnector.config import ConnectorConfig
from wificonnector.exceptions import PasswordSuggestionError

logger = logging.getLogger(__name__)

SUGGEST_PASSWORD_PROMPT = (
    "You are a password generator. Generate a strong password that is at least "
    "12 characters long and includes a mix of uppercase letters, lowercase "
    "letters, numbers, and symbols. Do not include any easily guessable patterns "
    "or common words in your generated password. Return the password in the "
    'following JSON format: {"password": "the_generated_password"}'
)


class SuggestedPassword(BaseModel):
    """Structured output expected from the provider."""

    password: str = Field(min_length=1, description="A strong, randomly generated password.")


class PasswordSuggestionService:
    """Asks the provider for one password per call.

    There are no retries and no caching: each call is a single attempt.
    """

    def __init__(self, config: ConnectorConfig, client: Optional[AsyncOpenAI] = None):
        """Initialize the service.

        Args:
            config: Configuration with provider model, key and timeout
            client: Pre-built client, mostly for tests
        """
        self.config = config
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self.config.get_api_key(),
                timeout=self.config.suggestion_timeout,
                max_retries=0,
            )
        return self._client

    async def suggest_password(self) -> str:
        """Generate a suggested password.

        Returns:
            The password string exactly as produced by the provider

        Raises:
            PasswordSuggestionError: If the provider call fails, times out,
                or returns something other than {"password": "<string>"}
        """
        logger.info("Requesting password suggestion from %s", self.config.openai_model)
        try:
            response = await self._get_client().chat.completions.create(
                model=self.config.openai_model,
                messages=[{"role": "user", "content": SUGGEST_PASSWORD_PROMPT}],
                response_format={"type": "json_object"},
                temperature=self.config.suggestion_temperature,
            )
        except OpenAIError as e:
            raise PasswordSuggestionError(f"Password provider call failed: {e}") from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise PasswordSuggestionError("Password provider returned an empty response")

        try:
            suggestion = SuggestedPassword.model_validate_json(content)
        except ValidationError as e:
            raise PasswordSuggestionError(
                f"Password provider returned an unexpected response: {e}"
            ) from e

        logger.info("Password suggestion received")
        return suggestion.password
