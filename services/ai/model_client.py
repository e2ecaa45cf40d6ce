"""Thin wrapper around the Anthropic Messages API"""
import anthropic

from services.helpers.error_handlers import UpstreamError
from utils.logger import log_info, log_error, log_warning


class ModelClient:
    """Single request/response calls to the language model"""

    def __init__(self, config, client=None):
        self.config = config
        self.model = config.AI_MODEL
        self.max_tokens = config.AI_MAX_TOKENS
        self.temperature = config.AI_TEMPERATURE

        if client is not None:
            self.client = client
        elif config.ANTHROPIC_API_KEY:
            self.client = anthropic.Anthropic(
                api_key=config.ANTHROPIC_API_KEY,
                timeout=config.AI_TIMEOUT,
                max_retries=0
            )
            log_info(f"Model client initialized with {self.model}")
        else:
            self.client = None
            log_warning("No Anthropic API key - every chat will get the fallback reply")

    def generate(self, system_prompt: str, user_text: str) -> str:
        """
        Generate a reply for the user's text

        Raises:
            UpstreamError: the API is unavailable, errored or returned no text
        """
        if not self.client:
            raise UpstreamError("Language model is not configured")

        try:
            response = self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                system=system_prompt,
                messages=[{"role": "user", "content": user_text}]
            )
        except anthropic.APIError as e:
            log_error(f"Anthropic API error: {str(e)}")
            raise UpstreamError(f"Language model call failed: {str(e)}") from e
        except Exception as e:
            log_error(f"Language model call failed: {str(e)}", exc_info=True)
            raise UpstreamError(f"Language model call failed: {str(e)}") from e

        text = ''.join(
            getattr(block, 'text', '') or ''
            for block in (getattr(response, 'content', None) or [])
        )
        if not text.strip():
            raise UpstreamError("Language model returned an empty reply")

        return text
