"""Input sanitization utilities"""
import re
from typing import Any
from services.helpers.error_handlers import InputError
from utils.logger import log_warning


class InputSanitizer:
    """Sanitize user inputs before they reach the model or the store"""

    def __init__(self, config):
        self.config = config
        self.max_length = getattr(config, 'MAX_MESSAGE_LENGTH', 2000)

        # Patterns to remove
        self.dangerous_patterns = [
            r'<script[^>]*>.*?</script>',  # Script tags
            r'javascript:',                 # JavaScript protocol
            r'<iframe[^>]*>.*?</iframe>',  # Iframes
        ]

    def sanitize(self, text: Any) -> str:
        """
        Sanitize input text

        Args:
            text: Input text to sanitize

        Returns:
            Sanitized text string
        """
        if text is None:
            return ""

        # Convert to string
        text = str(text)

        # Truncate if too long
        if len(text) > self.max_length:
            text = text[:self.max_length]
            log_warning(f"Input truncated to {self.max_length} characters")

        # Remove dangerous patterns
        for pattern in self.dangerous_patterns:
            text = re.sub(pattern, '', text, flags=re.IGNORECASE | re.DOTALL)

        # Remove control characters except newlines
        text = ''.join(char for char in text if ord(char) >= 32 or char == '\n')

        # Normalize whitespace
        text = re.sub(r'\s+', ' ', text)

        return text.strip()

    def check_message(self, text: Any) -> str:
        """
        Validate chat text without changing it

        Raises:
            InputError: the text is longer than MAX_MESSAGE_LENGTH
        """
        if not isinstance(text, str):
            return ""

        if len(text) > self.max_length:
            log_warning(f"Rejected chat message of {len(text)} characters")
            raise InputError(f"Message is longer than {self.max_length} characters")

        return text

    def sanitize_search_term(self, term: Any) -> str:
        """
        Sanitize a profile search term

        PostgREST filter syntax uses commas, parentheses and wildcards,
        none of which belong in a name.
        """
        term = self.sanitize(term)
        term = re.sub(r'[,()%*\\]', '', term)
        return term[:100].strip()

    def sanitize_id(self, value: Any) -> str:
        """Keep identifiers to the characters UUIDs and slugs use"""
        if value is None:
            return ""
        value = str(value).strip()
        if not re.fullmatch(r'[A-Za-z0-9_\-]{1,64}', value):
            log_warning("Rejected malformed identifier")
            return ""
        return value
