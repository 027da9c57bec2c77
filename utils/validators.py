"""
Input Validation Utilities

Validates schedule documents handed to the API before they reach
the parser.
"""

from typing import Tuple, Optional, Union


class ScheduleDocumentValidator:
    """Validate raw schedule detail documents"""

    ENCODINGS = ['utf-8', 'cp1252']
    # Maps every byte, so decoding never fails
    FALLBACK_ENCODING = 'latin1'

    @classmethod
    def validate(cls, content: Union[str, bytes, None]) -> Tuple[bool, Optional[str]]:
        """
        Validate a schedule document body

        Args:
            content: Raw request body (text or bytes)

        Returns:
            Tuple of (is_valid, error_message)
        """
        if content is None:
            return False, "Request body must be HTML string"

        text = cls.decode_content(content)

        if not text.strip():
            return False, "Request body must be HTML string"

        if '<' not in text:
            return False, "Request body does not look like HTML"

        return True, None

    @classmethod
    def decode_content(cls, content: Union[str, bytes]) -> str:
        """Decode bytes with encoding fallback"""
        if isinstance(content, str):
            return content
        for encoding in cls.ENCODINGS:
            try:
                return content.decode(encoding)
            except UnicodeDecodeError:
                continue
        return content.decode(cls.FALLBACK_ENCODING)
