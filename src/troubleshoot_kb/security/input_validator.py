"""
Input validation and sanitization for troubleshooting queries.
"""

from .exceptions import ValidationError


class InputValidator:
    """
    Validates and sanitizes user input.

    Rejects empty, non-string and over-long queries before they reach the
    query pipeline.
    """

    MAX_QUERY_LENGTH = 500

    @staticmethod
    def sanitize_query(query, max_length: int = MAX_QUERY_LENGTH) -> str:
        """
        Sanitize a user query.

        :param query: User's query
        :param max_length: Maximum allowed length in characters
        :return: Sanitized query string
        :raises ValidationError: If query is invalid
        """
        if not query or not isinstance(query, str):
            raise ValidationError("Query is required")

        if len(query) > max_length:
            raise ValidationError(
                f"Query exceeds maximum length of {max_length} characters"
            )

        sanitized = query.replace("\x00", "")
        sanitized = sanitized.strip()

        if not sanitized:
            raise ValidationError("Query cannot be empty")

        return sanitized
