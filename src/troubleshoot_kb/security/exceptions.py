"""
Exceptions raised while checking user input before it reaches the resolver.
"""


class SecurityError(Exception):
    """Base exception for rejected user input."""


class ValidationError(SecurityError):
    """Raised when a troubleshooting query is empty, not a string, or too long."""
