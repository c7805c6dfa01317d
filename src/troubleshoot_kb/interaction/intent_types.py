"""
Intent types for troubleshooting query classification.
"""
from enum import Enum


class IssueIntent(Enum):
    """Kinds of issue a troubleshooting query can be about."""
    NETWORK_ISSUE = "network_issue"
    ERROR_RESOLUTION = "error_resolution"
    PERFORMANCE_ISSUE = "performance_issue"
    EMAIL_ISSUE = "email_issue"
    PRINTING_ISSUE = "printing_issue"
    AUDIO_ISSUE = "audio_issue"
    GENERAL_TROUBLESHOOTING = "general_troubleshooting"
