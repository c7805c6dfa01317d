"""
Troubleshoot KB Service: resolves free-text troubleshooting questions to
known issues and their remediation steps.
"""
from .app import TroubleshootApp
from .config import TroubleshootConfig

__all__ = ["TroubleshootApp", "TroubleshootConfig"]
