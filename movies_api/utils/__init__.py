"""
Shared utilities package.
"""

from movies_api.utils.logging_config import setup_logging

__all__ = ['setup_logging']
