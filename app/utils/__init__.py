"""
Shared utilities package.

This package contains logging configuration used by the API and the
maintenance scripts.
"""

from app.utils.logging_config import setup_logging, configure_script_logging

__all__ = ['setup_logging', 'configure_script_logging']
