"""
Configuration loading for RDS snapshot export operations.
"""

from .manager import ConfigurationManager

__all__ = ["ConfigurationManager"]
