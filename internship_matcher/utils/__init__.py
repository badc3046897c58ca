"""
Utility modules for the internship matcher application.
"""

from .config import Config

__all__ = [
    "Config",
]
