"""
Log formatters module

Provides the formatter interface and the default implementation.
"""

from analog.formatters.base_formatter import BaseFormatter
from analog.formatters.default_formatter import DefaultFormatter, DEFAULT_FORMATTER

__all__ = [
    "BaseFormatter",
    "DefaultFormatter",
    "DEFAULT_FORMATTER",
]
