"""Proof renderers."""

from .base import ProofFormat
from .ascii import AsciiFormat
from .latex import LatexFormat, PREAMBLE
from .registry import FormatRegistry, get_format_handler

__all__ = [
    'ProofFormat', 'AsciiFormat', 'LatexFormat', 'PREAMBLE',
    'FormatRegistry', 'get_format_handler'
]
