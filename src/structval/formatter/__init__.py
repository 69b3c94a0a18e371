"""Canonical formatter module.

Exports the ``StringFormatter`` class and the ``format_value`` and
``format_composite`` convenience functions.
"""
from __future__ import annotations

from structval.formatter.formatter import StringFormatter, format_composite, format_value

__all__ = ["StringFormatter", "format_composite", "format_value"]
