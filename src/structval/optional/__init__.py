"""Optional override values.

Exports the ``OptionalValue`` union (``Present`` and ``Absent``), the
``ABSENT`` singleton and the ``present`` / ``as_optional`` helpers.
"""
from __future__ import annotations

from structval.optional.optional import (
    ABSENT,
    Absent,
    OptionalValue,
    Present,
    as_optional,
    present,
)

__all__ = ["ABSENT", "Absent", "OptionalValue", "Present", "as_optional", "present"]
