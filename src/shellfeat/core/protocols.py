"""Protocols (interfaces) consumed by the core layer.

The configuration pretty-printer that lists every setting lives outside
this package; the core only needs somewhere to hand its rendered string.
"""

from __future__ import annotations

from typing import Protocol


class EntryFormatter(Protocol):
    """Contract for a sink that writes one ``key = value`` setting entry.

    Any object with a matching :meth:`format_entry` satisfies this
    protocol structurally (no explicit inheritance required).
    """

    def format_entry(self, value: str) -> None:
        """Write *value* as the entry for the setting being formatted."""
        ...  # pragma: no cover
