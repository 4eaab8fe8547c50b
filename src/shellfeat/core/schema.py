"""Field schema for :class:`~shellfeat.core.models.FeatureSet`.

One descriptor per textual field name, declared in model order.  The
parser uses the boolean descriptors to match ``<name>`` / ``no-<name>``
tokens; the formatter walks :data:`SORTED_FIELDS`, whose order is part
of the rendered string's contract.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any

from shellfeat.core.models import FeatureSet


class FieldKind(str, Enum):
    FLAG = "flag"
    CURSOR = "cursor"


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """Maps a textual field name onto a :class:`FeatureSet` attribute."""

    name: str
    """Name as written in the grammar (e.g. ``ssh-env``)."""

    attr: str
    """Attribute on :class:`FeatureSet` (e.g. ``ssh_env``)."""

    kind: FieldKind

    def get(self, features: FeatureSet) -> Any:
        return getattr(features, self.attr)

    def set(self, features: FeatureSet, value: Any) -> FeatureSet:
        """Return a copy of *features* with this field replaced."""
        return dataclasses.replace(features, **{self.attr: value})


FIELDS: tuple[FieldDescriptor, ...] = (
    FieldDescriptor("cursor", "cursor", FieldKind.CURSOR),
    FieldDescriptor("path", "path", FieldKind.FLAG),
    FieldDescriptor("ssh-env", "ssh_env", FieldKind.FLAG),
    FieldDescriptor("ssh-terminfo", "ssh_terminfo", FieldKind.FLAG),
    FieldDescriptor("sudo", "sudo", FieldKind.FLAG),
    FieldDescriptor("title", "title", FieldKind.FLAG),
)

FIELDS_BY_NAME: dict[str, FieldDescriptor] = {desc.name: desc for desc in FIELDS}

FLAG_FIELDS: dict[str, FieldDescriptor] = {
    desc.name: desc for desc in FIELDS if desc.kind is FieldKind.FLAG
}
"""Boolean descriptors keyed by their exact, case-sensitive name."""

SORTED_FIELD_NAMES: tuple[str, ...] = (
    "cursor",
    "path",
    "ssh-env",
    "ssh-terminfo",
    "sudo",
    "title",
)
"""Field names in case-insensitive alphabetical order.

Rendered strings follow this order, so consumers may compare them
verbatim.
"""

SORTED_FIELDS: tuple[FieldDescriptor, ...] = tuple(
    FIELDS_BY_NAME[name] for name in SORTED_FIELD_NAMES
)
