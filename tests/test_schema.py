"""Tests for the field schema (core/schema.py)."""

from __future__ import annotations

import dataclasses

from shellfeat.core.models import Cursor, CursorShape, FeatureSet
from shellfeat.core.schema import (
    FIELDS,
    FLAG_FIELDS,
    SORTED_FIELD_NAMES,
    SORTED_FIELDS,
    FieldKind,
)


class TestFieldSchema:
    def test_every_model_field_has_a_descriptor(self) -> None:
        attrs = {f.name for f in dataclasses.fields(FeatureSet)}
        assert {desc.attr for desc in FIELDS} == attrs

    def test_flag_names(self) -> None:
        assert set(FLAG_FIELDS) == {"path", "ssh-env", "ssh-terminfo", "sudo", "title"}
        assert all(desc.kind is FieldKind.FLAG for desc in FLAG_FIELDS.values())

    def test_cursor_is_the_only_composite(self) -> None:
        composites = [desc.name for desc in FIELDS if desc.kind is FieldKind.CURSOR]
        assert composites == ["cursor"]

    def test_sorted_names_are_case_insensitive_alphabetical(self) -> None:
        declared = [desc.name for desc in FIELDS]
        assert list(SORTED_FIELD_NAMES) == sorted(declared, key=str.lower)

    def test_sorted_fields_follow_sorted_names(self) -> None:
        assert tuple(desc.name for desc in SORTED_FIELDS) == SORTED_FIELD_NAMES

    def test_get_and_set(self) -> None:
        desc = FLAG_FIELDS["ssh-terminfo"]
        fs = FeatureSet()
        updated = desc.set(fs, True)
        assert desc.get(fs) is False
        assert desc.get(updated) is True
        assert updated.ssh_terminfo is True

    def test_set_cursor(self) -> None:
        desc = SORTED_FIELDS[0]
        updated = desc.set(FeatureSet(), Cursor(shape=CursorShape.UNDERLINE))
        assert updated.cursor.shape is CursorShape.UNDERLINE
