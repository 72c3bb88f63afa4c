#!/usr/bin/env python3
"""
display.py
----------
Plain-text rendering of notes for terminal output.

A note's detail view is a list of fields. Each field is built as one of
three variants, chosen when the field is constructed:

    SingleLineField  - '  |          Status:  pending'
    MultiLineField   - first line as value, remaining lines indented below
    ListField        - heading line, then one entry per item

The compact one-line label used in note listings carries the (truncated)
text, the comment count, the status initial and the short due date.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Union

from reminder.models.note import Note
from reminder.models.tag import Tag

from .temporal import format_long, format_short

NAME_WIDTH = 12


def _line(name: str, value: object) -> str:
    return f"  |  {name:>{NAME_WIDTH}}:  {value}\n"


def _continuation(value: str) -> str:
    return f"  |  {'':>{NAME_WIDTH + 6}} {value}\n"


@dataclass(frozen=True)
class SingleLineField:
    name: str
    value: object

    def render(self) -> str:
        return _line(self.name, self.value)


@dataclass(frozen=True)
class MultiLineField:
    name: str
    lines: Sequence[str]

    def render(self) -> str:
        if not self.lines:
            return _line(self.name, "")
        heading, *rest = self.lines
        parts = [_line(self.name, heading)]
        parts.extend(_continuation(line.strip()) for line in rest if line.strip())
        return "".join(parts)


@dataclass(frozen=True)
class ListField:
    name: str
    items: Sequence["Field"]

    def render(self) -> str:
        return _line(self.name, "").rstrip() + "\n" + "".join(
            item.render() for item in self.items
        )


Field = Union[SingleLineField, MultiLineField, ListField]


def text_field(name: str, text: str) -> Field:
    """Single- or multi-line field depending on whether text spans lines."""
    if "\n" in text:
        return MultiLineField(name, text.split("\n"))
    return SingleLineField(name, text)


def note_fields(note: Note, tags: Sequence[Tag]) -> List[Field]:
    """
    Detail fields of a note.

    Args:
        note: Note to describe
        tags: The note's tags (already resolved from its ids)
    """
    return [
        text_field("Text", note.text),
        ListField("Comments", [text_field("", c) for c in note.comment_texts()]),
        text_field("Summary", note.summary),
        SingleLineField("Status", note.status.value),
        SingleLineField("Tags", ", ".join(tag.slug for tag in tags)),
        SingleLineField("Main", "yes" if note.is_main else "no"),
        SingleLineField("CompleteBy", format_long(note.complete_by)),
        SingleLineField("CreatedAt", format_long(note.created_at)),
        SingleLineField("UpdatedAt", format_long(note.updated_at)),
    ]


def render_note(note: Note, tags: Sequence[Tag]) -> str:
    """Full external text of a single note."""
    header = "Note Details: " + "-" * 49 + "\n"
    return header + "".join(field.render() for field in note_fields(note, tags))


def external_texts(notes: Sequence[Note], max_width: int) -> List[str]:
    """
    One-line labels for a list of notes.

    Text longer than max_width is cut to max_width - 3 characters plus
    '...'; a non-positive max_width disables truncation and padding.

    Examples:
        'Renew passport       {C:01, S:P, D:10-Mar-24}'
    """
    texts = []
    for note in notes:
        text = note.text
        if max_width > 0:
            if len(text) > max_width:
                text = text[: max(max_width - 3, 0)] + "..."
            text = f"{text:<{max_width}}"
        texts.append(
            f"{text} {{C:{len(note.comments):02d}, "
            f"S:{note.status.initial}, D:{format_short(note.complete_by)}}}"
        )
    return texts
