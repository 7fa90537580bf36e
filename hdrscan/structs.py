"""Finding struct definitions in header text."""

from __future__ import annotations

import re

from .models import Field, StructInfo

_STRUCT_PATTERN = re.compile(r"struct\s*(\w*)\s*\{([^}]*)\}\s*(\w*)\s*;")


def parse_struct_fields(text: str) -> list[Field]:
    """Split the body of a struct into fields, one per ``;`` terminated member."""
    return [
        Field.from_words(words)
        for words in (member.split() for member in text.split(";"))
        if words
    ]


def parse_structs(content: str) -> list[StructInfo]:
    """Return every struct definition found in ``content``.

    The tag after ``struct`` names the struct; when there is none, the
    name following the closing brace (a typedef name) is used.
    """
    return [
        StructInfo(
            name=match.group(1) or match.group(3),
            fields=parse_struct_fields(match.group(2)),
        )
        for match in _STRUCT_PATTERN.finditer(content)
    ]


def format_struct_info(info: StructInfo) -> str:
    """Render a struct definition as a readable report."""
    lines = [f"StructName: {info.name}"]
    for position, member in enumerate(info.fields):
        type_words = "".join(f"{word} " for word in member.types)
        lines.append(f"Field {position}: {type_words}{member.name}")
    return "\n".join(lines) + "\n\n\n"