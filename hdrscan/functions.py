"""Finding function declarations in header text."""

from __future__ import annotations

import re

from .models import Field, FunctionInfo

_FUNCTION_PATTERN = re.compile(
    r"([a-zA-Z_][a-zA-Z0-9_]*)\s+([a-zA-Z_][a-zA-Z0-9_]*)\s*\(([^)]*)\)\s*;"
)


def parse_parameters(text: str) -> list[Field]:
    """Split a comma separated parameter list into fields.

    In each parameter the last word is the name and the words before it
    are the type. Empty parameters are skipped.
    """
    return [
        Field.from_words(chunk.split()) for chunk in text.split(",") if chunk.strip()
    ]


def parse_functions(content: str) -> list[FunctionInfo]:
    """Return every ``type name(params);`` declaration found in ``content``."""
    return [
        FunctionInfo(
            name=match.group(2),
            return_type=match.group(1),
            parameters=parse_parameters(match.group(3)),
        )
        for match in _FUNCTION_PATTERN.finditer(content)
    ]


def format_function_info(info: FunctionInfo) -> str:
    """Render a function declaration as a readable report."""
    lines = [f"FunctionName: {info.name}", f"Return Type: {info.return_type}"]
    for position, parameter in enumerate(info.parameters):
        type_words = "".join(f"{word} " for word in parameter.types)
        lines.append(f"Parameter {position}: {type_words}{parameter.name}")
    return "\n".join(lines) + "\n\n\n"