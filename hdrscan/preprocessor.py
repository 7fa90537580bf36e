"""Finding ``#define`` directives in header text."""

from __future__ import annotations

import re

from .models import DefineInfo

_DEFINE_PATTERN = re.compile(
    r"#define[ \t]+(?P<name>[A-Za-z_][A-Za-z0-9_]*)"
    r"(?:\((?P<params>[^)\n]*)\))?"
    r"(?P<body>(?:[^\n]*\\[ \t]*\r?\n)*[^\n]*)"
)


def _clean_body(raw: str) -> str:
    lines = []
    for line in raw.splitlines():
        line = line.strip()
        if line.endswith("\\"):
            line = line[:-1].rstrip()
        if line:
            lines.append(line)
    return "\n".join(lines)


def _split_parameters(raw: str | None) -> tuple[str, ...]:
    if raw is None:
        return ()
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def parse_defines(content: str) -> list[DefineInfo]:
    """Return every ``#define`` in ``content``, continuation lines included.

    The body keeps one entry per source line, without the trailing
    backslashes; blank continuation lines are dropped.
    """
    return [
        DefineInfo(
            name=match.group("name"),
            body=_clean_body(match.group("body")),
            parameters=_split_parameters(match.group("params")),
        )
        for match in _DEFINE_PATTERN.finditer(content)
    ]