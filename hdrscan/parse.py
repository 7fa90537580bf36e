"""Scanning a root header, the headers it includes, and a command to do it."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path

from .files import DEFAULT_BASE_DIR, read_file_content
from .functions import format_function_info, parse_functions
from .models import DefineInfo, HeaderInfo, IncludeInfo, RootFolder
from .preprocessor import parse_defines
from .structs import format_struct_info, parse_structs

DEFAULT_ROOT_FILE = "bindgentest.h"

_INCLUDE_PATTERN = re.compile(r'#\s*include\s*"([^"]+)"')


def find_includes(content: str) -> list[IncludeInfo]:
    """Return the quoted ``#include`` directives of ``content`` in order."""
    return [IncludeInfo(match.group(1)) for match in _INCLUDE_PATTERN.finditer(content)]


def search_headers(
    root_file_name: str, base_dir: str | Path = DEFAULT_BASE_DIR
) -> RootFolder:
    """Read the root header and collect the headers it includes."""
    content = read_file_content(root_file_name, base_dir)
    return RootFolder(root_file_name=root_file_name, includes=find_includes(content))


def parse_header(file_name: str, base_dir: str | Path = DEFAULT_BASE_DIR) -> RootFolder:
    """Load every header included by ``file_name`` and parse its contents."""
    root = search_headers(file_name, base_dir)
    for include in root.includes:
        include.data = read_file_content(include.file_name, base_dir)
        root.headers.append(
            HeaderInfo(
                function_infos=parse_functions(include.data),
                structs_infos=parse_structs(include.data),
            )
        )
        root.all_defines.extend(parse_defines(include.data))
    return root


def _format_define(define: DefineInfo) -> str:
    head = f"#define {define.name}"
    if define.parameters:
        head += f"({', '.join(define.parameters)})"
    if not define.body:
        return head
    return f"{head} " + define.body.replace("\n", " \\\n  ")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hdrscan",
        description="List includes, functions, structs and defines of a header.",
    )
    parser.add_argument("file", nargs="?", default=DEFAULT_ROOT_FILE, help="root header")
    parser.add_argument(
        "--base-dir", default=DEFAULT_BASE_DIR, help="directory holding the headers"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Scan a root header and print what was found."""
    args = _build_parser().parse_args(argv)
    try:
        root = parse_header(args.file, args.base_dir)
    except OSError as exc:
        print(f"Could not open file: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"hdrscan: {exc}", file=sys.stderr)
        return 1

    for include, header in zip(root.includes, root.headers):
        print(f'#include "{include.file_name}"')
        print(f"File: {include.file_name}")
        for info in header.function_infos:
            print(format_function_info(info), end="")
        for struct in header.structs_infos:
            print(format_struct_info(struct), end="")
    for define in root.all_defines:
        print(_format_define(define), end=" \n\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())