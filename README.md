# hdrscan

`hdrscan` reads a C header, follows the `#include "..."` lines it contains,
and reports what it finds in each included file: function declarations of
the form `type name(params);`, struct definitions, and `#define`
directives (including multi-line ones continued with a backslash). It is
meant as a first step towards generating bindings from plain C headers,
without a C compiler.

## Installation

```
pip install .
```

## Command line

```
hdrscan [FILE] [--base-dir DIR]
```

`FILE` defaults to `bindgentest.h` and `--base-dir` to `example`, so with
no arguments the command reads `example/bindgentest.h` relative to the
current directory. For every header that the root file includes it prints:

- the include line and the file name,
- each function declaration (name, return type, parameters),
- each struct (name and fields),

and then every `#define` collected from all included headers. If a file
cannot be opened, a message goes to standard error and the exit status
is 1.

## Library use

```python
from hdrscan.functions import parse_functions, format_function_info
from hdrscan.structs import parse_structs, format_struct_info
from hdrscan.preprocessor import parse_defines
from hdrscan.parse import find_includes, parse_header

source = """
#include "def.h"
#define SQUARE(x) ((x) * (x))
struct point { int x; float y; };
void move_point(int dx, int dy);
"""

print([inc.file_name for inc in find_includes(source)])   # ['def.h']

for info in parse_functions(source):
    print(format_function_info(info), end="")

for info in parse_structs(source):
    print(format_struct_info(info), end="")

for define in parse_defines(source):
    print(define.name, define.parameters, define.body)
```

Main pieces:

- `hdrscan.files.read_file_content(filename, base_dir)` returns the text
  of a file inside `base_dir`, raising `OSError` if it cannot be opened.
- `hdrscan.functions`: `parse_parameters`, `parse_functions`,
  `format_function_info`.
- `hdrscan.structs`: `parse_struct_fields`, `parse_structs`,
  `format_struct_info`. An anonymous struct takes the name that follows
  its closing brace.
- `hdrscan.preprocessor.parse_defines` returns `DefineInfo` records with
  the name, the macro parameters and the body (one line per source line,
  trailing backslashes removed).
- `hdrscan.parse`: `find_includes`, `search_headers(root_file_name,
  base_dir)`, `parse_header(file_name, base_dir)` and the command's
  `main(argv=None)`. `parse_header` returns a `RootFolder` holding the
  includes (with their loaded text), one `HeaderInfo` per include
  (functions and structs) and all defines.
- `hdrscan.models`: the record types `Field`, `FunctionInfo`,
  `StructInfo`, `DefineInfo`, `IncludeInfo`, `HeaderInfo` and
  `RootFolder`. A `Field` holds a name and at most three type words.
- `hdrscan.vec`: small containers that can be used on their own —
  `Range`, `FrameIndex`, `RingBuffer`, `Bitflag`, `extend_to_index` and
  `remove_at`.

## What it does not do

- It does not generate bindings; it only reports declarations.
- It matches text with regular expressions. It does not run a
  preprocessor: `#if`/`#ifdef` blocks are not evaluated, macros are not
  expanded, and comments are not stripped.
- Only the headers included directly by the root file are scanned;
  includes inside those headers are not followed, and `#include <...>`
  lines are ignored.
- Function pointers, arrays, nested structs and declarations whose type
  has more than three words are not understood.

## Running the tests

```
pip install .[test]
pytest
```