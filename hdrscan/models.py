"""Records describing what was found in scanned header files."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

TYPE_PARAMETER_SPECIFIER_MAX = 3
MAX_NAME_LEN = 50
MAX_TYPE_LEN = 50
MAX_FILE_NAME_LEN = 256


@dataclass(frozen=True)
class Field:
    """A declared name with up to three type words, e.g. ``const char *name``."""

    name: str
    types: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if len(self.types) > TYPE_PARAMETER_SPECIFIER_MAX:
            raise ValueError(
                f"at most {TYPE_PARAMETER_SPECIFIER_MAX} type words are supported"
            )
        if len(self.name) > MAX_NAME_LEN:
            raise ValueError(f"name longer than {MAX_NAME_LEN} characters")
        for word in self.types:
            if len(word) > MAX_TYPE_LEN:
                raise ValueError(f"type word longer than {MAX_TYPE_LEN} characters")

    @property
    def type_len(self) -> int:
        """Number of type words."""
        return len(self.types)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "Field":
        """Build a field whose last word is the name and the rest its type.

        Words made only of whitespace are ignored.
        """
        kept = [word for word in words if word.strip()]
        if not kept:
            raise ValueError("no words to build a field from")
        *types, name = kept
        return cls(name=name, types=tuple(types))

    def describe(self) -> str:
        """Render the type words followed by the name."""
        return " ".join((*self.types, self.name))


@dataclass
class FunctionInfo:
    """A function declaration: name, return type and parameters."""

    name: str
    return_type: str
    parameters: list[Field] = field(default_factory=list)


@dataclass
class StructInfo:
    """A struct definition and its fields."""

    name: str = ""
    fields: list[Field] = field(default_factory=list)


@dataclass
class DefineInfo:
    """A preprocessor definition with its optional parameters and body."""

    name: str
    body: str = ""
    parameters: tuple[str, ...] = ()


@dataclass
class IncludeInfo:
    """A quoted include and, once read, the content of the included file."""

    file_name: str
    data: str | None = None

    def __post_init__(self) -> None:
        if len(self.file_name) >= MAX_FILE_NAME_LEN:
            raise ValueError(f"file name must be shorter than {MAX_FILE_NAME_LEN}")

    @property
    def length(self) -> int:
        """Length of the loaded content, zero when nothing is loaded."""
        return len(self.data) if self.data is not None else 0


@dataclass
class HeaderInfo:
    """Everything parsed out of one header."""

    function_infos: list[FunctionInfo] = field(default_factory=list)
    structs_infos: list[StructInfo] = field(default_factory=list)


@dataclass
class RootFolder:
    """The root header together with the headers it includes."""

    root_file_name: str
    headers: list[HeaderInfo] = field(default_factory=list)
    includes: list[IncludeInfo] = field(default_factory=list)
    all_defines: list[DefineInfo] = field(default_factory=list)