"""
File-type policy: maps a file name to a highlighting profile.

The language is detected with Pygments from the file name alone; the lexer
name then selects one of the registered profiles. Anything unrecognized gets
the default profile, which highlights nothing.
"""

from dataclasses import dataclass, field
from typing import Dict, Final, Optional, Tuple

from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound

DEFAULT_FILE_TYPE_NAME: Final[str] = "No filetype"


@dataclass(frozen=True)
class HighlightingOptions:
    """Highlight categories enabled for a language, plus its keyword lists."""
    numbers: bool = False
    strings: bool = False
    characters: bool = False
    comments: bool = False
    primary_keywords: Tuple[str, ...] = field(default_factory=tuple)
    secondary_keywords: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class FileType:
    """A named language profile."""
    name: str = DEFAULT_FILE_TYPE_NAME
    hl_opts: HighlightingOptions = field(default_factory=HighlightingOptions)

    @classmethod
    def default(cls) -> 'FileType':
        """The "no special highlighting" profile."""

        return cls()

    @classmethod
    def from_file_name(cls, file_name: Optional[str]) -> 'FileType':
        """
        Resolve the profile for a file name.

        Args:
            file_name: Path or bare name of the file, or None for an unsaved buffer

        Returns:
            The registered profile for the detected language, or the default one
        """

        if not file_name:
            return cls.default()

        try:
            lexer = get_lexer_for_filename(file_name)
        except ClassNotFound:
            return cls.default()

        return FILE_TYPES.get(lexer.name, cls.default())

    def highlighting_options(self) -> HighlightingOptions:
        """Options handed to the highlighter."""

        return self.hl_opts


C_LIKE_PRIMARY: Final[Tuple[str, ...]] = (
    "break", "case", "const", "continue", "default", "do", "else", "enum",
    "extern", "for", "goto", "if", "return", "sizeof", "static", "struct",
    "switch", "typedef", "union", "volatile", "while",
)

C_LIKE_SECONDARY: Final[Tuple[str, ...]] = (
    "char", "double", "float", "int", "long", "short", "signed", "unsigned",
    "void",
)

RUST: Final[FileType] = FileType(
    name="Rust",
    hl_opts=HighlightingOptions(
        numbers=True,
        strings=True,
        characters=True,
        comments=True,
        primary_keywords=(
            "as", "break", "const", "continue", "crate", "else", "enum",
            "extern", "false", "fn", "for", "if", "impl", "in", "let", "loop",
            "match", "mod", "move", "mut", "pub", "ref", "return", "self",
            "Self", "static", "struct", "super", "trait", "true", "type",
            "unsafe", "use", "where", "while", "dyn", "abstract", "become",
            "box", "do", "final", "macro", "override", "priv", "typeof",
            "unsized", "virtual", "yield", "async", "await", "try",
        ),
        secondary_keywords=(
            "bool", "char", "i8", "i16", "i32", "i64", "isize", "u8", "u16",
            "u32", "u64", "usize", "f32", "f64",
        ),
    ),
)

C: Final[FileType] = FileType(
    name="C",
    hl_opts=HighlightingOptions(
        numbers=True,
        strings=True,
        characters=True,
        comments=True,
        primary_keywords=C_LIKE_PRIMARY + ("auto", "inline", "register", "restrict"),
        secondary_keywords=C_LIKE_SECONDARY + ("_Bool", "size_t"),
    ),
)

CPP: Final[FileType] = FileType(
    name="C++",
    hl_opts=HighlightingOptions(
        numbers=True,
        strings=True,
        characters=True,
        comments=True,
        primary_keywords=C_LIKE_PRIMARY + (
            "auto", "catch", "class", "constexpr", "delete", "false",
            "namespace", "new", "nullptr", "private", "protected", "public",
            "template", "this", "throw", "true", "try", "using", "virtual",
        ),
        secondary_keywords=C_LIKE_SECONDARY + ("bool", "size_t", "wchar_t"),
    ),
)

JAVA: Final[FileType] = FileType(
    name="Java",
    hl_opts=HighlightingOptions(
        numbers=True,
        strings=True,
        characters=True,
        comments=True,
        primary_keywords=(
            "abstract", "break", "case", "catch", "class", "continue",
            "default", "do", "else", "enum", "extends", "false", "final",
            "finally", "for", "if", "implements", "import", "instanceof",
            "interface", "new", "null", "package", "private", "protected",
            "public", "return", "static", "super", "switch", "this", "throw",
            "throws", "true", "try", "while",
        ),
        secondary_keywords=(
            "boolean", "byte", "char", "double", "float", "int", "long",
            "short", "void", "var",
        ),
    ),
)

JAVASCRIPT_PRIMARY: Final[Tuple[str, ...]] = (
    "async", "await", "break", "case", "catch", "class", "const", "continue",
    "default", "delete", "do", "else", "export", "extends", "false",
    "finally", "for", "function", "if", "import", "in", "instanceof", "let",
    "new", "null", "return", "switch", "this", "throw", "true", "try",
    "typeof", "var", "while", "yield",
)

JAVASCRIPT: Final[FileType] = FileType(
    name="JavaScript",
    hl_opts=HighlightingOptions(
        numbers=True,
        strings=True,
        comments=True,
        primary_keywords=JAVASCRIPT_PRIMARY,
        secondary_keywords=("undefined", "NaN", "Infinity"),
    ),
)

TYPESCRIPT: Final[FileType] = FileType(
    name="TypeScript",
    hl_opts=HighlightingOptions(
        numbers=True,
        strings=True,
        comments=True,
        primary_keywords=JAVASCRIPT_PRIMARY + (
            "enum", "implements", "interface", "namespace", "type",
        ),
        secondary_keywords=(
            "any", "boolean", "never", "number", "string", "unknown", "void",
        ),
    ),
)

GO: Final[FileType] = FileType(
    name="Go",
    hl_opts=HighlightingOptions(
        numbers=True,
        strings=True,
        characters=True,
        comments=True,
        primary_keywords=(
            "break", "case", "chan", "const", "continue", "default", "defer",
            "else", "fallthrough", "for", "func", "go", "goto", "if",
            "import", "interface", "map", "package", "range", "return",
            "select", "struct", "switch", "type", "var",
        ),
        secondary_keywords=(
            "bool", "byte", "error", "float32", "float64", "int", "int8",
            "int16", "int32", "int64", "rune", "string", "uint", "uint8",
            "uint16", "uint32", "uint64",
        ),
    ),
)

# Keyed by Pygments lexer name.
FILE_TYPES: Final[Dict[str, FileType]] = {
    file_type.name: file_type
    for file_type in (RUST, C, CPP, JAVA, JAVASCRIPT, TYPESCRIPT, GO)
}


def register_file_type(lexer_name: str, file_type: FileType) -> None:
    """Register or replace the profile used for a Pygments lexer name."""

    FILE_TYPES[lexer_name] = file_type
