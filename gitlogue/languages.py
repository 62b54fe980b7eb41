"""Mapping file names to the language used for syntax highlighting."""

from __future__ import annotations

import os
from pathlib import PurePath
from typing import Dict, Optional, Union

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

PathLike = Union[str, "os.PathLike[str]"]

# Each language and the file extensions it claims. C++ is listed before C so
# that the upper-case C/H spellings resolve to C++ while lower-case .h is C.
_EXTENSIONS: Dict[str, tuple] = {
    "rust": ("rs",),
    "typescript": ("ts", "tsx", "mts", "cts"),
    "javascript": ("js", "jsx", "mjs", "cjs"),
    "python": ("py", "pyw"),
    "bash": ("sh", "bash", "zsh"),
    "go": ("go",),
    "ruby": ("rb", "rbw", "rake", "gemspec"),
    "swift": ("swift",),
    "kotlin": ("kt", "kts"),
    "java": ("java",),
    "php": ("php", "php3", "php4", "php5", "phtml"),
    "csharp": ("cs", "csx"),
    "cpp": (
        "cpp", "cc", "cxx", "c++", "C", "CPP", "hpp", "hh", "hxx", "h++",
        "H", "HPP", "tcc", "inl",
    ),
    "c": ("c", "h"),
    "haskell": ("hs", "lhs"),
    "dart": ("dart",),
    "scala": ("scala", "sc", "sbt"),
    "clojure": ("clj", "cljs", "cljc", "edn"),
    "zig": ("zig",),
    "elixir": ("ex", "exs"),
    "erlang": ("erl", "hrl", "es", "escript"),
    "html": ("html", "htm"),
    "css": ("css", "scss", "sass"),
    "json": ("json", "jsonc"),
    "markdown": ("md", "markdown"),
    "yaml": ("yaml", "yml"),
    "xml": ("xml", "svg", "xsl", "xslt"),
}

_LANGUAGE_BY_EXTENSION: Dict[str, str] = {}
for _language, _extensions in _EXTENSIONS.items():
    for _extension in _extensions:
        _LANGUAGE_BY_EXTENSION.setdefault(_extension, _language)

# Lexer alias for each language, as known to the highlighting library.
_LEXER_ALIASES: Dict[str, str] = {
    "rust": "rust",
    "typescript": "typescript",
    "javascript": "javascript",
    "python": "python",
    "bash": "bash",
    "go": "go",
    "ruby": "ruby",
    "swift": "swift",
    "kotlin": "kotlin",
    "java": "java",
    "php": "php",
    "csharp": "csharp",
    "cpp": "cpp",
    "c": "c",
    "haskell": "haskell",
    "dart": "dart",
    "scala": "scala",
    "clojure": "clojure",
    "zig": "zig",
    "elixir": "elixir",
    "erlang": "erlang",
    "html": "html",
    "css": "css",
    "json": "json",
    "markdown": "markdown",
    "yaml": "yaml",
    "xml": "xml",
}


def _extension(path: PathLike) -> Optional[str]:
    suffix = PurePath(os.fspath(path)).suffix
    if not suffix:
        return None
    return suffix[1:]


def language_for_path(path: PathLike) -> Optional[str]:
    """Name of the language a file's extension selects, or None if unsupported."""
    extension = _extension(path)
    if extension is None:
        return None
    return _LANGUAGE_BY_EXTENSION.get(extension)


def lexer_for_path(path: PathLike) -> Optional[Lexer]:
    """A fresh lexer for the file's language, or None if unsupported."""
    language = language_for_path(path)
    if language is None:
        return None
    try:
        return get_lexer_by_name(
            _LEXER_ALIASES[language], stripnl=False, stripall=False, ensurenl=False
        )
    except ClassNotFound:
        return None