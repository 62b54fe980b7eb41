"""Syntax highlighting of source text into coloured spans."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pygments.lexer import Lexer
from pygments.token import (
    Comment,
    Generic,
    Keyword,
    Literal,
    Name,
    Number,
    Operator,
    Punctuation,
    String,
    _TokenType,
)

from .colors import Color, Theme
from .languages import language_for_path, lexer_for_path


class TokenType(Enum):
    """Kinds of source tokens, each drawn in its own theme colour."""

    KEYWORD = "keyword"
    TYPE = "type"
    FUNCTION = "function"
    VARIABLE = "variable"
    STRING = "string"
    NUMBER = "number"
    COMMENT = "comment"
    OPERATOR = "operator"
    PUNCTUATION = "punctuation"
    CONSTANT = "constant"
    PARAMETER = "parameter"
    PROPERTY = "property"
    LABEL = "label"

    def color(self, theme: Theme) -> Color:
        """The theme's colour for this kind of token."""
        return getattr(theme, f"syntax_{self.value}")


@dataclass(frozen=True)
class HighlightSpan:
    """A highlighted stretch of source, as character offsets [start, end)."""

    start: int
    end: int
    token_type: TokenType


_CAPTURE_TYPES: Dict[str, TokenType] = {
    "keyword": TokenType.KEYWORD,
    "type": TokenType.TYPE,
    "function": TokenType.FUNCTION,
    "variable": TokenType.VARIABLE,
    "string": TokenType.STRING,
    "number": TokenType.NUMBER,
    "comment": TokenType.COMMENT,
    "operator": TokenType.OPERATOR,
    "punctuation": TokenType.PUNCTUATION,
    "constant": TokenType.CONSTANT,
    "parameter": TokenType.PARAMETER,
    "property": TokenType.PROPERTY,
    "label": TokenType.LABEL,
    "character": TokenType.STRING,
    "boolean": TokenType.CONSTANT,
    "namespace": TokenType.TYPE,
    "module": TokenType.TYPE,
    "constructor": TokenType.TYPE,
    "method": TokenType.FUNCTION,
    "macro": TokenType.FUNCTION,
    "annotation": TokenType.KEYWORD,
    "attribute": TokenType.KEYWORD,
    "decorator": TokenType.KEYWORD,
    "tag": TokenType.TYPE,
    "escape": TokenType.OPERATOR,
    "delimiter": TokenType.PUNCTUATION,
    "special": TokenType.OPERATOR,
    "field": TokenType.PROPERTY,
    "enum": TokenType.TYPE,
    "struct": TokenType.TYPE,
    "class": TokenType.TYPE,
    "interface": TokenType.TYPE,
    "trait": TokenType.TYPE,
    "regexp": TokenType.STRING,
    "conditional": TokenType.KEYWORD,
    "repeat": TokenType.KEYWORD,
    "exception": TokenType.KEYWORD,
    "include": TokenType.KEYWORD,
    "storageclass": TokenType.KEYWORD,
    "identifier": TokenType.VARIABLE,
    "float": TokenType.NUMBER,
    "text": TokenType.STRING,
}


def token_type_for_capture(name: str) -> Optional[TokenType]:
    """Token type for a capture name such as "keyword.function"; None to skip it."""
    base = name.split(".", 1)[0]
    return _CAPTURE_TYPES.get(base)


# Capture names for lexer token kinds; a kind not listed inherits its parent's.
_LEXER_CAPTURES: Dict[_TokenType, str] = {
    Keyword: "keyword",
    Keyword.Type: "type",
    Keyword.Constant: "boolean",
    Name: "variable",
    Name.Builtin: "function.builtin",
    Name.Builtin.Pseudo: "variable.builtin",
    Name.Class: "type",
    Name.Constant: "constant",
    Name.Decorator: "attribute",
    Name.Entity: "constant",
    Name.Exception: "type",
    Name.Function: "function",
    Name.Label: "label",
    Name.Namespace: "namespace",
    Name.Attribute: "property",
    Name.Property: "property",
    Name.Tag: "tag",
    Name.Variable: "variable",
    Name.Other: "variable",
    Literal: "constant",
    String: "string",
    String.Char: "character",
    String.Escape: "string.escape",
    String.Regex: "regexp",
    String.Doc: "string.doc",
    Number: "number",
    Number.Float: "float",
    Operator: "operator",
    Operator.Word: "keyword.operator",
    Punctuation: "punctuation",
    Comment: "comment",
    Generic.Heading: "text.title",
    Generic.Subheading: "text.title",
    Generic.Emph: "text.emphasis",
    Generic.Strong: "text.strong",
}


def _capture_for(ttype: _TokenType) -> Optional[str]:
    while ttype is not None:
        capture = _LEXER_CAPTURES.get(ttype)
        if capture is not None:
            return capture
        ttype = ttype.parent
    return None


class Highlighter:
    """Splits source text into highlighted spans for the language of a file."""

    def __init__(self) -> None:
        self._lexer: Optional[Lexer] = None
        self._language: Optional[str] = None
        self._cache: Optional[Tuple[str, List[HighlightSpan]]] = None

    @property
    def language(self) -> Optional[str]:
        """Name of the current language, or None when none is set."""
        return self._language

    def set_language_from_path(self, path) -> bool:
        """Pick the language from a file name; False (and no language) if unsupported."""
        self._cache = None
        lexer = lexer_for_path(path)
        if lexer is None:
            self._lexer = None
            self._language = None
            return False
        self._lexer = lexer
        self._language = language_for_path(path)
        return True

    def highlight(self, source: str) -> List[HighlightSpan]:
        """Highlighted spans of ``source``, ordered by start offset."""
        if self._lexer is None:
            return []
        if self._cache is not None and self._cache[0] == source:
            return list(self._cache[1])

        spans = []
        for index, ttype, value in self._lexer.get_tokens_unprocessed(source):
            if not value:
                continue
            capture = _capture_for(ttype)
            if capture is None:
                continue
            token_type = token_type_for_capture(capture)
            if token_type is None:
                continue
            spans.append(HighlightSpan(index, index + len(value), token_type))

        spans.sort(key=lambda span: span.start)
        self._cache = (source, spans)
        return list(spans)