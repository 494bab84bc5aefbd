# -*- coding: utf-8 -*-
"""
Markup Tokenizer
================
Splits one line of game text into literal runs and tag tokens.

Tokenization is a lossless partition: joining ``token.raw`` for every token of
a line gives the line back, for every input (empty lines, stray ``<``, lone
``%`` or backslash included).
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Union

from bgreflector.core.grammar import (
    CLOSING_FAMILIES,
    DATE_CODE_PATTERN,
    ESCAPE_BREAK_PATTERN,
    TAG_CANDIDATE_PATTERN,
    TagFamily,
    classify,
    extract_attributes,
)

# Order matters: special multi-character tokens first, then literal text,
# then a lone special character that did not start a token.
_TOKEN_RE = re.compile(
    rf"(?P<tag>{TAG_CANDIDATE_PATTERN})"
    rf"|(?P<esc>{ESCAPE_BREAK_PATTERN})"
    rf"|(?P<date>{DATE_CODE_PATTERN})"
    r"|(?P<text>[^<\\%]+)"
    r"|(?P<lone>[<\\%])"
)

_LINE_BREAK_RE = re.compile(r"\r?\n")


@dataclass(frozen=True)
class LiteralRun:
    """Plain text between tags."""
    text: str

    @property
    def raw(self) -> str:
        return self.text


@dataclass(frozen=True)
class Tag:
    """A recognized (or passed-through) markup token."""
    raw: str
    family: TagFamily
    attributes: Dict[str, str] = field(default_factory=dict, hash=False)

    @property
    def closing(self) -> bool:
        return self.family in CLOSING_FAMILIES


Token = Union[LiteralRun, Tag]


def split_lines(text: str) -> List[str]:
    """Split a document into lines; ``\\r\\n`` and ``\\n`` both end a line."""
    return _LINE_BREAK_RE.split(text)


def tokenize(line: str) -> List[Token]:
    """
    Tokenize a single line.

    ``<...>`` candidates are classified through the grammar table; anything the
    table does not know stays a ``LITERAL`` tag (the validator judges it, not
    the tokenizer). Escaped breaks (``\\n``, ``\\r`` as two characters) and
    date codes (``%Y`` ...) are atomic tokens.
    """
    tokens: List[Token] = []
    pending_text: List[str] = []

    def flush_text():
        if pending_text:
            tokens.append(LiteralRun("".join(pending_text)))
            pending_text.clear()

    for m in _TOKEN_RE.finditer(line):
        kind = m.lastgroup
        raw = m.group(0)

        if kind in ("text", "lone"):
            pending_text.append(raw)
            continue

        flush_text()
        if kind == "tag":
            family = classify(raw)
            attributes = extract_attributes(raw) if family is not TagFamily.LITERAL else {}
            tokens.append(Tag(raw, family, attributes))
        elif kind == "esc":
            tokens.append(Tag(raw, TagFamily.ESCAPE_BREAK))
        else:
            tokens.append(Tag(raw, TagFamily.DATE_CODE))

    flush_text()
    return tokens


def tokenize_text(text: str) -> List[List[Token]]:
    """Tokenize every line of a document."""
    return [tokenize(line) for line in split_lines(text)]


def detokenize(tokens: List[Token]) -> str:
    return "".join(token.raw for token in tokens)
