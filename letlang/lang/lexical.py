"""Lexical analysis for the letlang language. Turns raw source text into a flat list of classified tokens.

Lexing is deliberately naive:

```
<segment> ::= <char>*        ; any run of characters other than the literal space
<source>  ::= <segment> (" " <segment>)*
```

Only the space character separates segments: tabs, newlines and carriage returns are part of a segment, although
trailing line breaks are trimmed off before a segment is classified. The lexer never fails. Garbage in simply gives
Word tokens out.
"""

import re

from letlang.lang.token import KEYWORDS, OPERATORS, Position, Token, TokenKind


DEFAULT_PATH = "<in>"
DELIMITER = " "

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# decimal literals as accepted by a strict float parser: no whitespace, no underscores, no hex floats
FLOAT_LITERAL = re.compile(r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
                           re.IGNORECASE)


def trim_newlines(text):
    """Strips trailing '\\n' and '\\r' characters from text, leaving interior ones alone."""
    while text.endswith("\n") or text.endswith("\r"):
        if text.endswith("\n"):
            text = text[:-1]
        if text.endswith("\r"):
            text = text[:-1]
    return text


def is_float(segment):
    """Whether or not segment is a 64-bit floating point literal."""
    return FLOAT_LITERAL.fullmatch(segment) is not None


def is_hex(segment):
    """Whether or not segment is a hexadecimal literal: '0x' followed by hex digits. Note that '0x' itself counts."""
    if len(segment) < 2 or segment[:2] != "0x":
        return False
    return all(char in HEX_DIGITS for char in segment[2:])


def determine_kind(segment):
    """Classifies a trimmed segment. Keywords win over operators, which win over numbers; anything else is a Word."""
    if segment in KEYWORDS:
        return TokenKind.KEYWORD
    if segment in OPERATORS:
        return TokenKind.OPERATOR
    if is_float(segment) or is_hex(segment):
        return TokenKind.NUMERIC
    return TokenKind.WORD


def make_token(segment, path, col):
    """Trims and classifies a raw segment into a Token starting at col. Rows are not tracked, so row is always 0."""
    value = trim_newlines(segment)
    return Token(value, Position(path, 0, col), determine_kind(value))


def lex(source, path=DEFAULT_PATH):
    """Splits source on spaces and returns the resulting list of Tokens. The list is never empty: whatever is left
    after the last space (possibly nothing) always becomes the final token.
    """
    tokens = []
    segment = ""
    col = 0
    start = 0

    for char in source:
        col += 1
        if char != DELIMITER:
            segment += char
            continue

        tokens.append(make_token(segment, path, start))
        start = col
        segment = ""

    tokens.append(make_token(segment, path, start))
    return tokens
