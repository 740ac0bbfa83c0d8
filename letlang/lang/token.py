"""Token data types shared by the lexer and the parser.

A token is the smallest classified unit of a letlang program. Every token knows where it came from (a Position) and
what it is (a TokenKind). Both are immutable once the lexer has built them.
"""

from dataclasses import dataclass
from enum import Enum


KEYWORDS = frozenset(["let", "be", "fn"])
OPERATORS = frozenset(["=", "+", "-", "(", ")"])


@dataclass(frozen=True)
class Position:
    """Source location of a token, only used for diagnostics."""
    file: str
    row: int = 0
    col: int = 0

    def __str__(self):
        return f"{self.file}:{self.row}:{self.col}"


class TokenKind(Enum):
    """Closed set of token classifications. Kinds are compared for equality only."""
    WORD = "Word"
    KEYWORD = "Keyword"
    OPERATOR = "Operator"
    NUMERIC = "Numeric"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class Token:
    value: str
    position: Position
    kind: TokenKind

    def __repr__(self):
        return f"[{self.position}]: {self.value} ({self.kind})"
