"""Tokenizer for arithmetic assignment expressions."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum


class TokenType(IntEnum):
    """Kinds of token produced by :func:`tokenize`."""

    NUMBER = 0
    VARIABLE = 1
    OPERATOR = 2
    LPAREN = 3
    RPAREN = 4
    ASSIGN = 5
    FUNC = 6
    END = 7


@dataclass(frozen=True)
class Token:
    """A single lexical token."""

    type: TokenType
    value: str


# Characters matching none of the groups are skipped by finditer.
_TOKEN_RE = re.compile(
    r"(?P<NUMBER>[0-9]+)"
    r"|(?P<VARIABLE>[A-Za-z]+)"
    r"|(?P<OPERATOR>[-+*/^])"
    r"|(?P<ASSIGN>=)"
    r"|(?P<LPAREN>\()"
    r"|(?P<RPAREN>\))"
)


def tokenize(code: str) -> list[Token]:
    """Split ``code`` into tokens, ending with an ``END`` token.

    Runs of ASCII digits become numbers, runs of ASCII letters become
    variables; whitespace and unrecognised characters are skipped.
    """
    tokens = [
        Token(TokenType[match.lastgroup], match.group())
        for match in _TOKEN_RE.finditer(code)
    ]
    tokens.append(Token(TokenType.END, ""))
    return tokens