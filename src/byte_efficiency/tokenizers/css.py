"""Regex scanner measuring the significant characters of a stylesheet."""

from __future__ import annotations

import re
from typing import List

from byte_efficiency.domain.exceptions import TokenizeError
from byte_efficiency.domain.models import Token, TokenType

from .base import BaseTokenizer


class CssTokenizer(BaseTokenizer):
    """Drops whitespace and comments; keeps strings and ``/*!`` license comments."""

    LANGUAGE = "css"

    TOKEN_PATTERN = re.compile(
        r"""
        (?P<license>/\*!.*?\*/)
        |(?P<comment>/\*.*?\*/)
        |(?P<open_comment>/\*)
        |(?P<string>"(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*')
        |(?P<open_string>["'])
        |(?P<whitespace>\s+)
        |(?P<chunk>[^\s"'/]+|/)
        """,
        re.VERBOSE | re.DOTALL,
    )

    def _scan(self, source: str) -> List[Token]:
        tokens: List[Token] = []
        position = 0
        while position < len(source):
            match = self.TOKEN_PATTERN.match(source, position)
            if match is None:  # pragma: no cover - every character is covered
                raise TokenizeError(
                    "Unexpected character", context={"index": position}
                )
            kind = match.lastgroup
            if kind == "open_comment":
                raise TokenizeError(
                    "Unterminated comment", context={"index": position}
                )
            if kind == "open_string":
                raise TokenizeError(
                    "Unterminated string", context={"index": position}
                )
            if kind == "string":
                tokens.append(Token(type=TokenType.STRING, value=match.group()))
            elif kind in ("license", "chunk"):
                tokens.append(Token(type=TokenType.OTHER, value=match.group()))
            position = match.end()
        return tokens
