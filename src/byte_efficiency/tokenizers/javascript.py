"""JavaScript tokenizer backed by esprima."""

from __future__ import annotations

from typing import Any, List, Mapping

import esprima

from byte_efficiency.domain.exceptions import TokenizeError
from byte_efficiency.domain.models import Token, TokenType

from .base import BaseTokenizer


class JavaScriptTokenizer(BaseTokenizer):
    """Produces esprima tokens; comments and whitespace are never emitted."""

    LANGUAGE = "javascript"

    TYPE_MAP: Mapping[str, TokenType] = {
        "Identifier": TokenType.IDENTIFIER,
        "Keyword": TokenType.KEYWORD,
        "Punctuator": TokenType.PUNCTUATOR,
        "String": TokenType.STRING,
        "Numeric": TokenType.NUMERIC,
        "Boolean": TokenType.BOOLEAN,
        "Null": TokenType.NULL,
        "Template": TokenType.TEMPLATE,
        "RegularExpression": TokenType.REGULAR_EXPRESSION,
    }

    def _scan(self, source: str) -> List[Token]:
        try:
            raw_tokens = esprima.tokenize(source)
        except esprima.Error as exc:
            raise TokenizeError(
                "Invalid JavaScript",
                context={
                    "description": getattr(exc, "description", None) or str(exc),
                    "line": getattr(exc, "lineNumber", None),
                    "column": getattr(exc, "column", None),
                },
            ) from exc
        return [self._convert(raw) for raw in raw_tokens]

    def _convert(self, raw: Any) -> Token:
        token_type = self.TYPE_MAP.get(raw.type, TokenType.OTHER)
        return Token(type=token_type, value=str(raw.value))
