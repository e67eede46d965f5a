"""Tokenizer abstractions and shared behavior implementations."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from byte_efficiency.domain.exceptions import TokenizeError
from byte_efficiency.domain.models import Token
from byte_efficiency.utils.validators import validate_content


class BaseTokenizer(ABC):
    """Template-method base class that handles validation, errors and logging."""

    LANGUAGE = "text"

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger(
            f"{__name__}.{self.__class__.__name__}"
        )

    def tokenize(self, source: str) -> List[Token]:
        """Public API that aligns with ITokenizer.tokenize."""

        validate_content(source)
        try:
            tokens = self._scan(source)
        except TokenizeError:
            raise
        except Exception as exc:  # pragma: no cover - defensive
            self.logger.exception("Unexpected tokenizer failure")
            raise TokenizeError(
                "Unexpected tokenizer failure",
                context={"tokenizer": self.__class__.__name__},
            ) from exc
        self.log_tokens(source, tokens)
        return tokens

    @abstractmethod
    def _scan(self, source: str) -> List[Token]:
        """Language-specific scanning implemented by subclasses."""

    def log_tokens(self, source: str, tokens: List[Token]) -> None:
        """Hook for logging after a successful scan."""

        self.logger.debug(
            "tokenize_complete",
            extra={
                "language": self.LANGUAGE,
                "content_length": len(source),
                "token_count": len(tokens),
            },
        )
