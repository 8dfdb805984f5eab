from __future__ import annotations

"""
Token Counting Engine.

Estimates the token size of the generated document so it can be budgeted
before being handed to a language model. Uses tiktoken's local BPE
encoders, with a character-density heuristic when an encoding cannot be
loaded (for example when its BPE file cannot be downloaded).
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Dict

import tiktoken

from codebase_scanner.domain.constants import DEFAULT_TOKEN_MODEL

logger = logging.getLogger(__name__)

CHARS_PER_TOKEN_AVG = 4
FALLBACK_ENCODING = "o200k_base"

# -----------------------------------------------------------------------------
# STRATEGY INTERFACES
# -----------------------------------------------------------------------------

class TokenizerStrategy(ABC):
    """Abstract token counting algorithm."""

    @abstractmethod
    def count(self, text: str, model_id: str) -> int:
        pass


class HeuristicStrategy(TokenizerStrategy):
    """Character density estimate, always available."""

    def count(self, text: str, model_id: str) -> int:
        return math.ceil(len(text) / CHARS_PER_TOKEN_AVG)


class TiktokenStrategy(TokenizerStrategy):
    """
    OpenAI BPE encoders via tiktoken.

    The encoding comes from tiktoken's own model registry; identifiers it
    does not know use ``o200k_base``. Loaded encodings are kept for reuse.
    """

    def __init__(self) -> None:
        self._encodings: Dict[str, tiktoken.Encoding] = {}

    def count(self, text: str, model_id: str) -> int:
        name = resolve_encoding_name(model_id)
        encoding = self._encodings.get(name)
        if encoding is None:
            logger.debug(f"Loading tiktoken encoding '{name}' for model '{model_id}'.")
            encoding = tiktoken.get_encoding(name)
            self._encodings[name] = encoding
        return len(encoding.encode(text, disallowed_special=()))


def resolve_encoding_name(model_id: str) -> str:
    """Map a model identifier to its tiktoken encoding name."""
    try:
        return tiktoken.encoding_name_for_model(model_id)
    except KeyError:
        return FALLBACK_ENCODING

# -----------------------------------------------------------------------------
# SERVICE
# -----------------------------------------------------------------------------

class TokenizerService:
    """Routes counting to tiktoken and falls back to the heuristic."""

    def __init__(self) -> None:
        self.heuristic = HeuristicStrategy()
        self.primary: TokenizerStrategy = TiktokenStrategy()

    def count(self, text: str, model: str) -> int:
        if not text:
            return 0
        try:
            return self.primary.count(text, model)
        except Exception as e:
            logger.warning(f"Tokenizer {type(self.primary).__name__} failed: {e}. Using heuristic fallback.")
            return self.heuristic.count(text, model)


_SERVICE_INSTANCE = TokenizerService()


def count_tokens(text: str, model: str = DEFAULT_TOKEN_MODEL) -> int:
    """
    Estimate the number of tokens of ``text`` for the target model.

    Args:
        text: Input string content.
        model: Target model identifier (e.g. ``gpt-4o``).

    Returns:
        int: Token count (exact when tiktoken is usable, else estimated).
    """
    return _SERVICE_INSTANCE.count(text, model)
