from __future__ import annotations

import re
from typing import Callable, Iterable, Optional, Sequence, Union

TokenizerFn = Callable[[str], Sequence[str]]
PreProcessor = Callable[[str], str]

WHITESPACE_RE = re.compile(r"\s+")


def tokenize(text: str) -> list[str]:
    """Split on whitespace and keep only tokens longer than two characters."""

    return [token for token in WHITESPACE_RE.split(text) if len(token) > 2]


def tokenize_whitespace(text: str) -> list[str]:
    return [token for token in WHITESPACE_RE.split(text) if token]


def tokenize_regex(pattern: Union[str, re.Pattern[str]], text: str) -> list[str]:
    splitter = re.compile(pattern) if isinstance(pattern, str) else pattern
    return [token for token in splitter.split(text) if token]


class FunctionTokenizer:
    """Cursor over the tokens a plain tokenizing function produces for one text.

    The tokens are computed once, at construction. An optional token
    pre-processor is applied lazily by ``next_token`` and ``get_tokens``;
    ``None`` means identity.
    """

    def __init__(
        self,
        tokenizer_fn: TokenizerFn,
        text: str,
        *,
        token_preprocessor: Optional[PreProcessor] = None,
    ) -> None:
        self._tokens: tuple[str, ...] = tuple(tokenizer_fn(text))
        self._cursor = 0
        self._preprocessor = token_preprocessor

    def _apply(self, token: str) -> str:
        if self._preprocessor is None:
            return token
        return self._preprocessor(token)

    def has_more_tokens(self) -> bool:
        return self._cursor < len(self._tokens)

    def count_tokens(self) -> int:
        return len(self._tokens)

    def remaining_tokens(self) -> int:
        return len(self._tokens) - self._cursor

    def next_token(self) -> str:
        if self._cursor >= len(self._tokens):
            raise IndexError(f"no more tokens: all {len(self._tokens)} consumed")
        token = self._tokens[self._cursor]
        self._cursor += 1
        return self._apply(token)

    def get_tokens(self) -> list[str]:
        return [self._apply(token) for token in self._tokens]

    def set_token_preprocessor(self, preprocessor: Optional[PreProcessor]) -> None:
        self._preprocessor = preprocessor

    def __iter__(self):
        while self.has_more_tokens():
            yield self.next_token()

    def __repr__(self) -> str:
        return f"FunctionTokenizer(tokens={len(self._tokens)}, cursor={self._cursor})"


class TokenizerFactory:
    """Builds a ``FunctionTokenizer`` per input from one tokenizing function.

    A default token pre-processor installed on the factory is handed to every
    tokenizer created after it was set.
    """

    def __init__(self, tokenizer_fn: TokenizerFn, token_preprocessor: Optional[PreProcessor] = None) -> None:
        self.tokenizer_fn = tokenizer_fn
        self._preprocessor = token_preprocessor

    @property
    def token_preprocessor(self) -> Optional[PreProcessor]:
        return self._preprocessor

    def set_token_preprocessor(self, preprocessor: Optional[PreProcessor]) -> None:
        self._preprocessor = preprocessor

    def create(self, source: Union[str, Iterable[str], Iterable[bytes]]) -> FunctionTokenizer:
        if isinstance(source, str):
            text = source
        else:
            text = " ".join(_strip_line(line) for line in source)
        return FunctionTokenizer(self.tokenizer_fn, text, token_preprocessor=self._preprocessor)


def _strip_line(line: Union[str, bytes]) -> str:
    if isinstance(line, bytes):
        line = line.decode("utf-8", errors="ignore")
    return line.rstrip("\r\n")
