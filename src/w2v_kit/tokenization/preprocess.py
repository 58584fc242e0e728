from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Callable, Iterable, Tuple

PreProcessor = Callable[[str], str]


def lower_case_sentence(sentence: str) -> str:
    return sentence.lower()


def lower_case_token(token: str) -> str:
    return token.lower()


def strip_punctuation_token(token: str) -> str:
    """Drop leading and trailing ASCII punctuation from one token."""

    return token.strip(string.punctuation)


@dataclass(frozen=True)
class AggregatePreProcessor:
    """Apply several pre-processors in order, each consuming the previous output."""

    preprocessors: Tuple[PreProcessor, ...] = ()

    def __init__(self, preprocessors: Iterable[PreProcessor] = ()) -> None:
        object.__setattr__(self, "preprocessors", tuple(preprocessors))

    def __call__(self, text: str) -> str:
        for preprocessor in self.preprocessors:
            text = preprocessor(text)
        return text


def compose_preprocessors(*preprocessors: PreProcessor) -> AggregatePreProcessor:
    return AggregatePreProcessor(preprocessors)
