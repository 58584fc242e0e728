"""Tokenizers and text pre-processors."""

from .preprocess import (
    AggregatePreProcessor,
    compose_preprocessors,
    lower_case_sentence,
    lower_case_token,
    strip_punctuation_token,
)
from .tokenizer import FunctionTokenizer, TokenizerFactory, tokenize, tokenize_regex, tokenize_whitespace

__all__ = [
    "AggregatePreProcessor",
    "FunctionTokenizer",
    "TokenizerFactory",
    "compose_preprocessors",
    "lower_case_sentence",
    "lower_case_token",
    "strip_punctuation_token",
    "tokenize",
    "tokenize_regex",
    "tokenize_whitespace",
]
