from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from gensim.models import Word2Vec

SUMMARY_TOP_N = 10


@dataclass
class Vocabulary:
    """Word frequencies plus corpus-wide statistics of a trained model.

    ``total_word_occurrences`` counts occurrences of the retained words only, so
    it always equals the sum of ``word_counts``; words dropped by ``min_freq``
    are not included.
    """

    word_counts: dict[str, int] = field(default_factory=dict)
    total_word_occurrences: int = 0
    document_count: int = 0

    @classmethod
    def from_word2vec(cls, model: "Word2Vec") -> "Vocabulary":
        wv = model.wv
        counts = {word: int(wv.get_vecattr(word, "count")) for word in wv.index_to_key}
        return cls(
            word_counts=counts,
            total_word_occurrences=sum(counts.values()),
            document_count=int(model.corpus_count or 0),
        )

    @property
    def num_words(self) -> int:
        return len(self.word_counts)

    def word_frequency(self, word: str) -> int:
        return self.word_counts.get(word, 0)

    def __contains__(self, word: object) -> bool:
        return word in self.word_counts

    def __len__(self) -> int:
        return len(self.word_counts)


@dataclass(frozen=True)
class ModelSummary:
    num_words: int
    total_word_occurrences: int
    document_count: int
    top_words: dict[str, int]


def top_n_words(vocab: Vocabulary, n: int) -> dict[str, int]:
    """Return the ``n`` most frequent words, ordered by (frequency, word) descending."""

    if n <= 0:
        return {}
    ranked = sorted(vocab.word_counts.items(), key=lambda item: (item[1], item[0]), reverse=True)
    return dict(ranked[:n])


def model_summary(vocab: Vocabulary, top_n: int = SUMMARY_TOP_N) -> ModelSummary:
    return ModelSummary(
        num_words=vocab.num_words,
        total_word_occurrences=vocab.total_word_occurrences,
        document_count=vocab.document_count,
        top_words=top_n_words(vocab, top_n),
    )
