from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, Union

from gensim import utils

from ..tokenization.tokenizer import PreProcessor, TokenizerFactory

logger = logging.getLogger(__name__)


def _iter_sentence_paths(source: Path) -> list[Path]:
    if source.is_file():
        return [source]
    if source.is_dir():
        return sorted(path for path in source.iterdir() if path.is_file())
    raise ValueError(f"sentence source is neither a file nor a directory: {source}")


class CollectionSentenceSource:
    """Re-iterable sentence source over an in-memory collection."""

    def __init__(self, sentences: Iterable[str], *, preprocessor: Optional[PreProcessor] = None) -> None:
        self.sentences: list[str] = list(sentences)
        self.preprocessor = preprocessor

    def __iter__(self) -> Iterator[str]:
        for sentence in self.sentences:
            yield self.preprocessor(sentence) if self.preprocessor else sentence

    def __len__(self) -> int:
        return len(self.sentences)


class FileSentenceSource:
    """One sentence per non-blank line of a file, or of every file in a directory.

    Directory contents are read in filename order, without recursion. ``.gz``
    and ``.bz2`` files are decompressed transparently.
    """

    def __init__(self, source: Union[str, Path], *, preprocessor: Optional[PreProcessor] = None) -> None:
        self.source = Path(source)
        self.preprocessor = preprocessor
        self.input_files = _iter_sentence_paths(self.source)
        logger.debug("sentence files: %s", ", ".join(str(path) for path in self.input_files))

    def __iter__(self) -> Iterator[str]:
        for path in self.input_files:
            with utils.open(str(path), "rb") as handle:
                for raw in handle:
                    line = utils.to_unicode(raw, errors="ignore").strip()
                    if not line:
                        continue
                    yield self.preprocessor(line) if self.preprocessor else line


class TokenizedCorpus:
    """Restartable iterable of token lists, the shape gensim trains on.

    Every pass re-reads the sentence source and re-tokenizes through the
    factory. Sentences that yield no tokens are skipped.
    """

    def __init__(self, sentences: Iterable[str], factory: TokenizerFactory) -> None:
        # gensim makes one pass to build the vocabulary and one per epoch.
        if iter(sentences) is sentences:
            raise TypeError(
                f"sentence source must be re-iterable, got a one-shot iterator: {type(sentences).__name__}"
            )
        self.sentences = sentences
        self.factory = factory

    def __iter__(self) -> Iterator[Sequence[str]]:
        for sentence in self.sentences:
            tokens = self.factory.create(sentence).get_tokens()
            if tokens:
                yield tokens
