"""Two-file model persistence.

A model saved under ``base`` becomes two siblings:

- ``base.vectors``: gensim's plain-text word2vec format, a ``count dim`` header
  followed by one ``word c1 c2 ...`` row per word, with ``%`` and whitespace
  inside a word written as ``%XXXX`` (its code point in hex);
- ``base.vocab``: a pickled envelope holding the ``Vocabulary`` together with a
  format tag, a version and the shape of the vector table it was saved with.

``load_model`` checks the envelope against the vector table so that files from
different saves are not silently paired.
"""

from __future__ import annotations

import logging
import pickle
import re
from pathlib import Path
from typing import TYPE_CHECKING, Any, Union

from gensim.models import KeyedVectors

from .vocab import Vocabulary

if TYPE_CHECKING:  # pragma: no cover
    from .word2vec import EmbeddingModel

logger = logging.getLogger(__name__)

VECTORS_SUFFIX = ".vectors"
VOCAB_SUFFIX = ".vocab"
VOCAB_FORMAT = "w2v-kit-vocab"
VOCAB_FORMAT_VERSION = 1

WORD_ESCAPE_RE = re.compile(r"[%\s]")
WORD_UNESCAPE_RE = re.compile(r"%([0-9A-F]{4})")


class VocabularyFormatError(ValueError):
    """The ``.vocab`` file is corrupt or does not belong to the ``.vectors`` file."""


def _sibling(base: Union[str, Path], suffix: str) -> Path:
    base = Path(base)
    return base.with_name(base.name + suffix)


def escape_word(word: str) -> str:
    """Encode ``%`` and whitespace as ``%XXXX`` so a word stays one text-format field."""

    return WORD_ESCAPE_RE.sub(lambda match: f"%{ord(match.group()):04X}", word)


def unescape_word(word: str) -> str:
    return WORD_UNESCAPE_RE.sub(lambda match: chr(int(match.group(1), 16)), word)


def _rekeyed(vectors: KeyedVectors, keys: list[str]) -> KeyedVectors:
    out = KeyedVectors(vector_size=vectors.vector_size, dtype=vectors.vectors.dtype)
    out.add_vectors(keys, vectors.vectors)
    if "count" in vectors.expandos:
        for key, old_key in zip(keys, vectors.index_to_key):
            out.set_vecattr(key, "count", int(vectors.get_vecattr(old_key, "count")))
    return out


def save_vectors(vectors: KeyedVectors, path: Union[str, Path]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    keys = [escape_word(word) for word in vectors.index_to_key]
    if keys != vectors.index_to_key:
        vectors = _rekeyed(vectors, keys)
    vectors.save_word2vec_format(str(path), binary=False)


def load_vectors(path: Union[str, Path]) -> KeyedVectors:
    vectors = KeyedVectors.load_word2vec_format(str(path), binary=False)

    keys = [unescape_word(word) for word in vectors.index_to_key]
    if keys != vectors.index_to_key:
        vectors = _rekeyed(vectors, keys)
    return vectors


def _unpack(model: Union["EmbeddingModel", KeyedVectors]) -> tuple[KeyedVectors, Vocabulary]:
    if isinstance(model, KeyedVectors):
        vocab = getattr(model, "vocabulary", None)
        if not isinstance(vocab, Vocabulary):
            raise ValueError("vector table carries no vocabulary; load it with load_model first")
        for word, count in vocab.word_counts.items():
            if word in model.key_to_index:
                model.set_vecattr(word, "count", count)
        return model, vocab
    return model.vectors, model.vocabulary


def save_model(model: Union["EmbeddingModel", KeyedVectors], base_path: Union[str, Path]) -> None:
    """Write ``<base_path>.vectors`` and ``<base_path>.vocab``."""

    vectors, vocab = _unpack(model)
    vectors_path = _sibling(base_path, VECTORS_SUFFIX)
    vocab_path = _sibling(base_path, VOCAB_SUFFIX)

    save_vectors(vectors, vectors_path)

    envelope = {
        "format": VOCAB_FORMAT,
        "version": VOCAB_FORMAT_VERSION,
        "vector_size": int(vectors.vector_size),
        "num_words": len(vectors),
        "vocabulary": vocab,
    }
    with vocab_path.open("wb") as handle:
        pickle.dump(envelope, handle, protocol=pickle.HIGHEST_PROTOCOL)

    logger.info("saved model: %s (%d words, dim=%d)", base_path, len(vectors), vectors.vector_size)


def _read_envelope(vocab_path: Path) -> dict[str, Any]:
    try:
        with vocab_path.open("rb") as handle:
            envelope = pickle.load(handle)
    except (pickle.UnpicklingError, EOFError, AttributeError, ImportError, IndexError, TypeError) as exc:
        raise VocabularyFormatError(f"cannot deserialize vocabulary: {vocab_path}: {exc}") from exc

    if not isinstance(envelope, dict) or envelope.get("format") != VOCAB_FORMAT:
        raise VocabularyFormatError(f"not a vocabulary file: {vocab_path}")
    if envelope.get("version") != VOCAB_FORMAT_VERSION:
        raise VocabularyFormatError(
            f"unsupported vocabulary version {envelope.get('version')!r} in {vocab_path}"
        )
    if not isinstance(envelope.get("vocabulary"), Vocabulary):
        raise VocabularyFormatError(f"vocabulary payload missing in {vocab_path}")
    return envelope


def _check_pairing(envelope: dict[str, Any], vectors: KeyedVectors, vocab_path: Path) -> None:
    vocab: Vocabulary = envelope["vocabulary"]
    if envelope.get("vector_size") != vectors.vector_size:
        raise VocabularyFormatError(
            f"{vocab_path} was saved with dim={envelope.get('vector_size')}, vectors have dim={vectors.vector_size}"
        )
    if envelope.get("num_words") != len(vectors) or set(vocab.word_counts) != set(vectors.key_to_index):
        raise VocabularyFormatError(f"{vocab_path} does not match the words of its vector table")


def load_model(base_path: Union[str, Path]) -> KeyedVectors:
    """Load a model saved by ``save_model``.

    The returned vector table has per-word ``count`` attributes restored and the
    ``Vocabulary`` attached as ``vectors.vocabulary``.
    """

    vectors_path = _sibling(base_path, VECTORS_SUFFIX)
    vocab_path = _sibling(base_path, VOCAB_SUFFIX)

    vectors = load_vectors(vectors_path)
    envelope = _read_envelope(vocab_path)
    _check_pairing(envelope, vectors, vocab_path)

    vocab: Vocabulary = envelope["vocabulary"]
    for word, count in vocab.word_counts.items():
        vectors.set_vecattr(word, "count", count)
    vectors.vocabulary = vocab
    return vectors
