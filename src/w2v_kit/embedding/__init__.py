"""Word2Vec building, training, persistence and vector utilities."""

from .algebra import DimensionMismatchError, add_vectors, cosine_similarity, mean_vectors, mult_vectors
from .config import Word2VecConfig
from .corpus import CollectionSentenceSource, FileSentenceSource, TokenizedCorpus
from .persistence import VocabularyFormatError, load_model, load_vectors, save_model, save_vectors
from .vocab import ModelSummary, Vocabulary, model_summary, top_n_words
from .word2vec import EmbeddingModel, build_word2vec, fit_and_save_model, fit_model

__all__ = [
    "CollectionSentenceSource",
    "DimensionMismatchError",
    "EmbeddingModel",
    "FileSentenceSource",
    "ModelSummary",
    "TokenizedCorpus",
    "Vocabulary",
    "VocabularyFormatError",
    "Word2VecConfig",
    "add_vectors",
    "build_word2vec",
    "cosine_similarity",
    "fit_and_save_model",
    "fit_model",
    "load_model",
    "load_vectors",
    "mean_vectors",
    "model_summary",
    "mult_vectors",
    "save_model",
    "save_vectors",
    "top_n_words",
]
