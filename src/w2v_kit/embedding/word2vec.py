from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from gensim.models import KeyedVectors, Word2Vec

from ..tokenization.tokenizer import PreProcessor, TokenizerFactory, TokenizerFn
from .config import Word2VecConfig
from .corpus import TokenizedCorpus
from .persistence import save_model
from .vocab import Vocabulary

logger = logging.getLogger(__name__)


class EmbeddingModel:
    """A gensim Word2Vec bound to the corpus and settings it is trained with.

    Built untrained by ``build_word2vec``; ``fit`` builds the vocabulary and
    runs every epoch before returning.
    """

    def __init__(self, corpus: TokenizedCorpus, config: Word2VecConfig) -> None:
        self.corpus = corpus
        self.config = config
        self.word2vec = Word2Vec(**config.to_gensim_kwargs())
        self._trained = False

    @property
    def tokenizer_factory(self) -> TokenizerFactory:
        return self.corpus.factory

    @property
    def is_trained(self) -> bool:
        return self._trained

    def fit(self) -> "EmbeddingModel":
        model = self.word2vec
        model.build_vocab(self.corpus)
        model.train(self.corpus, total_examples=model.corpus_count, epochs=model.epochs)
        self._trained = True
        return self

    def _require_trained(self) -> None:
        if not self._trained:
            raise RuntimeError("model has not been trained yet")

    @property
    def vectors(self) -> KeyedVectors:
        self._require_trained()
        return self.word2vec.wv

    @property
    def vocabulary(self) -> Vocabulary:
        self._require_trained()
        return Vocabulary.from_word2vec(self.word2vec)


def build_word2vec(
    sentences: Iterable[str],
    tokenizer: Union[TokenizerFn, TokenizerFactory],
    *,
    batch_size: int = 1000,
    min_freq: int = 5,
    layer_size: int = 300,
    window_size: int = 5,
    token_preprocessor: Optional[PreProcessor] = None,
    config: Optional[Word2VecConfig] = None,
) -> EmbeddingModel:
    """Configure an untrained Word2Vec over a re-iterable source of raw sentences.

    ``tokenizer`` is either a plain tokenizing function, wrapped into a
    ``TokenizerFactory``, or a ready factory. An explicit ``config`` wins over
    the keyword overrides.
    """

    if config is None:
        config = Word2VecConfig(
            batch_size=batch_size,
            min_freq=min_freq,
            layer_size=layer_size,
            window_size=window_size,
        )

    if isinstance(tokenizer, TokenizerFactory):
        factory = tokenizer
        if token_preprocessor is not None:
            factory.set_token_preprocessor(token_preprocessor)
    else:
        factory = TokenizerFactory(tokenizer, token_preprocessor=token_preprocessor)

    return EmbeddingModel(TokenizedCorpus(sentences, factory), config)


def fit_model(model: EmbeddingModel) -> EmbeddingModel:
    logger.info("Training the Word2Vec model.")
    return model.fit()


def fit_and_save_model(model: EmbeddingModel, output_path: Union[str, Path]) -> EmbeddingModel:
    """Train ``model`` and persist it under ``output_path``; errors propagate unsaved."""

    trained = fit_model(model)
    save_model(trained, output_path)
    return trained
