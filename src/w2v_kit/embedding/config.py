from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Fixed training profile forwarded to gensim on every build.
SAMPLING = 1e-5
USE_ADAGRAD = False
ITERATIONS = 30
LEARNING_RATE = 0.025
MIN_LEARNING_RATE = 1e-2
NEGATIVE_SAMPLE = 10


@dataclass(frozen=True)
class Word2VecConfig:
    """Overridable Word2Vec settings; the rest of the profile is fixed."""

    batch_size: int = 1000
    min_freq: int = 5
    layer_size: int = 300
    window_size: int = 5
    workers: int = 3
    seed: int = 1

    def __post_init__(self) -> None:
        for name in ("batch_size", "min_freq", "layer_size", "window_size", "workers"):
            value = getattr(self, name)
            if not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

    @property
    def sampling(self) -> float:
        return SAMPLING

    @property
    def use_adagrad(self) -> bool:
        return USE_ADAGRAD

    @property
    def iterations(self) -> int:
        return ITERATIONS

    @property
    def learning_rate(self) -> float:
        return LEARNING_RATE

    @property
    def min_learning_rate(self) -> float:
        return MIN_LEARNING_RATE

    @property
    def negative_sample(self) -> int:
        return NEGATIVE_SAMPLE

    def to_gensim_kwargs(self) -> dict[str, Any]:
        # gensim has no AdaGrad option; plain SGD matches use_adagrad=False.
        return {
            "batch_words": self.batch_size,
            "min_count": self.min_freq,
            "vector_size": self.layer_size,
            "window": self.window_size,
            "sample": self.sampling,
            "epochs": self.iterations,
            "alpha": self.learning_rate,
            "min_alpha": self.min_learning_rate,
            "negative": self.negative_sample,
            "hs": 0,
            "workers": self.workers,
            "seed": self.seed,
        }
