"""Convenience layer for training and storing gensim Word2Vec models."""

__version__ = "0.1.0"
