import numpy as np
import pytest

from w2v_kit.embedding import (
    DimensionMismatchError,
    Vocabulary,
    add_vectors,
    cosine_similarity,
    mean_vectors,
    model_summary,
    mult_vectors,
    top_n_words,
)


def _vocab():
    return Vocabulary(word_counts={"a": 5, "b": 5, "c": 1}, total_word_occurrences=11, document_count=3)


def test_top_n_words_breaks_ties_by_word_descending():
    top = top_n_words(_vocab(), 2)

    assert list(top) == ["b", "a"]
    assert top == {"b": 5, "a": 5}


def test_top_n_words_bounds():
    assert top_n_words(_vocab(), 0) == {}
    assert list(top_n_words(_vocab(), 10)) == ["b", "a", "c"]


def test_model_summary():
    counts = {f"w{i:02d}": i for i in range(1, 16)}
    vocab = Vocabulary(word_counts=counts, total_word_occurrences=sum(counts.values()), document_count=4)

    summary = model_summary(vocab)

    assert summary.num_words == 15
    assert summary.total_word_occurrences == 120
    assert summary.document_count == 4
    assert list(summary.top_words) == [f"w{i:02d}" for i in range(15, 5, -1)]


def test_vocabulary_lookups():
    vocab = _vocab()

    assert "a" in vocab
    assert "z" not in vocab
    assert vocab.word_frequency("c") == 1
    assert vocab.word_frequency("z") == 0
    assert len(vocab) == vocab.num_words == 3


def test_vector_arithmetic():
    np.testing.assert_array_equal(add_vectors([1, 2], [3, 4]), [4, 6])
    np.testing.assert_array_equal(mult_vectors([1, 2], [3, 4]), [3, 8])
    np.testing.assert_array_equal(mean_vectors([1, 2], [3, 4]), [2, 3])


def test_vector_arithmetic_many_operands():
    np.testing.assert_array_equal(add_vectors([1, 1], [2, 2], [3, 3]), [6, 6])
    np.testing.assert_array_equal(mult_vectors([1, 2], [2, 2], [3, 2]), [6, 8])
    np.testing.assert_allclose(mean_vectors([0, 3], [3, 3], [6, 3]), [3, 3])


def test_vector_arithmetic_rejects_dimension_mismatch():
    with pytest.raises(DimensionMismatchError):
        add_vectors([1, 2], [1, 2, 3])
    with pytest.raises(DimensionMismatchError):
        mean_vectors([1, 2], [1, 2], [1])
    with pytest.raises(ValueError):
        mult_vectors([[1, 2]], [[1, 2]])


def test_cosine_similarity():
    assert cosine_similarity([1, 0], [1, 0]) == pytest.approx(1.0)
    assert cosine_similarity([1, 0], [0, 2]) == pytest.approx(0.0)
    with pytest.raises(ValueError):
        cosine_similarity([0, 0], [1, 1])


def test_model_summary_custom_top_n():
    summary = model_summary(_vocab(), top_n=1)

    assert summary.top_words == {"b": 5}
    assert summary.total_word_occurrences == 11
