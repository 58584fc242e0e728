import io

import pytest

from w2v_kit.tokenization import (
    AggregatePreProcessor,
    FunctionTokenizer,
    TokenizerFactory,
    compose_preprocessors,
    lower_case_sentence,
    lower_case_token,
    strip_punctuation_token,
    tokenize,
    tokenize_regex,
    tokenize_whitespace,
)

TOKENS = ["This", "that", "the", "other"]


def _fixed_tokens(_text):
    return list(TOKENS)


def test_tokenize_whitespace():
    assert tokenize_whitespace("this that the other") == ["this", "that", "the", "other"]
    assert tokenize_whitespace("  leading   and trailing\t\n") == ["leading", "and", "trailing"]


def test_tokenize_regex():
    assert tokenize_regex(":", "this:that:the other") == ["this", "that", "the other"]


def test_tokenize_drops_short_tokens():
    assert tokenize("a cat is on the mat") == ["cat", "the", "mat"]


def test_lower_case_preprocessors():
    assert lower_case_sentence("This is one.") == "this is one."
    assert lower_case_token("This") == "this"


def test_strip_punctuation_token():
    assert strip_punctuation_token("(word),") == "word"
    assert strip_punctuation_token("don't") == "don't"


def test_tokenizer_cursor():
    t = FunctionTokenizer(_fixed_tokens, "ignored")

    assert t.has_more_tokens()
    assert t.count_tokens() == 4
    assert t.next_token() == "This"
    assert t.remaining_tokens() == 3
    assert t.get_tokens() == TOKENS

    t.set_token_preprocessor(lower_case_token)
    assert t.get_tokens() == ["this", "that", "the", "other"]
    assert t.next_token() == "that"


def test_tokenizer_next_token_returns_every_token_in_order():
    t = FunctionTokenizer(tokenize_whitespace, "one two three")

    seen = [t.next_token() for _ in range(t.count_tokens())]

    assert seen == ["one", "two", "three"]
    assert not t.has_more_tokens()
    assert t.remaining_tokens() == 0


def test_tokenizer_next_token_past_end_raises():
    t = FunctionTokenizer(tokenize_whitespace, "only")
    t.next_token()

    with pytest.raises(IndexError):
        t.next_token()
    assert t.remaining_tokens() == 0


def test_tokenizer_empty_input():
    t = FunctionTokenizer(tokenize_whitespace, "")

    assert not t.has_more_tokens()
    assert t.count_tokens() == 0
    assert t.get_tokens() == []


def test_tokenizer_tokenizes_once():
    calls = []

    def counting(text):
        calls.append(text)
        return text.split()

    t = FunctionTokenizer(counting, "a b c")
    t.get_tokens()
    list(t)

    assert calls == ["a b c"]


def test_factory_creates_from_text_and_stream():
    factory = TokenizerFactory(tokenize_whitespace)

    assert factory.create("this that").get_tokens() == ["this", "that"]

    stream = io.StringIO("this that\nthe other\n")
    assert factory.create(stream).get_tokens() == ["this", "that", "the", "other"]


def test_factory_joins_lines_with_single_space():
    factory = TokenizerFactory(lambda text: [text])

    assert factory.create(io.BytesIO(b"one\r\ntwo\nthree")).get_tokens() == ["one two three"]


def test_factory_default_preprocessor_applies_to_new_tokenizers():
    factory = TokenizerFactory(tokenize_whitespace)
    before = factory.create("Upper Case")

    factory.set_token_preprocessor(lower_case_token)
    after = factory.create("Upper Case")

    assert before.get_tokens() == ["Upper", "Case"]
    assert after.get_tokens() == ["upper", "case"]


def test_aggregate_preprocessor_applies_in_order():
    p1 = lambda s: s + "1"
    p2 = lambda s: s + "2"

    composed = AggregatePreProcessor([p1, p2])

    assert composed("s") == p2(p1("s")) == "s12"
    assert composed("s") == "s12"


def test_aggregate_preprocessor_empty_is_identity():
    assert AggregatePreProcessor([])("Unchanged") == "Unchanged"


def test_compose_preprocessors():
    composed = compose_preprocessors(lower_case_sentence, str.strip)

    assert composed("  Mixed Case ") == "mixed case"
