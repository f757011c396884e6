import pytest

from trigramminer.tokenizer import WordTokenizer, tokenize


def test_contraction_and_hyphen():
    assert list(tokenize("It's a well-known fact.")) == ["it's", "a", "well-known", "fact"]


@pytest.mark.parametrize("text", ["", "   ", "\t\n", "... !!! ---", "?!,;:"])
def test_no_words(text):
    assert list(tokenize(text)) == []


def test_lowercase_is_idempotent():
    assert list(tokenize("Hello")) == list(tokenize("HELLO")) == ["hello"]


def test_letters_and_digits_form_one_token():
    assert list(tokenize("abc123 R2D2")) == ["abc123", "r2d2"]


def test_punctuation_does_not_join_words():
    assert list(tokenize("end.Start,next;last")) == ["end", "start", "next", "last"]


def test_double_hyphen_splits():
    assert list(tokenize("well--known")) == ["well", "known"]


def test_tokenize_is_lazy_and_single_pass():
    tokens = WordTokenizer().tokenize("one two three")
    assert iter(tokens) is tokens
    assert next(tokens) == "one"
    assert list(tokens) == ["two", "three"]
    assert list(tokens) == []


def test_ascii_only_splits_accented_words():
    assert WordTokenizer().tokenize_list("Café au lait") == ["caf", "au", "lait"]
    assert WordTokenizer(ascii_only=False).tokenize_list("Café au lait") == ["café", "au", "lait"]


def test_ascii_only_splits_non_latin_words():
    assert WordTokenizer().tokenize_list("naïve Straße") == ["na", "ve", "stra", "e"]
