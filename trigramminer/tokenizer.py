"""
tokenizer.py

WordTokenizer: regex word-shape tokenization for trigram counting.

A token is the leftmost match of one of three word shapes:

- a contraction:        ``\\w+'\\w+``   ("it's", "don't")
- a hyphenated pair:    ``\\w+-?\\w+``  ("well-known", and plain words of 2+ chars)
- a bare word run:      ``\\w+``        ("a", "7")

Everything that does not match (punctuation, whitespace, symbols) is skipped.
Every match is lower-cased before it is handed to the window accumulator.

Quick usage
-----------
    from trigramminer.tokenizer import WordTokenizer

    tok = WordTokenizer()
    list(tok.tokenize("It's a well-known fact."))
    # ['it's', 'a', 'well-known', 'fact']
"""

from __future__ import annotations

import re
from typing import Iterator, List


# Alternation order matters: the contraction and hyphen shapes must be tried
# before the bare run so that "it's" is not split into "it" + "s".
WORD_PATTERN = r"\w+'\w+|\w+-?\w+|\w+"


class WordTokenizer:
    """
    Lazy, lower-casing word tokenizer over :data:`WORD_PATTERN`.

    Parameters
    ----------
    ascii_only:
        If ``True`` (default), ``\\w`` means ``[A-Za-z0-9_]`` so accented or
        non-Latin letters act as separators. If ``False``, Unicode word
        characters are accepted as well.
    """

    def __init__(self, ascii_only: bool = True) -> None:
        self.ascii_only = ascii_only
        self._word_re = re.compile(WORD_PATTERN, re.ASCII if ascii_only else 0)

    def tokenize(self, text: str) -> Iterator[str]:
        """
        Yield normalized tokens from ``text`` one at a time.

        The returned iterator is single-pass: to walk the tokens again,
        call :meth:`tokenize` on the original text once more.
        """
        for m in self._word_re.finditer(text):
            yield m.group().lower()

    def tokenize_list(self, text: str) -> List[str]:
        """Materialize all tokens of ``text`` into a list."""
        return list(self.tokenize(text))

    def __repr__(self) -> str:
        return f"WordTokenizer(ascii_only={self.ascii_only})"


_default_tokenizer = WordTokenizer()


def tokenize(text: str) -> Iterator[str]:
    """Tokenize ``text`` with the default (ASCII) word grammar."""
    return _default_tokenizer.tokenize(text)
