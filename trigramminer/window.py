"""
window.py

WindowAccumulator: slide a three-token window over a token stream and count
every window into a :class:`FrequencyTable`.

Two feeding strategies are supported and produce identical tables for the
same text:

- **streaming**: :meth:`WindowAccumulator.feed_line` is called once per line.
  At most two tokens are carried from one line to the next, so a phrase may
  span a line break and memory use does not depend on input size.
- **whole buffer**: :meth:`WindowAccumulator.feed_text` tokenizes the complete
  text at once and counts every ``tokens[i:i + 3]`` window.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Literal, Optional, Tuple

from nltk.util import ngrams

from .frequency import FrequencyTable
from .tokenizer import WordTokenizer


ProcessingMode = Literal["streaming", "whole_buffer"]

WINDOW_SIZE = 3


def make_phrase(first: str, second: str, third: str) -> str:
    """Join three tokens into a phrase separated by single spaces."""
    return f"{first} {second} {third}"


class WindowAccumulator:
    """
    Turn token sequences into phrase counts.

    Parameters
    ----------
    tokenizer:
        Tokenizer used for every line / text fed in. Defaults to an ASCII
        :class:`WordTokenizer`.
    table:
        Table to increment. A fresh :class:`FrequencyTable` is created when
        omitted; read it back through :attr:`table`.

    One accumulator serves exactly one input. Mixing :meth:`feed_line` and
    :meth:`feed_text` on the same instance is not supported.
    """

    def __init__(
        self,
        tokenizer: Optional[WordTokenizer] = None,
        table: Optional[FrequencyTable] = None,
    ) -> None:
        self.tokenizer = tokenizer or WordTokenizer()
        self.table = table if table is not None else FrequencyTable()
        # Carry-over buffer; never holds more than two tokens between lines.
        self._pending: Deque[str] = deque()

    @property
    def pending(self) -> Tuple[str, ...]:
        """Tokens waiting for a complete window (at most two between lines)."""
        return tuple(self._pending)

    # ------------------------------------------------------------------
    # Streaming mode
    # ------------------------------------------------------------------
    def feed_line(self, line: str) -> int:
        """
        Add one line of text and count every window it completes.

        Blank or whitespace-only lines are ignored and leave the carry-over
        buffer untouched.

        Returns
        -------
        int
            Number of phrases counted while consuming this line.
        """
        if not line.strip():
            return 0

        self._pending.extend(self.tokenizer.tokenize(line))

        counted = 0
        while len(self._pending) >= WINDOW_SIZE:
            self.table.increment(
                make_phrase(self._pending[0], self._pending[1], self._pending[2])
            )
            # Slide by one token so consecutive windows overlap by two.
            self._pending.popleft()
            counted += 1
        return counted

    def feed_lines(self, lines: Iterable[str]) -> FrequencyTable:
        """Stream every line of ``lines`` through :meth:`feed_line`."""
        for line in lines:
            self.feed_line(line)
        return self.table

    # ------------------------------------------------------------------
    # Whole-buffer mode
    # ------------------------------------------------------------------
    def feed_text(self, text: str) -> FrequencyTable:
        """
        Tokenize ``text`` in one pass and count every three-token window.

        For ``n`` tokens this counts exactly ``max(n - 2, 0)`` phrases.
        """
        tokens = self.tokenizer.tokenize_list(text)
        for first, second, third in ngrams(tokens, WINDOW_SIZE):
            self.table.increment(make_phrase(first, second, third))
        return self.table
