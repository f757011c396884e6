"""
miner.py

TrigramMiner: input source → tokenizer → window accumulator → frequency
table → ranker.

Each input (a file, stdin, or an in-memory text) is processed to completion
with its own FrequencyTable before a result is produced. If the input
cannot be read, :class:`InputUnavailableError` is raised and no partial
result is returned.

Quick usage
-----------
    from trigramminer import TrigramMiner, MinerConfig

    miner = TrigramMiner(MinerConfig(mode="streaming", limit=10))
    result = miner.mine_file("moby-dick.txt")
    print(result.phrases_df.head())
"""

from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional, TextIO, Union

from .config import MinerConfig
from .frequency import FrequencyTable
from .ranker import TrigramResult
from .tokenizer import WordTokenizer
from .window import WindowAccumulator


STDIN_LABEL = "StdIn"


class InputUnavailableError(OSError):
    """An input source could not be opened or read to the end."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason


class TrigramMiner:
    """
    Count and rank three-word phrases per input.

    Parameters
    ----------
    config:
        Run options. Defaults to streaming mode and the top 100 phrases.
    logger:
        Optional logging callback used when ``verbose=True``. It must accept
        a single string. When omitted, verbose messages go to ``print``.
    verbose:
        If ``False`` (default), no progress messages are emitted.
    """

    def __init__(
        self,
        config: Optional[MinerConfig] = None,
        logger: Optional[Callable[[str], None]] = None,
        verbose: bool = False,
    ) -> None:
        self.config = config or MinerConfig()
        self.logger = logger
        self.verbose = verbose
        self.tokenizer = WordTokenizer(ascii_only=self.config.ascii_only)

    def _log(self, message: str) -> None:
        if not self.verbose:
            return
        if self.logger is not None:
            self.logger(message)
        else:
            print(message)

    # ------------------------------------------------------------------
    # Counting
    # ------------------------------------------------------------------
    def count_lines(self, lines: Iterable[str]) -> FrequencyTable:
        """
        Count every trigram in ``lines`` using the configured mode.

        Any exception raised while iterating ``lines`` propagates unchanged.
        """
        accumulator = WindowAccumulator(self.tokenizer)
        if self.config.mode == "streaming":
            return accumulator.feed_lines(lines)

        contents = "\n".join(line.rstrip("\r\n") for line in lines).strip()
        return accumulator.feed_text(contents)

    # ------------------------------------------------------------------
    # Public entry points
    # ------------------------------------------------------------------
    def mine_stream(self, stream: Iterable[str], source: str) -> TrigramResult:
        """
        Mine an open text stream (anything yielding lines).

        Raises
        ------
        InputUnavailableError
            If reading or decoding the stream fails part-way.
        """
        self._log(f"[TrigramMiner] reading '{source}' in {self.config.mode} mode...")
        table = self.count_lines(_read_lines(stream, source))

        self._log(
            f"[TrigramMiner]   → {table.total()} trigrams, "
            f"{len(table)} distinct in '{source}'."
        )
        return TrigramResult.from_table(
            table,
            source=source,
            limit=self.config.limit,
            config=self.config.model_dump(),
        )

    def mine_text(self, text: str, source: str = "text") -> TrigramResult:
        """Mine an in-memory string as if it were a file's contents."""
        return self.mine_stream(io.StringIO(text), source)

    def mine_file(self, path: Union[str, Path]) -> TrigramResult:
        """
        Open ``path`` and mine it. The result is labeled with ``str(path)``.

        Raises
        ------
        InputUnavailableError
            If the file is missing, unreadable, or not valid text in the
            configured encoding.
        """
        source = str(path)
        try:
            handle = open(path, mode="r", encoding=self.config.encoding)
        except OSError as exc:
            raise InputUnavailableError(source, exc.strerror or str(exc)) from exc

        with handle:
            return self.mine_stream(handle, source)

    def mine_stdin(self, stdin: Optional[TextIO] = None) -> TrigramResult:
        """
        Mine standard input (or the given stream) labeled ``"StdIn"``.

        Raises
        ------
        InputUnavailableError
            If standard input is closed or cannot be read.
        """
        stream = stdin if stdin is not None else sys.stdin
        # sys.stdin is None when the process was started with fd 0 closed.
        if stream is None:
            raise InputUnavailableError(STDIN_LABEL, "standard input is closed")
        return self.mine_stream(stream, STDIN_LABEL)


def _read_lines(stream: Iterable[str], source: str) -> Iterator[str]:
    """
    Yield the lines of ``stream``, turning read and decode faults into
    :class:`InputUnavailableError`. Errors raised by the consumer of the
    lines (tokenizing, counting) are not touched.
    """
    lines = iter(stream)
    while True:
        try:
            line = next(lines)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as exc:
            raise InputUnavailableError(source, str(exc)) from exc
        yield line
