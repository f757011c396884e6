"""
TrigramMiner

Top three-word phrase (trigram) counting for plain text.

High-level API
--------------
- WordTokenizer      → lower-cased word tokens from raw text
- WindowAccumulator  → sliding three-token windows (streaming or whole buffer)
- FrequencyTable     → phrase → count
- rank_phrases       → top-N phrases by count, ties by phrase text
- TrigramMiner       → per-input pipeline producing a TrigramResult
- format_result      → fixed-width text table for a TrigramResult
"""

from importlib.metadata import PackageNotFoundError, version


from .tokenizer import WORD_PATTERN, WordTokenizer, tokenize
from .frequency import FrequencyTable
from .window import WindowAccumulator, make_phrase
from .ranker import RankedPhrase, TrigramResult, rank_phrases
from .config import MinerConfig
from .miner import InputUnavailableError, TrigramMiner
from .report import format_result


# ---------------------------------------------------------------------
# Runtime version (single source of truth = pyproject.toml)
# ---------------------------------------------------------------------
try:
    __version__ = version("trigramminer")
except PackageNotFoundError:
    # Fallback when running directly from a clone without installation
    __version__ = "0.0.0"

__all__ = [
    "WORD_PATTERN",
    "WordTokenizer",
    "tokenize",
    "FrequencyTable",
    "WindowAccumulator",
    "make_phrase",
    "RankedPhrase",
    "TrigramResult",
    "rank_phrases",
    "MinerConfig",
    "InputUnavailableError",
    "TrigramMiner",
    "format_result",
    "__version__",
]
