"""
ranker.py

Ranking of counted phrases and the per-input result container.

Phrases are ordered by count (descending). Ties are broken by the phrase
text in ascending order so that the ranking is the same on every run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Optional

import pandas as pd

from .config import DEFAULT_LIMIT
from .frequency import FrequencyTable


RESULT_COLUMNS = ["rank", "phrase", "count"]


class RankedPhrase(NamedTuple):
    phrase: str
    count: int


def rank_phrases(table: FrequencyTable, limit: int = DEFAULT_LIMIT) -> List[RankedPhrase]:
    """
    Return at most ``limit`` phrases, highest count first.

    Parameters
    ----------
    table:
        Counts collected for a single input.
    limit:
        Maximum length of the result. ``0`` yields an empty list.

    Returns
    -------
    List[RankedPhrase]
        ``(phrase, count)`` pairs sorted by count descending, then phrase
        ascending.
    """
    if limit < 0:
        raise ValueError("limit must be >= 0")
    ordered = sorted(table.items(), key=lambda item: (-item[1], item[0]))
    return [RankedPhrase(phrase, count) for phrase, count in ordered[:limit]]


def ranked_frame(ranked: List[RankedPhrase]) -> pd.DataFrame:
    """Build the ``rank`` / ``phrase`` / ``count`` DataFrame for a ranking."""
    df = pd.DataFrame(
        [(i + 1, r.phrase, r.count) for i, r in enumerate(ranked)],
        columns=RESULT_COLUMNS,
    )
    df["count"] = df["count"].astype("int64")
    df["rank"] = df["rank"].astype("int64")
    return df


@dataclass
class TrigramResult:
    """
    Ranked trigrams for one input source.

    Attributes
    ----------
    source:
        Label of the input (a file path, or ``"StdIn"``).
    phrases_df:
        One row per reported phrase, already ranked. Columns:
            - 'rank'    : 1-based position
            - 'phrase'  : three space-separated tokens
            - 'count'   : number of occurrences
    total_trigrams:
        Number of windows counted in the whole input (not only the top rows).
    distinct_trigrams:
        Number of different phrases seen in the whole input.
    config:
        Options used for the run (mode, limit, ...), for reproducibility.
    """

    source: str
    phrases_df: pd.DataFrame
    total_trigrams: int
    distinct_trigrams: int
    config: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_table(
        cls,
        table: FrequencyTable,
        source: str,
        limit: int = DEFAULT_LIMIT,
        config: Optional[Dict[str, Any]] = None,
    ) -> "TrigramResult":
        ranked = rank_phrases(table, limit)
        return cls(
            source=source,
            phrases_df=ranked_frame(ranked),
            total_trigrams=table.total(),
            distinct_trigrams=len(table),
            config=dict(config or {}),
        )

    @property
    def entries(self) -> List[RankedPhrase]:
        return [
            RankedPhrase(str(phrase), int(count))
            for phrase, count in zip(self.phrases_df["phrase"], self.phrases_df["count"])
        ]

    @property
    def is_empty(self) -> bool:
        return self.phrases_df.empty

    def __len__(self) -> int:
        return len(self.phrases_df)
