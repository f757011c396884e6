"""
config.py

MinerConfig: run-time options for :class:`~trigramminer.miner.TrigramMiner`.

The processing mode is an explicit value passed to the miner, so tests and
callers can pick a strategy per run without touching shared state.
"""

from __future__ import annotations

import codecs

from pydantic import BaseModel, Field, field_validator

from .window import ProcessingMode


DEFAULT_LIMIT = 100


class MinerConfig(BaseModel):
    """Options for one mining run (applied to every input of that run)."""

    mode: ProcessingMode = Field(
        "streaming",
        description=(
            "'streaming' reads line by line carrying at most two tokens; "
            "'whole_buffer' reads the full input before tokenizing."
        ),
    )
    limit: int = Field(
        DEFAULT_LIMIT,
        ge=0,
        description="Maximum number of ranked phrases reported per input.",
    )
    ascii_only: bool = Field(
        True,
        description="Restrict word characters to [A-Za-z0-9_].",
    )
    encoding: str = Field(
        "utf-8",
        description="Text encoding used when opening input files.",
    )

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {value}") from exc
        return value
