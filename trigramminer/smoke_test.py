"""
trigramminer.smoke_test

Minimal end-to-end smoke test for TrigramMiner.

Usage (from any directory where the env is active):

    python -m trigramminer.smoke_test

What it does:
- Creates a tiny in-memory corpus (a few short paragraphs).
- Mines it in streaming mode and in whole-buffer mode.
- Checks that both modes produced the same ranking.
- Prints the top phrases as a table.
"""

from __future__ import annotations

from typing import Any, Dict

from .config import MinerConfig
from .miner import TrigramMiner
from .report import format_result


DEMO_TEXT = """\
It was the best of times, it was the worst of times,
it was the age of wisdom, it was the age of foolishness,

it was the epoch of belief, it was the epoch of incredulity,
it was the season of Light, it was the season of Darkness,
it was the spring of hope, it was the winter of despair.
"""


def run_smoke_test(verbose: bool = True) -> Dict[str, Any]:
    """
    Run the pipeline in both modes over the demo text.

    Returns
    -------
    result : dict
        A dictionary containing:
        - "streaming"     (TrigramResult)
        - "whole_buffer"  (TrigramResult)
    """
    if verbose:
        print("[smoke_test] Starting TrigramMiner smoke test...")

    results = {}
    for mode in ("streaming", "whole_buffer"):
        miner = TrigramMiner(MinerConfig(mode=mode, limit=10), verbose=verbose)
        results[mode] = miner.mine_text(DEMO_TEXT, source=f"demo ({mode})")

    if results["streaming"].entries != results["whole_buffer"].entries:
        raise RuntimeError("streaming and whole_buffer modes disagree on the demo text")

    if verbose:
        print(format_result(results["streaming"]))
        print("[smoke_test] Smoke test completed successfully ✅")

    return results


def main() -> None:
    """
    CLI entrypoint for: python -m trigramminer.smoke_test
    """
    run_smoke_test(verbose=True)


if __name__ == "__main__":
    main()
