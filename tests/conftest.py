import pytest

from trigramminer import MinerConfig, TrigramMiner


@pytest.fixture(params=["streaming", "whole_buffer"])
def miner(request):
    return TrigramMiner(MinerConfig(mode=request.param))
