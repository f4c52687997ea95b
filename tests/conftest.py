import os
import random

import pytest


def fuzz_rounds() -> int:
    """
    Number of random inputs generated for property tests. Set
    `LZ_FNV_FUZZ_ROUNDS` in the environment to something larger for a more
    thorough run.
    """

    return int(os.getenv("LZ_FNV_FUZZ_ROUNDS", "50"))


@pytest.fixture
def rng(request: pytest.FixtureRequest) -> random.Random:
    """
    Random generator seeded from the running test's name so that a failure
    reproduces on the next run.
    """

    return random.Random(request.node.name)


@pytest.fixture
def random_inputs(rng: random.Random) -> list[bytes]:
    return [rng.randbytes(rng.randint(0, 256)) for _ in range(fuzz_rounds())]
