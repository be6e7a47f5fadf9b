"""
Shared fixtures for tangle tests.
"""

import pytest

from engine.dag.builder import parse_dag


# Root + 3 nodes: 1 -> {0}, 2 -> {0, 1}, 3 -> {1, 2}
SAMPLE_TANGLE = "3\n1 1 10\n1 2 20\n2 3 30\n"

# Depth is not monotonic in id order: node 4 (depth 1) follows node 3 (depth 3)
NON_MONOTONIC_TANGLE = "4\n1 1 1\n2 2 2\n3 3 3\n1 1 4\n"


@pytest.fixture
def sample_text():
    return SAMPLE_TANGLE


@pytest.fixture
def sample_store():
    return parse_dag(SAMPLE_TANGLE)


@pytest.fixture
def non_monotonic_store():
    return parse_dag(NON_MONOTONIC_TANGLE)


@pytest.fixture
def write_tangle(tmp_path):
    """Write tangle text to a file and return its path"""
    def _write(text: str, name: str = "tangle.txt"):
        path = tmp_path / name
        path.write_text(text)
        return path
    return _write
