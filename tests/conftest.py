import os

import pytest

from spt_checker.graph import WeightedGraph

DATA_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir, "data"))

# Graph shared by the end-to-end scenarios
G_EDGES = [(0, 1, 1), (0, 2, 4), (1, 2, 2), (1, 3, 5), (2, 3, 1)]


@pytest.fixture
def data_dir() -> str:
    return DATA_DIR


@pytest.fixture
def G() -> WeightedGraph:
    return WeightedGraph.from_edges(4, G_EDGES)


@pytest.fixture
def good_tree() -> WeightedGraph:
    return WeightedGraph.from_edges(4, [(0, 1, 1), (1, 2, 2), (2, 3, 1)])


@pytest.fixture
def suboptimal_tree() -> WeightedGraph:
    return WeightedGraph.from_edges(4, [(0, 1, 1), (1, 2, 2), (1, 3, 5)])
