import pytest

from TSPBench.graph import CityGraph

SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10)]


@pytest.fixture
def square() -> CityGraph:
    # d(0,1)=d(1,2)=d(2,3)=d(0,3)=10, diagonals truncate 14.14 -> 14
    return CityGraph.build(SQUARE)
