import pytest

from gsjp import Coordinate

# 境界ちょうどを避けるための微小量（度）
EPSILON = 1e-9


@pytest.fixture
def tokyo_tower():
    return Coordinate(35.65858404079, 139.74543164468)
