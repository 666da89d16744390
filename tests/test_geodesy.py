import pytest

from gsjp import GeodesicMeasurer, MeshLevel, mesh_from_coordinate

# (最小, 最大) メートル。東京付近での東西・南北の長さ
NOMINAL = {
    MeshLevel.MESH1: (60_000, 100_000),
    MeshLevel.MESH2: (8_000, 12_000),
    MeshLevel.MESH3: (800, 1_200),
    MeshLevel.MESH4: (400, 600),
    MeshLevel.MESH5: (200, 300),
    MeshLevel.MESH6: (100, 150),
}


@pytest.fixture(scope="module")
def measurer():
    return GeodesicMeasurer()


@pytest.mark.parametrize("level", list(MeshLevel))
def test_cell_size(measurer, tokyo_tower, level):
    mesh = mesh_from_coordinate(tokyo_tower, level)
    width, height = measurer.cell_size_m(mesh)
    lower, upper = NOMINAL[level]
    assert lower < width < upper
    assert lower < height < upper


def test_cell_area(measurer, tokyo_tower):
    mesh = mesh_from_coordinate(tokyo_tower, MeshLevel.MESH3)
    width, height = measurer.cell_size_m(mesh)
    assert measurer.cell_area_m2(mesh) == pytest.approx(width * height, rel=0.01)
