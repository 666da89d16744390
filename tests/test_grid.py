import pytest
from shapely.geometry import Point

from gsjp import Extent, Mesh2, MeshLevel, iter_meshes, mesh_records


def test_iter_meshes_order():
    area = Extent(north=36.0, south=34.9, east=140.0, west=138.0)
    codes = [m.code for m in iter_meshes(1, area)]
    # 西から東、南から北の順
    assert codes == ["5238", "5239", "5338", "5339"]


def test_iter_meshes_covers_parent():
    mesh2 = Mesh2("533935")
    area = Extent(
        north=mesh2.north - 1e-9,
        south=mesh2.south + 1e-9,
        east=mesh2.east - 1e-9,
        west=mesh2.west + 1e-9,
    )
    meshes = list(iter_meshes(MeshLevel.MESH3, area))
    assert len(meshes) == 100
    assert len({m.code for m in meshes}) == 100
    assert all(m.code.startswith("533935") for m in meshes)
    assert meshes[0].code == "53393500"
    assert meshes[-1].code == "53393599"


def test_iter_meshes_clips_to_domain():
    area = Extent(north=20.5, south=10.0, east=119.5, west=100.0)
    codes = [m.code for m in iter_meshes(1, area)]
    assert codes == ["3018"]


def test_iter_meshes_outside_domain():
    area = Extent(north=10.0, south=0.0, east=10.0, west=0.0)
    assert list(iter_meshes(1, area)) == []


def test_mesh_records():
    area = Extent(north=36.0, south=34.9, east=140.0, west=138.0)
    records = list(mesh_records(1, area))
    assert [r.code for r in records] == ["5238", "5239", "5338", "5339"]
    rec = records[-1]
    assert rec.south == pytest.approx(53 / 1.5)
    assert rec.north == pytest.approx(53 / 1.5 + 40.0 / 60.0)
    assert rec.west == pytest.approx(139.0)
    assert rec.east == pytest.approx(140.0)


def test_mesh_polygon():
    mesh = Mesh2("533935")
    poly = mesh.polygon()
    assert poly.bounds == pytest.approx((mesh.west, mesh.south, mesh.east, mesh.north))
    center = mesh.center()
    assert poly.contains(Point(center.lon, center.lat))
