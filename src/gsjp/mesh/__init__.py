from .base import Mesh, NeighborDirection
from .mesh1 import Mesh1
from .standard import Mesh2, Mesh3
from .divided import Mesh4, Mesh5, Mesh6
from .subdivision import DecimalMesh, QuadrantMesh, SubdividedMesh
from .levels import MeshLevel, mesh_from_code, mesh_from_coordinate

__all__ = [
    "Mesh",
    "NeighborDirection",
    "Mesh1",
    "Mesh2",
    "Mesh3",
    "Mesh4",
    "Mesh5",
    "Mesh6",
    "SubdividedMesh",
    "DecimalMesh",
    "QuadrantMesh",
    "MeshLevel",
    "mesh_from_code",
    "mesh_from_coordinate",
]
