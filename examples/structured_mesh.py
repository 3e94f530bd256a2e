"""
Basic example: build a structured quad mesh on the unit square.

Vertex coordinates live in a FiniteSet borrowed from a numpy array, the cell
connectivity is generated on demand by an implicit topology basis and then
materialized into owned storage.
"""

import numpy as np
import sys
from pathlib import Path

# Add src to Python path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from fe2o3 import (
    DataView,
    FiniteSet,
    NumberSet,
    materialize,
    structured_quad_basis,
)
from fe2o3.config import create_default_config


def main():
    """Build a mesh and report its cells and total area."""

    print("=" * 60)
    print("fe2o3 - Structured Quad Mesh Example")
    print("=" * 60)

    create_default_config().apply()

    nx, ny = 5, 4
    x = np.linspace(0.0, 1.0, nx)
    y = np.linspace(0.0, 1.0, ny)
    X, Y = np.meshgrid(x, y, indexing='ij')
    coordinates = np.stack((X, Y), axis=-1).reshape(-1, 2)

    with DataView(coordinates) as view:
        vertices = FiniteSet(view)
        topology = structured_quad_basis(nx, ny)
        print(f"Vertices: {vertices.cardinality()}, cells: {topology.cardinality()}")

        total_area = 0.0
        for handle, cell in enumerate(topology):
            corners = np.array([vertices.get_element(v).to_list() for v in cell])
            dx = corners[:, 0].max() - corners[:, 0].min()
            dy = corners[:, 1].max() - corners[:, 1].min()
            total_area += dx * dy
            if handle < 3:
                print(f"  cell {handle}: vertices {cell.to_list()}")

    print(f"Total area: {total_area:.6f}")

    explicit = materialize(topology)
    print(f"Materialized connectivity shape: {explicit.basis.elements.dimensions()}")
    print(f"Reals: {NumberSet.REALS.cardinality()}, empty set: {NumberSet.EMPTY.cardinality()}")


if __name__ == "__main__":
    main()
