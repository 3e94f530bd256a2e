"""Topology bases of structured grids.

Vertices of a structured grid are numbered in the same row-major order used
by the array layer, so vertex ``(i, j)`` of an ``nx x ny`` grid has handle
``i*ny + j``. Cells are numbered the same way over the ``(nx-1) x (ny-1)``
cell grid.
"""

import functools
import logging

import numpy as np

from ..core.arrays import DataHold
from ..core.arrays.traits import compute_flat_index
from ..core.errors import CellShapeError, InfiniteCardinalityError
from ..core.types import default_handle_type
from ..utils.logging_utils import log_function_call
from .sets import FiniteSet
from .topology import CellMapper, ExplicitTopologyBasis, ImplicitTopologyBasis, TopologyBasis

logger = logging.getLogger(__name__)


def _line_cell(handle: int) -> DataHold:
    return DataHold([handle, handle + 1], (2,), dtype=default_handle_type())


def _quad_cell(nx: int, ny: int, handle: int) -> DataHold:
    i, j = divmod(handle, ny - 1)
    vertices = [
        compute_flat_index((nx, ny), (i, j)),
        compute_flat_index((nx, ny), (i + 1, j)),
        compute_flat_index((nx, ny), (i + 1, j + 1)),
        compute_flat_index((nx, ny), (i, j + 1)),
    ]
    return DataHold(vertices, (4,), dtype=default_handle_type())


def _check_vertex_count(*counts: int) -> None:
    if any(n < 2 for n in counts):
        raise ValueError("Grid must have at least 2 vertices in each direction")


def line_cells(n_vertices: int) -> CellMapper:
    """Mapper from a segment handle to its two vertex handles."""
    _check_vertex_count(n_vertices)
    return _line_cell


def quad_cells(nx: int, ny: int) -> CellMapper:
    """
    Mapper from a quad handle to its four vertex handles.

    Vertices are listed counter-clockwise starting at the lowest corner:
    ``(i, j), (i+1, j), (i+1, j+1), (i, j+1)``.
    """
    _check_vertex_count(nx, ny)
    return functools.partial(_quad_cell, nx, ny)


def structured_line_basis(n_vertices: int) -> ImplicitTopologyBasis:
    """Implicit basis of a chain of ``n_vertices - 1`` segments."""
    return ImplicitTopologyBasis(n_vertices - 1, line_cells(n_vertices))


def structured_quad_basis(nx: int, ny: int) -> ImplicitTopologyBasis:
    """Implicit basis of the quad cells of an ``nx x ny`` vertex grid."""
    return ImplicitTopologyBasis((nx - 1) * (ny - 1), quad_cells(nx, ny))


@log_function_call
def materialize(basis: TopologyBasis) -> ExplicitTopologyBasis:
    """
    Store every cell of a finite basis in memory.

    Args:
        basis: Finite topology basis whose cells all share one shape

    Returns:
        Explicit basis backed by an owned array of shape
        ``(cardinality, *cell_shape)``
    """
    card = basis.cardinality()
    if card.is_infinite:
        raise InfiniteCardinalityError("materialize")

    cells = []
    cell_shape = None
    for handle in range(card.value):
        cell = basis.get_element(handle)
        if cell is None:
            raise ValueError(f"Basis has no cell for handle {handle} "
                             f"although its cardinality is {card}")
        if cell_shape is None:
            cell_shape = cell.dimensions()
        elif cell.dimensions() != cell_shape:
            raise CellShapeError(handle, cell.dimensions(), cell_shape)
        cells.append(cell.as_array())

    if cells:
        data = np.concatenate(cells)
        shape = (card.value,) + tuple(cell_shape)
    else:
        data = np.empty(0, dtype=default_handle_type())
        shape = (0,)

    logger.info(f"Materialized topology basis: {card.value} cells of shape {cell_shape}")
    return ExplicitTopologyBasis(FiniteSet(DataHold(data, shape)))
