"""
Grid of the 2048 game: tile matrix, move resolution, random spawning and end of game detection.
"""

import logging

from numpy import array, int64, ndarray, zeros
from numpy.random import PCG64DXSM, Generator, default_rng

from game2048.config import GRID_SIZE, INIT_FILLED_CELLS, SPAWN_VALUE
from game2048.core.action import Action

# ##>: Module logger.
_logger = logging.getLogger(__name__)

# ##>: Module-level generator seeded from OS entropy, used when no generator is injected.
_GENERATOR = default_rng(PCG64DXSM())


class Grid:
    """
    Square matrix of tiles.

    A cell holds 0 when empty and a power of two otherwise. The grid is mutated in place by ``update`` and
    ``insert_random_cell``; spawning a tile after a move is left to the caller.

    Parameters
    ----------
    size : int, optional
        Width and height of the grid (default is 4).
    initial_tiles : int, optional
        Number of tiles spawned at construction (default is 3).
    seed : int, optional
        Seed of a dedicated random generator.
    rng : Generator, optional
        Random generator used to spawn tiles. Takes precedence over ``seed``.
    """

    def __init__(
        self,
        size: int = GRID_SIZE,
        initial_tiles: int = INIT_FILLED_CELLS,
        seed: int | None = None,
        rng: Generator | None = None,
    ):
        if size < 2:
            raise ValueError(f'size must be >= 2, got {size}')
        if not 0 <= initial_tiles <= size * size:
            raise ValueError(f'initial_tiles must be between 0 and {size * size}, got {initial_tiles}')

        self._size = size
        self._rng = rng if rng is not None else (default_rng(seed) if seed is not None else _GENERATOR)
        self._cells = zeros((size, size), dtype=int64)

        for _ in range(initial_tiles):
            self.insert_random_cell()

    @classmethod
    def from_cells(cls, cells, rng: Generator | None = None) -> 'Grid':
        """
        Build a grid holding the given tiles.

        Parameters
        ----------
        cells : array_like
            Square matrix of tiles, 0 for empty cells and powers of two otherwise.
        rng : Generator, optional
            Random generator used for later spawns.

        Returns
        -------
        Grid
            A grid whose cells are a copy of ``cells``.

        Raises
        ------
        ValueError
            If the matrix is not square or holds a value that is neither 0 nor a power of two.
        """
        matrix = array(cells, dtype=int64)
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise ValueError(f'cells must be a square matrix, got shape {matrix.shape}')
        if (matrix < 0).any():
            raise ValueError('cells must be non-negative')
        tiles = matrix[matrix != 0]
        if (tiles & (tiles - 1)).any():
            raise ValueError('non-empty cells must be powers of two')

        grid = cls(size=matrix.shape[0], initial_tiles=0, rng=rng)
        grid._cells[:] = matrix
        return grid

    @property
    def size(self) -> int:
        """Width and height of the grid."""
        return self._size

    @property
    def cells(self) -> ndarray:
        """Backing matrix of the grid."""
        return self._cells

    def copy(self) -> 'Grid':
        """Independent grid with the same tiles, sharing the random generator."""
        return Grid.from_cells(self._cells, rng=self._rng)

    def __repr__(self) -> str:
        return f'Grid({self._cells.tolist()})'

    def __str__(self) -> str:
        numerals = [[str(int(value)) for value in row] for row in self._cells]
        width = max(1, max(len(numeral) for row in numerals for numeral in row))
        return ''.join(''.join(f'{numeral:<{width}} ' for numeral in row) + '\n' for row in numerals)

    def update(self, action: Action | str) -> None:
        """
        Slide and merge every row or column toward the edge named by the action.

        Parameters
        ----------
        action : Action or str
            Direction of the move.

        Notes
        -----
        - A tile takes part in at most one merge per call.
        - Vertical moves are solved as the transposed horizontal move on the transposed grid.
        - No tile is spawned.
        """
        action = Action(action)

        # ##: Use the symmetry between vertical and horizontal moves.
        if action.is_vertical:
            self.transpose()
            self.update(action.transpose())
            self.transpose()
            return

        for i in range(self._size):
            self._update_row(i, action)
        _logger.debug('Resolved move %s', action.value)

    def _update_row(self, i: int, action: Action) -> None:
        """
        Resolve a horizontal move on one row with an anchor and a probe cursor.

        Parameters
        ----------
        i : int
            Index of the row.
        action : Action
            LEFT or RIGHT.
        """
        row = self._cells[i]
        step = 1 if action is Action.LEFT else -1
        anchor = 0 if action is Action.LEFT else self._size - 1
        probe = anchor + step

        for _ in range(self._size - 1):
            anchor_value, probe_value = int(row[anchor]), int(row[probe])
            if anchor_value == 0 or probe_value == 0 or anchor_value == probe_value:
                # ##: Merge into the anchor, or slide into it when one side is empty.
                row[anchor] += row[probe]
                row[probe] = 0

                if anchor_value != 0 and anchor_value == probe_value:
                    anchor += step
            else:
                # ##: Settle the anchor and bring the probe tile right next to it.
                anchor += step
                row[anchor], row[probe] = row[probe], row[anchor]

            probe += step

    def transpose(self) -> 'Grid':
        """
        Transpose the grid in place.

        Returns
        -------
        Grid
            The grid itself.
        """
        cells = self._cells
        for i in range(self._size):
            for j in range(i + 1, self._size):
                cells[i, j], cells[j, i] = cells[j, i], cells[i, j]
        return self

    def empty_cells(self) -> list[tuple[int, int]]:
        """Positions (row, col) of empty cells, in row-major order."""
        return [(i, j) for i in range(self._size) for j in range(self._size) if self._cells[i, j] == 0]

    def random_empty_cell(self, rng: Generator | None = None) -> tuple[int, int] | None:
        """
        Pick an empty cell uniformly at random.

        Parameters
        ----------
        rng : Generator, optional
            Generator to draw from instead of the grid's own.

        Returns
        -------
        tuple[int, int] or None
            Position of the chosen cell, or None when the grid is full.
        """
        available_cells = self.empty_cells()
        if not available_cells:
            return None

        rng = rng if rng is not None else self._rng
        return available_cells[int(rng.integers(len(available_cells)))]

    def insert_random_cell(self, rng: Generator | None = None) -> None:
        """
        Spawn a tile of value 2 in a random empty cell. Does nothing on a full grid.

        Parameters
        ----------
        rng : Generator, optional
            Generator to draw from instead of the grid's own.
        """
        cell = self.random_empty_cell(rng)
        if cell is None:
            _logger.debug('No empty cell left, nothing spawned')
            return

        self._cells[cell] = SPAWN_VALUE
        _logger.debug('Spawned %d at %s', SPAWN_VALUE, cell)

    def game_over(self) -> bool:
        """
        Check if no move can change the grid anymore.

        Returns
        -------
        bool
            True when every cell is filled and no two adjacent cells, in a row or in a column, hold the
            same value.
        """
        cells, size = self._cells, self._size

        # ##: Any empty cell.
        for i in range(size):
            for j in range(size):
                if cells[i, j] == 0:
                    return False

        # ##: Horizontal pairs.
        for i in range(size):
            for j in range(1, size):
                if cells[i, j] != 0 and cells[i, j] == cells[i, j - 1]:
                    return False

        # ##: Vertical pairs.
        for j in range(size):
            for i in range(1, size):
                if cells[i, j] != 0 and cells[i, j] == cells[i - 1, j]:
                    return False

        return True
