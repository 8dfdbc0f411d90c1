import logging

import numpy as np

ALIVE = '█'
DEAD = ' '

# (row, col) deltas of the 8 Moore neighbours
MOORE_OFFSETS = [(i, j) for i in (-1, 0, 1) for j in (-1, 0, 1) if (i != 0 or j != 0)]

# Pattern coordinates are (row, col) relative to the pattern's top-left corner.
PATTERNS = {
    'block': [(0, 0), (0, 1), (1, 0), (1, 1)],
    'blinker': [(0, 0), (0, 1), (0, 2)],
    'toad': [(0, 1), (0, 2), (0, 3), (1, 0), (1, 1), (1, 2)],
    'beacon': [(0, 0), (0, 1), (1, 0), (2, 3), (3, 2), (3, 3)],
    'glider': [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)],
    'r_pentomino': [(0, 1), (0, 2), (1, 0), (1, 1), (2, 1)],
}

# Starting population of the 30x30 demo board.
DEMO_SEED = [(0, 2), (2, 2), (1, 1), (4, 4), (23, 24), (24, 23), (24, 24),
             (22, 23), (23, 23), (25, 25), (25, 24), (22, 25)]


class GameOfLifeError(Exception):
    pass


class InvalidDimension(GameOfLifeError, ValueError):
    pass


class TooManySeeds(GameOfLifeError, ValueError):
    pass


class IndexOutOfBounds(GameOfLifeError, IndexError):
    pass


def place(name, row=0, col=0):
    """Return the coordinates of pattern `name` shifted to (row, col)."""
    return [(row + r, col + c) for r, c in PATTERNS[name]]


class GameOfLife:
    """Conway's Game of Life on a fixed grid with hard edges.

    Cells live in a flat boolean array in row-major order, so the cell at
    (row, col) is at index row * width + col. Nothing outside the grid is
    ever counted as a neighbour: there is no wraparound between opposite
    edges and none between the end of one row and the start of the next.
    """

    def __init__(self, width, height):
        for name, value in (('width', width), ('height', height)):
            if not isinstance(value, (int, np.integer)) or value <= 0:
                raise InvalidDimension(
                    '{} must be a positive integer, got {!r}'.format(name, value))
        self.width = int(width)
        self.height = int(height)
        self.size = self.width * self.height
        self.generation = 0
        self._cells = np.zeros(self.size, dtype=bool)

    @property
    def cells(self):
        """Read-only flat view of the cells."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def grid(self):
        """Read-only (height, width) view of the cells."""
        view = self._cells.reshape(self.height, self.width)
        view.flags.writeable = False
        return view

    def index(self, row, col):
        """Flat index of (row, col)."""
        if not isinstance(row, (int, np.integer)) or not isinstance(col, (int, np.integer)):
            raise IndexOutOfBounds(
                'coordinates must be integers, got ({!r}, {!r})'.format(row, col))
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexOutOfBounds(
                '({}, {}) is outside the {}x{} grid'.format(row, col, self.width, self.height))
        return row * self.width + col

    def is_alive(self, row, col):
        return bool(self._cells[self.index(row, col)])

    def seed(self, coordinates):
        """Mark every (row, col) in `coordinates` alive.

        The whole list is validated before any cell changes, so a failed
        call leaves the grid as it was.
        """
        coordinates = list(coordinates)
        if len(coordinates) > self.size:
            raise TooManySeeds(
                '{} seeds for a grid of {} cells'.format(len(coordinates), self.size))
        indices = [self.index(row, col) for row, col in coordinates]
        self._cells[indices] = True
        logging.info('Seeded {} coordinates, {} cells alive.'.format(
            len(coordinates), self.count_alive()))

    def neighbours(self, row, col):
        """Number of live neighbours of the cell at (row, col)."""
        self.index(row, col)
        count = 0
        for dr, dc in MOORE_OFFSETS:
            r, c = row + dr, col + dc
            if 0 <= r < self.height and 0 <= c < self.width and self._cells[r * self.width + c]:
                count += 1
        return count

    def neighbour_counts(self):
        """Live neighbour count of every cell, as a (height, width) array."""
        padded = np.pad(self.grid.astype(int), 1, mode='constant')
        h, w = self.height, self.width
        return sum(
            padded[1 + i:1 + i + h, 1 + j:1 + j + w]
            for i, j in MOORE_OFFSETS
        )

    def tick(self):
        """Advance the simulation by one generation."""
        snapshot = self.grid
        neighbours = self.neighbour_counts()
        new_grid = snapshot.copy()
        new_grid[snapshot & (neighbours < 2)] = False
        new_grid[snapshot & ((neighbours == 2) | (neighbours == 3))] = True
        new_grid[~snapshot & (neighbours == 3)] = True
        new_grid[snapshot & (neighbours > 3)] = False
        self._cells = new_grid.ravel()
        self.generation += 1
        logging.debug('Generation {}: {} cells alive.'.format(self.generation, self.count_alive()))

    def count_alive(self):
        """Return number of live cells."""
        return int(np.count_nonzero(self._cells))

    def lines(self, alive=ALIVE, dead=DEAD):
        """Render the grid as `height` strings of `width` glyphs."""
        return [''.join(alive if c else dead for c in row) for row in self.grid]

    def __str__(self):
        return '\n'.join(self.lines()) + '\n'
