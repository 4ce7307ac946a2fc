from array import array
from typing import Iterator, List, Tuple

class Grid:
    # Bitmask Constants
    NORTH = 0b0001
    EAST  = 0b0010
    SOUTH = 0b0100
    WEST  = 0b1000

    # All walls present (N|E|S|W) = 15, i.e. an enclosed cell
    ALL_WALLS = NORTH | EAST | SOUTH | WEST

    # Fixed order used for every direction listing
    DIRECTIONS = (NORTH, EAST, SOUTH, WEST)

    # Origin is the lower-left cell, so North increases y.
    DX = {NORTH: 0, SOUTH: 0, EAST: 1, WEST: -1}
    DY = {NORTH: 1, SOUTH: -1, EAST: 0, WEST: 0}
    OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}

    NAMES = {NORTH: "N", EAST: "E", SOUTH: "S", WEST: "W"}

    __slots__ = ('width', 'height', 'cells')

    def __init__(self, width: int, height: int):
        if not isinstance(width, int) or not isinstance(height, int):
            raise ValueError(f"Grid dimensions must be integers, got {width!r}x{height!r}")
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        # 'B' (unsigned char) -> 1 byte per cell, low 4 bits are the walls
        self.cells = array('B', [self.ALL_WALLS] * (width * height))

    def seal(self):
        """
        Puts every wall back in.
        Writes the flags directly instead of going through set_wall: every
        cell gets all four bits, so both sides of each wall already agree.
        """
        for idx in range(len(self.cells)):
            self.cells[idx] = self.ALL_WALLS

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def get_coords(self, idx: int) -> Tuple[int, int]:
        if not 0 <= idx < len(self.cells):
            raise IndexError(f"Cell index {idx} out of bounds")
        y, x = divmod(idx, self.width)
        return x, y

    def _check_direction(self, dir_bit: int):
        if dir_bit not in self.OPPOSITE:
            raise ValueError(f"Invalid direction: {dir_bit!r}")

    def neighbor(self, x: int, y: int, dir_bit: int) -> Tuple[int, int]:
        """Coordinates one step away in 'dir_bit'. Not bounds checked."""
        self._check_direction(dir_bit)
        return x + self.DX[dir_bit], y + self.DY[dir_bit]

    def set_wall(self, x: int, y: int, dir_bit: int, present: bool):
        """
        Sets the wall on side 'dir_bit' of (x,y) and, when there is a cell on
        the other side, the OPPOSITE wall of that neighbor to the same value.
        This is the only way walls change after construction.
        """
        self._check_direction(dir_bit)
        idx1 = self.get_index(x, y)
        nx, ny = x + self.DX[dir_bit], y + self.DY[dir_bit]
        opposite = self.OPPOSITE[dir_bit]

        if present:
            self.cells[idx1] |= dir_bit
        else:
            self.cells[idx1] &= ~dir_bit

        if 0 <= nx < self.width and 0 <= ny < self.height:
            idx2 = ny * self.width + nx
            if present:
                self.cells[idx2] |= opposite
            else:
                self.cells[idx2] &= ~opposite

    def carve_path(self, x: int, y: int, dir_bit: int):
        """Removes the wall between (x,y) and its neighbor in 'dir_bit'."""
        self.set_wall(x, y, dir_bit, False)

    def add_wall(self, x: int, y: int, dir_bit: int):
        self.set_wall(x, y, dir_bit, True)

    def has_wall(self, x: int, y: int, dir_bit: int) -> bool:
        self._check_direction(dir_bit)
        return (self.cells[self.get_index(x, y)] & dir_bit) != 0

    def is_enclosed(self, x: int, y: int) -> bool:
        return (self.cells[self.get_index(x, y)] & self.ALL_WALLS) == self.ALL_WALLS

    def get_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nx, ny, direction_to_neighbor) for all valid grid neighbors.
        Does NOT check walls.
        """
        self.get_index(x, y)
        # North
        if y < self.height - 1:
            yield (x, y + 1, self.NORTH)
        # East
        if x < self.width - 1:
            yield (x + 1, y, self.EAST)
        # South
        if y > 0:
            yield (x, y - 1, self.SOUTH)
        # West
        if x > 0:
            yield (x - 1, y, self.WEST)

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nx, ny) for neighbors that are NOT blocked by a wall.
        """
        val = self.cells[self.get_index(x, y)]

        if not (val & self.NORTH) and y < self.height - 1:
            yield (x, y + 1)
        if not (val & self.EAST) and x < self.width - 1:
            yield (x + 1, y)
        if not (val & self.SOUTH) and y > 0:
            yield (x, y - 1)
        if not (val & self.WEST) and x > 0:
            yield (x - 1, y)

    def legal_directions(self, x: int, y: int) -> List[int]:
        """Directions whose destination stays inside the grid."""
        return [dir_bit for _, _, dir_bit in self.get_neighbors(x, y)]

    def unexplored_directions(self, x: int, y: int) -> List[int]:
        """Legal directions leading into a cell that is still enclosed."""
        return [
            dir_bit
            for nx, ny, dir_bit in self.get_neighbors(x, y)
            if self.is_enclosed(nx, ny)
        ]
