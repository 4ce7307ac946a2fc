from collections import deque
from typing import Any, Dict, List, Tuple
from wander_maze.core.grid import Grid

class MazeAnalyzer:
    @staticmethod
    def popcount_walls(val: int) -> int:
        c = 0
        if val & Grid.NORTH: c += 1
        if val & Grid.EAST: c += 1
        if val & Grid.SOUTH: c += 1
        if val & Grid.WEST: c += 1
        return c

    @staticmethod
    def find_asymmetric_walls(grid: Grid) -> List[Tuple[int, int, int]]:
        """
        Returns (x, y, dir) for every wall that is present on one side and
        missing on the other. Only East/North are checked, each shared wall
        is reported once.
        """
        broken = []
        for y in range(grid.height):
            for x in range(grid.width):
                for dir_bit in (Grid.EAST, Grid.NORTH):
                    nx, ny = grid.neighbor(x, y, dir_bit)
                    if not grid.in_bounds(nx, ny):
                        continue
                    if grid.has_wall(x, y, dir_bit) != grid.has_wall(nx, ny, Grid.OPPOSITE[dir_bit]):
                        broken.append((x, y, dir_bit))
        return broken

    @staticmethod
    def count_passages(grid: Grid) -> int:
        """Number of removed walls between two cells (boundary excluded)."""
        passages = 0
        for y in range(grid.height):
            for x in range(grid.width):
                if x < grid.width - 1 and not grid.has_wall(x, y, Grid.EAST):
                    passages += 1
                if y < grid.height - 1 and not grid.has_wall(x, y, Grid.NORTH):
                    passages += 1
        return passages

    @staticmethod
    def count_components(grid: Grid) -> int:
        """Connected regions of cells, following open passages (BFS)."""
        seen = bytearray(grid.width * grid.height)
        components = 0
        for start in range(len(seen)):
            if seen[start]:
                continue
            components += 1
            seen[start] = 1
            queue = deque([grid.get_coords(start)])
            while queue:
                x, y = queue.popleft()
                for nx, ny in grid.get_open_neighbors(x, y):
                    idx = ny * grid.width + nx
                    if not seen[idx]:
                        seen[idx] = 1
                        queue.append((nx, ny))
        return components

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """Symmetric walls and a passage graph that is a spanning tree."""
        if MazeAnalyzer.find_asymmetric_walls(grid):
            return False
        cells = grid.width * grid.height
        return (MazeAnalyzer.count_passages(grid) == cells - 1
                and MazeAnalyzer.count_components(grid) == 1)

    @staticmethod
    def calculate_stats(grid: Grid) -> Dict[str, Any]:
        dead_ends = 0
        intersections = 0 # 0, 1 walls
        corridors = 0 # 2 walls
        enclosed = 0 # 4 walls

        for val in grid.cells:
            walls = MazeAnalyzer.popcount_walls(val)
            if walls == 4: enclosed += 1
            elif walls == 3: dead_ends += 1
            elif walls == 2: corridors += 1
            else: intersections += 1

        total = grid.width * grid.height
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "enclosed": enclosed,
            "passages": MazeAnalyzer.count_passages(grid),
            "components": MazeAnalyzer.count_components(grid),
            "dead_end_percent": (dead_ends / total) * 100,
        }
