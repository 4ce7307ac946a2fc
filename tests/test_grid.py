import random
import unittest
import sys
import os

# Add project root to path so we can import wander_maze
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from wander_maze.core.grid import Grid
from wander_maze.core.analysis import MazeAnalyzer

class TestGrid(unittest.TestCase):
    def test_initialization(self):
        w, h = 10, 7
        grid = Grid(w, h)
        self.assertEqual(len(grid.cells), w * h, f"Grid initialization size mismatch. Expected {w*h}, got {len(grid.cells)}")
        # Every cell starts enclosed
        for val in grid.cells:
            self.assertEqual(val, Grid.ALL_WALLS)
        self.assertTrue(all(grid.is_enclosed(x, y) for y in range(h) for x in range(w)))

    def test_invalid_dimensions(self):
        for w, h in [(0, 5), (5, 0), (-1, 3), (3, -2)]:
            with self.assertRaises(ValueError):
                Grid(w, h)
        with self.assertRaises(ValueError):
            Grid(2.5, 3)

    def test_coordinates(self):
        grid = Grid(5, 5)
        idx = grid.get_index(2, 2)
        self.assertEqual(idx, 12) # 2 * 5 + 2
        self.assertEqual(grid.get_coords(12), (2, 2))
        self.assertEqual(grid.get_coords(7), (2, 1))

        with self.assertRaises(IndexError):
            grid.get_index(-1, 0)
        with self.assertRaises(IndexError):
            grid.get_index(0, 5)
        with self.assertRaises(IndexError):
            grid.get_coords(25)

    def test_out_of_bounds_access(self):
        grid = Grid(3, 3)
        with self.assertRaises(IndexError):
            grid.has_wall(3, 0, Grid.NORTH)
        with self.assertRaises(IndexError):
            grid.is_enclosed(0, -1)
        with self.assertRaises(IndexError):
            grid.set_wall(-1, 1, Grid.EAST, False)
        with self.assertRaises(IndexError):
            grid.legal_directions(5, 5)

    def test_invalid_direction(self):
        grid = Grid(3, 3)
        with self.assertRaises(ValueError):
            grid.has_wall(0, 0, 3)
        with self.assertRaises(ValueError):
            grid.set_wall(0, 0, 16, False)

    def test_carve_path(self):
        grid = Grid(2, 2)
        # 0,1  1,1
        # 0,0  1,0

        # Carve from (0,0) EAST to (1,0)
        grid.carve_path(0, 0, Grid.EAST)

        self.assertFalse(grid.has_wall(0, 0, Grid.EAST))
        self.assertFalse(grid.has_wall(1, 0, Grid.WEST))

        # Others remain
        self.assertTrue(grid.has_wall(0, 0, Grid.NORTH))
        self.assertTrue(grid.has_wall(1, 0, Grid.EAST))
        self.assertFalse(grid.is_enclosed(0, 0))
        self.assertFalse(grid.is_enclosed(1, 0))
        self.assertTrue(grid.is_enclosed(0, 1))

    def test_north_increases_y(self):
        grid = Grid(2, 2)
        grid.carve_path(0, 0, Grid.NORTH)
        self.assertFalse(grid.has_wall(0, 1, Grid.SOUTH))
        self.assertEqual(grid.neighbor(0, 0, Grid.NORTH), (0, 1))
        self.assertEqual(grid.neighbor(1, 1, Grid.WEST), (0, 1))

    def test_set_wall_restores_both_sides(self):
        grid = Grid(3, 3)
        grid.set_wall(1, 1, Grid.SOUTH, False)
        grid.set_wall(1, 0, Grid.NORTH, True)
        self.assertTrue(grid.has_wall(1, 1, Grid.SOUTH))
        self.assertTrue(grid.has_wall(1, 0, Grid.NORTH))
        self.assertTrue(grid.is_enclosed(1, 1))

    def test_boundary_wall_only_touches_own_cell(self):
        grid = Grid(2, 2)
        grid.set_wall(0, 0, Grid.WEST, False)
        self.assertFalse(grid.has_wall(0, 0, Grid.WEST))
        self.assertFalse(grid.is_enclosed(0, 0))
        # Nothing else changed
        self.assertEqual(list(grid.cells[1:]), [Grid.ALL_WALLS] * 3)

    def test_symmetry_under_random_mutation(self):
        rng = random.Random(7)
        grid = Grid(6, 4)
        self.assertEqual(MazeAnalyzer.find_asymmetric_walls(grid), [])
        for _ in range(500):
            x, y = rng.randrange(6), rng.randrange(4)
            grid.set_wall(x, y, rng.choice(Grid.DIRECTIONS), rng.random() < 0.5)
            self.assertEqual(MazeAnalyzer.find_asymmetric_walls(grid), [])

    def test_seal_is_idempotent(self):
        grid = Grid(4, 3)
        grid.carve_path(1, 1, Grid.EAST)
        grid.carve_path(0, 0, Grid.WEST)
        grid.seal()
        once = grid.cells.tobytes()
        grid.seal()
        self.assertEqual(grid.cells.tobytes(), once)
        self.assertEqual(once, Grid(4, 3).cells.tobytes())

    def test_legal_directions(self):
        grid = Grid(3, 3)
        self.assertEqual(set(grid.legal_directions(0, 0)), {Grid.NORTH, Grid.EAST})
        self.assertEqual(set(grid.legal_directions(2, 2)), {Grid.SOUTH, Grid.WEST})
        self.assertEqual(grid.legal_directions(1, 1), [Grid.NORTH, Grid.EAST, Grid.SOUTH, Grid.WEST])
        self.assertEqual(set(Grid(2, 5).legal_directions(0, 0)), {Grid.NORTH, Grid.EAST})
        self.assertEqual(Grid(1, 1).legal_directions(0, 0), [])
        self.assertEqual(Grid(1, 3).legal_directions(0, 1), [Grid.NORTH, Grid.SOUTH])

    def test_unexplored_directions(self):
        grid = Grid(3, 3)
        self.assertEqual(len(grid.unexplored_directions(1, 1)), 4)
        grid.carve_path(1, 2, Grid.EAST)
        # (1,2) is no longer enclosed, so North from the center is explored
        self.assertEqual(grid.unexplored_directions(1, 1), [Grid.EAST, Grid.SOUTH, Grid.WEST])
        grid.carve_path(1, 1, Grid.SOUTH)
        self.assertEqual(grid.unexplored_directions(1, 1), [Grid.EAST, Grid.WEST])

    def test_neighbors(self):
        grid = Grid(3, 3)
        neighbors = list(grid.get_neighbors(1, 1))
        self.assertEqual(len(neighbors), 4)

        corner_neighbors = list(grid.get_neighbors(0, 0))
        self.assertEqual(len(corner_neighbors), 2)
        self.assertIn((1, 0, Grid.EAST), corner_neighbors)
        self.assertIn((0, 1, Grid.NORTH), corner_neighbors)

    def test_open_neighbors(self):
        grid = Grid(3, 3)
        self.assertEqual(list(grid.get_open_neighbors(1, 1)), [])
        grid.carve_path(1, 1, Grid.NORTH)
        grid.carve_path(1, 1, Grid.WEST)
        self.assertEqual(list(grid.get_open_neighbors(1, 1)), [(1, 2), (0, 1)])
        # Removing a boundary wall does not open a way out of the grid
        grid.carve_path(0, 0, Grid.SOUTH)
        self.assertEqual(list(grid.get_open_neighbors(0, 0)), [])

if __name__ == '__main__':
    unittest.main()
