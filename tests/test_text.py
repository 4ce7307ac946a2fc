import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from wander_maze.algo.wanderers import Wanderers
from wander_maze.core.grid import Grid
from wander_maze.viz.text import render_text, render_lines

class TestTextRender(unittest.TestCase):
    def test_sealed_single_cell(self):
        self.assertEqual(render_text(Grid(1, 1)), "+---+\n|   |\n+---+")

    def test_origin_is_lower_left(self):
        grid = Grid(2, 2)
        # Open (0,0) -> (1,0) on the bottom row only
        grid.carve_path(0, 0, Grid.EAST)
        self.assertEqual(render_lines(grid), [
            "+---+---+",
            "|   |   |",
            "+---+---+",
            "|       |",
            "+---+---+",
        ])

    def test_vertical_passage(self):
        grid = Grid(1, 2)
        grid.carve_path(0, 0, Grid.NORTH)
        self.assertEqual(render_lines(grid), [
            "+---+",
            "|   |",
            "+   +",
            "|   |",
            "+---+",
        ])

    def test_dimensions(self):
        grid = Grid(6, 4)
        Wanderers(grid, seed=1).run_all()
        lines = render_lines(grid)
        self.assertEqual(len(lines), 2 * 4 + 1)
        for line in lines:
            self.assertEqual(len(line), 4 * 6 + 1)
        # Outer frame stays intact
        self.assertEqual(lines[0], "+---" * 6 + "+")
        self.assertEqual(lines[-1], "+---" * 6 + "+")
        for line in lines[1::2]:
            self.assertTrue(line.startswith("|") and line.endswith("|"))

if __name__ == '__main__':
    unittest.main()
