import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from wander_maze.core.grid import Grid
from wander_maze.algo.registry import GENERATORS
from wander_maze.core.analysis import MazeAnalyzer

def benchmark_size(width: int, height: int):
    print(f"\n--- Benchmarking {width}x{height} ({width*height:,} cells) ---")

    for name in sorted(GENERATORS):
        grid = Grid(width, height)
        algo = GENERATORS[name](grid, seed=42)

        gen_start = time.time()
        algo.run_all()
        gen_time = time.time() - gen_start

        components = MazeAnalyzer.count_components(grid)
        print(f"{name:<12} Time: {gen_time:.4f}s  "
              f"Speed: {(width*height)/max(gen_time, 1e-9):,.0f} cells/sec  "
              f"Components: {components}")

def run_suite():
    sizes = [
        (10, 10),
        (100, 100),
        (500, 500),
        (1000, 1000),
    ]

    for w, h in sizes:
        benchmark_size(w, h)

if __name__ == "__main__":
    run_suite()
