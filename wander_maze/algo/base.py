import random
from abc import ABC, abstractmethod
from typing import Iterator
from wander_maze.core.grid import Grid

class Generator(ABC):
    name = "base"

    def __init__(self, grid: Grid, seed: int = None, rng=None):
        self.grid = grid
        self.seed = seed
        # Anything with choice() and shuffle() will do; random.Random by default
        self.rng = rng if rng is not None else random.Random(seed)
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def run_all(self) -> Grid:
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
        return self.grid
