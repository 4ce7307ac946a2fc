import heapq
import logging
from typing import Iterator, List, Optional, Tuple
from wander_maze.core.grid import Grid
from wander_maze.algo.base import Generator

logger = logging.getLogger(__name__)

class Wanderers(Generator):
    """
    Randomized walks from the origin until stuck, restarted from explored
    cells that still border enclosed ones (hunt-and-kill).

    Every step enters an enclosed cell, so the passages always form a tree,
    and generation only stops once no enclosed cell borders the explored
    region, which means every cell has been reached.
    """
    name = "wanderers"

    def __init__(self, grid: Grid, seed: int = None, rng=None):
        super().__init__(grid, seed=seed, rng=rng)
        # Indices of cells that gained a passage and may still border
        # enclosed cells. Min-heap so restarts follow row-major scan order.
        self._candidates: List[int] = []
        self.walk_count = 0
        self.splice_count = 0

    def _mark_explored(self, x: int, y: int):
        heapq.heappush(self._candidates, y * self.grid.width + x)

    def walk(self, x: int, y: int) -> Iterator[str]:
        """
        Wanders from (x,y) into enclosed neighbors until there are none left.
        A walk that is stuck on its very first cell while that cell is still
        enclosed splices it onto a random legal neighbor instead.
        """
        rng = self.rng
        grid = self.grid
        self.walk_count += 1

        while True:
            dirs = grid.unexplored_directions(x, y)
            if not dirs:
                if grid.is_enclosed(x, y):
                    legal = grid.legal_directions(x, y)
                    # 1x1 grid: nothing to connect to
                    if legal:
                        dir_bit = rng.choice(legal)
                        grid.carve_path(x, y, dir_bit)
                        self._mark_explored(x, y)
                        self.step_count += 1
                        self.splice_count += 1
                        logger.debug("Spliced (%d, %d) via %s", x, y, Grid.NAMES[dir_bit])
                break

            dir_bit = rng.choice(dirs)
            grid.carve_path(x, y, dir_bit)
            self._mark_explored(x, y)
            x, y = grid.neighbor(x, y, dir_bit)
            self._mark_explored(x, y)
            self.step_count += 1

            # Yield every N steps to keep UI responsive without spamming
            if self.step_count % 100 == 0:
                yield f"Wandering... Carved: {self.step_count}"

    def find_restart(self) -> Optional[Tuple[int, int]]:
        """
        First explored cell (row-major order) that still has an unexplored
        direction, or None when there is nothing left to reach.
        """
        grid = self.grid
        while self._candidates:
            x, y = grid.get_coords(self._candidates[0])
            if not grid.is_enclosed(x, y) and grid.unexplored_directions(x, y):
                return x, y
            # Explored cells never get enclosed neighbors back
            heapq.heappop(self._candidates)
        return None

    def run(self) -> Iterator[str]:
        self.grid.seal()
        self._candidates = []

        x, y = 0, 0
        while True:
            yield from self.walk(x, y)

            restart = self.find_restart()
            if restart is None:
                break
            x, y = restart
            logger.debug("Walk %d ended, restarting at %s", self.walk_count, restart)

        logger.debug(
            "Wanderers finished: %d walls removed over %d walks (%d splices)",
            self.step_count, self.walk_count, self.splice_count,
        )
        yield "Done"
