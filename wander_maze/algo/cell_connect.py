import logging
from typing import Iterator
from wander_maze.algo.base import Generator

logger = logging.getLogger(__name__)

class RandomCellConnect(Generator):
    """
    Visits every cell once in random order and knocks one random wall out of
    each cell that is still enclosed when its turn comes.

    Cheaper than Wanderers but connectivity is never checked, so the result
    usually falls apart into several disconnected islands.
    """
    name = "cellconnect"

    def run(self) -> Iterator[str]:
        grid = self.grid
        grid.seal()

        order = list(range(grid.width * grid.height))
        self.rng.shuffle(order)

        for visited, idx in enumerate(order, 1):
            x, y = grid.get_coords(idx)
            if grid.is_enclosed(x, y):
                # Construct list of walls we COULD break down
                dirs = grid.legal_directions(x, y)
                if dirs:
                    grid.carve_path(x, y, self.rng.choice(dirs))
                    self.step_count += 1

            if visited % 100 == 0:
                yield f"Connecting... Visited: {visited}/{len(order)}"

        logger.debug("Cell connect finished: %d walls removed", self.step_count)
        yield "Done"
