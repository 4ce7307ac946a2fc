from typing import Dict, Type
from wander_maze.core.grid import Grid
from wander_maze.algo.base import Generator
from wander_maze.algo.wanderers import Wanderers
from wander_maze.algo.cell_connect import RandomCellConnect

DEFAULT_ALGO = Wanderers.name

GENERATORS: Dict[str, Type[Generator]] = {
    Wanderers.name: Wanderers,
    RandomCellConnect.name: RandomCellConnect,
}

def create_generator(name: str, grid: Grid, seed: int = None, rng=None) -> Generator:
    try:
        cls = GENERATORS[name]
    except KeyError:
        raise ValueError(f"Unknown algorithm {name!r}, expected one of {sorted(GENERATORS)}") from None
    return cls(grid, seed=seed, rng=rng)

def build_maze(width: int, height: int, algo: str = DEFAULT_ALGO, seed: int = None) -> Grid:
    """Creates a width x height grid and runs 'algo' over it to completion."""
    grid = Grid(width, height)
    return create_generator(algo, grid, seed=seed).run_all()
