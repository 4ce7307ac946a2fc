from typing import List
from wander_maze.core.grid import Grid

CORNER = "+"
H_WALL = "---"
V_WALL = "|"
OPEN_H = "   "
OPEN_V = " "

def render_lines(grid: Grid) -> List[str]:
    """
    Renders the maze as ASCII rows, top row first so that the origin (0,0)
    ends up in the lower-left corner of the printout.
    """
    top = grid.height - 1
    line = CORNER
    for x in range(grid.width):
        line += (H_WALL if grid.has_wall(x, top, Grid.NORTH) else OPEN_H) + CORNER
    lines = [line]

    for y in range(top, -1, -1):
        line1 = V_WALL if grid.has_wall(0, y, Grid.WEST) else OPEN_V
        line2 = CORNER
        for x in range(grid.width):
            line1 += OPEN_H + (V_WALL if grid.has_wall(x, y, Grid.EAST) else OPEN_V)
            line2 += (H_WALL if grid.has_wall(x, y, Grid.SOUTH) else OPEN_H) + CORNER
        lines.append(line1)
        lines.append(line2)
    return lines

def render_text(grid: Grid) -> str:
    return "\n".join(render_lines(grid))
