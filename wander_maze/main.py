import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'wander_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from wander_maze.algo.registry import GENERATORS, DEFAULT_ALGO, create_generator
from wander_maze.core.grid import Grid
from wander_maze.core.analysis import MazeAnalyzer
from wander_maze.viz.text import render_text

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Wander Maze: perfect maze generator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--width", type=int, default=10, help="Maze Width")
    gen_parser.add_argument("--height", type=int, default=10, help="Maze Height")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--algo", type=str, default=DEFAULT_ALGO, choices=sorted(GENERATORS), help="Generation Algorithm")
    gen_parser.add_argument("--visual", action="store_true", help="Show generation in a pygame window")
    gen_parser.add_argument("--speed", type=int, default=1, help="Generator yields consumed per frame (visual mode)")
    gen_parser.add_argument("--stats", action="store_true", help="Log maze statistics after generation")

    # Compare Command
    cmp_parser = subparsers.add_parser("compare", help="Compare generation algorithms over several seeds")
    cmp_parser.add_argument("--width", type=int, default=20, help="Maze Width")
    cmp_parser.add_argument("--height", type=int, default=20, help="Maze Height")
    cmp_parser.add_argument("--runs", type=int, default=10, help="Seeds per algorithm")

    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("wander_maze")

    if args.command is None:
        parser.print_help()
        return

    if args.width <= 0 or args.height <= 0:
        parser.error(f"width and height must be positive, got {args.width}x{args.height}")

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        logger.info(f"Generating {args.width}x{args.height} maze with {args.algo.upper()}...")
        grid = Grid(args.width, args.height)
        generator = create_generator(args.algo, grid, seed=args.seed)

        if args.visual:
            logger.info("Visual mode enabled - Opening window...")
            from wander_maze.viz.renderer import Renderer
            renderer = Renderer(grid, generator=generator, steps_per_frame=max(1, args.speed))
            renderer.init_window()
            renderer.run_loop()
            if not renderer.gen_finished:
                logger.warning("Window closed before generation finished.")
                return
        else:
            generator.run_all()
            print(render_text(grid))

        logger.info(f"Removed {generator.step_count} walls.")
        if args.stats:
            stats = MazeAnalyzer.calculate_stats(grid)
            logger.info(f"Stats: {stats}")
            if not MazeAnalyzer.is_perfect(grid):
                logger.warning("Maze is not perfect (%d components).", stats["components"])

    elif args.command == "compare":
        if args.runs <= 0:
            parser.error(f"runs must be positive, got {args.runs}")
        logger.info(f"Comparing algorithms on {args.width}x{args.height} over {args.runs} seeds...")

        print(f"\n{'ALGORITHM':<12} | {'PASSAGES':<10} | {'COMPONENTS':<10} | {'DEAD ENDS':<10} | {'PERFECT':<8}")
        print("-" * 62)
        for name in sorted(GENERATORS):
            passages = components = dead_ends = perfect = 0
            for seed in range(args.runs):
                grid = Grid(args.width, args.height)
                create_generator(name, grid, seed=seed).run_all()
                stats = MazeAnalyzer.calculate_stats(grid)
                passages += stats["passages"]
                components += stats["components"]
                dead_ends += stats["dead_ends"]
                perfect += MazeAnalyzer.is_perfect(grid)

            runs = args.runs
            print(f"{name:<12} | {passages / runs:<10.1f} | {components / runs:<10.1f} | {dead_ends / runs:<10.1f} | {perfect}/{runs}")

if __name__ == "__main__":
    main()
