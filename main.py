# main.py
import argparse
import os
import sys
import time

# Import project modules
import constants as const
from config import MazeConfig
from drawing import create_labyrinth
from grid_core import MazeConfigError
from mesh_builder import create_maze_stl
from visualization import show_labyrinth, visualize_labyrinth


def _positive_int(value: str) -> int:
    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"size must be an integer, got {value!r}")
    if size < const.MIN_MAZE_SIZE:
        raise argparse.ArgumentTypeError(f"size must be at least {const.MIN_MAZE_SIZE}, got {size}")
    return size


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a square labyrinth of width SIZE.",
        epilog="Press space in the viewer to display the solution.",
    )
    parser.add_argument("size", type=_positive_int, help="width of the labyrinth in rooms")
    parser.add_argument(
        "style",
        nargs="?",
        default=const.STYLE_GRID,
        help="grid (default), diamond (d) or circle (c); anything else means grid",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for a reproducible labyrinth")
    parser.add_argument("--no-jitter", action="store_true", help="straight walls in grid style")
    parser.add_argument("--output-dir", default="output", help="where images and meshes are written")
    parser.add_argument("--stl", action="store_true", help="also export a printable STL mesh")
    parser.add_argument("--show", action="store_true", help="open the interactive viewer")
    return parser


def run(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = MazeConfig(
        size=args.size,
        style=args.style,
        seed=args.seed,
        jitter=0.0 if args.no_jitter else None,
    )
    try:
        config = config.validate()
    except MazeConfigError as e:
        parser.error(str(e))

    start_time = time.time()
    print("\n--- Configuration ---")
    print(f"  Size: {config.size}, Style: {config.style}, Seed: {config.seed}, Jitter: {config.resolve_jitter():.2f}")
    os.makedirs(args.output_dir, exist_ok=True)

    drawing = create_labyrinth(config)

    print("\n--- Generating Visualizations ---")
    visualize_labyrinth(drawing, filename=os.path.join(args.output_dir, "labyrinth.png"))
    visualize_labyrinth(
        drawing, filename=os.path.join(args.output_dir, "labyrinth_solution.png"), show_solution=True
    )

    if args.stl:
        print("\n--- Generating STL ---")
        create_maze_stl(drawing, os.path.join(args.output_dir, "labyrinth.stl"))

    end_time = time.time()
    print(f"\n--- Total Execution Time: {end_time - start_time:.2f} seconds ---")

    if args.show:
        show_labyrinth(drawing)
    return 0


if __name__ == "__main__":
    sys.exit(run())
