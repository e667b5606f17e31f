"""mazeforge CLI entry point.

Generates a level maze and prints it, its zone statistics, or a routed path.
Accepts configuration via flags and MAZE_* environment variables, with
optional .env loading. CLI flags take precedence over the environment.

Run `python run.py --help` for details.
"""

from __future__ import annotations

import argparse
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

from . import __version__
from .logging_utils import log
from .maze import MazeBuilder, MazeConfig, MazeError

AXES = "xyz"


def _color_enabled() -> bool:
    # Disable colors if output is not a real terminal (e.g., during pytest capture)
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):  # pragma: no cover - environment dependent
        return False


def _cell(text: str) -> tuple:
    try:
        return tuple(int(p) for p in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected comma separated integers, got {text!r}") from None


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    mazeforge maze generator

    Carve a partial reverse-Kruskal maze, prune it the way levels are built
    and print the result. Configuration can be provided via CLI flags or
    environment variables. If both are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          MAZE_DIMENSION        2 or 3 (default: 3)
          MAZE_HALF_SIZE        grid is 2*half+1 cells per axis (default: 5)
          MAZE_PERCENT          share of wall candidates processed (default: 100)
          MAZE_SEED             generation seed (default: random)
          MAZE_LOG_LEVEL        debug|info|warn|error (default: warn)

        Examples:
          # Print a 2D maze
          python run.py generate --dim 2 --half-size 8 --seed 7

          # Zone statistics for a sparse 3D maze
          python run.py stats --percent 60 --seed 3

          # Route between two cells
          python run.py path 1,1 5,5 --dim 2 --seed 7
        """
    )

    parser = argparse.ArgumentParser(
        prog="mazeforge",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"mazeforge {__version__}",
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--dim", type=int, default=None, help="Grid dimension, 2 or 3")
    common.add_argument("--half-size", dest="half_size", type=int, default=None, help="Half extent per axis")
    common.add_argument("--percent", type=float, default=None, help="Carve percentage in [0, 100]")
    common.add_argument("--seed", type=int, default=None, help="Generation seed")
    common.add_argument(
        "--shift",
        default="",
        help="Axes whose wall lattice is shifted by one, e.g. 'xz'",
    )
    common.add_argument(
        "--raw",
        action="store_true",
        help="Skip pruning and print the carved maze as is",
    )

    subparsers = parser.add_subparsers(dest="command")

    gen_parser = subparsers.add_parser("generate", parents=[common], help="Print a generated maze")
    gen_parser.set_defaults(command="generate")

    stats_parser = subparsers.add_parser("stats", parents=[common], help="Print wall and zone counts")
    stats_parser.set_defaults(command="stats")

    path_parser = subparsers.add_parser("path", parents=[common], help="Print the A* path between two cells")
    path_parser.add_argument("start", type=_cell, help="Start cell, e.g. 1,1")
    path_parser.add_argument("goal", type=_cell, help="Goal cell, e.g. 5,5")
    path_parser.set_defaults(command="path")

    # If no subcommand provided, default to generate
    if len(argv) == 0:
        argv = ["generate"]

    args = parser.parse_args(argv)
    if args.command is None:
        args = parser.parse_args(list(argv) + ["generate"])
    return args


def build_config(args: argparse.Namespace) -> MazeConfig:
    shifts = tuple(axis in args.shift.lower() for axis in AXES)
    return MazeConfig.from_env(
        dimension=args.dim,
        half_size=args.half_size,
        percent=args.percent,
        seed=args.seed,
        shifts=shifts,
    )


def _paint(text: str, color: str, enabled: bool) -> str:
    return f"{color}{text}{Style.RESET_ALL}" if enabled else text


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    colored = _color_enabled()
    if colored:  # pragma: no cover - terminal only
        _color_init()

    try:
        config = build_config(args)
        builder = MazeBuilder(config) if args.raw else MazeBuilder.default(config)
        maze = builder.build()
    except MazeError as e:
        print(f"[ERROR] {e.message}", file=sys.stderr)
        return 1

    log.info(event="cli", command=args.command, seed=config.seed, size=maze.size)

    if args.command == "stats":
        m = builder.metrics
        lines = [
            f"seed: {config.seed}",
            f"size: {'x'.join(str(s) for s in maze.size)}",
            f"walls: {len(maze.walls)}",
            f"free cells: {maze.free_count()}",
            f"free zones: {m.get('free_zones', len(maze.compute_free_zones()))}",
            f"room zones: {m.get('room_zones', len(maze.compute_room_zones()))}",
            f"corridor zones: {m.get('corridor_zones', len(maze.compute_corridor_zones()))}",
            f"runtime ms: {m.get('runtime_ms', 0)}",
        ]
        print("\n".join(lines))
        return 0

    marks = {}
    if args.command == "path":
        if len(args.start) != maze.dim or len(args.goal) != maze.dim:
            print(f"[ERROR] cells must have {int(maze.dim)} coordinates", file=sys.stderr)
            return 1
        found = maze.find_path_with_cost(args.start, args.goal)
        if found is None:
            print(f"no path from {args.start} to {args.goal}")
            return 2
        path, cost = found
        marks = {cell: _paint("*", Fore.YELLOW, colored) for cell in path}
        print(f"path: {len(path)} cells, cost {cost}")

    wall = _paint("#", Fore.CYAN, colored)
    print(maze.render(wall=wall, marks=marks))
    return 0


def entrypoint() -> None:  # pragma: no cover
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":  # pragma: no cover
    entrypoint()
