"""aMAZEing CLI entry point.

Carves a perfect maze from a seed and lets you walk it from the top-left
room to the goal, which sits at the deepest point of the carve. Accepts
configuration via flags and environment variables, with optional .env
loading.

Run `python run.py --help` for details.
"""

import argparse
import os
import sys
from textwrap import dedent

from colorama import Fore, Style, just_fix_windows_console
from dotenv import load_dotenv

from amaze import __version__ as _package_version
from amaze import logging_utils
from amaze.logging_utils import log
from amaze.maze import InvalidMazeConfig, Maze, MazeConfig

EXIT_OK = 0
EXIT_INPUT_FAILED = 1
EXIT_CONFIG_ERROR = 2

SUBCOMMANDS = ("play", "tui", "show")
_GLOBAL_WITH_VALUE = ("--env-file", "--log-level")
_GLOBAL_FLAGS = ("-h", "--help", "--version")


def _load_version() -> str:
    try:
        with open("VERSION", "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return _package_version


__version__ = _load_version()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    aMAZEing

    Generate a perfect maze (exactly one path between any two rooms) and walk
    it in the terminal. The same seed and dimensions always give the same
    maze. If both CLI flags and environment variables are present, CLI flags
    take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          AMAZE_WIDTH      Grid width, odd and >= 3 (default: 79)
          AMAZE_HEIGHT     Grid height, odd and >= 3 (default: 23)
          AMAZE_SEED       Non-negative seed (default: current time)
          AMAZE_LOG_LEVEL  debug | info | warn | error (default: warn)
          AMAZE_LOG_JSON   Emit log records as JSON when set to 1

        Controls:
          h=left  j=down  k=up  l=right  q=quit

        Examples:
          # Play a fresh maze
          python run.py

          # Replay maze 1234
          python run.py play 1234

          # Print a small maze and exit
          python run.py show 42 --width 21 --height 11

          # Play in the Textual interface
          python run.py tui --seed 7
        """
    )

    parser = argparse.ArgumentParser(
        prog="amaze",
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
        "--log-level",
        dest="log_level",
        choices=sorted(logging_utils.LEVELS),
        default=None,
        help="Log threshold (default: env AMAZE_LOG_LEVEL or warn)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"aMAZEing {__version__}",
    )

    # Shared maze options
    maze_opts = argparse.ArgumentParser(add_help=False)
    maze_opts.add_argument(
        "seed_pos",
        nargs="?",
        type=int,
        metavar="SEED",
        help="Seed for the maze (same as --seed)",
    )
    maze_opts.add_argument("--seed", type=int, default=None, help="Seed (default: env AMAZE_SEED or current time)")
    maze_opts.add_argument("--width", type=int, default=None, help="Grid width (default: env AMAZE_WIDTH or 79)")
    maze_opts.add_argument("--height", type=int, default=None, help="Grid height (default: env AMAZE_HEIGHT or 23)")
    maze_opts.add_argument("--no-color", dest="no_color", action="store_true", help="Disable coloured output")

    subparsers = parser.add_subparsers(dest="command")

    play_parser = subparsers.add_parser(
        "play",
        parents=[maze_opts],
        help="Play in the raw terminal (default)",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    play_parser.set_defaults(command="play")

    tui_parser = subparsers.add_parser(
        "tui",
        parents=[maze_opts],
        help="Play in the Textual interface",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    tui_parser.set_defaults(command="tui")

    show_parser = subparsers.add_parser(
        "show",
        parents=[maze_opts],
        help="Print one generated maze and exit",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    show_parser.set_defaults(command="show")

    return parser.parse_args(_with_default_command(argv))


def _with_default_command(argv: list[str]) -> list[str]:
    """Insert ``play`` after the global options when no subcommand is given."""
    i = 0
    while i < len(argv):
        tok = argv[i]
        if tok in _GLOBAL_WITH_VALUE:
            i += 2
        elif tok.split("=", 1)[0] in _GLOBAL_WITH_VALUE or tok in _GLOBAL_FLAGS:
            i += 1
        else:
            break
    if i < len(argv) and argv[i] in SUBCOMMANDS:
        return argv
    if any(tok in _GLOBAL_FLAGS for tok in argv[:i]):
        return argv
    return [*argv[:i], "play", *argv[i:]]


def _env_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise InvalidMazeConfig(f"{name} must be an integer, got {raw!r}") from None


def resolve_config(args: argparse.Namespace) -> MazeConfig:
    """Merge CLI flags over environment variables over defaults."""
    defaults = MazeConfig()
    seed = args.seed if args.seed is not None else args.seed_pos
    if seed is None:
        seed = _env_int("AMAZE_SEED")
    width = args.width if args.width is not None else _env_int("AMAZE_WIDTH")
    height = args.height if args.height is not None else _env_int("AMAZE_HEIGHT")
    config = MazeConfig(
        width=defaults.width if width is None else width,
        height=defaults.height if height is None else height,
        seed=seed,
    )
    return config.validate()


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()
    if args.log_level:
        logging_utils.set_level(args.log_level)

    just_fix_windows_console()
    color = not args.no_color and sys.stdout.isatty()

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if color else text

    def value(val: str | int) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if color else str(val)

    try:
        config = resolve_config(args)
        maze = Maze(config)
    except InvalidMazeConfig as exc:
        error_prefix = f"{Fore.RED}[ERROR]{Style.RESET_ALL}" if color else "[ERROR]"
        print(f"{error_prefix} {exc}", file=sys.stderr)
        log.error(event="config_error", detail=str(exc))
        return EXIT_CONFIG_ERROR

    log.info(event="startup", mode=args.command, seed=maze.seed, width=maze.width, height=maze.height)

    if args.command == "show":
        from amaze.render import render

        print(render(maze, maze.entry, color=color))
        return EXIT_OK

    if args.command == "tui":
        from amaze.tui import run_tui

        return run_tui(maze)

    from amaze.game import run_game
    from amaze.terminal import FrameWriter, read_key

    print(f"{label('using seed')} {value(maze.seed)}")
    try:
        return run_game(maze, read_key, FrameWriter(clear=color), color=color)
    except (EOFError, OSError) as exc:
        print(f"\n[ERROR] could not read a command: {exc}", file=sys.stderr)
        log.error(event="input_failed", detail=str(exc))
        return EXIT_INPUT_FAILED
    except KeyboardInterrupt:
        print("\nExiting...")
        return 130


def cli() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()
