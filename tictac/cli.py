"""
Tictac CLI - Command-line interface for the engine.

Usage:
    tictac play [--size N]                 Play in the terminal
    tictac serve [--host H] [--port P]     Run the REST API

In `play`, type a cell index to move, or one of:
    n          new game
    size N     switch to an N x N board
    history    recent matches
    share      score summary
    q          quit
"""

import argparse
import logging
import os
import sys

from .engine_core.action import MoveError
from .session import GameController, SUPPORTED_SIZES
from .summary import history_line, render_board, share_summary, status_message

logger = logging.getLogger(__name__)

HELP_TEXT = "Commands: <index> | n | size N | history | share | q"


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Tictac - Configurable-size tic-tac-toe",
        prog="tictac",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("TICTAC_LOG_LEVEL", "WARNING"),
        help="Logging level (default: WARNING, or $TICTAC_LOG_LEVEL)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument(
        "--size", type=int, default=3, choices=SUPPORTED_SIZES, help="Board size N"
    )

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the REST API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        cmd_play(args)
    elif args.command == "serve":
        cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_play(args):
    """Interactive terminal game."""
    controller = GameController(board_size=args.size)
    run_interactive(controller)


def cmd_serve(args):
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run("tictac.api.app:app", host=args.host, port=args.port)


def run_interactive(controller, input_fn=input, output=print):
    """
    Read commands until quit or end of input.

    Returns the controller so callers (and tests) can inspect the
    final state.
    """
    output(HELP_TEXT)
    show(controller, output)

    while True:
        try:
            line = input_fn("> ").strip().lower()
        except EOFError:
            break

        if not line:
            continue
        if line in ("q", "quit", "exit"):
            break

        if line in ("n", "new"):
            controller.new_game()
            show(controller, output)
        elif line.startswith("size"):
            parts = line.split()
            if len(parts) != 2 or not parts[1].isdecimal():
                output("Usage: size N")
                continue
            size = int(parts[1])
            if size not in controller.supported_sizes:
                output(f"Supported sizes: {', '.join(map(str, controller.supported_sizes))}")
                continue
            controller.set_board_size(size)
            show(controller, output)
        elif line in ("h", "history"):
            records = controller.history()
            if not records:
                output("No games played yet")
            for record in records:
                output(history_line(record))
        elif line == "share":
            output(share_summary(controller))
        elif line.isdecimal():
            result = controller.move(int(line))
            if not result.success:
                if result.error_code == MoveError.GAME_ALREADY_OVER:
                    output("Game is over - type n for a new game")
                else:
                    output(result.error)
                continue
            show(controller, output)
        else:
            output(HELP_TEXT)

    return controller


def show(controller, output=print):
    output(render_board(controller.board, controller.board_size, controller.winning_line))
    scores = controller.scores
    output(f"X: {scores.x}  Draws: {scores.draws}  O: {scores.o}")
    output(status_message(controller))


if __name__ == "__main__":
    main()
