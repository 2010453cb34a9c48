#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py play [--rows N] [--columns N] [--mines N] [--player NAME]
                        [--seed N] [--state PATH] [--verbose]
    python main.py show [--state PATH] [--verbose]
    python main.py clear [--state PATH] [--verbose]
"""
import argparse
import logging

from src.minefield import (
    GameSession,
    GameStateStore,
    MalformedState,
    MoveResult,
    SessionConfig,
    StateWriteError,
    ValidationError,
    parse_coordinates,
    render_board,
)


MESSAGES = {
    MoveResult.IGNORED: "Nothing to do there.",
    MoveResult.EXPLODED: "BOOM! You hit a mine.",
    MoveResult.WON: "Congratulations, you cleared the board!",
    MoveResult.FLAGGED: "Flag placed.",
    MoveResult.UNFLAGGED: "Flag removed.",
    MoveResult.NO_FLAGS_LEFT: "No flags left.",
}


def load_or_create(args: argparse.Namespace, config: SessionConfig) -> GameSession:
    """Resume the saved game, or start a new one."""
    store = config.make_store()
    try:
        session = GameSession.resume(store)
    except MalformedState as error:
        print(f"Saved game is corrupt ({error}), starting over.")
        store.clear()
        session = None

    if session is not None:
        print(f"Welcome back, {session.player_name}. Previous game loaded.")
        return session

    return GameSession.new(
        args.player,
        args.rows,
        args.columns,
        args.mines,
        store=store,
        rng=config.make_rng(),
    )


def play(args: argparse.Namespace) -> None:
    """Run the interactive game loop."""
    config = SessionConfig(state_path=args.state, seed=args.seed)
    try:
        session = load_or_create(args, config)
    except ValidationError as error:
        print(f"Cannot start game: {error}")
        return
    board = session.board

    print(session.render())
    while session.is_playing:
        print(f"Flags: {board.flag_count}/{board.total_mines}")
        command = input("Action (r <cell> reveal, f <cell> flag, q quit): ").split()
        if not command:
            continue
        if command[0].lower() == "q":
            print("Game saved.")
            return
        if len(command) != 2 or command[0].lower() not in ("r", "f"):
            print("Unknown action.")
            continue

        position = parse_coordinates(command[1], board.rows, board.columns)
        if position is None:
            print(f"Invalid cell: {command[1]}")
            continue

        try:
            if command[0].lower() == "r":
                result = session.reveal(*position)
            else:
                result = session.toggle_flag(*position)
        except StateWriteError as error:
            print(f"Warning: {error}")
            continue

        if result in MESSAGES:
            print(MESSAGES[result])
        print(session.render())


def show(args: argparse.Namespace) -> None:
    """Print the saved board."""
    try:
        session = GameSession.resume(GameStateStore(args.state))
    except MalformedState as error:
        print(f"Saved game is corrupt: {error}")
        return
    if session is None:
        print("No saved game.")
        return
    print(f"Player: {session.player_name}")
    print(render_board(session.board))


def clear(args: argparse.Namespace) -> None:
    """Delete the saved game."""
    GameStateStore(args.state).clear()
    print("Saved game cleared.")


def build_parser() -> argparse.ArgumentParser:
    """Command line parser; --state and --verbose are accepted by every command."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--state", default=SessionConfig.state_path, help="Save file path"
    )
    common.add_argument("--verbose", action="store_true", help="Debug logging")

    parser = argparse.ArgumentParser(description="Minefield - Terminal Minesweeper")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser(
        "play", parents=[common], help="Play or resume a game"
    )
    play_parser.add_argument("--rows", type=int, default=9, help="Board rows")
    play_parser.add_argument("--columns", type=int, default=9, help="Board columns")
    play_parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    play_parser.add_argument("--player", default="Player", help="Player name")
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )

    subparsers.add_parser("show", parents=[common], help="Print the saved board")
    subparsers.add_parser("clear", parents=[common], help="Delete the saved game")
    return parser


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        play(args)
    elif args.command == "show":
        show(args)
    elif args.command == "clear":
        clear(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
