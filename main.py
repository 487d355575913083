#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--rows R] [--cols C] [--mines M] [--seed S]
    python main.py demo [--games N] [--delay S] [--seed S]
"""
import argparse
import time
from typing import Optional, Tuple

import numpy as np

from minesweeper import (
    BoardConfig,
    GameSession,
    InvalidConfiguration,
    MinesweeperEnv,
    render_ansi,
    status_line,
)


PLAY_HELP = "Commands: r ROW COL (reveal), f ROW COL (flag), n (new game), q (quit)"


def parse_command(
    line: str, config: BoardConfig
) -> Tuple[Optional[str], Optional[Tuple[int, int]], Optional[str]]:
    """
    Parse one line typed by the player.

    Returns:
        Tuple of (command, position, error message). Command is one of
        "r", "f", "n", "q" or None when the line is invalid.
    """
    parts = line.strip().lower().split()
    if not parts:
        return None, None, PLAY_HELP

    command = parts[0]
    if command in ("n", "q"):
        return command, None, None
    if command not in ("r", "f") or len(parts) != 3:
        return None, None, PLAY_HELP

    try:
        row, col = int(parts[1]), int(parts[2])
    except ValueError:
        return None, None, "Row and column must be numbers"

    if not (0 <= row < config.rows and 0 <= col < config.cols):
        return None, None, (
            f"Position must be within 0-{config.rows - 1} rows "
            f"and 0-{config.cols - 1} columns"
        )
    return command, (row, col), None


def play(args: argparse.Namespace, config: BoardConfig) -> None:
    """Play an interactive game in the terminal."""
    session = GameSession(config, seed=args.seed)
    print(PLAY_HELP)

    while True:
        view = session.view()
        print()
        print(status_line(view))
        print(render_ansi(view, coordinates=True))

        try:
            line = input("> ")
        except EOFError:
            break

        command, position, error = parse_command(line, config)
        if error:
            print(error)
            continue
        if command == "q":
            break
        if command == "n":
            session.restart()
        elif command == "r":
            session.reveal(*position)
        elif command == "f":
            session.toggle_flag(*position)

    print(f"Games played: {session.games_played}")


def demo(args: argparse.Namespace, config: BoardConfig) -> None:
    """Watch a random player reveal cells."""
    env = MinesweeperEnv(config=config, render_mode="ansi")
    rng = np.random.default_rng(args.seed)

    print(f"Board: {config.rows}x{config.cols} with {config.num_mines} mines")

    wins = 0
    for game in range(args.games):
        seed = args.seed + game if args.seed is not None else None
        env.reset(seed=seed)
        done = False
        step = 0
        info = {}

        while not done:
            reveal_mask = env.get_action_mask()[: config.total_cells]
            action = int(rng.choice(np.flatnonzero(reveal_mask)))

            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            print(f"\n=== Game {game + 1}/{args.games} | Step {step} ===")
            print(f"Last move: ({action // config.cols}, {action % config.cols})")
            print(env.render())
            time.sleep(args.delay)

        if info.get("game_state") == "WON":
            wins += 1

    print(f"\n=== Final: {wins}/{args.games} wins ===")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    board_options = argparse.ArgumentParser(add_help=False)
    board_options.add_argument(
        "--rows", type=int, default=9, help="Grid height"
    )
    board_options.add_argument(
        "--cols", type=int, default=9, help="Grid width"
    )
    board_options.add_argument(
        "--mines", type=int, default=10, help="Number of mines"
    )
    board_options.add_argument(
        "--seed", type=int, default=None, help="Random seed"
    )

    subparsers.add_parser(
        "play", parents=[board_options], help="Play in the terminal"
    )

    demo_parser = subparsers.add_parser(
        "demo", parents=[board_options], help="Watch a random player"
    )
    demo_parser.add_argument(
        "--games", type=int, default=3, help="Number of games"
    )
    demo_parser.add_argument(
        "--delay", type=float, default=0.3, help="Delay between moves"
    )

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return

    try:
        config = BoardConfig(args.rows, args.cols, args.mines)
    except InvalidConfiguration as exc:
        parser.error(str(exc))

    if args.command == "play":
        play(args, config)
    elif args.command == "demo":
        demo(args, config)


if __name__ == "__main__":
    main()
