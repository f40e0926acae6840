#!/usr/bin/env python3
"""
Minefield - command line driver.

Usage:
    python main.py play [--width W] [--height H] [--mines M] CELL [CELL ...]
    python main.py saved
"""
import argparse
import logging
import sys

from minefield import (
    BEGINNER,
    Game,
    MinefieldError,
    int_to_column_key,
    list_saved_games,
)


def render(game: Game) -> str:
    """Render the board as ASCII, with column letters and row numbers."""
    obs = game.observation()
    label_width = len(str(game.height))

    header = " " * (label_width + 1) + " ".join(
        int_to_column_key(col).ljust(2) for col in range(game.width)
    )
    lines = [header.rstrip()]

    for row in range(game.height):
        row_str = str(row + 1).rjust(label_width) + " "
        for col in range(game.width):
            val = obs[row, col]
            if val == -1:
                row_str += "."
            elif val == -2:
                row_str += "F"
            elif val == 9:
                row_str += "*"
            elif val == 0:
                row_str += " "
            else:
                row_str += str(val)
            row_str += "  "
        lines.append(row_str.rstrip())

    return "\n".join(lines)


def play(args: argparse.Namespace) -> int:
    """Create a game and reveal the given cells in order."""
    try:
        game = Game.create(args.width, args.height, args.mines, name=args.name)
    except MinefieldError as error:
        print(f"Cannot create game: {error}")
        return 1

    print(f"Game {game.id}: {game.width}x{game.height} with {args.mines} mines\n")
    print(render(game))

    for cell_name in args.cells:
        if game.is_complete():
            break
        try:
            game.reveal_cell(cell_name)
        except MinefieldError as error:
            print(f"\n{error}")
            continue

        print(f"\n=== Reveal {cell_name} | Version {game.version} ===")
        print(render(game))

    if game.is_won:
        print("\n*** WIN! ***")
    elif game.is_lost:
        print("\n*** LOST (hit mine) ***")
    else:
        print(f"\n{game.revealed_or_flagged_cell_count}/{game.cell_count} cells revealed")
    print(f"Events logged: {len(game.events)}")
    return 0


def saved(args: argparse.Namespace) -> int:
    """List saved games."""
    games = list_saved_games()
    if not games:
        print("No saved games.")
    for info in games:
        print(f"{info.id}  {info.name}")
    return 0


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Minefield puzzle engine")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    play_parser = subparsers.add_parser("play", help="Play a scripted game")
    play_parser.add_argument("--width", type=int, default=BEGINNER.width)
    play_parser.add_argument("--height", type=int, default=BEGINNER.height)
    play_parser.add_argument("--mines", type=int, default=BEGINNER.num_mines)
    play_parser.add_argument("--name", default=None, help="Game name")
    play_parser.add_argument("cells", nargs="+", help="Cells to reveal, e.g. B6")
    play_parser.set_defaults(func=play)

    saved_parser = subparsers.add_parser("saved", help="List saved games")
    saved_parser.set_defaults(func=saved)

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
