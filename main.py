#!/usr/bin/env python3
"""
Puzzle games - terminal entry point.

Usage:
    python main.py mines [--preset {easy,medium,hard}] [--width W --height H --mines N]
    python main.py cipher [--quote N] [--quotes-file FILE] [--save FILE]
"""
import argparse
import logging
import random
import time
from typing import List, Optional

from src.minefield import Board, BoardConfig, InvalidConfiguration, PRESETS, render_board
from src.cryptogram import ALPHABET, ProgressStore, Puzzle, QUOTES, Quote, load_quotes


def play_mines(args: argparse.Namespace) -> None:
    """Play a minefield game in the terminal."""
    if args.width is not None or args.height is not None or args.mines is not None:
        preset = PRESETS[args.preset]
        try:
            config = BoardConfig(
                width=args.width if args.width is not None else preset.width,
                height=args.height if args.height is not None else preset.height,
                num_mines=args.mines if args.mines is not None else preset.num_mines,
            )
        except InvalidConfiguration as exc:
            print(f"Invalid board: {exc}")
            return
    else:
        config = PRESETS[args.preset]

    rng = random.Random(args.seed)
    board = Board.generate(config, rng)
    start_time = time.time()
    elapsed: Optional[float] = None

    print(f"Board: {config.width}x{config.height} with {config.num_mines} mines")
    print("Commands: r ROW COL (reveal), f ROW COL (flag), n (new game), q (quit)")

    while True:
        print()
        print(render_board(board, reveal_mines=not board.is_playing))
        if board.is_won:
            print(f"\nAll free squares open, game won! ({elapsed:.0f}s)")
        elif board.is_lost:
            print("\nMine hit, game lost")
        else:
            print(f"\nMines left: {board.mines_remaining}")

        parts = input("> ").split()
        if not parts:
            continue
        command = parts[0].lower()
        if command == "q":
            break
        if command == "n":
            board = Board.generate(config, rng)
            start_time = time.time()
            elapsed = None
            continue
        if command in ("r", "f") and len(parts) == 3:
            try:
                row, col = int(parts[1]), int(parts[2])
            except ValueError:
                print("Row and column must be numbers")
                continue
            if command == "r":
                board = board.reveal_at(row, col)
            else:
                board = board.toggle_flag_at(row, col)
            # Clock stops once, when the game ends
            if not board.is_playing and elapsed is None:
                elapsed = time.time() - start_time
            continue
        print("Unknown command")


def _render_puzzle(puzzle: Puzzle) -> str:
    """Show the encoded quote with the player's entries underneath."""
    entries = "".join(
        (puzzle.display_value(ch) or "_") if ch in ALPHABET else ch
        for ch in puzzle.encoded_text
    )
    return f"{puzzle.encoded_text}\n{entries}\n    - {puzzle.quote.author}"


def play_cipher(args: argparse.Namespace) -> None:
    """Play cryptograms in the terminal, saving progress between sessions."""
    quotes: List[Quote] = load_quotes(args.quotes_file) if args.quotes_file else list(QUOTES)
    if not quotes:
        print("No quotes available")
        return
    store: Optional[ProgressStore] = ProgressStore(args.save) if args.save else None
    rng = random.Random(args.seed)

    index = args.quote if args.quote is not None else (store.current if store else 0)
    index %= len(quotes)

    def open_puzzle(number: int) -> Puzzle:
        saved = store.load_puzzle(number, quotes[number]) if store else None
        return saved or Puzzle.build(quotes[number], rng)

    puzzle = open_puzzle(index)
    start_time = time.time()
    print("Commands: LETTER GUESS (e.g. 'q e'), LETTER - (clear), h (hint),")
    print("          n/p (next/previous puzzle), q (quit)")

    while True:
        status = "Game solved!" if puzzle.is_solved else f"{index + 1} of {len(quotes)}"
        print(f"\n{status}\n{_render_puzzle(puzzle)}")

        parts = input("> ").split()
        if not parts:
            continue
        command = parts[0].lower()
        before = puzzle

        # Two tokens are always a letter entry, even for cipher letters h/n/p/q
        if len(parts) == 2 and len(parts[0]) == 1:
            if puzzle.is_locked(parts[0]):
                print("That letter is locked")
                continue
            entered = "" if parts[1] == "-" else parts[1]
            puzzle, _ = puzzle.apply_letter(parts[0], entered)
        elif len(parts) != 1:
            print("Unknown command")
            continue
        elif command == "q":
            break
        elif command in ("n", "p"):
            if store:
                store.save_puzzle(index, puzzle)
            index = (index + (1 if command == "n" else -1)) % len(quotes)
            puzzle = open_puzzle(index)
            start_time = time.time()
            continue
        elif command == "h":
            puzzle = puzzle.get_hint(rng)
        else:
            print("Unknown command")
            continue

        if puzzle.is_solved and not before.is_solved:
            print(f"Solved in {time.time() - start_time:.0f}s")

    if store:
        store.save_puzzle(index, puzzle)
        store.current = index
        store.save()
        print(f"Progress saved to {store.path}")


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Minefield and cryptogram puzzles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Game to play")

    mines_parser = subparsers.add_parser("mines", help="Play minefield")
    mines_parser.add_argument(
        "--preset", choices=sorted(PRESETS), default="easy", help="Board preset"
    )
    mines_parser.add_argument("--width", type=int, default=None, help="Columns")
    mines_parser.add_argument("--height", type=int, default=None, help="Rows")
    mines_parser.add_argument("--mines", type=int, default=None, help="Mine count")

    cipher_parser = subparsers.add_parser("cipher", help="Play cryptograms")
    cipher_parser.add_argument("--quote", type=int, default=None, help="Puzzle number (0-based)")
    cipher_parser.add_argument("--quotes-file", default=None, help="JSON list of quotes")
    cipher_parser.add_argument("--save", default=None, help="Progress file")

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.command == "mines":
        play_mines(args)
    elif args.command == "cipher":
        play_cipher(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
