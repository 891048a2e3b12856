"""Command-line front end for the word ladder game."""

from __future__ import annotations

import argparse
import random
import sys

from .game import DEFAULT_DICTIONARY, Game, GameError

_GIVE_UP = {"give up", "giveup", "quit"}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wordladder", description="Solve and play word ladders.")
    parser.add_argument("-d", "--dictionary", default=DEFAULT_DICTIONARY, help="dictionary file")
    parser.add_argument("--history-dir", default=None, help="directory of player history files")
    commands = parser.add_subparsers(dest="command", required=True)

    solve = commands.add_parser("solve", help="find the shortest ladder between two words")
    solve.add_argument("start")
    solve.add_argument("target")
    solve.add_argument("-l", "--length", type=int, default=None, help="word length")

    play = commands.add_parser("play", help="play a game")
    play.add_argument("player")
    play.add_argument("-l", "--length", type=int, choices=range(3, 8), default=3)
    play.add_argument("--seed", type=int, default=None)

    analytics = commands.add_parser("analytics", help="show a player's statistics")
    analytics.add_argument("player")
    analytics.add_argument("-l", "--length", type=int, default=3)
    return parser


def _flush(game: Game, shown: int) -> int:
    for entry in game.log[shown:]:
        print(entry)
    return len(game.log)


def _solve(game: Game, args: argparse.Namespace) -> int:
    game.load_dictionary(args.length or len(args.start))
    path = game.solve(args.start, args.target)
    if not path:
        print("No path exists between these words")
    else:
        for word in path:
            print(word)
    return 0


def _play(game: Game, args: argparse.Namespace) -> int:
    game.start(args.player, args.length)
    shown = _flush(game, 0)
    print(game.status())
    while game.session is not None:
        try:
            line = input("> ").strip()
        except EOFError:
            line = "give up"
        command = line.lower()
        try:
            if command == "hint":
                print(game.hint())
            elif command in _GIVE_UP:
                game.give_up()
            else:
                game.move(line)
        except GameError as exc:
            print(exc, file=sys.stderr)
        shown = _flush(game, shown)
        if game.session is not None:
            print(game.status())
    return 0


def _analytics(game: Game, args: argparse.Namespace) -> int:
    try:
        game.load_dictionary(args.length)
    except GameError as exc:
        print(exc, file=sys.stderr)
    print(game.analytics(args.player))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    args = _build_parser().parse_args(argv)
    rng = random.Random(getattr(args, "seed", None))
    game = Game(args.dictionary, args.history_dir, rng)
    handlers = {"solve": _solve, "play": _play, "analytics": _analytics}
    try:
        return handlers[args.command](game, args)
    except GameError as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())