"""Solving, playing and reviewing word ladders."""

from __future__ import annotations

import os
import random
from collections.abc import Collection, Sequence
from datetime import datetime

from .builder import GraphBuilder, load_dictionary
from .graph import Graph
from .session import GameSession, load_sessions, save_session
from .solver import Solver

ARROW = " → "
DEFAULT_DICTIONARY = "dictionary.txt"


class GameError(Exception):
    """A request the game refuses, carrying a message for the player."""


def validate_move(current: str, new_word: str, dictionary: Collection[str]) -> int:
    """Check that ``new_word`` is a legal step from ``current``.

    Returns the position of the changed letter; raises ``GameError`` otherwise.
    """
    if not new_word:
        raise GameError("Please enter a word")
    if new_word == current:
        raise GameError("New word is the same as current word")
    if len(new_word) != len(current):
        raise GameError("Word length must be the same")
    changed = [i for i, (a, b) in enumerate(zip(current, new_word)) if a != b]
    if len(changed) != 1:
        raise GameError("You must change exactly one letter")
    if new_word not in dictionary:
        raise GameError("Word not in dictionary")
    return changed[0]


def _mark(word: str, position: int) -> str:
    if 0 <= position < len(word):
        return f"{word[:position]}[{word[position]}]{word[position + 1:]}"
    return word


def format_hint(current: str, next_word: str, position: int) -> str:
    """Describe the hinted step, bracketing the letter that changes."""
    return f"Change {_mark(current, position)} to {_mark(next_word, position)}"


def game_summary(session: GameSession) -> str:
    """Return the end-of-game summary for ``session``."""
    return (
        "\nGame Summary:\n"
        f"Player: {session.player_name}\n"
        f"Start: {session.start_word}\n"
        f"Target: {session.target_word}\n"
        f"Moves: {session.move_count} (Optimal: {session.optimal_moves})\n"
        f"Hints used: {session.hints_used}\n"
        f"Your path: {ARROW.join(session.moves)}"
    )


def _format_date(moment: datetime | None) -> str:
    if moment is None:
        return ""
    return f"{moment:%a %b} {moment.day} {moment:%H:%M:%S %Y}"


def analytics_report(username: str, sessions: Sequence[GameSession], solver: Solver) -> str:
    """Return a per-game and summary report of a player's sessions."""
    lines = [f"Game sessions for {username}:\n"]
    unique_words: set[str] = set()
    total_hints = total_moves = total_optimal = 0

    for session in sessions:
        total_hints += session.hints_used
        total_moves += session.move_count
        path = solver.find_shortest_path(session.start_word, session.target_word)
        optimal = len(path) - 1 if path else 0
        total_optimal += optimal
        unique_words.update(session.moves)
        lines.append(f"Game on {_format_date(session.start_time)}:")
        lines.append(f"  {session.start_word}{ARROW}{session.target_word}")
        lines.append(f"  Moves: {session.move_count} (Optimal: {optimal})")
        lines.append(f"  Hints used: {session.hints_used}\n")

    games = len(sessions)
    if total_moves:
        efficiency = 100 * total_optimal / total_moves
    else:
        efficiency = float("nan") if total_optimal == 0 else float("inf")

    lines.append("\nSummary Statistics:")
    lines.append(f"Total games played: {games}")
    lines.append(f"Unique words used: {len(unique_words)}")
    lines.append(f"Average hints per game: {total_hints / games:.2f}")
    lines.append(
        f"Average moves per game: {total_moves / games:.2f} "
        f"(Optimal: {total_optimal / games:.2f})"
    )
    lines.append(f"Efficiency: {efficiency:.1f}%")
    return "\n".join(lines) + "\n"


class Game:
    """The game's state: dictionary, word graph, current session and log."""

    def __init__(
        self,
        dictionary_file: str | os.PathLike[str] = DEFAULT_DICTIONARY,
        history_dir: str | os.PathLike[str] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.dictionary_file = dictionary_file
        self.history_dir = history_dir
        self._rng = rng if rng is not None else random.Random()
        self.dictionary: list[str] = []
        self.graph: Graph[str] = Graph()
        self.solver = Solver(self.graph)
        self.session: GameSession | None = None
        self.log: list[str] = []

    def load_dictionary(self, word_length: int) -> list[str]:
        """Load words of ``word_length`` letters and rebuild the word graph."""
        try:
            words = load_dictionary(self.dictionary_file, word_length)
        except OSError as exc:
            raise GameError(f"Failed to load dictionary: {exc}") from exc
        self.dictionary = words
        self.graph = GraphBuilder().build_graph(words)
        self.solver = Solver(self.graph)
        return words

    def solve(self, start: str, target: str) -> list[str]:
        """Return the shortest ladder between two words, ``[]`` if none."""
        if start.upper() == target.upper():
            raise GameError("Start and target words are the same")
        return self.solver.find_shortest_path(start, target)

    def start(self, player: str, word_length: int) -> GameSession:
        """Begin a game between two random connected words."""
        if not player:
            raise GameError("Please enter your name")
        if self.session is not None:
            self.end_game()

        self.load_dictionary(word_length)
        if len(self.dictionary) < 2:
            raise GameError("Not enough words in dictionary")
        if len(self.graph) < 2:
            raise GameError("No word ladder exists in dictionary")

        while True:
            start_word = self._rng.choice(self.dictionary)
            target_word = self._rng.choice(self.dictionary)
            if start_word == target_word:
                continue
            path = self.solver.find_shortest_path(start_word, target_word)
            if path:
                break

        self.session = GameSession(player, start_word, target_word, len(path) - 1)
        self.log.clear()
        self.log.append(f"Game started: {start_word}{ARROW}{target_word}")
        self.log.append("Make your first move!")
        return self.session

    def _require_session(self) -> GameSession:
        if self.session is None:
            raise GameError("No game in progress")
        return self.session

    def move(self, word: str) -> bool:
        """Move to ``word``; return True when it reaches the target."""
        session = self._require_session()
        new_word = word.upper()
        validate_move(session.current_word, new_word, self.dictionary)
        session.add_move(new_word)
        if new_word == session.target_word:
            self.log.append("Congratulations! You reached the target word.")
            self.end_game()
            return True
        self.log.append(f"Moved to: {new_word}")
        return False

    def hint(self) -> str | None:
        """Return a hint for the next step, or None when no game is running."""
        session = self.session
        if session is None or session.is_complete():
            return None
        current = session.current_word
        found = self.solver.get_hint(current, session.target_word)
        if found is None:
            return "No hint available"
        session.increment_hints()
        self.log.append(f"Hint used: change {current} to {found.word}")
        return format_hint(current, found.word, found.position)

    def give_up(self) -> list[str]:
        """End the game and return the optimal ladder from its start."""
        session = self._require_session()
        path = self.solver.find_shortest_path(session.start_word, session.target_word)
        if path:
            self.log.append("\nOptimal solution:")
            self.log.append(ARROW.join(path))
        self.end_game()
        return path

    def end_game(self) -> str | None:
        """Save and close the current game; return its summary."""
        session = self.session
        if session is None:
            return None
        summary = game_summary(session)
        self.log.append(summary)
        save_session(session, self.history_dir)
        self.session = None
        return summary

    def status(self) -> str:
        """Describe the current word, target, moves and hints."""
        session = self._require_session()
        return (
            f"Current word: {session.current_word}\n"
            f"Target word: {session.target_word}\n"
            f"Moves: {session.move_count}/{session.optimal_moves} | "
            f"Hints used: {session.hints_used}"
        )

    def analytics(self, username: str) -> str:
        """Return the analytics report for ``username``."""
        if not username:
            raise GameError("Please enter a player name")
        sessions = load_sessions(username, self.history_dir)
        if not sessions:
            return "No game data found for this player"
        return analytics_report(username, sessions, self.solver)