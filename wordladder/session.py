"""Play sessions and their per-player CSV history files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

CSV_HEADER = "Timestamp,Player,StartWord,TargetWord,Moves,HintsUsed,UserMoves,OptimalMoves"
MOVE_SEPARATOR = "->"


def _now() -> datetime:
    return datetime.now().replace(microsecond=0)


@dataclass
class GameSession:
    """One game: the player, the words, the moves made and hints taken."""

    player_name: str
    start_word: str
    target_word: str
    optimal_moves: int
    start_time: datetime | None = field(default_factory=_now)
    moves: list[str] = field(default_factory=list)
    hints_used: int = 0

    def __post_init__(self) -> None:
        if not self.moves:
            self.moves = [self.start_word]

    def add_move(self, word: str) -> None:
        """Record a word the player moved to."""
        self.moves.append(word)

    def increment_hints(self) -> None:
        """Count one more hint."""
        self.hints_used += 1

    @property
    def move_count(self) -> int:
        """Moves made after the starting word."""
        return len(self.moves) - 1

    @property
    def current_word(self) -> str:
        """The last word reached, empty if there are no moves."""
        return self.moves[-1] if self.moves else ""

    def is_complete(self) -> bool:
        """Whether the last word reached is the target."""
        return bool(self.moves) and self.moves[-1] == self.target_word


def session_filename(player_name: str, directory: str | os.PathLike[str] | None = None) -> Path:
    """Return the history file path for ``player_name``."""
    name = player_name.lower().replace(" ", "_") + ".csv"
    return Path(directory) / name if directory is not None else Path(name)


def _format_time(moment: datetime | None) -> str:
    return moment.replace(microsecond=0).isoformat() if moment is not None else ""


def _parse_time(text: str) -> datetime | None:
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def _to_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def save_session(session: GameSession, directory: str | os.PathLike[str] | None = None) -> Path:
    """Append ``session`` to its player's history file and return the path."""
    path = session_filename(session.player_name, directory)
    is_new = not path.exists()
    fields = [
        _format_time(session.start_time),
        session.player_name,
        session.start_word,
        session.target_word,
        MOVE_SEPARATOR.join(session.moves),
        str(session.hints_used),
        str(max(len(session.moves) - 1, 0)),
        str(session.optimal_moves),
    ]
    with path.open("a", encoding="utf-8", newline="") as handle:
        if is_new:
            handle.write(CSV_HEADER + "\n")
        handle.write(",".join(fields) + "\n")
    return path


def load_sessions(username: str, directory: str | os.PathLike[str] | None = None) -> list[GameSession]:
    """Read every session stored for ``username``; none if there is no file."""
    path = session_filename(username, directory)
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError:
        return []

    sessions = []
    for line in lines[1:]:
        parts = line.split(",")
        if len(parts) < 8:
            continue
        sessions.append(
            GameSession(
                player_name=parts[1],
                start_word=parts[2],
                target_word=parts[3],
                optimal_moves=_to_int(parts[7]),
                start_time=_parse_time(parts[0]),
                moves=parts[4].split(MOVE_SEPARATOR),
                hints_used=_to_int(parts[5]),
            )
        )
    return sessions