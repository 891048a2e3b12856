# wordladder

Solve and play the Word Ladder puzzle: turn one word into another by changing
a single letter at a time, where every step must be a dictionary word.

## Installation

```
pip install .
```

## The dictionary

Words are read from a plain text file of whitespace-separated words, by
default `dictionary.txt` in the current directory (change it with
`-d/--dictionary`). Only words of the chosen length are kept, and they are
converted to upper case. Words with no neighbour one letter away are left out
of the word graph, so no ladder starts or ends at them.

## Command line

The `wordladder` command takes one of three subcommands. The global options
`-d/--dictionary FILE` and `--history-dir DIR` come before the subcommand.

Find the shortest ladder between two words (the word length defaults to the
length of the start word; `-l/--length` sets it):

```
wordladder solve cat dog
```

The ladder is printed one word per line, or `No path exists between these
words`. Giving the same word twice is an error.

Play a game as a named player, with words of 3 to 7 letters (`-l/--length`,
default 3) and an optional `--seed` for the random choice of words:

```
wordladder play Alice -l 4
```

Two connected words are picked at random. At the `>` prompt type a word that
changes exactly one letter of the current word, `hint` for the next step of an
optimal ladder (the changing letter is shown in brackets), or `give up` /
`giveup` / `quit` to stop and see the optimal ladder. End of input also gives
up. After each turn the current word, target, moves against the optimal count
and hints used are shown. When a game ends its summary is printed and the game
is appended to the player's history file.

Show a player's statistics, computing optimal ladders with words of the
length given by `-l/--length` (default 3):

```
wordladder analytics Alice
```

The report lists each game with its moves against the optimal count and hints
used, followed by totals: games played, unique words used, average hints and
moves per game, and efficiency (optimal moves as a percentage of moves made).

## History files

Each player's games are appended to `<player_name>.csv` (lower case, spaces
replaced by underscores) in the current directory or in `--history-dir`. The
columns are `Timestamp,Player,StartWord,TargetWord,Moves,HintsUsed,UserMoves,OptimalMoves`,
with the moves joined by `->`.

## Library use

```python
from wordladder.builder import GraphBuilder, load_dictionary
from wordladder.solver import Solver

words = load_dictionary("dictionary.txt", 3)
solver = Solver(GraphBuilder().build_graph(words))

print(solver.find_shortest_path("cat", "dog"))   # [] if there is no ladder
hint = solver.get_hint("CAT", "DOG")             # Hint(word, position) or None
```

- `wordladder.graph.Graph` is an undirected graph with `add_node`, `add_edge`,
  `contains` (also `in`), `neighbors`, `shortest_path`, `len()` and sorted
  iteration. Neighbours are visited in sorted order, so shortest paths are
  deterministic.
- `wordladder.builder.load_dictionary(filename, word_length=0)` reads words
  (raising `OSError` if the file cannot be opened); `GraphBuilder.build_graph`
  links words that differ in one letter. A builder keeps its pattern index
  between calls.
- `wordladder.solver.Solver` answers `find_shortest_path` and `get_hint`,
  comparing words in upper case.
- `wordladder.session` holds `GameSession` with `save_session`,
  `load_sessions` and `session_filename` for the CSV history.
- `wordladder.game.Game` drives a game: `load_dictionary`, `solve`, `start`,
  `move`, `hint`, `give_up`, `end_game`, `status` and `analytics`, keeping a
  `log` of messages. Refused requests raise `GameError`. The helpers
  `validate_move`, `format_hint`, `game_summary` and `analytics_report` are
  available on their own.

## What it does not do

There is no graphical window: the game is played in the terminal through the
`wordladder` command or from Python.

## Running the tests

```
pip install .[test]
pytest
```