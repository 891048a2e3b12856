from datetime import datetime

from wordladder.session import (
    CSV_HEADER,
    GameSession,
    load_sessions,
    save_session,
    session_filename,
)


def make_session(name="Alice"):
    return GameSession(name, "CAT", "DOG", 3, start_time=datetime(2024, 5, 1, 12, 30, 15))


def test_new_session_starts_at_start_word():
    session = make_session()
    assert session.moves == ["CAT"]
    assert session.move_count == 0
    assert session.current_word == "CAT"
    assert session.hints_used == 0
    assert not session.is_complete()


def test_moves_and_completion():
    session = make_session()
    for word in ["COT", "COG", "DOG"]:
        session.add_move(word)
    assert session.move_count == 3
    assert session.current_word == "DOG"
    assert session.is_complete()


def test_increment_hints():
    session = make_session()
    session.increment_hints()
    session.increment_hints()
    assert session.hints_used == 2


def test_filename_lowercases_and_replaces_spaces(tmp_path):
    assert session_filename("John Smith").name == "john_smith.csv"
    assert session_filename("John Smith", tmp_path).parent == tmp_path


def test_first_save_writes_header(tmp_path):
    path = save_session(make_session(), tmp_path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == CSV_HEADER
    assert len(lines) == 2


def test_second_save_appends_without_header(tmp_path):
    save_session(make_session(), tmp_path)
    path = save_session(make_session(), tmp_path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines.count(CSV_HEADER) == 1
    assert len(lines) == 3


def test_round_trip(tmp_path):
    session = make_session("Bob Jones")
    session.add_move("COT")
    session.add_move("COG")
    session.increment_hints()
    save_session(session, tmp_path)
    loaded = load_sessions("bob jones", tmp_path)
    assert loaded == [session]


def test_round_trip_drops_microseconds(tmp_path):
    moment = datetime(2023, 1, 2, 3, 4, 5, 678)
    save_session(GameSession("Eve", "CAT", "DOG", 3, start_time=moment), tmp_path)
    (loaded,) = load_sessions("Eve", tmp_path)
    assert loaded.start_time == moment.replace(microsecond=0)


def test_missing_file_gives_no_sessions(tmp_path):
    assert load_sessions("nobody", tmp_path) == []


def test_short_and_bad_lines(tmp_path):
    path = session_filename("Carol", tmp_path)
    path.write_text(
        CSV_HEADER + "\n"
        "bad,line\n"
        "not-a-time,Carol,CAT,DOG,CAT->COT,x,1,y\n",
        encoding="utf-8",
    )
    (loaded,) = load_sessions("Carol", tmp_path)
    assert loaded.start_time is None
    assert loaded.hints_used == 0
    assert loaded.optimal_moves == 0
    assert loaded.moves == ["CAT", "COT"]