import io
import signal

import pytest

from stingbank.file_manager import Storage, parse_users
from stingbank.shutdown import ExitRequested, ShutdownGuard
from stingbank.user import User


@pytest.fixture
def storage(tmp_path):
    return Storage(tmp_path, out=io.StringIO())


@pytest.fixture
def users():
    alice = User("alice")
    alice.new_deposit(40, now=1_000_000)
    return {"alice": alice, "bob": User("bob")}


def test_request_exit_raises_and_flags(storage):
    guard = ShutdownGuard(storage)
    assert guard.exiting is False
    with pytest.raises(ExitRequested):
        guard.request_exit(signal.SIGINT, None)
    assert guard.exiting is True
    assert guard.saved is False


def test_request_exit_after_save_exits_process(storage, users):
    guard = ShutdownGuard(storage)
    guard.finish(users)
    with pytest.raises(SystemExit) as info:
        guard.request_exit()
    assert info.value.code == 0


def test_read_returns_words_in_order(storage, users):
    guard = ShutdownGuard(storage)
    stdin = io.StringIO("D alice\n\n  W\n")
    stdout = io.StringIO()
    words = [guard.read("> ", users, stdin, stdout) for _ in range(3)]
    assert words == ["D", "alice", "W"]
    assert stdout.getvalue() == "> > > "
    assert guard.saved is False


def test_read_at_end_of_input_saves_and_raises(storage, users):
    guard = ShutdownGuard(storage)
    stdout = io.StringIO()
    with pytest.raises(ExitRequested):
        guard.read("Action: ", users, io.StringIO(""), stdout)
    assert guard.saved is True
    assert "exiting..." in stdout.getvalue()
    assert set(parse_users(storage.data.read_text())) == {"alice", "bob"}


def test_read_while_exiting_saves_and_raises(storage, users):
    guard = ShutdownGuard(storage)
    with pytest.raises(ExitRequested):
        guard.request_exit()
    with pytest.raises(ExitRequested):
        guard.read("Action: ", users, io.StringIO("C\n"), io.StringIO())
    assert guard.saved is True
    assert storage.data.exists()


def test_install_routes_interrupt(storage):
    guard = ShutdownGuard(storage)
    previous = guard.install()
    try:
        assert signal.SIGINT in previous
        assert signal.getsignal(signal.SIGINT) == guard.request_exit
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)