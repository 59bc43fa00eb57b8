import io
import signal

from xshell.execute import Status
from xshell.history import History
from xshell.shell import HOSTNAME, handle_input, main, prompt


def test_prompt_format():
    assert prompt("alice", "x_shell") == "alice@x_shell> "


def test_empty_input_is_not_recorded():
    history = History()
    assert handle_input("\n", HOSTNAME, history) == Status.OK
    assert len(history) == 0


def test_input_is_recorded_without_newline(capfd):
    history = History()
    assert handle_input("hostname\n", HOSTNAME, history) == Status.OK
    assert list(history) == ["hostname"]
    assert capfd.readouterr().out == "x_shell\n"


def test_history_lists_entries(capfd):
    history = History()
    handle_input("hostname", HOSTNAME, history)
    capfd.readouterr()
    assert handle_input("history", HOSTNAME, history) == Status.OK
    assert capfd.readouterr().out == history.render()
    assert list(history) == ["hostname", "history"]


def test_exit_input(capfd):
    history = History()
    assert handle_input("exit", HOSTNAME, history) == Status.EXIT
    assert capfd.readouterr().out == "Goodbye!\n"


def test_failed_command_is_still_recorded():
    history = History()
    assert handle_input("false", HOSTNAME, history) == Status.ERROR
    assert list(history) == ["false"]


def test_main_runs_until_exit(monkeypatch, capfd):
    monkeypatch.setenv("USER", "tester")
    monkeypatch.setattr("sys.stdin", io.StringIO("hostname\nexit\nhostname\n"))
    assert main([]) == 0
    out = capfd.readouterr().out
    assert out.startswith("tester@x_shell> x_shell\n")
    assert out.count("x_shell\n") == 1
    assert out.endswith("Goodbye!\n")


def test_main_ends_at_end_of_input(monkeypatch, capfd):
    monkeypatch.setenv("USER", "tester")
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert capfd.readouterr().out == "tester@x_shell> \n"


def test_main_without_user_fails(monkeypatch, capfd):
    monkeypatch.delenv("USER", raising=False)
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1
    assert "Error getting username" in capfd.readouterr().err


def test_main_restores_interrupt_handler(monkeypatch, capfd):
    monkeypatch.setenv("USER", "tester")
    monkeypatch.setattr("sys.stdin", io.StringIO("exit\n"))
    before = signal.getsignal(signal.SIGINT)
    assert main([]) == 0
    assert capfd.readouterr().out == "tester@x_shell> Goodbye!\n"
    assert signal.getsignal(signal.SIGINT) == before