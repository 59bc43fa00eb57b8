import pytest

from xshell.redirect import RedirectError, Redirects, open_redirects, split_redirects


def test_no_redirects():
    result = split_redirects(["ls", "-l"])
    assert result == Redirects(["ls", "-l"], None, None, None)


def test_input_redirect():
    result = split_redirects(["sort", "<", "in.txt"])
    assert result.args == ["sort"]
    assert result.stdin == "in.txt"
    assert result.stdout is None and result.append_to is None


def test_all_redirects():
    result = split_redirects(["cmd", "<", "a", "x", ">", "b", ">>", "c"])
    assert result == Redirects(["cmd", "x"], "a", "b", "c")


def test_only_first_occurrence_removed():
    result = split_redirects(["cmd", ">", "a", ">", "b"])
    assert result.stdout == "a"
    assert result.args == ["cmd", ">", "b"]


def test_original_args_untouched():
    args = ["cat", "<", "f"]
    split_redirects(args)
    assert args == ["cat", "<", "f"]


@pytest.mark.parametrize(
    "args, message",
    [
        (["cat", "<"], "Input file is missing after '<'"),
        (["ls", ">"], "Output file is missing after '>'"),
        (["ls", ">>"], "Output file is missing after '>>'"),
    ],
)
def test_missing_target(args, message):
    with pytest.raises(RedirectError, match=message):
        split_redirects(args)


def test_open_nothing():
    with open_redirects(Redirects(["ls"])) as (stdin, stdout):
        assert (stdin, stdout) == (None, None)


def test_open_input_and_truncating_output(tmp_path):
    source = tmp_path / "in.txt"
    source.write_bytes(b"data")
    target = tmp_path / "out.txt"
    target.write_bytes(b"old contents")
    with open_redirects(Redirects([], str(source), str(target))) as (stdin, stdout):
        assert stdin.read() == b"data"
        stdout.write(b"new")
    assert target.read_bytes() == b"new"


def test_append_keeps_contents(tmp_path):
    target = tmp_path / "log.txt"
    target.write_bytes(b"first\n")
    with open_redirects(Redirects([], append_to=str(target))) as (_, stdout):
        stdout.write(b"second\n")
    assert target.read_bytes() == b"first\nsecond\n"


def test_append_wins_over_truncate(tmp_path):
    truncated = tmp_path / "t.txt"
    truncated.write_bytes(b"gone")
    appended = tmp_path / "a.txt"
    with open_redirects(
        Redirects([], stdout=str(truncated), append_to=str(appended))
    ) as (_, stdout):
        stdout.write(b"here")
    assert truncated.read_bytes() == b""
    assert appended.read_bytes() == b"here"


def test_missing_input_file(tmp_path):
    with pytest.raises(RedirectError, match="Failed to open input file"):
        with open_redirects(Redirects([], stdin=str(tmp_path / "absent"))):
            pass


def test_unwritable_output(tmp_path):
    target = tmp_path / "no" / "such" / "dir.txt"
    with pytest.raises(RedirectError, match="Failed to open output file"):
        with open_redirects(Redirects([], stdout=str(target))):
            pass