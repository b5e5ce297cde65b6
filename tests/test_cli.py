import io

import pytest

from autocomplete.cli import run_cli
from autocomplete.constants import BANNER
from autocomplete.trie import Trie


def keys(text):
    it = iter(text)
    return lambda: next(it)


def test_run_cli_commits_and_quits():
    trie = Trie()
    out = io.StringIO()
    run_cli(trie, read_char=keys("hi\rh\x7f\x1b"), out=out)

    assert "hi" in trie
    assert len(trie) == 1
    output = out.getvalue()
    assert output.startswith(BANNER)
    assert "[hi]" in output


def test_run_cli_stops_on_ctrl_c():
    trie = Trie()
    run_cli(trie, read_char=keys("ab\x03"), out=io.StringIO())
    assert len(trie) == 0


def test_run_cli_closed_input():
    with pytest.raises(EOFError):
        run_cli(Trie(), read_char=iter(["a", ""]).__next__, out=io.StringIO())
