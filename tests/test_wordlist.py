import logging

import pytest

from autocomplete.trie import Trie
from autocomplete.wordlist import load_words


def test_load_words(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("apple\n  Apply \n\nbanana\napple\n", encoding="utf-8")
    trie = Trie()

    assert load_words(trie, str(path)) == 4
    assert len(trie) == 3
    assert sorted(trie.search("App")) == ["Apply"]
    assert sorted(trie.search("ap")) == ["apple"]


def test_load_words_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_words(Trie(), str(tmp_path / "nope.txt"))


def test_load_words_logs_inserted_count(tmp_path, caplog):
    path = tmp_path / "words.txt"
    path.write_text("x\nx\ny\n", encoding="utf-8")
    with caplog.at_level(logging.INFO, logger="autocomplete"):
        assert load_words(Trie(), str(path)) == 3
    assert "Loaded 3 words" in caplog.text
