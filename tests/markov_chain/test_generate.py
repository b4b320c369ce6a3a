import argparse
import json
import re

import pytest
from literate_randomizer.markov_chain.generate import main, parse_count


def test_parse_count():
    assert parse_count("4") == 4
    assert parse_count("3-7") == (3, 7)
    with pytest.raises(argparse.ArgumentTypeError):
        parse_count("many")
    with pytest.raises(argparse.ArgumentTypeError):
        parse_count("3-x")


def test_main_sentence(capsys):
    assert main(["--unit", "sentence", "--seed", "1", "--env", "test"]) == 0
    output = capsys.readouterr().out.strip()
    assert output[0].isupper()
    assert output[-1] in ".?!"


def test_main_paragraphs_from_file(tmp_path, capsys):
    corpus_file = tmp_path / "corpus.txt"
    corpus_file.write_text("The cat sat. The cat ran.", encoding="utf-8")

    exit_code = main([
        "--source-file", str(corpus_file), "--unit", "paragraphs", "--paragraphs", "2",
        "--sentences", "1", "--words", "3", "--first-word", "The", "--punctuation", "!",
        "--env", "test", "--seed", "4",
    ])

    assert exit_code == 0
    paragraphs = capsys.readouterr().out.strip().split("\n\n")
    assert len(paragraphs) == 2
    assert paragraphs[0].startswith("The cat")
    assert paragraphs[1].endswith("!")


def test_main_word(capsys):
    assert main(["--unit", "word", "--seed", "2", "--env", "test"]) == 0
    word = capsys.readouterr().out.strip()
    assert re.match(r"^[A-Za-z](?:[A-Za-z'-]*[A-Za-z])?$", word)


def test_main_markov_word(tmp_path, capsys):
    corpus_file = tmp_path / "corpus.txt"
    corpus_file.write_text("The cat sat. The cat ran.", encoding="utf-8")

    assert main(["--unit", "markov-word", "--source-file", str(corpus_file), "--seed", "4", "--env", "test"]) == 0
    assert capsys.readouterr().out.strip() in {"The", "cat"}


def test_main_stats(capsys):
    assert main(["--stats", "--env", "test"]) == 0
    stats = json.loads(capsys.readouterr().out)
    assert stats["words_count"] > 0
    assert stats["word_chains_count"] <= stats["words_count"]


def test_main_reports_errors(tmp_path, capsys):
    assert main(["--source-file", str(tmp_path / "missing.txt"), "--env", "test"]) == 1
    assert "Error" in capsys.readouterr().err

    assert main(["--unit", "sentence", "--words", "7-3", "--env", "test"]) == 1
    assert "smaller than minimum" in capsys.readouterr().err
