"""
tests/test_cli.py — Console script behaviour, driven through main(argv).
"""

import builtins

import pytest

from charcodec.cli.main import main


def run(capsys, *argv):
    main(list(argv))
    return capsys.readouterr().out


def test_encode(capsys):
    out = run(capsys, "encode", "Hello World!")
    assert "[0, 55, 26, 33, 33, 36, 2, 70, 36, 39, 33, 25, 5, 1]" in out
    assert "Tokens: 14" in out


def test_encode_without_special_tokens(capsys):
    out = run(capsys, "encode", "Hi", "--no-special")
    assert "[55, 30]" in out
    assert "Tokens: 2" in out


def test_encode_breakdown(capsys):
    out = run(capsys, "encode", "H i", "--breakdown")
    assert "#55  letter" in out
    assert "␣" in out and "space" in out


def test_encode_uses_config(capsys, tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("codec:\n  wrap_special: false\ndisplay:\n  separator: ' '\n")
    out = run(capsys, "--config", str(path), "encode", "Hi")
    assert "[55 30]" in out


def test_decode(capsys):
    out = run(capsys, "decode", "0, 55, 56, 2, abc, 1")
    assert '"HI "' in out
    assert "Valid tokens: 5" in out
    assert "Characters: 3" in out


def test_vocab_filter(capsys):
    out = run(capsys, "vocab", "--type", "number")
    assert "#12" in out
    assert "Showing 10 of 74 tokens" in out


def test_vocab_no_results(capsys):
    out = run(capsys, "vocab", "--search", "%")
    assert "No tokens found" in out
    assert "Showing 0 of 74 tokens" in out


def test_stats(capsys):
    out = run(capsys, "stats")
    assert "Lowercase    26" in out
    assert "Total        74" in out
    assert "Other" not in out


def test_dataset(capsys, tmp_path):
    corpus = tmp_path / "corpus.txt"
    corpus.write_text("abcdef\n\nghijkl\n")
    out = run(capsys, "dataset", "--input", str(corpus), "--context-window", "3", "--stride", "2")
    assert "Texts: 2" in out
    assert "Samples: 6" in out
    assert 'First input:  "ab"' in out


def test_dataset_invalid_window(capsys, tmp_path):
    corpus = tmp_path / "corpus.txt"
    corpus.write_text("abcdef\n")
    with pytest.raises(SystemExit) as exc:
        main(["dataset", "--input", str(corpus), "--context-window", "0"])
    assert exc.value.code == 1
    assert "Error:" in capsys.readouterr().out


def test_dataset_directory_input(capsys, tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["dataset", "--input", str(tmp_path)])
    assert exc.value.code == 1
    assert "Error:" in capsys.readouterr().out


def test_interactive(capsys, monkeypatch):
    lines = iter(["Hi", "", ":d 55, 56"])

    def fake_input(prompt=""):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr(builtins, "input", fake_input)
    out = run(capsys, "interactive")
    assert "Output: [0, 55, 30, 1]" in out
    assert 'Output: "HI"' in out
    assert "Goodbye!" in out


def test_no_command_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 1


def test_missing_config_exits(capsys, tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(tmp_path / "nope.yaml"), "stats"])
    assert exc.value.code == 1
    assert "Error:" in capsys.readouterr().out


def test_interactive_bare_decode_command(capsys, monkeypatch):
    lines = iter([":d", ":dog"])

    def fake_input(prompt=""):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr(builtins, "input", fake_input)
    out = run(capsys, "interactive")
    assert 'Output: ""' in out
    # Only ":d" alone or followed by a space switches to decoding
    assert "Output: [0, 7, 25, 36, 28, 1]" in out
