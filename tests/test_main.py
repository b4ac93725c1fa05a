import sys

import pytest

from chainhash.main import InputError, main, parse_pairs


def run_main(monkeypatch, *args: str):
    monkeypatch.setattr(sys, "argv", ["chainhash", *args])
    main()


def test_demo(monkeypatch, capsys):
    run_main(monkeypatch)
    out = capsys.readouterr().out

    lines = out.splitlines()
    assert lines[0] == "== after inserts =="
    assert lines[1] == "capacity 16, length 12"
    assert "'red'" in lines
    assert "True" in lines
    assert "'golden'" in lines
    assert "11" in lines
    assert "capacity 16, length 11" in lines

    tail = out.split("== after set moon ==\n")[1]
    assert tail.startswith("capacity 16, length 12\n")
    assert "('moon', 'silver')" in tail
    assert "('lion', 'golden')" not in tail


def test_parse_pairs():
    text = "# colors\napple = red\n\nice cream=white\nurl=a=b\n"
    assert parse_pairs(text) == [
        ("apple", "red"),
        ("ice cream", "white"),
        ("url", "a=b"),
    ]


def test_parse_pairs_error():
    with pytest.raises(InputError, match=r"\[line 2\]"):
        parse_pairs("a=1\nbroken\n")


def test_load_file(monkeypatch, capsys, tmp_path):
    path = tmp_path / "pairs.txt"
    path.write_text("a=1\nb=2\na=3\n")

    run_main(monkeypatch, str(path))
    out = capsys.readouterr().out.splitlines()

    assert out[0] == "== {0:s} ==".format(str(path))
    assert out[1] == "capacity 16, length 2"
    assert any("('a', '3')" in line for line in out[2:])


def test_load_file_bad_data(monkeypatch, capsys, tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("a=1\nnope\n")

    with pytest.raises(SystemExit) as exc:
        run_main(monkeypatch, str(path))

    assert exc.value.code == 65
    assert capsys.readouterr().err == "[line 2] expected key=value\n"


def test_load_missing_file(monkeypatch, capsys, tmp_path):
    with pytest.raises(SystemExit) as exc:
        run_main(monkeypatch, str(tmp_path / "missing.txt"))

    assert exc.value.code == 66
    assert "Could not read" in capsys.readouterr().err


def test_usage(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_main(monkeypatch, "a", "b")

    assert exc.value.code == 64
    assert capsys.readouterr().out == "Usage: chainhash [path]\n"


def test_load_file_not_utf8(monkeypatch, capsys, tmp_path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"a=\xff\xfe\n")

    with pytest.raises(SystemExit) as exc:
        run_main(monkeypatch, str(path))

    assert exc.value.code == 65
    assert "Could not decode" in capsys.readouterr().err
