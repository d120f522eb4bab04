"""
`python -m inidoc`: the demo console program.
"""

import io

from inidoc.__main__ import main


def test_prints_document(tmp_path, capsys):
    path = tmp_path / "game.ini"
    path.write_text("[Window]\nwidth = 800\n\n[Player]\nname = Kariko\n",
                    encoding="utf-8")
    assert main([str(path), "--encoding", "utf-8"]) == 0
    out = capsys.readouterr().out
    assert "Reading ini file succeeded." in out
    assert "Section Name: Window" in out
    assert "\tKey Name: width Key Value: 800" in out
    assert "Section Name: Player" in out


def test_path_from_stdin(tmp_path, capsys, monkeypatch):
    path = tmp_path / "game.ini"
    path.write_text("[A]\nk = v\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO(f'"{path}"\n'))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Enter ini file location.")
    assert "\tKey Name: k Key Value: v" in out


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.ini")]) == 1
    assert "Reading ini file failed." in capsys.readouterr().out


def test_broken_file(tmp_path, capsys):
    path = tmp_path / "broken.ini"
    path.write_text("[A]\n[B]\nk = v\n", encoding="utf-8")
    assert main([str(path), "--encoding", "utf-8"]) == 1
    assert "Reading ini file failed." in capsys.readouterr().out


def test_undecodable_file(tmp_path, capsys, monkeypatch):
    path = tmp_path / "garbage.ini"
    path.write_bytes(b"[A]\nk=\xff\xff\xff\n")
    monkeypatch.setattr(
        "inidoc.ini.parser.chardet.detect",
        lambda raw: {"encoding": "ascii", "confidence": 1.0})
    assert main([str(path), "--encoding", "utf-8"]) == 1
    assert "Reading ini file failed." in capsys.readouterr().out
