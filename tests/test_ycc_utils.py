from pathlib import Path

import pytest

from ygtools.ycc.utils import default_out_path, out_file, read_in_file


def test_default_out_path_drops_directory_and_extension():
    assert default_out_path("dir/sub/main.c") == "main.o"


def test_default_out_path_joins_middle_parts():
    assert default_out_path("a.b.c") == "ab.o"


def test_default_out_path_without_extension():
    assert default_out_path("noext") == ".o"


def test_read_in_file_round_trip(tmp_path):
    src = tmp_path / "main.c"
    src.write_text("int main() { return 0; }")
    assert read_in_file(str(src)) == "int main() { return 0; }"


def test_read_in_file_missing_exits(tmp_path, capsys):
    missing = str(tmp_path / "missing.c")
    with pytest.raises(SystemExit) as exc:
        read_in_file(missing)
    assert exc.value.code == -1
    assert missing in capsys.readouterr().out


def test_out_file_explicit_path_truncates(tmp_path):
    target = tmp_path / "out.o"
    target.write_bytes(b"old contents")
    with out_file("main.c", str(target)) as handle:
        handle.write(b"new")
    assert target.read_bytes() == b"new"


def test_out_file_default_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with out_file("src/prog.c", None) as handle:
        assert Path(handle.name).name == "prog.o"
        handle.write(b"x")
    assert (tmp_path / "prog.o").read_bytes() == b"x"


def test_out_file_bad_directory_exits(tmp_path):
    with pytest.raises(SystemExit) as exc:
        out_file("main.c", str(tmp_path / "no" / "such" / "dir.o"))
    assert exc.value.code == -1