from ygtools.color import red
from ygtools.ycc.error import ErrorLoc, YccError

CODE = "int main() {\n    return 1\n}"


def test_build_includes_code_line_and_marker():
    err = YccError(ErrorLoc(line=1, col=4, length=6), "expected semicolon", "expected `;`")
    text = str(err.build(CODE, "main.c"))
    assert "    return 1" in text
    assert red("^" * 6) in text
    assert "expected semicolon" in text
    assert "expected `;`" in text
    assert "main.c:1:4:" in text


def test_build_without_matching_line():
    err = YccError(ErrorLoc(line=10, col=0, length=1), "unexpected token", "here")
    built = err.build(CODE, "main.c")
    assert len(built.fmt_lines) == 1
    assert red("^") in built.fmt_lines[0]


def test_build_with_line_has_two_lines():
    err = YccError(ErrorLoc(line=0, col=0, length=3), "bad", "here")
    built = err.build(CODE, "main.c")
    assert len(built.fmt_lines) == 2
    assert built.fmt_lines[0].endswith("int main() {")


def test_print_goes_to_stderr(capsys):
    err = YccError(ErrorLoc(line=0, col=1, length=2), "expected ident", "expected ident")
    err.print(CODE, "file.c")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "expected ident" in captured.err
    assert "file.c:0:1:" in captured.err