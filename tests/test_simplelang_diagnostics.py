from ygtools.color import bold, red, yellow
from ygtools.simplelang.diagnostics import report_error, report_warning


def test_report_error(capsys):
    report_error("something broke")
    captured = capsys.readouterr()
    assert captured.err == f"{bold(red('Error'))}: something broke\n"
    assert captured.out == ""


def test_report_warning(capsys):
    report_warning("be careful")
    captured = capsys.readouterr()
    assert captured.err == f"{bold(yellow('Warning'))}: be careful\n"
    assert captured.out == ""