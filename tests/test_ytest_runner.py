import pytest

from ygtools.ytest.runner import CommandResult, expand_command, main, run_commands


def test_expand_command_substitutes_paths():
    assert expand_command("run %s %c", "a.yl", "b.c") == "run a.yl b.c"


def test_expand_command_trims_and_unescapes_newline():
    assert expand_command("  go %s\\n", "x.yl", "y.c") == "go x.yl"


def test_expand_command_unescapes_quotes():
    assert expand_command('echo \\"hi\\"', "a", "b") == 'echo "hi"'


def test_expand_command_unicode_escape():
    assert expand_command("x\\u{41}", "a", "b") == "xA"


def test_expand_command_invalid_escape():
    with pytest.raises(ValueError):
        expand_command("bad \\q", "a", "b")


def test_run_commands_strips_whitespace():
    results = list(run_commands(["echo a b\n"], "a", "b"))
    assert len(results) == 1
    assert results[0].stdout == "ab"
    assert results[0].success


def test_run_commands_exit_code():
    (result,) = run_commands(["exit 3\n"], "a", "b")
    assert result.returncode == 3
    assert result.exit_code == 3
    assert not result.success


def test_command_result_success_flag():
    assert CommandResult("", "", 0).success is True
    assert CommandResult("", "", 1).success is False


def _write_case(tmp_path, text):
    case = tmp_path / "case.yl"
    case.write_text(text)
    return str(case)


def test_main_passes_on_matching_output(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    case = _write_case(tmp_path, "# RUN:\necho hi\n# STDOUT:\nhi\n")
    assert main([f"-t={case}"]) == 0


def test_main_writes_and_removes_input(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    case = _write_case(tmp_path, "# IN:\nabc\n# RUN:\ncat %s\n# STDOUT:\nabc\n")
    assert main([f"-t={case}"]) == 0
    assert not (tmp_path / "tmp.yl").exists()


def test_main_mismatch_exits(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    case = _write_case(tmp_path, "# RUN:\necho hi\n# STDOUT:\nbye\n")
    with pytest.raises(SystemExit) as exc:
        main([f"-t={case}"])
    assert exc.value.code == -1


def test_main_no_exit_continues_on_mismatch(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    case = _write_case(tmp_path, "# RUN:\necho hi\n# STDOUT:\nbye\n")
    assert main([f"-t={case}", "-no-exit"]) == 0


def test_main_expected_exit_code(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    case = _write_case(tmp_path, "# RUN:\nexit 3\n# EXIT_CODE=3\n")
    assert main([f"-t={case}"]) == 0
    assert "matched" in capsys.readouterr().out


def test_main_failing_command_without_expectation(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    case = _write_case(tmp_path, "# RUN:\nexit 2\n")
    with pytest.raises(SystemExit) as exc:
        main([f"-t={case}"])
    assert exc.value.code == -1


def test_main_expect_fail_but_succeeds(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    case = _write_case(tmp_path, "# EXPECT_FAIL\n# RUN:\necho hi\n")
    with pytest.raises(SystemExit) as exc:
        main([f"-t={case}"])
    assert exc.value.code == -1


def test_main_expect_fail_and_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    case = _write_case(tmp_path, "# EXPECT_FAIL\n# RUN:\nexit 1\n")
    assert main([f"-t={case}"]) == 0


def test_main_missing_test_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as exc:
        main([f"-t={tmp_path / 'missing.yl'}"])
    assert exc.value.code == -1