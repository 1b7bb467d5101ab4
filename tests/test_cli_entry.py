"""Tests for the preview command line."""

from cli.cli_entry import create_parser, build_options, main
from namely.models_fs import CaseMode


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_reverse_preview(capsys):
    assert main(["reverse", "report.txt", "README"]) == 0
    out = capsys.readouterr().out
    assert "troper.txt" in out
    assert "EMDAER" in out


def test_swap_preview_marks_unchanged(capsys):
    assert main(["swap", "A - B.txt", "A-B-C.txt", "--separator", "-"]) == 0
    out = capsys.readouterr().out
    assert "B - A.txt" in out
    assert "(unchanged)" in out


def test_replace_preview(capsys):
    assert main(["replace", "foo_bar.txt", "--old", "_", "--new", "-"]) == 0
    assert "foo-bar.txt" in capsys.readouterr().out


def test_replace_empty_old_is_error(capsys):
    assert main(["replace", "foo_bar.txt", "--old", ""]) == 1
    assert "Error:" in capsys.readouterr().out


def test_case_preview_warns_about_reserved_name(capsys):
    assert main(["case", "CON.TXT", "--mode", "lower"]) == 0
    out = capsys.readouterr().out
    assert "-> con" in out
    assert "Warnings:" in out


def test_size_command(tmp_path, capsys):
    path = tmp_path / "data.bin"
    path.write_bytes(b"\0" * 2048)
    assert main(["size", str(path)]) == 0
    assert "2.00 KB" in capsys.readouterr().out


def test_size_command_missing_file(tmp_path, capsys):
    assert main(["size", str(tmp_path / "missing.bin")]) == 1
    assert "Error:" in capsys.readouterr().out


def test_build_options_for_swap():
    args = create_parser().parse_args(["swap", "a-b", "-s", "_", "--no-spacing"])
    options = build_options(args)
    assert options.separator == "_"
    assert options.add_spacing is False


def test_build_options_for_case():
    args = create_parser().parse_args(["case", "a", "--mode", "invert"])
    assert build_options(args).case_mode is CaseMode.INVERT_CASE


def test_replace_ignore_case(capsys):
    assert main(["replace", "FOO_foo.txt", "--old", "foo", "--new", "bar", "-i"]) == 0
    assert "bar_bar.txt" in capsys.readouterr().out


def test_build_options_for_replace_is_case_sensitive_by_default():
    args = create_parser().parse_args(["replace", "a", "--old", "x"])
    assert build_options(args).case_sensitive is True
