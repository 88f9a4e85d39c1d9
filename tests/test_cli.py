"""Tests for the command-line interface.

WHY: The CLI is how CI jobs and terminal users run the checker. Its exit
status gates builds, and its stdout may be piped into other tools, so
status chatter must stay on stderr.

HOW: main() is called in-process with explicit argv and returns the exit
status; capsys captures stdout/stderr. Files come from the conftest
fixtures (sample_file has three errors, clean_file has none).

RULES:
- Exit status: 0 clean, 1 diagnostics, 2 I/O error
- Rendered output on stdout (or --output); status lines on stderr
"""

import io
import json

import pytest

from legv8_checker import config
from legv8_checker.cli import (
    EXIT_DIAGNOSTICS,
    EXIT_ERROR,
    EXIT_OK,
    build_parser,
    check_paths,
    main,
)


class TestExitStatus:

    def test_clean_file(self, clean_file, capsys):
        assert main([str(clean_file)]) == EXIT_OK
        captured = capsys.readouterr()
        assert captured.out == "No problems found in 1 file.\n"
        assert "Checked 1 file(s), 0 diagnostic(s)" in captured.err

    def test_file_with_errors(self, sample_file, capsys):
        assert main([str(sample_file), "--source", "compiler"]) == EXIT_DIAGNOSTICS
        out = capsys.readouterr().out
        assert "sample.s:4:9: error: Expected a comma. [compiler]" in out

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.s")]) == EXIT_ERROR
        assert "Error: File not found" in capsys.readouterr().err

    def test_unwritable_output(self, clean_file, tmp_path, capsys):
        target = tmp_path / "missing-dir" / "out.txt"
        assert main([str(clean_file), "--output", str(target)]) == EXIT_ERROR
        assert "Error:" in capsys.readouterr().err

    def test_bad_default_format_from_environment(self, clean_file, monkeypatch, capsys):
        monkeypatch.setattr(config, "DEFAULT_FORMAT", "xml")
        assert main([str(clean_file)]) == EXIT_ERROR
        err = capsys.readouterr().err
        assert "Error: Unknown format 'xml'" in err
        assert "github, lsp_json, text" in err


class TestInputs:

    def test_directory_is_expanded(self, sample_file, clean_file, tmp_path, capsys):
        (tmp_path / "notes.txt").write_text("ZZZ\n", encoding="utf-8")
        reports = check_paths([str(tmp_path)])
        names = sorted(r.name.rsplit("/", 1)[-1] for r in reports)
        assert names == ["clean.s", "sample.s"]

    def test_empty_directory_reports_status(self, tmp_path, capsys):
        (tmp_path / "empty").mkdir()
        assert main([str(tmp_path / "empty")]) == EXIT_OK
        assert "No assembly files under" in capsys.readouterr().err

    def test_directory_matches_uppercase_suffix(self, tmp_path):
        (tmp_path / "boot.S").write_text("HALT\n", encoding="utf-8")
        reports = check_paths([str(tmp_path)])
        assert [r.name.rsplit("/", 1)[-1] for r in reports] == ["boot.S"]

    def test_explicit_file_any_extension(self, tmp_path):
        path = tmp_path / "prog.txt"
        path.write_text("ZZZ\n", encoding="utf-8")
        reports = check_paths([str(path)])
        assert len(reports) == 1
        assert len(reports[0].diagnostics) == 1

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("HALT\nZZZ\n"))
        assert main(["-", "--format", "github"]) == EXIT_DIAGNOSTICS
        out = capsys.readouterr().out
        assert out.startswith("::error file=untitled%3Astdin,line=2,col=1,")


class TestOutputOptions:

    def test_lsp_json_to_stdout(self, sample_file, capsys):
        assert main([str(sample_file), "--format", "lsp_json"]) == EXIT_DIAGNOSTICS
        data = json.loads(capsys.readouterr().out)
        assert len(data) == 1
        assert [d["range"]["start"]["line"] for d in data[0]["diagnostics"]] == [3, 5, 7]

    def test_exact_line_end_flag(self, sample_file, capsys):
        main([str(sample_file), "--format", "lsp_json", "--exact-line-end"])
        data = json.loads(capsys.readouterr().out)
        assert data[0]["diagnostics"][1]["range"]["end"]["character"] == 22

    def test_output_file(self, sample_file, tmp_path, capsys):
        target = tmp_path / "report.txt"
        assert main([str(sample_file), "--output", str(target)]) == EXIT_DIAGNOSTICS
        assert "Expected a comma." in target.read_text(encoding="utf-8")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Saved:" in captured.err

    def test_no_source_lines(self, sample_file, capsys):
        main([str(sample_file), "--no-source-lines"])
        assert "    ADDI X0 X1, #12" not in capsys.readouterr().out


class TestParser:

    def test_requires_a_path(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_rejects_unknown_format(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["a.s", "--format", "xml"])

    def test_defaults(self):
        args = build_parser().parse_args(["a.s"])
        assert args.exact_line_end is None
        assert args.source is None
        assert args.output is None
