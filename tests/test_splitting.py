"""Tests for the split pipeline and command line."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from docx2sections.cli import main
from docx2sections.exceptions import InputValidationError, NameConflictError
from docx2sections.splitting import SplitOptions, load_source_html, split_document, split_html


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers the CLI attaches so captured streams are not reused."""
    yield
    package_logger = logging.getLogger("docx2sections")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def html_file(tmp_path: Path, scenario_a_html: str) -> Path:
    path = tmp_path / "converted.html"
    path.write_text(scenario_a_html, encoding="utf-8")
    return path


class TestSplitHtml:
    """Tests for split_html function."""

    def test_fragment(self, scenario_a_html: str) -> None:
        """A bare fragment is segmented from the implied body."""
        sections = split_html(scenario_a_html)

        assert [s.name for s in sections] == ["orphan", "Intro", "Details"]

    def test_full_document(self) -> None:
        """Only body children are segmented; head content is ignored."""
        html = "<html><head><title>T</title></head><body><h1>A</h1><p>a</p></body></html>"

        sections = split_html(html)

        assert [s.name for s in sections] == ["A"]
        assert len(sections[0]) == 2

    def test_empty_document(self) -> None:
        """An empty document has no sections."""
        assert split_html("") == []


class TestLoadSourceHtml:
    """Tests for load_source_html function."""

    def test_reads_html(self, html_file: Path) -> None:
        """HTML files are read directly."""
        assert "Preamble" in load_source_html(html_file)

    def test_converts_docx(self, tmp_path: Path) -> None:
        """Word documents go through the converter."""
        docx = tmp_path / "doc.docx"
        with patch("docx2sections.splitting.convert_docx_to_html", return_value="<h1>X</h1>") as convert:
            assert load_source_html(docx) == "<h1>X</h1>"
        convert.assert_called_once_with(docx)

    def test_forced_html(self, tmp_path: Path) -> None:
        """source_is_html reads any extension as HTML."""
        path = tmp_path / "export.txt"
        path.write_text("<h1>T</h1>", encoding="utf-8")

        assert load_source_html(path, source_is_html=True) == "<h1>T</h1>"

    def test_unsupported_extension(self, tmp_path: Path) -> None:
        """Unknown extensions are rejected."""
        with pytest.raises(InputValidationError, match="Unsupported source type"):
            load_source_html(tmp_path / "notes.pdf")

    def test_non_utf8_html(self, tmp_path: Path) -> None:
        """Undecodable HTML is reported as an input error."""
        path = tmp_path / "bad.html"
        path.write_bytes(b"<h1>A</h1><p>\xff\xfe</p>")

        with pytest.raises(InputValidationError, match="Cannot read"):
            load_source_html(path)

    def test_unreadable_html(self, tmp_path: Path) -> None:
        """OS errors while reading become input errors."""
        path = tmp_path / "locked.html"
        path.write_text("<h1>A</h1>", encoding="utf-8")

        with patch.object(Path, "read_text", side_effect=PermissionError("denied")):
            with pytest.raises(InputValidationError, match="denied"):
                load_source_html(path)

    def test_missing_html(self, tmp_path: Path) -> None:
        """A missing HTML file is an input error."""
        with pytest.raises(InputValidationError, match="Document not found"):
            load_source_html(tmp_path / "missing.html")


class TestSplitDocument:
    """Tests for split_document function."""

    def test_end_to_end(self, tmp_path: Path, html_file: Path) -> None:
        """HTML input is split into one file per section."""
        dest = tmp_path / "out"

        result = split_document(html_file, SplitOptions(dest_dir=dest))

        assert result.dest_dir == dest
        assert result.source == html_file
        assert [s.name for s in result.sections] == ["orphan", "Intro", "Details"]
        assert all(path.is_file() for path in result.paths)

    def test_docx_source(self, tmp_path: Path) -> None:
        """Word sources are converted before splitting."""
        docx = tmp_path / "doc.docx"
        dest = tmp_path / "out"
        with patch(
            "docx2sections.splitting.convert_docx_to_html",
            return_value="<h1>One</h1><p>1</p><h1>Two</h1>",
        ):
            result = split_document(docx, SplitOptions(dest_dir=dest))

        assert sorted(p.name for p in dest.iterdir()) == ["One.html", "Two.html"]
        assert len(result.sections) == 2

    def test_paths_are_distinct_after_overwrite(self, tmp_path: Path) -> None:
        """The report lists each surviving path once."""
        source = tmp_path / "dup.html"
        source.write_text("<h1>Notes</h1><h1>Notes</h1>", encoding="utf-8")

        result = split_document(source, SplitOptions(dest_dir=tmp_path / "out"))

        assert len(result.sections) == 2
        assert result.paths == [tmp_path / "out" / "Notes.html"]

    def test_conflict_error_leaves_no_output(self, tmp_path: Path) -> None:
        """A rejected run never creates the destination."""
        source = tmp_path / "dup.html"
        source.write_text("<h1>Notes</h1><h1>Notes</h1>", encoding="utf-8")
        dest = tmp_path / "out"

        with pytest.raises(NameConflictError):
            split_document(source, SplitOptions(dest_dir=dest, on_conflict="error"))
        assert not dest.exists()


class TestCli:
    """Tests for the command line entry point."""

    def test_success(self, tmp_path: Path, html_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Written paths are printed and the exit code is 0."""
        dest = tmp_path / "out"

        code = main(["--file", str(html_file), "--dest", str(dest), "--log-level", "warning"])

        assert code == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [str(dest / name) for name in ("orphan.html", "Intro.html", "Details.html")]

    def test_failure_exit_code(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Errors are printed to stderr with a non-zero exit code."""
        code = main(["--file", str(tmp_path / "missing.docx"), "--dest", str(tmp_path / "out")])

        assert code == 1
        assert "error: Document not found" in capsys.readouterr().err
        assert not (tmp_path / "out").exists()

    def test_undecodable_source_exit_code(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A non-UTF-8 HTML source fails cleanly with exit code 1."""
        source = tmp_path / "bad.html"
        source.write_bytes(b"<h1>A</h1><p>\xff\xfe</p>")

        code = main(["--file", str(source), "--dest", str(tmp_path / "out")])

        assert code == 1
        assert "error: Cannot read" in capsys.readouterr().err
        assert not (tmp_path / "out").exists()

    def test_unknown_log_level(self, tmp_path: Path, html_file: Path) -> None:
        """An unknown log level is a usage error."""
        with pytest.raises(SystemExit) as excinfo:
            main(["--file", str(html_file), "--dest", str(tmp_path / "out"), "--log-level", "verbose"])
        assert excinfo.value.code == 2

    def test_file_is_required(self) -> None:
        """The CLI never prompts; a missing --file is a usage error."""
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 2

    def test_suffix_policy(self, tmp_path: Path) -> None:
        """--on-conflict is passed through to the writer."""
        source = tmp_path / "dup.html"
        source.write_text("<h1>Notes</h1><h1>Notes</h1>", encoding="utf-8")
        dest = tmp_path / "out"

        code = main(["--file", str(source), "--dest", str(dest), "--on-conflict", "suffix"])

        assert code == 0
        assert sorted(p.name for p in dest.iterdir()) == ["Notes-2.html", "Notes.html"]
