from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from mdxsmith.core.exceptions import ConfigurationError
from mdxsmith.core.extnames import MD_EXTENSIONS, MDX_EXTENSIONS
from mdxsmith.ui.cli import app


def _write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_compile_writes_to_stdout(tmp_path: Path) -> None:
    source = _write(tmp_path, "intro.mdx", "# Intro\n")

    result = CliRunner().invoke(app, ["compile", str(source)])

    assert result.exit_code == 0, result.output
    assert "<h1>Intro</h1>" in result.stdout


def test_compile_writes_to_file(tmp_path: Path) -> None:
    source = _write(tmp_path, "intro.md", "Some *text*\n")
    target = tmp_path / "build" / "intro.html"

    result = CliRunner().invoke(app, ["compile", str(source), "--output", str(target)])

    assert result.exit_code == 0, result.output
    assert target.read_text(encoding="utf-8") == "<p>Some <em>text</em></p>"


def test_compile_rejects_unknown_extension(tmp_path: Path) -> None:
    source = _write(tmp_path, "notes.txt", "# Notes\n")

    result = CliRunner().invoke(app, ["compile", str(source)])

    assert result.exit_code == 1
    assert "Unsupported document extension" in result.output


def test_compile_with_forced_format(tmp_path: Path) -> None:
    source = _write(tmp_path, "notes.txt", "# Notes\n")

    result = CliRunner().invoke(app, ["compile", str(source), "--format", "md"])

    assert result.exit_code == 0, result.output
    assert "<h1>Notes</h1>" in result.stdout


def test_compile_with_markdown_extension(tmp_path: Path) -> None:
    source = _write(tmp_path, "doc.md", "# Title\n")

    result = CliRunner().invoke(app, ["compile", str(source), "-x", "toc"])

    assert result.exit_code == 0, result.output
    assert 'id="title"' in result.stdout


def test_compile_debug_reraises(tmp_path: Path) -> None:
    source = _write(tmp_path, "notes.txt", "# Notes\n")

    result = CliRunner().invoke(app, ["--debug", "compile", str(source)])

    assert result.exit_code != 0
    assert isinstance(result.exception, ConfigurationError)


def test_extensions_lists_both_formats() -> None:
    result = CliRunner().invoke(app, ["extensions"])

    assert result.exit_code == 0, result.output
    assert result.stdout.split() == [*MD_EXTENSIONS, *MDX_EXTENSIONS]


def test_extensions_for_single_format() -> None:
    result = CliRunner().invoke(app, ["extensions", "--format", "mdx"])

    assert result.exit_code == 0, result.output
    assert result.stdout.split() == list(MDX_EXTENSIONS)


def test_compile_warns_about_leading_block_that_is_not_front_matter(tmp_path: Path) -> None:
    source = _write(tmp_path, "a.md", "---\nIntro paragraph\n---\n# Title\n")

    result = CliRunner().invoke(app, ["compile", str(source)])

    assert result.exit_code == 0, result.output
    assert "Intro paragraph" in result.stdout
    assert "<h1>Title</h1>" in result.stdout
    output = " ".join(result.output.split())
    assert "warning: a.md: Leading '---' block is not YAML front matter" in output


def test_compile_verbose_error_lists_cause_chain(tmp_path: Path) -> None:
    source = _write(tmp_path, "doc.md", "# Title\n")

    result = CliRunner().invoke(app, ["-vv", "compile", str(source), "-x", "not_a_real_ext_xyz"])

    assert result.exit_code == 1
    assert "Failed to initialize Markdown processor" in result.output
    assert "type: PipelineConstructionError" in result.output
    assert "caused by:" in result.output
