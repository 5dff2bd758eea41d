from __future__ import annotations

import base64
import json
import textwrap
from pathlib import Path

from readme_html.cli import cli


def _write(tmp_path: Path, filename: str, content: str) -> Path:
    path = tmp_path / filename
    path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
    return path


def _write_pyproject(base: Path, body: str) -> Path:
    path = base / "pyproject.toml"
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def _write_payload(tmp_path: Path, filename: str, text: str) -> Path:
    content = base64.b64encode(text.encode("utf-8")).decode("ascii")
    path = tmp_path / filename
    path.write_text(json.dumps({"content": content, "encoding": "base64"}), encoding="utf-8")
    return path


def test_cli_prints_rendered_markup(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(
        tmp_path,
        "doc.md",
        """
        # Introduction
        - [x] done
        """,
    )

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 0
    assert result.output.startswith('<h1 class="text-3xl font-bold mt-8 mb-4">Introduction</h1>')
    assert result.output.endswith("</ul>\n")
    assert target.read_text(encoding="utf-8").startswith("# Introduction")


def test_cli_rejects_non_markdown_files(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "notes.txt", "# Heading\n")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code != 0
    assert "not a supported input file" in result.output


def test_cli_reads_config_from_pyproject(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_pyproject(
        tmp_path,
        """
        [tool.readme-html]
        indent_offset_px = 7
        close_unterminated_fence = false
        """,
    )
    target = _write(
        tmp_path,
        "configured.md",
        """
        # Title
          - nested
        ```
        open
        """,
    )

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 0
    assert "margin-left: 7px;" in result.output
    assert "</pre>" not in result.output


def test_cli_flags_override_config(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_pyproject(
        tmp_path,
        """
        [tool.readme-html]
        indent_offset_px = 7
        close_unterminated_fence = false
        """,
    )
    target = _write(
        tmp_path,
        "override.md",
        """
        # Title
          - nested
        ```
        open
        """,
    )

    result = cli_runner.invoke(
        cli, ["--indent-offset", "15", "--close-fence", str(target)]
    )

    assert result.exit_code == 0
    assert "margin-left: 15px;" in result.output
    assert "open\n</code></pre>" in result.output


def test_cli_keep_open_fence_flag(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "fence.md", "```\nopen\n")

    result = cli_runner.invoke(cli, ["--keep-open-fence", str(target)])

    assert result.exit_code == 0
    assert "</pre>" not in result.output


def test_cli_rejects_invalid_config(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_pyproject(
        tmp_path,
        """
        [tool.readme-html]
        indent_offset_px = -2
        """,
    )
    target = _write(tmp_path, "doc.md", "# Heading\n")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code != 0
    assert "indent_offset_px" in result.output


def test_cli_rejects_nul_characters(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "nul.md"
    target.write_text("# Heading\nbad\x00line\n", encoding="utf-8")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code != 0
    assert "Line 2 contains a NUL character" in result.output


def test_cli_renders_github_payload(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write_payload(tmp_path, "readme.json", "## From GitHub\n")

    result = cli_runner.invoke(cli, ["--github-json", str(target)])

    assert result.exit_code == 0
    assert "From GitHub</h2>" in result.output


def test_cli_github_payload_requires_json_extension(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "doc.md", "# Heading\n")

    result = cli_runner.invoke(cli, ["--github-json", str(target)])

    assert result.exit_code != 0
    assert "not a supported input file" in result.output


def test_cli_bad_payload_fails_without_fallback(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "readme.json"
    target.write_text(json.dumps({"message": "Not Found"}), encoding="utf-8")

    result = cli_runner.invoke(cli, ["--github-json", str(target)])

    assert result.exit_code != 0
    assert "no `content` field" in result.output


def test_cli_bad_payload_prints_fallback(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "readme.json"
    target.write_text(json.dumps({"message": "Not Found"}), encoding="utf-8")

    result = cli_runner.invoke(
        cli, ["--github-json", "--fallback-type", "readme", str(target)]
    )

    assert result.exit_code == 0
    assert "readme not available" in result.output


def test_cli_undecodable_markdown_prints_fallback(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "broken.md"
    target.write_bytes(b"\xff\xfe# Heading\n")

    result = cli_runner.invoke(cli, ["--fallback-type", "note", str(target)])

    assert result.exit_code == 0
    assert "note not available" in result.output


def test_cli_verbose_logs_to_stderr(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("README_HTML_LOG_LEVEL", raising=False)
    target = _write(tmp_path, "doc.md", "# Heading\n")

    result = cli_runner.invoke(cli, ["--verbose", str(target)])

    assert result.exit_code == 0
    assert "Rendering 1 lines" in result.output
