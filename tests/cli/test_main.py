"""Unit tests for the CLI main module."""

import json
from unittest.mock import MagicMock, patch

import pytest

from project2md.cli.main import main


def run_main(*argv):
    with patch("sys.argv", ["project2md", *argv]):
        main()


def test_writes_markdown_and_json(sample_project, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)

    run_main(str(sample_project))

    markdown = (tmp_path / "project-structure.md").read_text(encoding="utf-8")
    record = json.loads((tmp_path / "project-structure.json").read_text(encoding="utf-8"))
    assert markdown.startswith("# Project structure for `sample`\n")
    assert "- **src/** — `100 B` — _modified: " in markdown
    assert [item["path"] for item in record["files"]] == ["src", "src/main.txt", "README.md"]

    err = capsys.readouterr().err
    assert "Wrote markdown to: project-structure.md" in err
    assert "Wrote JSON to: project-structure.json" in err
    assert "Entries written: 3" in err


def test_output_option_and_no_json(sample_project, tmp_path):
    output = tmp_path / "out" / "structure.md"

    run_main(str(sample_project), "-o", str(output), "--no-json")

    assert output.is_file()
    assert not (tmp_path / "out" / "structure.json").exists()


def test_stdout_output(sample_project, capsys):
    run_main(str(sample_project), "-o", "-")

    captured = capsys.readouterr()
    assert captured.out.startswith("# Project structure for `sample`\n")
    assert "Wrote markdown to" not in captured.err
    assert "Entries written: 3" in captured.err


def test_depth_and_excludes(sample_project, capsys):
    (sample_project / "fixtures").mkdir()
    run_main(str(sample_project), "-o", "-", "-d", "0", "-e", "fixtures")

    out = capsys.readouterr().out
    assert "- **src/** — `?` — _modified: " in out
    assert "main.txt" not in out
    assert "fixtures" not in out


def test_invalid_depth_means_unbounded(sample_project, capsys):
    run_main(str(sample_project), "-o", "-", "-d", "-3")

    assert "main.txt" in capsys.readouterr().out


def test_ignore_patterns(sample_project, capsys):
    run_main(str(sample_project), "-o", "-", "-i", "*.md")

    out = capsys.readouterr().out
    assert "README.md" not in out.split("## Project Tree", 1)[1]


def test_config_file_and_overrides(sample_project, tmp_path, capsys):
    config = tmp_path / "settings.yaml"
    config.write_text("project_type: From Config\nexclude_names: [src]\n", encoding="utf-8")

    run_main(str(sample_project), "-o", "-", "-c", str(config), "--framework", "surely-not-installed-xyz")

    out = capsys.readouterr().out
    assert "> Project Type: From Config\n" in out
    assert "- surely-not-installed-xyz: **Unknown**\n" in out
    assert "src" not in out.split("## Project Tree", 1)[1]


def test_auto_discovered_config(sample_project, capsys):
    (sample_project / "project2md.yaml").write_text("project_type: Discovered\n", encoding="utf-8")

    run_main(str(sample_project), "-o", "-", "--project-type", "From CLI")

    assert "> Project Type: From CLI\n" in capsys.readouterr().out


def test_no_packages(sample_project, capsys):
    (sample_project / "poetry.lock").write_text('[[package]]\nname = "django"\nversion = "5.0.3"\n')

    run_main(str(sample_project), "-o", "-")
    assert "## Packages" in capsys.readouterr().out

    run_main(str(sample_project), "-o", "-", "--no-packages")
    assert "## Packages" not in capsys.readouterr().out


def test_invalid_root(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        run_main(str(tmp_path / "missing"))

    assert exc_info.value.code == 1
    assert "Error: Path not found or not a directory" in capsys.readouterr().err


def test_unusable_config_file(sample_project, tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        run_main(str(sample_project), "-c", str(tmp_path / "missing.yaml"))

    assert exc_info.value.code == 1
    assert "Error: Failed to load" in capsys.readouterr().err


def test_unwritable_output(sample_project, tmp_path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("file")

    with pytest.raises(SystemExit) as exc_info:
        run_main(str(sample_project), "-o", str(blocker / "structure.md"))

    assert exc_info.value.code == 1
    assert capsys.readouterr().err.startswith("Error: ")


def test_keyboard_interrupt(sample_project):
    with patch("project2md.cli.main.run", side_effect=KeyboardInterrupt), pytest.raises(SystemExit) as exc_info:
        run_main(str(sample_project))

    assert exc_info.value.code == 130


def test_broken_pipe(sample_project):
    with (
        patch("project2md.cli.main.run", side_effect=BrokenPipeError),
        patch("project2md.cli.main.os") as mock_os,
        patch("sys.stdout", MagicMock()),
        pytest.raises(SystemExit) as exc_info,
    ):
        run_main(str(sample_project), "-o", "-")

    assert exc_info.value.code == 141
    mock_os.dup2.assert_called_once()


def test_syntax_error():
    with pytest.raises(SystemExit) as exc_info:
        run_main("--depth")

    assert exc_info.value.code == 2


def test_repeated_runs_do_not_list_previous_reports(sample_project, monkeypatch, capsys):
    (sample_project / "pyproject.toml").write_bytes(b"z" * 10)
    monkeypatch.chdir(sample_project)

    run_main()
    first = json.loads((sample_project / "project-structure.json").read_text(encoding="utf-8"))
    first_err = capsys.readouterr().err
    run_main()
    second = json.loads((sample_project / "project-structure.json").read_text(encoding="utf-8"))
    second_err = capsys.readouterr().err

    assert [item["path"] for item in first["files"]] == ["src", "src/main.txt", "pyproject.toml", "README.md"]
    assert second["files"] == first["files"]
    assert "Entries written: 4" in first_err
    assert "Entries written: 4" in second_err
    markdown = (sample_project / "project-structure.md").read_text(encoding="utf-8")
    assert "project-structure" not in markdown


def test_custom_output_inside_project_is_not_listed(sample_project, capsys):
    output = sample_project / "docs" / "layout.md"

    run_main(str(sample_project), "-o", str(output))
    run_main(str(sample_project), "-o", str(output))

    record = json.loads((sample_project / "docs" / "layout.json").read_text(encoding="utf-8"))
    assert [item["path"] for item in record["files"]] == ["docs", "src", "src/main.txt", "README.md"]
    assert record["files"][0]["size"] == 0
