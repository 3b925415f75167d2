"""Tests for CLI parser and main behavior."""

from __future__ import annotations

import zipfile
from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from skillpack.cli.main import build_parser, main
from skillpack.exceptions import ArchiveError


def test_build_parser_package_output_dir_optional(tmp_path: Path) -> None:
    parser = build_parser()

    args = parser.parse_args(["package", str(tmp_path)])

    assert args.command == "package"
    assert args.skill_path == tmp_path
    assert args.output_dir is None
    assert args.no_validate is False


def test_build_parser_package_accepts_output_dir(tmp_path: Path) -> None:
    parser = build_parser()

    args = parser.parse_args(["package", str(tmp_path), str(tmp_path / "dist")])

    assert args.output_dir == tmp_path / "dist"


def test_build_parser_validate_requires_path() -> None:
    parser = build_parser()

    with pytest.raises(SystemExit):
        parser.parse_args(["validate"])


@pytest.mark.parametrize(
    ("short_args", "long_args"),
    [
        pytest.param(["package", ".", "-c", "cfg.yaml"], ["package", ".", "--config", "cfg.yaml"], id="config"),
        pytest.param(["package", ".", "-n"], ["package", ".", "--no-validate"], id="no-validate"),
        pytest.param(["package", ".", "-q"], ["package", ".", "--quiet"], id="quiet"),
        pytest.param(["validate", ".", "-v"], ["validate", ".", "--verbose"], id="verbose"),
    ],
)
def test_shorthand_equivalent_to_long_form(short_args: list[str], long_args: list[str]) -> None:
    parser = build_parser()

    assert vars(parser.parse_args(short_args)) == vars(parser.parse_args(long_args))


def test_main_help_shows_ascii_banner(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["-h"])

    captured = capsys.readouterr()
    assert exc_info.value.code == 0
    assert ">_ SKILLPACK" in captured.out


def test_validate_command_success(valid_skill: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["validate", str(valid_skill)])

    assert code == 0
    assert capsys.readouterr().out.strip() == "Skill is valid!"


def test_validate_command_reports_hyphen_case(
    make_skill: Callable[..., Path], capsys: pytest.CaptureFixture[str]
) -> None:
    skill_dir = make_skill(skill_md="---\nname: My_Skill\ndescription: x\n---\n")

    code = main(["validate", str(skill_dir)])

    assert code == 1
    assert "hyphen-case" in capsys.readouterr().out


def test_validate_command_missing_skill_md(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["validate", str(tmp_path)])

    assert code == 1
    assert "SKILL.md not found" in capsys.readouterr().out


def test_package_command_writes_archive_to_cwd(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    skill_dir = tmp_path / "skills" / "public" / "demo"
    skill_dir.mkdir(parents=True)
    (skill_dir / "SKILL.md").write_text("---\nname: demo\ndescription: Demo skill\n---\n", encoding="utf-8")
    cwd = tmp_path / "work"
    cwd.mkdir()
    monkeypatch.chdir(cwd)

    code = main(["package", str(skill_dir)])

    out = capsys.readouterr().out
    assert code == 0
    assert (Path.cwd() / "demo.zip").is_file()
    assert "Added: demo/SKILL.md" in out
    assert "Successfully packaged skill to:" in out


def test_package_command_quiet_hides_entries(
    valid_skill: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    code = main(["package", str(valid_skill), str(tmp_path / "dist"), "--quiet"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Added:" not in out
    assert "Output directory:" in out


def test_package_command_validation_failure(
    make_skill: Callable[..., Path], tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    skill_dir = make_skill(skill_md="---\nname: my-skill\ndescription: Does <x> things\n---\n")

    code = main(["package", str(skill_dir), str(tmp_path / "dist")])

    captured = capsys.readouterr()
    assert code == 1
    assert "Validation failed: Description cannot contain angle brackets" in captured.err
    assert not (tmp_path / "dist" / "my-skill.zip").exists()


def test_package_command_no_validate_packages_invalid_skill(
    make_skill: Callable[..., Path], tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    skill_dir = make_skill(skill_md="---\nname: Bad_Name\ndescription: x\n---\n")

    code = main(["package", str(skill_dir), str(tmp_path / "dist"), "--no-validate"])

    assert code == 0
    assert "Validating skill..." not in capsys.readouterr().out
    assert zipfile.is_zipfile(tmp_path / "dist" / "my-skill.zip")


def test_package_command_config_disables_validation(
    make_skill: Callable[..., Path], tmp_path: Path
) -> None:
    skill_dir = make_skill(skill_md="---\nname: Bad_Name\ndescription: x\n---\n")
    config_path = tmp_path / "skillpack.yaml"
    config_path.write_text("validate: false\narchive_suffix: .skill\n", encoding="utf-8")

    code = main(["package", str(skill_dir), str(tmp_path / "dist"), "--config", str(config_path)])

    assert code == 0
    assert (tmp_path / "dist" / "my-skill.skill").is_file()


@pytest.mark.parametrize(
    "setup",
    ["missing", "file", "no-skill-md"],
)
def test_package_command_input_errors(setup: str, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    target = tmp_path / "target"
    if setup == "file":
        target.write_text("x", encoding="utf-8")
    elif setup == "no-skill-md":
        target.mkdir()

    code = main(["package", str(target), str(tmp_path / "dist")])

    assert code == 1
    assert capsys.readouterr().err.startswith("Error:")
    assert not (tmp_path / "dist" / "target.zip").exists()


def test_package_command_config_error_code(
    valid_skill: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    code = main(["package", str(valid_skill), "--config", str(tmp_path / "missing.yaml")])

    assert code == 2
    assert "Configuration error" in capsys.readouterr().err


@patch("skillpack.cli.handlers.package_skill", side_effect=ArchiveError("Error creating zip file: disk full"))
def test_package_command_archive_error(
    mock_package: MagicMock, valid_skill: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    code = main(["package", str(valid_skill)])

    assert code == 1
    assert "disk full" in capsys.readouterr().err
    mock_package.assert_called_once()


def test_package_command_unreadable_skill_folder(
    valid_skill: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    original_exists = Path.exists

    def _exists(self: Path, *args: object, **kwargs: object) -> bool:
        if self.name == "SKILL.md":
            raise PermissionError(13, "Permission denied", str(self))
        return original_exists(self, *args, **kwargs)

    monkeypatch.setattr(Path, "exists", _exists)

    code = main(["package", str(valid_skill), str(tmp_path / "dist")])

    assert code == 1
    assert capsys.readouterr().err.startswith("Error: Could not access skill folder")
