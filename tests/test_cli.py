"""Smoke tests for the command-line interface."""

import json
from pathlib import Path

from supportconfig import cli

FIXTURES = Path(__file__).resolve().parent / "fixtures" / "reports"


def empty_config(tmp_path: Path) -> Path:
    path = tmp_path / "splitter.yml"
    path.write_text("version: 1\n", encoding="utf-8")
    return path


def test_parser_defaults() -> None:
    parser = cli.build_parser()
    args = parser.parse_args(["report.txt"])

    assert args.report == Path("report.txt")
    assert args.output_dir == Path("supportconfig")
    assert args.config == Path("config/splitter.yml")
    assert args.flatten is None
    assert args.unique is None
    assert args.exclude == []
    assert args.list_sections is False


def test_main_splits_report(tmp_path) -> None:
    out = tmp_path / "out"
    code = cli.main(
        [
            str(FIXTURES / "basic-environment.txt"),
            "--output-dir",
            str(out),
            "--config",
            str(empty_config(tmp_path)),
        ]
    )

    assert code == 0
    assert (out / "etc" / "os-release").exists()
    assert (out / "etc" / "SuSE-release").exists()


def test_main_applies_switches(tmp_path) -> None:
    out = tmp_path / "out"
    code = cli.main(
        [
            str(FIXTURES / "basic-environment.txt"),
            "--output-dir",
            str(out),
            "--config",
            str(empty_config(tmp_path)),
            "--flatten",
            "--exclude",
            "/etc/SuSE-*",
        ]
    )

    assert code == 0
    assert sorted(path.name for path in out.iterdir()) == ["etc_os-release"]


def test_main_reports_errors(tmp_path, caplog) -> None:
    report = tmp_path / "broken.txt"
    report.write_text("#==[ Log File ]====#\nno prefix\n", encoding="utf-8")

    code = cli.main([str(report), "--output-dir", str(tmp_path / "out")])

    assert code == 1
    assert "Failed to split" in caplog.text


def test_main_missing_report(tmp_path) -> None:
    assert cli.main([str(tmp_path / "nope.txt"), "--output-dir", str(tmp_path)]) == 1


def test_list_sections_json(tmp_path, capsys) -> None:
    code = cli.main([str(FIXTURES / "messages.txt"), "--list-sections", "--format", "json"])

    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert [entry["path"] for entry in payload] == ["/var/log/nodes/logname.log", "/.vimrc"]
    assert not (tmp_path / "out").exists()


def test_list_sections_text(capsys) -> None:
    cli.main([str(FIXTURES / "basic-environment.txt"), "--list-sections"])

    out = capsys.readouterr().out
    assert "[Configuration File] /etc/os-release (9 lines)" in out
    assert "[System] Virtualization (4 lines)" in out


def test_explicit_missing_config_is_an_error(tmp_path, caplog) -> None:
    out = tmp_path / "out"
    code = cli.main(
        [
            str(FIXTURES / "basic-environment.txt"),
            "--output-dir",
            str(out),
            "--config",
            str(tmp_path / "typo.yml"),
        ]
    )

    assert code == 1
    assert "typo.yml" in caplog.text
    assert not out.exists()
