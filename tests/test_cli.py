import json
from pathlib import Path

import pytest

from artifactkit.cli import build_parser, main


def test_list_json(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["list", "--json"]) == 0
    names = json.loads(capsys.readouterr().out)
    assert "gpg" in names
    assert names == sorted(names)


def test_list_plain_prints_versions(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["list"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "jq 1.8.1" in lines


def test_build_writes_plan_and_scripts(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out = tmp_path / "out"

    code = main(["build", "--platform", "x86_64-linux", "--out", str(out)])

    assert code == 0
    assert (out / "plan.json").exists()
    assert (out / "plan.cbor").exists()
    assert len(list((out / "scripts").glob("*.sh"))) == 46
    stdout = capsys.readouterr().out
    assert "Planned 46 artifacts for x86_64-linux." in stdout
    assert "gpg:2.5.16" in stdout


def test_build_only_reports_unsupported_platform(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["build", "--platform", "aarch64-linux", "--only", "json-c"])

    assert code == 1
    assert "E_UNSUPPORTED_PLATFORM" in capsys.readouterr().err


def test_build_frozen_without_lock_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(
        [
            "build",
            "--platform",
            "aarch64-darwin",
            "--only",
            "jq",
            "--frozen",
            "--lock",
            str(tmp_path / "missing.lock"),
        ]
    )

    assert code == 1
    assert "E_LOCKFILE" in capsys.readouterr().err


def test_build_write_lock_then_frozen(tmp_path: Path) -> None:
    lock = tmp_path / "artifactkit.lock"
    base = ["build", "--platform", "aarch64-darwin", "--only", "jq", "ripgrep", "--lock", str(lock)]

    assert main([*base, "--write-lock"]) == 0
    assert json.loads(lock.read_text(encoding="utf-8"))["platform"] == "aarch64-darwin"
    assert main([*base, "--frozen"]) == 0


def test_build_require_frozen_policy(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["build", "--platform", "x86_64-linux", "--only", "jq", "--require-frozen"])
    assert code == 1
    assert "E_POLICY" in capsys.readouterr().err


def test_build_writes_log_even_on_failure(tmp_path: Path) -> None:
    log = tmp_path / "log.jsonl"

    code = main(["build", "--platform", "x86_64-linux", "--only", "libuv", "--log", str(log)])

    assert code == 1
    records = [json.loads(line) for line in log.read_text(encoding="utf-8").splitlines()]
    assert any(record["operation"] == "unsupported_platform" for record in records)


def test_changed_all(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["changed", "--all"]) == 0
    assert "tmux" in json.loads(capsys.readouterr().out)


def test_changed_list(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["changed", "--list"]) == 0
    assert "zsh" in capsys.readouterr().out.splitlines()


def test_changed_requires_two_revisions(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["changed", "HEAD"]) == 1
    assert "E_VALIDATION" in capsys.readouterr().err


def test_parser_rejects_unknown_platform() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["build", "--platform", "sparc-solaris"])
