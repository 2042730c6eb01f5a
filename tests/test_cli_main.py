import io
import json
from pathlib import Path

from licensetype.cli.main import main
from licensetype.core.config import LicenseTypeConfig
from licensetype.core.registry import KNOWN_LICENSES

DATA_DIR = Path(__file__).parent / "data" / "licenses"


def _write(license_id: str, target: Path) -> Path:
    target.write_bytes((DATA_DIR / f"{license_id}.txt").read_bytes())
    return target


def test_cli_file_command(tmp_path: Path, capsys):
    target = _write("AGPL-3.0", tmp_path / "LICENSE")

    rc = main(["file", str(target)])

    assert rc == 0
    out = json.loads(capsys.readouterr().out)
    assert out["license_id"] == "AGPL-3.0"
    assert out["source_path"] == str(target)
    assert out["recognized"] is True


def test_cli_dir_command_first_and_all(tmp_path: Path, capsys):
    _write("GPL-2.0", tmp_path / "COPYING")
    _write("LGPL-2.1", tmp_path / "COPYING.LIB")

    assert main(["dir", str(tmp_path)]) == 0
    first = json.loads(capsys.readouterr().out)
    assert first["license_id"] == "GPL-2.0"

    assert main(["dir", str(tmp_path), "--all"]) == 0
    everything = json.loads(capsys.readouterr().out)
    assert [item["license_id"] for item in everything] == ["GPL-2.0", "LGPL-2.1"]


def test_cli_dir_strict_fails_on_multiple(tmp_path: Path, capsys):
    _write("GPL-2.0", tmp_path / "COPYING")
    _write("LGPL-2.1", tmp_path / "COPYING.LIB")

    rc = main(["dir", str(tmp_path), "--strict"])

    assert rc == 1
    assert "multiple license files found" in capsys.readouterr().err


def test_cli_dir_without_license_files(tmp_path: Path, capsys):
    rc = main(["dir", str(tmp_path)])
    assert rc == 1
    assert "unable to find any license file" in capsys.readouterr().err


def test_cli_text_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO((DATA_DIR / "LGPL-3.0.txt").read_text(encoding="utf-8")))
    assert main(["text"]) == 0
    assert capsys.readouterr().out.strip() == "LGPL-3.0"


def test_cli_text_unrecognized(tmp_path: Path, capsys):
    target = tmp_path / "notes.txt"
    target.write_text("hello world", encoding="utf-8")
    assert main(["text", str(target)]) == 1
    assert "could not guess license type" in capsys.readouterr().err


def test_cli_known_lists_registry(capsys):
    assert main(["known"]) == 0
    assert capsys.readouterr().out.split() == list(KNOWN_LICENSES)


def test_cli_uses_config_patterns(tmp_path: Path, capsys):
    repo = tmp_path / "repo"
    repo.mkdir()
    _write("MPL-2.0", repo / "NOTICE")
    cfg = LicenseTypeConfig()
    cfg.scan.patterns = ("notice",)
    config_path = cfg.to_json(tmp_path / "cfg.json")

    rc = main(["--config", config_path, "--log-level", "DEBUG", "dir", str(repo)])

    assert rc == 0
    assert json.loads(capsys.readouterr().out)["license_id"] == "MPL-2.0"
