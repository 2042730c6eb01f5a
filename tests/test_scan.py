import logging
from pathlib import Path

import pytest

from licensetype.core.config import ScanConfig
from licensetype.core.errors import MultipleLicensesFound, NoLicenseFileFound, UnrecognizedLicense
from licensetype.core.scan import (
    list_directory,
    new_license_from_directory,
    new_licenses_from_directory,
    scan_directory,
)

DATA_DIR = Path(__file__).parent / "data" / "licenses"


def _copy_reference(license_id: str, target: Path) -> None:
    target.write_bytes((DATA_DIR / f"{license_id}.txt").read_bytes())


@pytest.fixture
def mixed_repo(tmp_path):
    repo = tmp_path / "repo"
    repo.mkdir()
    _copy_reference("MIT", repo / "LICENSE")
    _copy_reference("Apache-2.0", repo / "LICENSE.txt")
    (repo / "README.md").write_text(
        "Permission is hereby granted, free of charge, to any person obtaining a copy of this software",
        encoding="utf-8",
    )
    return repo


def test_multi_scan_returns_all_in_listing_order(mixed_repo):
    licenses = new_licenses_from_directory(mixed_repo)
    assert [lic.license_id for lic in licenses] == ["MIT", "Apache-2.0"]
    assert [Path(lic.source_path).name for lic in licenses] == ["LICENSE", "LICENSE.txt"]


def test_single_scan_returns_first_in_listing_order(mixed_repo):
    lic = new_license_from_directory(mixed_repo)
    assert lic.license_id == "MIT"
    assert lic.source_path == str(mixed_repo / "LICENSE")


def test_strict_single_scan_rejects_multiple(mixed_repo):
    with pytest.raises(MultipleLicensesFound) as excinfo:
        new_license_from_directory(mixed_repo, strict=True)
    assert excinfo.value.license_ids == ["MIT", "Apache-2.0"]
    with pytest.raises(MultipleLicensesFound):
        new_license_from_directory(mixed_repo, ScanConfig(strict=True))
    assert new_license_from_directory(mixed_repo, ScanConfig(strict=True), strict=False).license_id == "MIT"


def test_strict_single_scan_allows_one(tmp_path):
    _copy_reference("EPL-1.0", tmp_path / "LICENSE")
    assert new_license_from_directory(tmp_path, strict=True).license_id == "EPL-1.0"


def test_empty_directory_has_no_license_file(tmp_path):
    with pytest.raises(NoLicenseFileFound):
        new_licenses_from_directory(tmp_path)


def test_directory_without_candidates_has_no_license_file(tmp_path):
    (tmp_path / "README.md").write_text("hello", encoding="utf-8")
    with pytest.raises(NoLicenseFileFound):
        new_license_from_directory(tmp_path)


def test_only_candidate_unrecognized(tmp_path):
    (tmp_path / "LICENSE").write_text("Do whatever, just don't sue me.", encoding="utf-8")
    with pytest.raises(UnrecognizedLicense):
        new_licenses_from_directory(tmp_path)
    with pytest.raises(UnrecognizedLicense):
        new_license_from_directory(tmp_path)


def test_unrecognized_and_unreadable_candidates_are_skipped(tmp_path, caplog):
    (tmp_path / "LICENSE").write_text("custom terms", encoding="utf-8")
    (tmp_path / "LICENSES").mkdir()
    _copy_reference("BSD-2-Clause", tmp_path / "LICENSE-BSD")

    with caplog.at_level(logging.DEBUG, logger="licensetype"):
        licenses = scan_directory(tmp_path)

    assert [lic.license_id for lic in licenses] == ["BSD-2-Clause"]
    skipped = [rec.getMessage() for rec in caplog.records if "Skipping" in rec.getMessage()]
    assert len(skipped) == 2


def test_missing_directory_propagates_oserror(tmp_path):
    with pytest.raises(FileNotFoundError):
        new_licenses_from_directory(tmp_path / "missing")


def test_file_instead_of_directory_propagates_oserror(tmp_path):
    target = tmp_path / "LICENSE"
    _copy_reference("MIT", target)
    with pytest.raises(NotADirectoryError):
        scan_directory(target)


def test_custom_patterns(tmp_path):
    _copy_reference("CDDL-1.0", tmp_path / "NOTICE")
    _copy_reference("MIT", tmp_path / "LICENSE")
    licenses = scan_directory(tmp_path, ScanConfig(patterns=("notice*",)))
    assert [lic.license_id for lic in licenses] == ["CDDL-1.0"]


def test_scan_is_not_recursive(tmp_path):
    nested = tmp_path / "sub"
    nested.mkdir()
    _copy_reference("MIT", nested / "LICENSE")
    with pytest.raises(NoLicenseFileFound):
        scan_directory(tmp_path)


def test_list_directory_is_sorted(tmp_path):
    for name in ("b", "a", "C"):
        (tmp_path / name).write_text("", encoding="utf-8")
    assert list_directory(tmp_path) == ["C", "a", "b"]


def test_undecodable_candidate_is_skipped_with_strict_decoding(tmp_path):
    (tmp_path / "LICENSE").write_bytes(b"\xff\xfe\x00bad")
    _copy_reference("MIT", tmp_path / "LICENSE-MIT")

    licenses = scan_directory(tmp_path, ScanConfig(errors="strict"))

    assert [lic.license_id for lic in licenses] == ["MIT"]
    assert Path(licenses[0].source_path).name == "LICENSE-MIT"
