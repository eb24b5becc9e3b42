import os
import zipfile
from pathlib import Path

import pytest

from xcodebuild_action import result_bundle
from xcodebuild_action.errors import MissingResultBundle, UploadFailure


def _make_bundle(tmp_path: Path) -> Path:
    bundle = tmp_path / "build" / "Tests.xcresult"
    (bundle / "Data").mkdir(parents=True)
    (bundle / "Info.plist").write_bytes(b"<plist/>")
    (bundle / "Data" / "data.0~abc").write_bytes(b"payload")
    return bundle


class _RecordingStore:
    def __init__(self) -> None:
        self.calls: list[tuple[str, list[str], str]] = []

    def upload(self, name, files, root_dir):
        self.calls.append((name, list(files), root_dir))
        return list(files)


def test_archive_keeps_parent_directory(tmp_path) -> None:
    bundle = _make_bundle(tmp_path)

    archive = result_bundle.archive_result_bundle(str(bundle))
    assert archive == str(bundle) + ".zip"

    with zipfile.ZipFile(archive) as zf:
        names = set(zf.namelist())
        assert "Tests.xcresult/Info.plist" in names
        assert "Tests.xcresult/Data/data.0~abc" in names
        assert zf.read("Tests.xcresult/Data/data.0~abc") == b"payload"
        assert all(n.startswith("Tests.xcresult/") for n in names)


def test_archive_preserves_symlinks(tmp_path) -> None:
    bundle = _make_bundle(tmp_path)
    os.symlink("Info.plist", bundle / "link.plist")

    archive = result_bundle.archive_result_bundle(str(bundle))
    with zipfile.ZipFile(archive) as zf:
        info = zf.getinfo("Tests.xcresult/link.plist")
        assert (info.external_attr >> 16) & 0o170000 == 0o120000
        assert zf.read(info) == b"Info.plist"


def test_archive_failure_returns_none_and_logs(tmp_path, capsys) -> None:
    missing = tmp_path / "Tests.xcresult"

    assert result_bundle.archive_result_bundle(str(missing)) is None
    assert "::error::" in capsys.readouterr().out
    assert not (tmp_path / "Tests.xcresult.zip").exists()


def test_archive_failure_removes_partial_archive(monkeypatch, tmp_path) -> None:
    bundle = _make_bundle(tmp_path)

    def boom(bundle_path, archive_path):
        Path(archive_path).write_bytes(b"partial")
        raise OSError("disk full")

    monkeypatch.setattr(result_bundle, "_write_archive", boom)

    assert result_bundle.archive_result_bundle(str(bundle)) is None
    assert not Path(str(bundle) + ".zip").exists()


def test_capture_missing_bundle_raises(tmp_path) -> None:
    with pytest.raises(MissingResultBundle) as e:
        result_bundle.capture_result_bundle(str(tmp_path / "nope.xcresult"), None, store=_RecordingStore())
    assert "Could not find result bundle" in str(e.value)


def test_capture_uploads_archive_with_given_name(tmp_path) -> None:
    bundle = _make_bundle(tmp_path)
    store = _RecordingStore()

    got = result_bundle.capture_result_bundle(str(bundle), "test-results", store=store)
    assert got == str(bundle)
    assert store.calls == [("test-results", [str(bundle) + ".zip"], str(bundle.parent))]


def test_capture_defaults_name_to_bundle_stem(tmp_path) -> None:
    bundle = _make_bundle(tmp_path)
    store = _RecordingStore()

    result_bundle.capture_result_bundle(str(bundle), None, store=store)
    assert store.calls[0][0] == "Tests"


def test_capture_skips_upload_when_archive_fails(monkeypatch, tmp_path) -> None:
    bundle = _make_bundle(tmp_path)
    store = _RecordingStore()
    monkeypatch.setattr(result_bundle, "archive_result_bundle", lambda _p: None)

    assert result_bundle.capture_result_bundle(str(bundle), "x", store=store) is None
    assert store.calls == []


def test_capture_propagates_upload_failure(tmp_path) -> None:
    bundle = _make_bundle(tmp_path)

    class _FailingStore:
        def upload(self, name, files, root_dir):
            raise UploadFailure("nope")

    with pytest.raises(UploadFailure):
        result_bundle.capture_result_bundle(str(bundle), "x", store=_FailingStore())


def test_archive_single_file_keeps_its_name(tmp_path) -> None:
    report = tmp_path / "report.json"
    report.write_bytes(b"{}")

    archive = result_bundle.archive_result_bundle(str(report))
    assert archive == str(report) + ".zip"
    with zipfile.ZipFile(archive) as zf:
        assert zf.namelist() == ["report.json"]
        assert zf.read("report.json") == b"{}"


def test_capture_regular_file_is_uploaded(tmp_path) -> None:
    report = tmp_path / "report.json"
    report.write_bytes(b"{}")
    store = _RecordingStore()

    assert result_bundle.capture_result_bundle(str(report), None, store=store) == str(report)
    assert store.calls == [("report", [str(report) + ".zip"], str(tmp_path))]
