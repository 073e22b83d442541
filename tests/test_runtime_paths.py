from __future__ import annotations

from pathlib import Path

from wenyan import runtime_paths


def test_source_package_root_points_to_repo_package() -> None:
    root = runtime_paths.package_root()
    assert root.name == "wenyan"
    assert (root / "themes").exists()


def test_source_resources_root_resolves() -> None:
    root = runtime_paths.resources_root()
    assert root.name == "resources"
    assert (root / "style.css").is_file()


def test_frozen_prefers_meipass_wenyan_dir(tmp_path: Path, monkeypatch) -> None:
    bundle_root = tmp_path / "bundle"
    package_root = bundle_root / "wenyan"
    package_root.mkdir(parents=True)
    monkeypatch.setattr(runtime_paths.sys, "frozen", True, raising=False)
    monkeypatch.setattr(runtime_paths.sys, "_MEIPASS", str(bundle_root), raising=False)

    assert runtime_paths.package_root() == package_root
    assert runtime_paths.resources_root() == package_root / "resources"


def test_frozen_falls_back_to_meipass_when_wenyan_missing(tmp_path: Path, monkeypatch) -> None:
    bundle_root = tmp_path / "bundle"
    bundle_root.mkdir(parents=True)
    monkeypatch.setattr(runtime_paths.sys, "frozen", True, raising=False)
    monkeypatch.setattr(runtime_paths.sys, "_MEIPASS", str(bundle_root), raising=False)

    assert runtime_paths.package_root() == bundle_root
