import json
import subprocess
from pathlib import Path
from unittest.mock import patch

from drillbook.project import Crate, RustAnalyzerProject


def test_add_path_only_rust_files():
    project = RustAnalyzerProject()
    project.add_path("exercises/intro1.rs")
    project.add_path("exercises/README.md")
    project.add_path("exercises/00_intro")
    assert [c.root_module for c in project.crates] == [str(Path("exercises/intro1.rs"))]


def test_crate_defaults():
    crate = Crate(root_module="a.rs")
    assert crate.edition == "2021"
    assert crate.cfg == ["test"]
    assert crate.deps == []


def test_exercises_to_json_walks_tree(tmp_path):
    root = tmp_path / "exercises"
    (root / "01_b").mkdir(parents=True)
    (root / "00_a").mkdir()
    (root / "01_b" / "b.rs").write_text("")
    (root / "00_a" / "a.rs").write_text("")
    (root / "00_a" / "README.md").write_text("")
    project = RustAnalyzerProject()
    project.exercises_to_json(root)
    names = [Path(c.root_module).name for c in project.crates]
    assert names == ["a.rs", "b.rs"]


def test_exercises_to_json_missing_dir(tmp_path):
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path / "nowhere")
    assert project.crates == []


def test_to_json_round_trip():
    project = RustAnalyzerProject(sysroot_src="/sys")
    project.add_path("x.rs")
    data = json.loads(project.to_json())
    assert list(data) == ["sysroot_src", "crates"]
    assert data["sysroot_src"] == "/sys"
    assert data["crates"] == [
        {"root_module": "x.rs", "edition": "2021", "deps": [], "cfg": ["test"]}
    ]
    assert " " not in project.to_json()


def test_write_to_disk(tmp_path):
    project = RustAnalyzerProject(sysroot_src="/sys")
    project.add_path("y.rs")
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    assert target.read_text() == project.to_json()


def test_sysroot_from_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/custom/src")
    project = RustAnalyzerProject()
    with patch("drillbook.project.subprocess.run") as run:
        project.get_sysroot_src()
    assert project.sysroot_src == "/custom/src"
    assert run.call_count == 0


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    done = subprocess.CompletedProcess(
        args=[], returncode=0, stdout=b"/opt/rust\n", stderr=b""
    )
    project = RustAnalyzerProject()
    with patch("drillbook.project.subprocess.run", return_value=done) as run:
        project.get_sysroot_src()
    assert run.call_args[0][0] == ["rustc", "--print", "sysroot"]
    parts = Path(project.sysroot_src).parts
    assert parts[-5:] == ("lib", "rustlib", "src", "rust", "library")
    assert Path(*parts[:-5]) == Path("/opt/rust")
    assert "Determined toolchain: /opt/rust" in capsys.readouterr().out