"""Generate a rust-project.json so rust-analyzer understands the exercises."""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import asdict, dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One crate entry of rust-project.json."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])


@dataclass
class RustAnalyzerProject:
    """The contents of rust-project.json."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def add_path(self, path: str | os.PathLike[str]) -> None:
        """Add a crate for ``path`` if it is a ``.rs`` file."""
        path = Path(path)
        if path.suffix == ".rs":
            self.crates.append(Crate(root_module=str(path)))

    def exercises_to_json(self, root: str | os.PathLike[str] = "exercises") -> None:
        """Add a crate for every ``.rs`` file below ``root``."""
        for path in sorted(Path(root).glob("**/*")):
            self.add_path(path)

    def get_sysroot_src(self) -> None:
        """Find the standard library sources from RUST_SRC_PATH or ``rustc``."""
        env_path = os.environ.get("RUST_SRC_PATH")
        if env_path is not None:
            self.sysroot_src = env_path
            return

        result = subprocess.run(
            ["rustc", "--print", "sysroot"], capture_output=True, check=False
        )
        text = result.stdout.decode("utf-8", errors="replace")
        parts = text.split()
        toolchain = parts[0] if parts else text

        print(f"Determined toolchain: {toolchain}\n")

        self.sysroot_src = str(
            Path(toolchain, "lib", "rustlib", "src", "rust", "library")
        )

    def to_json(self) -> str:
        """Serialise the project compactly."""
        return json.dumps(asdict(self), separators=(",", ":"), ensure_ascii=False)

    def write_to_disk(self, path: str | os.PathLike[str] = "./rust-project.json") -> None:
        """Write the project file."""
        Path(path).write_bytes(self.to_json().encode("utf-8"))