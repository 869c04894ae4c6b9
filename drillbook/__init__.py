"""Status lines, rust-project.json generation and worked exercise solutions."""

__version__ = "0.1.0"