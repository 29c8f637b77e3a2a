"""Core types."""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class FileResult:
    """Outcome of obfuscating one file."""
    name: str
    kind: str              # "config" | "text"
    size_before: int
    size_after: int


@dataclass(slots=True)
class DirectoryReport:
    """Result of a directory pass.  Failed files do not fail the pass."""
    directory: str
    obfuscated: list[FileResult] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)          # file names
    failed: dict[str, str] = field(default_factory=dict)      # name → reason

    @property
    def ok(self) -> bool:
        return not self.failed

    def to_dict(self) -> dict:
        return {
            "directory": self.directory,
            "obfuscated": [
                {"name": r.name, "kind": r.kind, "size_before": r.size_before, "size_after": r.size_after}
                for r in self.obfuscated
            ],
            "skipped": list(self.skipped),
            "failed": dict(self.failed),
        }
