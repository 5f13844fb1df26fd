"""Rollback ledger for a scaffolding run.

Every stage records the paths it creates (or attempts to create). On failure
the pipeline calls ``rollback()`` once, which deletes the recorded paths in
insertion order. Deletion is best-effort: problems are reported and the pass
always runs to completion.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from .utils import print_error, print_success, print_warning


class RollbackLedger:
    """Append-only, ordered record of filesystem paths created during a run."""

    def __init__(self) -> None:
        self._paths: list[Path] = []

    def record(self, path: str | Path) -> None:
        """Append *path* to the ledger. Duplicates are kept."""
        self._paths.append(Path(path).absolute())

    @property
    def paths(self) -> list[Path]:
        return list(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def rollback(self) -> list[Path]:
        """Delete every recorded path that still exists.

        Directories are removed recursively, anything else is unlinked. Paths
        that no longer exist (already removed, or never materialised) are
        skipped silently.

        Returns:
            The paths that existed and were removed, in ledger order.
        """
        print_error("An error occurred. Rolling back changes...")
        removed: list[Path] = []

        for path in self._paths:
            try:
                if not path.exists() and not path.is_symlink():
                    continue
                print_warning(f"Removing: {path}")
                if path.is_dir() and not path.is_symlink():
                    shutil.rmtree(path)
                else:
                    path.unlink()
            except OSError as exc:
                print_warning(f"Could not remove {path}: {exc}")
                continue
            removed.append(path)

        print_success("Rollback completed.")
        return removed
