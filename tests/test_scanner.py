"""Project directory scanning tests.

Verifies recency ordering, hidden/file exclusion, and unreadable roots.
"""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from repolauncher.scanner import DirectoryUnreadable, Entry, scan_projects


def _make_dir(root: Path, name: str, mtime: float) -> Path:
    path = root / name
    path.mkdir()
    os.utime(path, (mtime, mtime))
    return path


class ScanProjectsTests(unittest.TestCase):
    def test_orders_directories_newest_first(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _make_dir(root, "proj-a", 2_000_000)
            _make_dir(root, "proj-b", 3_000_000)
            _make_dir(root, "proj-c", 1_000_000)

            entries = scan_projects(root)

        self.assertEqual([entry.name for entry in entries], ["proj-b", "proj-a", "proj-c"])
        self.assertEqual(entries[0].modified_at, 3_000_000)

    def test_entries_carry_absolute_paths(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _make_dir(root, "demo", 1_000_000)

            (entry,) = scan_projects(root)

            self.assertIsInstance(entry, Entry)
            self.assertTrue(entry.path.is_absolute())
            self.assertEqual(entry.path, (root / "demo").resolve())

    def test_skips_hidden_directories_files_and_symlinks(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            real = _make_dir(root, "visible", 1_000_000)
            _make_dir(root, ".hidden", 2_000_000)
            (root / "notes.txt").write_text("x\n", encoding="utf-8")
            (root / "linked").symlink_to(real, target_is_directory=True)

            entries = scan_projects(root)

        self.assertEqual([entry.name for entry in entries], ["visible"])

    def test_equal_mtimes_fall_back_to_name_order(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("zeta", "alpha", "mid"):
                _make_dir(root, name, 1_000_000)

            entries = scan_projects(root)

        self.assertEqual([entry.name for entry in entries], ["alpha", "mid", "zeta"])

    def test_empty_root_returns_no_entries(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(scan_projects(Path(tmp)), ())

    def test_missing_root_raises_directory_unreadable(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"
            with self.assertRaises(DirectoryUnreadable) as ctx:
                scan_projects(missing)

        self.assertEqual(ctx.exception.root, missing)
        self.assertTrue(ctx.exception.reason)

    def test_file_root_raises_directory_unreadable(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "file.txt"
            target.write_text("x\n", encoding="utf-8")
            with self.assertRaises(DirectoryUnreadable):
                scan_projects(target)


if __name__ == "__main__":
    unittest.main()
