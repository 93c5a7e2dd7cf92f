# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import shutil
from pathlib import Path

import pytest

from docsite.sync.errors import CopyError, DestinationPrepError
from docsite.sync.tree_mirror import (
    MirrorStatus,
    copy_file,
    ensure_removed,
    mirror_tree,
    prepare_destination,
)

from conftest import write


def relative_files(directory):
    return sorted(p.relative_to(directory).as_posix() for p in directory.rglob('*') if p.is_file())


@pytest.fixture
def source(tmp_path):
    src = tmp_path / "src"
    write(src / "intro.md", "Response time <500ms\n")
    write(src / "guides" / "setup.mdx", "<CustomTag> below <90%\n")
    write(src / "guides" / "data.csv", "a,<1\n")
    return src


class TestMirrorTree:
    """Tests for the clean-slate directory mirror."""

    def test_copies_structure_and_normalizes(self, source, tmp_path):
        dst = tmp_path / "dst"
        result = mirror_tree(source, dst)

        assert result.status is MirrorStatus.COPIED
        assert result.files_copied == 3
        assert result.documents_normalized == 2
        assert relative_files(dst) == relative_files(source)
        assert (dst / "intro.md").read_text(encoding='utf-8') == "Response time &lt;500ms\n"
        assert (dst / "guides" / "setup.mdx").read_text(encoding='utf-8') == "<CustomTag> below &lt;90%\n"
        # Non-documents are copied verbatim
        assert (dst / "guides" / "data.csv").read_text(encoding='utf-8') == "a,<1\n"

    def test_source_is_never_modified(self, source, tmp_path):
        mirror_tree(source, tmp_path / "dst")
        assert (source / "intro.md").read_text(encoding='utf-8') == "Response time <500ms\n"

    def test_stale_files_are_removed(self, source, tmp_path):
        dst = tmp_path / "dst"
        write(dst / "old.md", "stale")
        write(dst / "guides" / "removed.md", "stale")

        mirror_tree(source, dst)

        assert not (dst / "old.md").exists()
        assert relative_files(dst) == relative_files(source)

    def test_without_clean_keeps_existing_files(self, source, tmp_path):
        dst = tmp_path / "dst"
        write(dst / "keep.txt", "keep")
        mirror_tree(source, dst, clean=False)
        assert (dst / "keep.txt").exists()
        assert (dst / "intro.md").exists()

    def test_without_normalize(self, source, tmp_path):
        dst = tmp_path / "dst"
        result = mirror_tree(source, dst, normalize=False)
        assert result.documents_normalized == 0
        assert (dst / "intro.md").read_text(encoding='utf-8') == "Response time <500ms\n"

    def test_missing_source_is_skipped(self, tmp_path):
        dst = tmp_path / "dst"
        result = mirror_tree(tmp_path / "missing", dst, clean=False)
        assert result.skipped
        assert not dst.exists()

    def test_missing_source_with_clean_leaves_empty_destination(self, tmp_path):
        dst = tmp_path / "dst"
        write(dst / "old.md", "stale")
        result = mirror_tree(tmp_path / "missing", dst, clean=True)
        assert result.skipped
        assert dst.is_dir()
        assert list(dst.iterdir()) == []

    def test_remove_failure_aborts_before_copy(self, source, tmp_path, monkeypatch):
        dst = tmp_path / "dst"
        write(dst / "old.md", "stale")

        def failing_rmtree(path, *args, **kwargs):
            raise PermissionError("permission denied")

        monkeypatch.setattr(shutil, "rmtree", failing_rmtree)
        with pytest.raises(DestinationPrepError):
            mirror_tree(source, dst)

        assert relative_files(dst) == ["old.md"]

    def test_destination_conflicting_with_file(self, source, tmp_path):
        blocker = write(tmp_path / "blocker", "a file")
        with pytest.raises(DestinationPrepError):
            mirror_tree(source, blocker / "dst")

    def test_copy_failure_is_fatal(self, source, tmp_path, monkeypatch):
        def failing_copy2(src, dst, *args, **kwargs):
            raise OSError("read error")

        monkeypatch.setattr(shutil, "copy2", failing_copy2)
        with pytest.raises(CopyError):
            mirror_tree(source, tmp_path / "dst")

    def test_copy_stops_at_first_failing_file(self, tmp_path, monkeypatch):
        src = tmp_path / "src"
        for i in range(5):
            write(src / f"doc{i}.md", f"<{i}")
        attempts = []

        def failing_copy2(src, dst, *args, **kwargs):
            attempts.append(src)
            raise OSError("read error")

        monkeypatch.setattr(shutil, "copy2", failing_copy2)
        with pytest.raises(CopyError) as exc_info:
            mirror_tree(src, tmp_path / "dst")

        assert len(attempts) == 1
        assert exc_info.value.path == Path(attempts[0])
        assert list((tmp_path / "dst").iterdir()) == []


class TestHelpers:
    def test_ensure_removed_handles_files_dirs_and_missing(self, tmp_path):
        file_path = write(tmp_path / "f.txt", "x")
        dir_path = tmp_path / "d"
        write(dir_path / "nested" / "g.txt", "y")

        ensure_removed(file_path)
        ensure_removed(dir_path)
        ensure_removed(tmp_path / "missing")

        assert not file_path.exists()
        assert not dir_path.exists()

    def test_prepare_destination_creates_parents(self, tmp_path):
        dst = tmp_path / "a" / "b" / "c"
        prepare_destination(dst, clean=False)
        assert dst.is_dir()


class TestCopyFile:
    def test_copies_and_normalizes(self, tmp_path):
        src = write(tmp_path / "README.md", "Startup <5s\n")
        dst = tmp_path / "site" / "docs" / "index.md"

        result = copy_file(src, dst, normalize=True)

        assert result.status is MirrorStatus.COPIED
        assert result.documents_normalized == 1
        assert dst.read_text(encoding='utf-8') == "Startup &lt;5s\n"
        assert src.read_text(encoding='utf-8') == "Startup <5s\n"

    def test_overwrites_existing_destination(self, tmp_path):
        src = tmp_path / "logo.png"
        src.write_bytes(b"new<1")
        dst = tmp_path / "img" / "logo.png"
        dst.parent.mkdir()
        dst.write_bytes(b"old")

        copy_file(src, dst)

        assert dst.read_bytes() == b"new<1"

    def test_copy_failure_raises(self, tmp_path, monkeypatch):
        src = tmp_path / "logo.png"
        src.write_bytes(b"png")
        dst = tmp_path / "img" / "logo.png"

        def failing_copy2(src, dst, *args, **kwargs):
            raise PermissionError("permission denied")

        monkeypatch.setattr(shutil, "copy2", failing_copy2)
        with pytest.raises(CopyError) as exc_info:
            copy_file(src, dst)

        assert exc_info.value.path == src
        assert not dst.exists()

    def test_missing_source_is_skipped(self, tmp_path):
        dst = tmp_path / "img" / "logo.png"
        result = copy_file(tmp_path / "missing.png", dst)
        assert result.skipped
        assert not dst.parent.exists()


if __name__ == "__main__":
    pytest.main()
