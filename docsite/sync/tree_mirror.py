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

"""
Materialize a source directory (or a single file) at a destination inside the site.

Tree copies use clean-slate semantics: the destination is removed and recreated before anything is copied,
so files which no longer exist in the source do not survive. Documents are normalized only once the whole
copy is complete.
"""

import logging
import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .errors import CopyError, DestinationPrepError
from .normalizer import normalize_document, normalize_tree

logger = logging.getLogger(__name__)


class MirrorStatus(Enum):
    COPIED = "copied"
    SKIPPED = "skipped"


@dataclass
class MirrorResult:
    """
    Outcome of mirroring a single source.

    Attributes:
        status (MirrorStatus): Whether the source was copied or skipped because it does not exist
        files_copied (int): Number of files written to the destination
        documents_normalized (int): Number of documents passed through the normalizer
    """

    status: MirrorStatus
    files_copied: int = 0
    documents_normalized: int = 0

    @property
    def skipped(self) -> bool:
        return self.status is MirrorStatus.SKIPPED


def ensure_removed(path: Path):
    """Remove existing path (file, dir, or symlink) if present."""
    try:
        if path.is_symlink() or path.exists():
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            else:
                path.unlink()
    except OSError as e:
        raise DestinationPrepError(f"Failed to remove existing path {path}: {e}", path=path) from e


def prepare_destination(path: Path, clean: bool):
    """Make sure ``path`` exists as a directory; if ``clean`` is set, it is emptied first."""
    path = Path(path)
    if clean:
        ensure_removed(path)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DestinationPrepError(f"Failed to create directory {path}: {e}", path=path) from e


def _copy_contents(src_dir: Path, dst_dir: Path) -> int:
    copied = []

    # CopyError is not an OSError, so copytree does not collect it and the copy stops at the first failure
    def copy_and_count(src, dst):
        try:
            result = shutil.copy2(src, dst)
        except OSError as e:
            raise CopyError(f"Failed to copy {src} -> {dst}: {e}", path=Path(src)) from e
        copied.append(dst)
        return result

    try:
        shutil.copytree(src_dir, dst_dir, copy_function=copy_and_count, dirs_exist_ok=True)
    except (shutil.Error, OSError) as e:
        raise CopyError(f"Failed to copy {src_dir} -> {dst_dir}: {e}", path=src_dir) from e
    return len(copied)


def mirror_tree(src_dir, dst_dir, clean: bool = True, normalize: bool = True) -> MirrorResult:
    """Replace the contents of ``dst_dir`` with the contents of ``src_dir``.

    The steps are strictly ordered:

      1. If ``clean`` is set, the destination is removed and recreated empty.
      2. If the source does not exist, nothing is copied and the result is marked as skipped.
      3. All files and subdirectories are copied, preserving the relative structure.
      4. If ``normalize`` is set, every document in the destination is normalized.

    Args:
        src_dir: Source directory.
        dst_dir: Destination directory.
        clean: Whether to clear the destination before copying.
        normalize: Whether to normalize the copied documents.

    Returns:
        MirrorResult: Outcome of the operation.

    Raises:
        DestinationPrepError: If the destination cannot be removed or created.
        CopyError: If any file or subdirectory fails to copy.
        NormalizationError: If a copied document cannot be normalized.
    """
    src_dir = Path(src_dir)
    dst_dir = Path(dst_dir)

    if clean:
        prepare_destination(dst_dir, clean=True)

    if not src_dir.is_dir():
        logger.debug(f"  Source directory does not exist: {src_dir}")
        return MirrorResult(MirrorStatus.SKIPPED)

    files_copied = _copy_contents(src_dir, dst_dir)
    logger.debug(f"  Copied: {src_dir} -> {dst_dir} ({files_copied} files)")

    documents_normalized = normalize_tree(dst_dir) if normalize else 0
    return MirrorResult(MirrorStatus.COPIED, files_copied, documents_normalized)


def copy_file(src_file, dst_file, normalize: bool = False) -> MirrorResult:
    """Copy a single file, overwriting the destination, and optionally normalize the copy.

    Missing parent directories of the destination are created. There is no clean step.
    """
    src_file = Path(src_file)
    dst_file = Path(dst_file)

    if not src_file.is_file():
        logger.debug(f"  Source file does not exist: {src_file}")
        return MirrorResult(MirrorStatus.SKIPPED)

    prepare_destination(dst_file.parent, clean=False)
    try:
        shutil.copy2(src_file, dst_file)
    except OSError as e:
        raise CopyError(f"Failed to copy {src_file} -> {dst_file}: {e}", path=src_file) from e
    logger.debug(f"  Copied: {src_file} -> {dst_file}")

    documents_normalized = 0
    if normalize:
        normalize_document(dst_file)
        documents_normalized = 1
    return MirrorResult(MirrorStatus.COPIED, 1, documents_normalized)
