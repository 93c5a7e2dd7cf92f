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
Content normalization for documents published to the MDX based site.

MDX reads ``<`` followed by a token as the start of a JSX tag. Prose such as ``<500ms`` or ``<90%`` is
common in the docs and breaks compilation, so the bracket in front of a number is replaced by its entity.
Nothing else is escaped.
"""

from __future__ import annotations

import logging
import os
import re
import shutil
import tempfile
from pathlib import Path
from typing import Iterator

from .errors import NormalizationError

logger = logging.getLogger(__name__)

# `<` directly followed by at least one decimal digit, e.g. `<500ms`, `<90%`.
NUMERIC_TAG_RE = re.compile(r"<(?=\d)")
ESCAPED_LT = "&lt;"

DOCUMENT_SUFFIXES = ('.md', '.mdx')


def escape_numeric_tags(text: str) -> str:
    """Escape every ``<`` that is immediately followed by a decimal digit.

    The digits and all other characters are left untouched. Applying the function to its own output does
    not change it, as no literal ``<`` in front of a digit remains after the first pass.

    Args:
        text: Document content.

    Returns:
        str: The escaped content.
    """
    return NUMERIC_TAG_RE.sub(ESCAPED_LT, text)


def is_document(path) -> bool:
    """Whether ``path`` follows the documentation file naming convention."""
    return Path(path).suffix.lower() in DOCUMENT_SUFFIXES


def iter_documents(directory) -> Iterator[Path]:
    """Yield all documents below ``directory`` (recursively) in sorted path order."""
    directory = Path(directory)
    for path in sorted(directory.rglob('*')):
        if path.is_file() and is_document(path):
            yield path


def _write_atomic(path: Path, content: str):
    """Replace the content of ``path`` so that readers never observe a partially written file."""
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    try:
        with os.fdopen(fd, 'w', encoding='utf-8', newline='') as f:
            f.write(content)
        shutil.copymode(str(path), tmp_name)
        os.replace(tmp_name, str(path))
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


def normalize_document(path) -> bool:
    """Normalize a single document in place.

    Args:
        path: Path of the document to rewrite.

    Returns:
        bool: ``True`` if the content changed, ``False`` if the document was already normalized (in which
        case the file is not rewritten).

    Raises:
        NormalizationError: If the document cannot be read (including non UTF-8 content) or written back.
            On failure, the original content is left unmodified.
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as err:
        raise NormalizationError(f"Could not read {path}: {err}", path=path) from err

    normalized = escape_numeric_tags(content)
    if normalized == content:
        return False

    try:
        _write_atomic(path, normalized)
    except OSError as err:
        raise NormalizationError(f"Could not write {path}: {err}", path=path) from err

    logger.debug(f"  Normalized: {path}")
    return True


def normalize_tree(directory) -> int:
    """Normalize every document below ``directory``, one at a time.

    Returns:
        int: Number of documents processed.
    """
    count = 0
    for document in iter_documents(directory):
        normalize_document(document)
        count += 1
    return count
