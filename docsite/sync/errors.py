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
Errors raised while synchronizing the documentation site.

All of them are fatal for a sync run. A missing optional source is not an error; it is reported as a
skipped target instead (see :class:`docsite.sync.tree_mirror.MirrorStatus`).
"""

from typing import Optional


class SyncError(Exception):
    """Base class for fatal sync failures.

    Args:
        message: Description of the failure.
        path: File system path the failing operation acted on (if any).
        target: Name of the sync target being processed. Filled in by the orchestrator if not known at the
            point where the error is raised.
    """

    step = "sync"

    def __init__(self, message: str, path=None, target: Optional[str] = None):
        super().__init__(message)
        self.path = path
        self.target = target

    def describe(self) -> str:
        target = self.target if self.target is not None else "<unknown>"
        return f"target '{target}' failed during {self.step}: {self}"


class DestinationPrepError(SyncError):
    """Clearing or creating a destination directory failed."""

    step = "destination preparation"


class CopyError(SyncError):
    """A file or subtree could not be copied."""

    step = "copy"


class NormalizationError(SyncError):
    """A copied document could not be read or rewritten."""

    step = "normalization"


class ResolutionError(SyncError):
    """The sync targets could not be determined (invalid locale table, unreadable source location)."""

    step = "target resolution"
