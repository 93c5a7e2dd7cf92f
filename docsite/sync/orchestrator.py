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
Sequencing of a full sync run.

Targets are processed one after another on the calling thread. The first fatal error aborts the run; the
remaining targets are not attempted.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .errors import SyncError
from .locales_config import LocaleConfig
from .targets import SiteLayout, SyncTarget, TargetKind, resolve_targets
from .tree_mirror import MirrorResult, copy_file, mirror_tree

logger = logging.getLogger(__name__)


@dataclass
class SyncReport:
    """
    Summary of a completed run.

    Attributes:
        completed (List[str]): Names of the synchronized targets, in processing order
        skipped (List[str]): Names of the targets skipped because their source does not exist
        results (Dict[str, MirrorResult]): Per target outcome for the completed targets
    """

    completed: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    results: Dict[str, MirrorResult] = field(default_factory=dict)


def sync_target(target: SyncTarget) -> MirrorResult:
    """Synchronize a single target, attaching the target name to any error raised."""
    try:
        if target.kind is TargetKind.TREE:
            return mirror_tree(target.source, target.destination, clean=target.clean, normalize=target.normalize)
        return copy_file(target.source, target.destination, normalize=target.normalize)
    except SyncError as e:
        if e.target is None:
            e.target = target.name
        raise


def run_sync(layout: SiteLayout, locales: Optional[Sequence[LocaleConfig]] = None) -> SyncReport:
    """Run the full documentation sync.

    Args:
        layout: Input and output locations.
        locales: Locales to synchronize. If `None`, the configured locales are used.

    Returns:
        SyncReport: Summary of the run.

    Raises:
        SyncError: On the first fatal failure. The ``target`` attribute names the failing target.
    """
    logger.info("Syncing documentation...")
    report = SyncReport()

    pending, skipped = resolve_targets(layout, locales)
    for target in skipped:
        logger.info(f"Skipped {target.label}: source not found ({target.source})")
        report.skipped.append(target.name)

    for target in pending:
        logger.debug(f"Processing {target.name}: {target.source} -> {target.destination}")
        result = sync_target(target)
        report.results[target.name] = result
        if result.skipped:
            # Source vanished between resolution and processing
            logger.info(f"Skipped {target.label}: source not found ({target.source})")
            report.skipped.append(target.name)
            continue
        report.completed.append(target.name)
        if target.kind is TargetKind.TREE:
            logger.info(
                f"Copied {target.label}: {result.files_copied} files, "
                f"{result.documents_normalized} documents processed"
            )
        else:
            logger.info(f"Copied {target.label} to {target.destination}")

    logger.info("Documentation sync complete!")
    return report
