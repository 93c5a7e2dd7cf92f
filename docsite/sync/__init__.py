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
Sync of the locale-partitioned documentation sources into the documentation site.
"""

__version__ = "0.1.0"

from .errors import SyncError, DestinationPrepError, CopyError, NormalizationError, ResolutionError
from .normalizer import escape_numeric_tags, normalize_document, normalize_tree
from .tree_mirror import MirrorResult, MirrorStatus, mirror_tree, copy_file
from .locales_config import LocaleConfig, LOCALES
from .targets import SiteLayout, SyncTarget, TargetKind, build_targets, resolve_targets
from .orchestrator import SyncReport, run_sync

__all__ = [
    'SyncError',
    'DestinationPrepError',
    'CopyError',
    'NormalizationError',
    'ResolutionError',
    'escape_numeric_tags',
    'normalize_document',
    'normalize_tree',
    'MirrorResult',
    'MirrorStatus',
    'mirror_tree',
    'copy_file',
    'LocaleConfig',
    'LOCALES',
    'SiteLayout',
    'SyncTarget',
    'TargetKind',
    'build_targets',
    'resolve_targets',
    'SyncReport',
    'run_sync',
]
