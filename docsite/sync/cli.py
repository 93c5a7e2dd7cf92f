#!/usr/bin/env python3

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
Script to sync the documentation sources into the documentation site.
The default locale is copied to the site's docs directory, the other locales to the site's i18n directory.
This script should be run every time before the site is built.
"""

import argparse
import logging
import sys

from .config import load_config, layout_from_config
from .errors import SyncError
from .locales_config import get_locale_ids
from .orchestrator import run_sync
from .targets import build_targets

logger = logging.getLogger(__name__)


def list_targets(layout):
    """Print the resolved targets and whether their sources exist"""
    print(f"Project root: {layout.root_dir}")
    print(f"Site directory: {layout.website_dir}")
    print(f"Locales: {', '.join(get_locale_ids())}")
    for target in build_targets(layout):
        state = "found" if target.source_exists() else "missing"
        print(f"  {target.name:<12} [{state:>7}] {target.source} -> {target.destination}")


def main(argv=None):
    """Main function to sync the documentation into the site"""
    # Parse command line arguments
    parser = argparse.ArgumentParser(description='Sync documentation sources into the documentation site')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose output')
    parser.add_argument('--root-dir', default=None, help='Project root directory (default: current directory)')
    parser.add_argument('--website-dir', default=None, help='Site directory (default: <root-dir>/docs-site)')
    parser.add_argument(
        '--list-targets', action='store_true', help='Show the sync targets and whether their sources exist'
    )
    args = parser.parse_args(argv)

    config = load_config()
    if args.root_dir is not None:
        config['DOCS_SYNC_ROOT_DIR'] = args.root_dir
    if args.website_dir is not None:
        config['DOCS_SYNC_WEBSITE_DIR'] = args.website_dir
    verbose = args.verbose or config['DOCS_SYNC_VERBOSE']

    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format='%(message)s')

    layout = layout_from_config(config)

    try:
        if args.list_targets:
            list_targets(layout)
            return 0

        logger.debug(f"Project root: {layout.root_dir}")
        logger.debug(f"Site directory: {layout.website_dir}")
        run_sync(layout)
    except SyncError as e:
        logger.error(f"Error syncing docs: {e.describe()}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
