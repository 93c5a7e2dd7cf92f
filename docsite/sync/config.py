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
Run configuration for the docs sync, read from environment variables with defaults
"""

import os
from pathlib import Path
from typing import Optional

from .targets import SiteLayout


def load_config(default_config: Optional[dict] = None) -> dict:
    """Load configuration from environment variables or use defaults

    If no default configuration is provided, a default configuration is used. In this case, the default
    configuration is:

        'DOCS_SYNC_ROOT_DIR': None,      # current working directory
        'DOCS_SYNC_WEBSITE_DIR': None,   # <root dir>/docs-site
        'DOCS_SYNC_VERBOSE': False,

    Args:
        default_config: Default configuration dictionary. If `None`, a default configuration is used.

    Returns:
        dict: Configuration with environment variable overrides
    """
    if default_config is None:
        default_config = {
            'DOCS_SYNC_ROOT_DIR': None,
            'DOCS_SYNC_WEBSITE_DIR': None,
            'DOCS_SYNC_VERBOSE': False,
        }

    config = default_config.copy()

    # Override with environment variables if present
    for key in config:
        if key in os.environ:
            env_val = os.environ[key]
            if isinstance(config[key], bool):
                config[key] = env_val.lower() in ('1', 'true', 'yes', 'on')
            elif env_val == '':
                continue
            else:
                config[key] = env_val

    return config


def layout_from_config(config: dict) -> SiteLayout:
    """Build the site layout, resolving unset directories to their defaults"""
    root_dir = Path(config.get('DOCS_SYNC_ROOT_DIR') or os.getcwd()).resolve()
    website_dir = config.get('DOCS_SYNC_WEBSITE_DIR')
    website_dir = Path(website_dir).resolve() if website_dir else root_dir / 'docs-site'
    return SiteLayout(root_dir=root_dir, website_dir=website_dir)
