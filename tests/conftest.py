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
Pytest configuration and shared fixtures.
"""

import pytest

from docsite.sync.targets import SiteLayout


def write(path, content):
    """Write a text file, creating missing parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding='utf-8')
    return path


@pytest.fixture
def layout(tmp_path):
    """Empty project root with a site directory inside it."""
    root_dir = tmp_path / "project"
    root_dir.mkdir()
    return SiteLayout(root_dir=root_dir, website_dir=root_dir / "docs-site")


@pytest.fixture
def project(layout):
    """Project with English and Chinese docs, a root README and both brand assets."""
    docs = layout.docs_source
    write(docs / "README.md", "# Project\n\nStartup takes <5s.\n")
    write(docs / "en" / "intro.md", "# Intro\n\nResponse time <500ms, see <Tabs> for details.\n")
    write(docs / "en" / "guides" / "setup.mdx", "Error rate below <90%.\n")
    write(docs / "en" / "guides" / "config.json", '{"limit": "<10"}\n')
    write(docs / "zh" / "intro.md", "# 介绍\n\n响应时间 <500ms\n")

    logo = layout.logo_source
    logo.parent.mkdir(parents=True, exist_ok=True)
    logo.write_bytes(b"\x89PNG\r\n\x1a\n<1\xff")
    favicon = layout.favicon_source
    favicon.parent.mkdir(parents=True, exist_ok=True)
    favicon.write_bytes(b"\x00\x00\x01\x00<2")
    return layout
