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
Resolution of the units of work (sync targets) for a run.

Layout of the inputs and outputs::

    <root>/
    ├── docs/
    │   ├── README.md                  -> <website>/docs/index.md
    │   ├── en/                        -> <website>/docs/
    │   └── zh/                        -> <website>/i18n/zh/docusaurus-plugin-content-docs/current/
    └── app/
        ├── logo.png                   -> <website>/static/img/logo.png
        └── public/favicon.ico         -> <website>/static/img/favicon.ico
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .errors import ResolutionError
from .locales_config import LocaleConfig, get_default_locale, get_locales

DOCS_PLUGIN_SUBPATH = Path('docusaurus-plugin-content-docs') / 'current'
INDEX_DOCUMENT = 'index.md'
ROOT_README = 'README.md'


class TargetKind(Enum):
    TREE = "tree"
    FILE = "file"


@dataclass(frozen=True)
class SyncTarget:
    """
    One unit of work of a sync run.

    Attributes:
        name (str): Short unique name (e.g. ``'locale:zh'``, ``'readme'``)
        label (str): Human readable description used in progress messages
        kind (TargetKind): Directory tree or single file
        source (Path): Source directory or file
        destination (Path): Destination directory or file
        clean (bool): Whether the destination is cleared before copying (tree targets only)
        normalize (bool): Whether copied documents are normalized
    """

    name: str
    label: str
    kind: TargetKind
    source: Path
    destination: Path
    clean: bool = False
    normalize: bool = True

    def source_exists(self) -> bool:
        try:
            if self.kind is TargetKind.TREE:
                return self.source.is_dir()
            return self.source.is_file()
        except OSError as e:
            raise ResolutionError(
                f"Cannot check source {self.source}: {e}", path=self.source, target=self.name
            ) from e


@dataclass(frozen=True)
class SiteLayout:
    """Input and output locations, derived from the project root and the site directory."""

    root_dir: Path
    website_dir: Path

    @property
    def docs_source(self) -> Path:
        return self.root_dir / 'docs'

    @property
    def readme_source(self) -> Path:
        return self.docs_source / ROOT_README

    @property
    def logo_source(self) -> Path:
        return self.root_dir / 'app' / 'logo.png'

    @property
    def favicon_source(self) -> Path:
        return self.root_dir / 'app' / 'public' / 'favicon.ico'

    @property
    def content_dir(self) -> Path:
        return self.website_dir / 'docs'

    @property
    def i18n_dir(self) -> Path:
        return self.website_dir / 'i18n'

    @property
    def static_img_dir(self) -> Path:
        return self.website_dir / 'static' / 'img'


def locale_destination(layout: SiteLayout, locale: LocaleConfig) -> Path:
    """Destination directory of a locale's content tree."""
    if locale.default:
        return layout.content_dir
    return layout.i18n_dir / locale.identifier / DOCS_PLUGIN_SUBPATH


def _locale_target(layout: SiteLayout, locale: LocaleConfig) -> SyncTarget:
    return SyncTarget(
        name=f"locale:{locale.identifier}",
        label=f"{locale.label} docs",
        kind=TargetKind.TREE,
        source=layout.docs_source / locale.source_subdir,
        destination=locale_destination(layout, locale),
        clean=True,
        normalize=True,
    )


def build_targets(layout: SiteLayout, locales: Optional[Sequence[LocaleConfig]] = None) -> List[SyncTarget]:
    """Build the fixed, ordered list of sync targets.

    The order is: default locale tree, secondary locale trees (in configuration order), root README as site
    index, logo, favicon. The README comes after the locale trees as the default locale tree is cleared
    when synchronized.

    Args:
        layout: Input and output locations.
        locales: Locales to synchronize. If `None`, the configured locales are used.

    Returns:
        List[SyncTarget]: All targets, independent of whether their sources exist.
    """
    locales = get_locales() if locales is None else list(locales)
    try:
        default_locale = get_default_locale(locales)
    except ValueError as e:
        raise ResolutionError(f"Invalid locale configuration: {e}") from e
    secondary_locales = [locale for locale in locales if not locale.default]

    targets = [_locale_target(layout, locale) for locale in [default_locale] + secondary_locales]
    targets.append(
        SyncTarget(
            name='readme',
            label='README',
            kind=TargetKind.FILE,
            source=layout.readme_source,
            destination=layout.content_dir / INDEX_DOCUMENT,
            normalize=True,
        )
    )
    targets.append(
        SyncTarget(
            name='logo',
            label='Logo',
            kind=TargetKind.FILE,
            source=layout.logo_source,
            destination=layout.static_img_dir / 'logo.png',
            normalize=False,
        )
    )
    targets.append(
        SyncTarget(
            name='favicon',
            label='Favicon',
            kind=TargetKind.FILE,
            source=layout.favicon_source,
            destination=layout.static_img_dir / 'favicon.ico',
            normalize=False,
        )
    )
    return targets


def resolve_targets(
    layout: SiteLayout, locales: Optional[Sequence[LocaleConfig]] = None
) -> Tuple[List[SyncTarget], List[SyncTarget]]:
    """Split the targets into those to process and those skipped because their source is missing.

    Returns:
        Tuple[List[SyncTarget], List[SyncTarget]]: Pending targets and skipped targets, both in target order.
    """
    pending = []
    skipped = []
    for target in build_targets(layout, locales):
        if target.source_exists():
            pending.append(target)
        else:
            skipped.append(target)
    return pending, skipped
