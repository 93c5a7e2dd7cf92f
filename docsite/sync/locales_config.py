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
Shared locale configuration for the documentation site.

This file defines the locales whose documentation is synchronized into the site. It has to be kept
consistent with the ``i18n`` section of the site configuration (``docusaurus.config.ts``).

Add new locales to the LOCALES list below.
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class LocaleConfig:
    """
    A single documentation locale.

    Attributes:
        identifier (str): Locale identifier as used by the site (e.g. ``'zh'``)
        label (str): Human readable name, used in progress messages
        source_subdir (str): Directory below the docs source root which holds this locale's content
        default (bool): Whether this is the default locale (published to the primary content directory)
    """

    identifier: str
    label: str
    source_subdir: str
    default: bool = False


# List of all documentation locales
# Please note that:
# - Exactly one locale has to be marked as default.
# - The order in which the locales are listed here is the order in which they are synchronized. The default
#   locale is always synchronized first.
LOCALES = [
    LocaleConfig('en', 'English', 'en', default=True),
    LocaleConfig('zh', '中文', 'zh'),
    # Add new locales in the same way as above
]


def validate_locales(locales) -> None:
    """Check that exactly one locale is the default and that identifiers are unique."""
    defaults = [locale for locale in locales if locale.default]
    if len(defaults) != 1:
        raise ValueError(f"Exactly one default locale is required, found {len(defaults)}")
    identifiers = [locale.identifier for locale in locales]
    duplicates = sorted({i for i in identifiers if identifiers.count(i) > 1})
    if duplicates:
        raise ValueError(f"Duplicate locale identifiers: {duplicates}")


def get_locales() -> List[LocaleConfig]:
    """Get the list of configured locales."""
    return LOCALES.copy()


def get_default_locale(locales=None) -> LocaleConfig:
    """Get the default locale."""
    locales = LOCALES if locales is None else locales
    validate_locales(locales)
    return next(locale for locale in locales if locale.default)


def get_locale_ids() -> List[str]:
    """Get just the locale identifiers."""
    return [locale.identifier for locale in LOCALES]


if __name__ == "__main__":
    # When run directly, show the configuration
    print(f"Configured locales: {len(LOCALES)}")
    for i, locale in enumerate(LOCALES, 1):
        marker = " (default)" if locale.default else ""
        print(f"  {i}. {locale.identifier}: {locale.label}{marker}")
