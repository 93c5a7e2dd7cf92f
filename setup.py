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

from setuptools import setup, find_namespace_packages

setup(
    name="docsite.sync",
    version="0.1.0",
    description="Sync of the locale-partitioned documentation sources into the documentation site.",
    packages=find_namespace_packages(include=['docsite.*']),
    python_requires=">=3.8",
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'docs-sync = docsite.sync.cli:main',
        ],
    },
    zip_safe=False,
)
