# -*- coding: utf-8 -*-
# File: setup.py

# Copyright 2024 Dr. Janis Meyer. All rights reserved.
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

import os
import re

from setuptools import find_packages, setup

ROOT = os.path.realpath(os.path.join(os.path.dirname(__file__)))

with open(os.path.join(ROOT, "README.md"), "rb") as f:
    long_description = f.read().decode("utf-8")


def get_version():
    init_path = os.path.join(ROOT, "layoutbox", "__init__.py")
    with open(init_path, "r", encoding="utf-8") as init_file:
        init_py = init_file.readlines()
    version_line = [l.strip() for l in init_py if l.startswith("__version__")][0]
    version = version_line.split("=")[-1].strip().strip("'\"")
    return version


# Will list all dependencies, even those that are only needed for development
_DEPS = [
    "catalogue==2.0.10",
    "numpy>=1.24",
    "pyyaml>=6.0.1",
    "termcolor>=1.1",
    "tabulate>=0.7.7",
    "typing-extensions>=4.1.0",
    # type-stubs
    "types-PyYAML>=6.0.12.12",
    "types-termcolor>=1.1.3",
    "types-tabulate>=0.9.0.3",
    # dev dependencies
    "black==23.7.0",
    "isort==5.13.2",
    "pylint==2.17.4",
    "mypy==1.4.1",
    # test
    "pytest>=8.0.2",
    "pytest-cov",
]

# lookup table with items like:
# catalogue: "catalogue==2.0.10"
deps = {b: a for a, b in (re.findall(r"^(([^!=<>]+)(?:[!=<>].*)?$)", x)[0] for x in _DEPS)}


def deps_list(*pkgs: str):
    return [deps[pkg] for pkg in pkgs]


dist_deps = deps_list(
    "catalogue",
    "numpy",
    "pyyaml",
    "termcolor",
    "tabulate",
    "typing-extensions",
)

# test dependencies
test_deps = deps_list("pytest", "pytest-cov")

# dev dependencies
dev_deps = deps_list(
    "black",
    "isort",
    "pylint",
    "mypy",
    "types-PyYAML",
    "types-termcolor",
    "types-tabulate",
)

EXTRA_DEPS = {
    "dev": dev_deps,
    "test": test_deps,
}

setup(
    name="layoutbox",
    version=get_version(),
    author="Dr. Janis Meyer",
    license="Apache License 2.0",
    description="Rectangle geometry and box collection operations for page layout analysis",
    long_description=long_description,
    long_description_content_type="text/markdown",
    install_requires=dist_deps,
    extras_require=EXTRA_DEPS,
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: Image Recognition",
    ],
    python_requires=">=3.9",
)
