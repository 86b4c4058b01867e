#!/usr/bin/env python3
"""Setup script for Release Cadence."""

from setuptools import setup, find_packages
from pathlib import Path

# Read version from package
version = {}
with open("release_cadence/__init__.py") as f:
    exec(f.read(), version)

# Read long description from README
readme = Path("README.md").read_text(encoding="utf-8")

# Read requirements
requirements = Path("release_cadence/requirements.txt").read_text().strip().split("\n")

setup(
    name="release-cadence",
    version=version["__version__"],
    description="Measure how long each beta, release candidate and GA release stayed current, from a git tag listing",
    long_description=readme,
    long_description_content_type="text/markdown",
    author="",
    author_email="",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"release_cadence": ["requirements.txt"]},
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "release-cadence=release_cadence.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Version Control :: Git",
        "Topic :: Software Development :: Build Tools",
    ],
    keywords="git tags releases release-cadence beta rc go",
)
