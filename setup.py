"""
Setuptools script for the seeker_sim pursuit simulation.

Reads the package version from ``seeker_sim/__init__.py`` without importing
the package, so builds in an isolated environment do not need the runtime
dependencies. Runtime and development dependencies come from
``requirements.txt`` and ``requirements-dev.txt``.
"""

import pathlib
import re

import setuptools

HERE = pathlib.Path(__file__).parent
PACKAGE_DIR = HERE / "seeker_sim"
README_PATH = HERE / "README.md"
REQUIREMENTS_PATH = HERE / "requirements.txt"
DEV_REQUIREMENTS_PATH = HERE / "requirements-dev.txt"

PACKAGE_NAME = "seeker-sim"
AUTHOR = "seeker_sim Development Team"
DESCRIPTION = (
    "Gymnasium-compatible episodic pursuit simulation: a seeker closing "
    "distance to a target in a bounded arena"
)
LICENSE = "MIT"

KEYWORDS = [
    "reinforcement learning",
    "gymnasium",
    "pursuit",
    "simulation",
    "reward shaping",
]

CLASSIFIERS = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "License :: OSI Approved :: MIT License",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: Gymnasium",
]


def read_requirements(requirements_file: pathlib.Path) -> list:
    """Return requirement specifiers from a requirements file, skipping comments."""
    if not requirements_file.exists():
        return []
    requirements = []
    for line in requirements_file.read_text(encoding="utf-8").splitlines():
        line = line.split("#", 1)[0].strip()
        if line:
            requirements.append(line)
    return requirements


def read_long_description() -> str:
    if README_PATH.exists():
        return README_PATH.read_text(encoding="utf-8")
    return DESCRIPTION


def get_version_from_package() -> str:
    """Extract ``__version__`` from the package ``__init__.py`` by regex."""
    init_text = (PACKAGE_DIR / "__init__.py").read_text(encoding="utf-8")
    match = re.search(r'^__version__\s*=\s*["\']([^"\']+)["\']', init_text, re.M)
    if not match:
        raise RuntimeError("Unable to find __version__ in seeker_sim/__init__.py")
    return match.group(1)


def setup_package():
    version = get_version_from_package()

    install_requires = read_requirements(REQUIREMENTS_PATH)
    dev_requirements = read_requirements(DEV_REQUIREMENTS_PATH)

    setuptools.setup(
        name=PACKAGE_NAME,
        version=version,
        description=DESCRIPTION,
        long_description=read_long_description(),
        long_description_content_type="text/markdown",
        author=AUTHOR,
        license=LICENSE,
        keywords=KEYWORDS,
        classifiers=CLASSIFIERS,
        packages=setuptools.find_packages(include=["seeker_sim", "seeker_sim.*"]),
        install_requires=install_requires,
        extras_require={
            "dev": dev_requirements,
            "test": [
                "pytest>=8.0.0",
                "pytest-cov>=4.0.0",
                "hypothesis>=6.100.0",
            ],
        },
        entry_points={
            "console_scripts": [
                "seeker-sim=seeker_sim.cli.main:main",
            ]
        },
        python_requires=">=3.10",
        zip_safe=False,
    )


if __name__ == "__main__":
    setup_package()
