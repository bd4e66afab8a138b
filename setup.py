#!/usr/bin/env python3
"""
Setup script for FailTracker.

Issue tracking core: issues, edit sessions and change history.
"""

import sys
from pathlib import Path
from typing import List, Dict, Any

from setuptools import setup, find_packages


def read_file(filepath: str) -> str:
    """Read file contents safely."""
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            return f.read()
    except FileNotFoundError:
        return ""


def get_version() -> str:
    """Get version from the constants file."""
    version_file = Path(__file__).parent / "fail_tracker" / "utils" / "constants.py"
    if version_file.exists():
        content = read_file(str(version_file))
        for line in content.split('\n'):
            if "'VERSION':" in line and "APP_INFO" in content:
                # Extract version from APP_INFO dict
                version = line.split("'")[3]
                return version
    return "1.0.0"  # Fallback version


def get_requirements() -> List[str]:
    """Get requirements from requirements.txt."""
    requirements_file = Path(__file__).parent / "requirements.txt"
    if requirements_file.exists():
        with open(requirements_file, 'r', encoding='utf-8') as f:
            return [
                line.strip()
                for line in f
                if line.strip() and not line.startswith('#')
            ]

    # Fallback requirements
    return [
        "python-dotenv>=0.19.0,<2.0.0",
    ]


def get_dev_requirements() -> List[str]:
    """Get development requirements."""
    dev_requirements_file = Path(__file__).parent / "requirements-dev.txt"
    if dev_requirements_file.exists():
        with open(dev_requirements_file, 'r', encoding='utf-8') as f:
            return [
                line.strip()
                for line in f
                if line.strip() and not line.startswith('#') and not line.startswith('-r')
            ]

    # Fallback dev requirements
    return [
        "pytest>=7.0.0",
        "pytest-cov>=4.0.0",
        "pytest-mock>=3.10.0",
        "black>=23.0.0",
        "flake8>=6.0.0",
        "mypy>=1.0.0",
        "isort>=5.12.0",
    ]


def validate_python_version() -> None:
    """Validate Python version compatibility."""
    if sys.version_info < (3, 9):
        raise RuntimeError(
            "This package requires Python 3.9 or higher. "
            f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
        )


def get_long_description() -> str:
    """Get long description from README."""
    readme_file = Path(__file__).parent / "README.md"
    return read_file(str(readme_file))


def get_classifiers() -> List[str]:
    """Get package classifiers."""
    return [
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Bug Tracking",
        "Topic :: Office/Business :: Groupware",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3 :: Only",
        "Operating System :: OS Independent",
        "Natural Language :: English",
        "Typing :: Typed",
    ]


def get_keywords() -> List[str]:
    """Get package keywords."""
    return [
        "issue-tracking", "bug-tracker", "project-management",
        "workflow", "audit-log", "change-history"
    ]


# Validate Python version before proceeding
validate_python_version()

# Setup configuration
setup_config: Dict[str, Any] = {
    "name": "fail-tracker",
    "version": get_version(),
    "description": "Issue tracking core: issues, edit sessions and change history",
    "long_description": get_long_description(),
    "long_description_content_type": "text/markdown",
    "packages": find_packages(exclude=['tests*', 'docs*', 'examples*']),
    "classifiers": get_classifiers(),
    "keywords": " ".join(get_keywords()),
    "license": "MIT",
    "python_requires": ">=3.9",
    "install_requires": get_requirements(),
    "extras_require": {
        "dev": get_dev_requirements(),
        "testing": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "pytest-mock>=3.10.0",
        ],
        "linting": [
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
            "isort>=5.12.0",
        ],
    },
    "include_package_data": True,
    "zip_safe": False,
    "platforms": ["any"],
}

if __name__ == "__main__":
    try:
        setup(**setup_config)
    except Exception as e:
        print(f"Setup failed: {e}", file=sys.stderr)
        sys.exit(1)
