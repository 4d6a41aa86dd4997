#!/usr/bin/env python3
"""
Setup script for Material Quote Extractor
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README file
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text()

# Read requirements
requirements = (this_directory / "requirements.txt").read_text().splitlines()

setup(
    name="material-quote-extractor",
    version="1.0.0",
    description="A rule-based extractor for manufacturing line items in supplier quotes and pricing sheets",
    long_description=long_description,
    long_description_content_type="text/markdown",
    keywords="quote extraction sheet metal pricing pdf",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Manufacturing",
        "Topic :: Text Processing",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "quote-extractor=quote_extractor.cli:cli",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
