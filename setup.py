# setup.py
from setuptools import setup, find_packages

setup(
    name="statement-parser",
    version="0.1.0",
    description="Parse CSV and PDF bank statements into categorized transactions",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.9",
    install_requires=[
        "click>=7.0",
        "pyyaml>=5.3",
        "pandas>=2.0",
        "pdfplumber>=0.10",
        "anyio>=3.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "parse-statements=statement_parser.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
