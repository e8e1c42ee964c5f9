"""
setup.py
"""
import os
import logging
from codecs import open
from setuptools import setup, find_packages
import sys


logger = logging.getLogger(__name__)

here = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(here, "README.md"), encoding="utf-8") as f:
    readme = f.read()

with open(os.path.join(here, "scadaxdf", "version.py"), encoding="utf-8") as f:
    lines = f.read().split("\n")
    if len(lines) != 2:
        print("Invalid format in version.py", file=sys.stderr)
        sys.exit(1)


version = lines[0].split()[2].strip('"').strip("'")

install_requires = [
    "NREL-jade",
    "click>=8.0",
    "lxml>=4.5",
    "openpyxl",
    "pandas",
    "pydantic>=2.0",
    "toml>=0.10.0",
]
dev_requires = [
    "flake8",
    "pycodestyle",
    "pylint",
    "pytest",
    "pytest-cov",
]
test_requires = ["pytest"]

setup(
    name="scadaxdf",
    version=version,
    description="Generates XDF addressing and network-model documents from SCADA signal tables",
    long_description=readme,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_dir={"scadaxdf": "scadaxdf"},
    entry_points={
        "console_scripts": [
            "scadaxdf=scadaxdf.cli.scadaxdf:cli",
        ],
    },
    include_package_data=True,
    package_data={
        "scadaxdf": [
            "config/*.toml",
            "config/*.json",
        ],
    },
    license="BSD license",
    zip_safe=False,
    keywords=["scada", "xdf"],
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: BSD License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
    ],
    test_suite="tests",
    install_requires=install_requires,
    extras_require={
        "dev": dev_requires,
        "test": test_requires,
    },
)
