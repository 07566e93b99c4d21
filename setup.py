#!/usr/bin/env python

import re
import os
import shutil
import sys
import tempfile
import zipapp
from subprocess import check_call

from setuptools import setup, find_packages, Command

cmdclass = {}


with open("ciphertool/__init__.py") as f:
    _version = re.search(r"__version__\s+=\s+\'(.*)\'", f.read()).group(1)


class bdist_zip(Command):
    """Custom command to bundle the application and its requirements into a runnable zip file."""

    description = "Bundle the application into a single zip archive"
    user_options = [("dist-dir=", "d", "directory where to put the archive [default: dist]")]

    def initialize_options(self):
        self.dist_dir = None

    def finalize_options(self):
        if self.dist_dir is None:
            self.dist_dir = "dist"

    def run(self):
        os.makedirs(self.dist_dir, exist_ok=True)
        target = os.path.join(self.dist_dir, f"ciphertool-{_version}.zip")
        with tempfile.TemporaryDirectory() as staging:
            check_call([sys.executable, "-m", "pip", "install", "--target", staging, "-r", "requirements.txt"])
            shutil.copytree("ciphertool", os.path.join(staging, "ciphertool"),
                            ignore=shutil.ignore_patterns("__pycache__", "*.pyc"))
            zipapp.create_archive(staging, target, interpreter="/usr/bin/env python3", main="ciphertool.cli:cli")
        self.announce(f"created {target}", level=2)


cmdclass["bdist_zip"] = bdist_zip


CURDIR = os.path.dirname(os.path.abspath(__file__))
with open(os.path.join(CURDIR, "requirements.txt")) as requirements:
    REQUIREMENTS = requirements.read().splitlines()


setup(
    name="ciphertool",
    version=_version,
    packages=find_packages(exclude=["tests"]),
    description="Caesar and Vigenère text substitution from the command line",
    license="MIT",
    python_requires=">=3.8",
    entry_points={"console_scripts": ["ciphertool=ciphertool.cli:cli"]},
    install_requires=REQUIREMENTS,
    extras_require={"test": ["pytest"]},
    cmdclass=cmdclass,
)
