#!/usr/bin/env python

"""The setup script."""

from setuptools import find_packages, setup

with open("requirements.txt", "r") as f:
    requirements = [x for x in map(str.strip, f.read().split("\n")) if x != ""]

setup(
    author="Dominik Muhs",
    author_email="dmuhs@protonmail.ch",
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Natural Language :: English",
        "Typing :: Typed",
        "Framework :: Falcon",
        "Programming Language :: Python :: 3",
    ],
    description="Falcon middleware for page and size query parameters",
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
    include_package_data=True,
    name="falcon_pagination",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    version="0.1.0",
    zip_safe=False,
)
