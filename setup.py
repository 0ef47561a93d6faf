"""Setup script for linkgraph."""

from setuptools import find_packages, setup

setup(
    name="linkgraph",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.0",
            "networkx>=3.0",
        ],
    },
)
