"""Build configuration for the sexpfmt package."""

from setuptools import setup

setup(
    name="sexpfmt",
    version="0.1.0",
    description="Width-aware pretty-printer for s-expression text",
    python_requires=">=3.9",
    packages=["sexpfmt"],
    package_dir={"sexpfmt": "python/sexpfmt"},
    package_data={"sexpfmt": ["py.typed"]},
    extras_require={
        "test": ["pytest", "pytest-benchmark"],
    },
)
