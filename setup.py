# setup.py - Package the nested interval encoder
from setuptools import setup, find_packages

setup(
    name="nested_intervals",
    version="0.1.0",
    description="Matrix nested interval encoding of tree positions",
    packages=find_packages(include=["nested_intervals", "nested_intervals.*"]),
    install_requires=["numpy"],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",
)
