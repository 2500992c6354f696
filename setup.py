"""Setup script for sam-trinary-py package."""

from setuptools import setup, find_packages

setup(
    name="sam-trinary-py",
    use_scm_version={"fallback_version": "0.1.0"},
    description="Pure Python SaM sponge hash over balanced ternary",
    packages=find_packages(include=["trinary", "sam"]),
    python_requires=">=3.6",
    extras_require={"test": ["pytest"]},
    include_package_data=True,
)
