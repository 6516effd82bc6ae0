from setuptools import find_packages, setup

setup(
    name="permutate",
    version="0.1.0",
    description="Lazy cartesian product iterator with buffer reuse",
    packages=find_packages(exclude=["*.tests"]),
    python_requires=">=3.12",
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["permutate = permutate.cli:main"]},
)
