# setup.py
from setuptools import setup, find_packages

setup(
    name="malt",
    version="0.3.0",
    description="A small s-expression language: lexer, reader macros and a tree-walking evaluator",
    packages=find_packages(include=["malt", "malt.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest>=7", "hypothesis>=6"],
    },
    entry_points={
        "console_scripts": ["malt=malt.interpreter:main"],
    },
    zip_safe=False,
)
