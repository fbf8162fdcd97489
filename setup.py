# setup.py
from setuptools import setup, find_packages

setup(
    name="faye",
    version="0.1.0",
    description="faye, a pretty lil lisp: reader and tree-walking evaluator",
    packages=find_packages(include=["faye", "faye.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
