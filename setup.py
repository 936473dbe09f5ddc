# setup.py
from setuptools import setup, find_packages

setup(
    name="sprig",
    version="0.1.0",
    description="A minimal Lisp evaluator core over pre-analyzed expression trees",
    python_requires=">=3.10",
    packages=find_packages(include=["sprig", "sprig.*"]),
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
