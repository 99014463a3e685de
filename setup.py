# setup.py
from setuptools import setup, find_packages

setup(
    name="meval",
    version="0.1.0",
    description="An extensible eval/apply core for a small Lisp",
    packages=find_packages(include=["meval", "meval.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
