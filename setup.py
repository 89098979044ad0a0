# setup.py
from setuptools import setup, find_packages

setup(
    name="arma-values",
    version="0.1.0",
    description="Convert between Python values and Arma (SQF) literal text",
    packages=find_packages(include=["arma", "arma.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
