# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="schemelet",
    version="0.1.0",
    description="A small Lisp-family expression interpreter",
    python_requires=">=3.10",
    packages=find_namespace_packages(include=["schemelet", "schemelet.*"]),
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["schemelet=schemelet.__main__:main"],
    },
    zip_safe=False,
)
