# setup.py
from setuptools import setup, find_packages

setup(
    name="mylisp",
    version="0.1.0",
    description="A minimal homoiconic list-processing language",
    packages=find_packages(include=["mylisp", "mylisp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["mylisp=mylisp.repl:main"],
    },
    zip_safe=False,
)
