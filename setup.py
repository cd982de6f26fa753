# setup.py
from setuptools import setup, find_packages

setup(
    name="spanlisp",
    version="0.1.0",
    description="A small Clojure-flavoured Lisp REPL with span-accurate diagnostics",
    packages=find_packages(include=["spanlisp", "spanlisp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "step1=spanlisp.repl:step1_main",
            "step2=spanlisp.repl:step2_main",
        ],
    },
    zip_safe=False,
)
