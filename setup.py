#!/usr/bin/env python3
from setuptools import setup

setup(
    name="githubfs",
    author="Peter Kerpedjiev",
    author_email="pkerpedjiev@gmail.com",
    packages=["githubfs", "httpfs"],
    entry_points={"console_scripts": ["githubfs = githubfs.__main__:main"]},
    url="https://github.com/milahu/githubfs",
    description="Read-only filesystem for Github repositories",
    license="MIT",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    install_requires=["diskcache", "fusepy", "requests"],
    extras_require={"test": ["pytest", "urllib3"]},
    python_requires=">=3.7",
    version="0.5.0",
)
