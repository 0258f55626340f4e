import sys
from pathlib import Path

from setuptools import setup, find_namespace_packages

if sys.version_info[0:2] < (3, 9):
    raise RuntimeError("This package requires Python 3.9+.")

setup(
    name="moat-dmap",
    version="0.1.0",
    packages=find_namespace_packages(include=["moat.*"]),
    package_data={"moat.dmap": ["_cfg.yaml"]},
    url="https://github.com/M-o-a-T/moat",
    license="MIT",
    author="Matthias Urlichs",
    author_email="<matthias@urlichs.de>",
    description="Path-based access to decoded JSON, YAML and msgpack data",
    long_description=Path(__file__).with_name("README.rst").read_text(encoding="utf-8"),
    install_requires=[
        "anyio>=3.0",
        "asyncclick>=8.1",
        "attrs>=22.1",
        "msgpack>=1.0",
        "ruyaml>=0.91",
        "simpleeval>=0.9.13",
        "simplejson>=3.17",
        "trio>=0.22",
    ],
    extras_require={
        "test": ["pytest>=7", "anyio>=3.0", "trio>=0.22"],
    },
    entry_points={
        "console_scripts": ["moat-dmap = moat.dmap._main:cmd"],
    },
    python_requires=">=3.9",
    classifiers=[
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Framework :: AnyIO",
        "Framework :: Trio",
        "License :: OSI Approved",
    ],
)
