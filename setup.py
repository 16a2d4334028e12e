#!/usr/bin/env python3
#
# Please see pyproject.toml for build system and tool configuration.
#
# see: https://setuptools.pypa.io/en/latest/userguide/pyproject_config.html

import setuptools

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="preconditions",
    version="1.0.0",
    description="Fail-fast argument and state checks for Python functions.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="Apache-2.0",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    install_requires=[
        "numpy",
        'tomli; python_version < "3.11"',
    ],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.8",
)
