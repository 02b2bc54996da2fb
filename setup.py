#!/usr/bin/env python
"""
Setup script for maybe-monad - an optional value container with functional combinators
"""

from setuptools import setup, find_packages
import os
import re

# Read the version from the package __init__.py file
with open(os.path.join("maybe_monad", "__init__.py"), "r") as f:
    version_match = re.search(r"__version__\s*=\s*['\"]([^'\"]*)['\"]", f.read())
    version = version_match.group(1) if version_match else "0.1.0"

long_description = ""
content_type = "text/markdown"
if os.path.exists("README.md"):
    with open("README.md", "r", encoding="utf-8") as f:
        long_description = f.read()

# No runtime dependencies: the package only needs the standard library
install_requires = []

# Optional dependencies
extras_require = {
    "dev": [
        "pytest>=7.3.1",
        "pytest-cov>=4.1.0",
        "black>=23.3.0",
        "isort>=5.12.0",
    ],
    "test": [
        "pytest>=7.3.1",
        "pytest-cov>=4.1.0",
    ],
}

setup(
    name="maybe-monad",
    version=version,
    description="Maybe/Option container with lift, bind and flatten combinators",
    long_description=long_description,
    long_description_content_type=content_type,
    packages=find_packages(include=["maybe_monad", "maybe_monad.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries",
    ],
    python_requires=">=3.10",
    install_requires=install_requires,
    extras_require=extras_require,
    include_package_data=True,
    zip_safe=False,
    keywords=[
        "maybe",
        "option",
        "monad",
        "functional-programming",
    ],
)
