#!/usr/bin/env python3
"""
Setup script for slade that reads its metadata from pyproject.toml.
"""

import sys

from setuptools import find_packages, setup

# Read the pyproject.toml to get the package metadata
try:
    import tomllib

    with open("pyproject.toml", "rb") as f:
        pyproject_data = tomllib.load(f)

    poetry = pyproject_data["tool"]["poetry"]
    name = poetry["name"]
    version = poetry["version"]
    description = poetry["description"]
    authors = poetry["authors"]
    license_text = poetry["license"]

    # Get dependencies
    install_requires = []
    for dep, version_spec in poetry["dependencies"].items():
        if dep == "python":
            continue
        if isinstance(version_spec, str):
            install_requires.append(f"{dep}{version_spec}")
        else:
            install_requires.append(dep)

    test_requires = [
        f"{dep}{spec}" if isinstance(spec, str) else dep
        for dep, spec in poetry["group"]["test"]["dependencies"].items()
    ]

    console_scripts = [f"{script}={target}" for script, target in poetry["scripts"].items()]

    setup(
        name=name,
        version=version,
        description=description,
        author=authors[0] if isinstance(authors, list) else authors,
        license=license_text,
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        install_requires=install_requires,
        extras_require={"test": test_requires},
        entry_points={"console_scripts": console_scripts},
        python_requires=">=3.11,<4.0",
        include_package_data=True,
        zip_safe=False,
    )

except Exception as e:
    print(f"Error reading pyproject.toml: {e}")
    sys.exit(1)
