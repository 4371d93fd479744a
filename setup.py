#!/usr/bin/env python

from setuptools import find_packages, setup  # type: ignore

setup(
    name="safe-numeric",
    license="Apache License 2.0",
    description="Reentrant numeric literal parsing into an exact scaled mantissa, with controlled precision loss",
    long_description=open("README.rst").read(),
    use_scm_version={
        "write_to": "safe_numeric/version.py",
        "fallback_version": "0.1.0",
    },
    setup_requires=["setuptools_scm >= 3.4.3"],
    install_requires=["typing_extensions >= 3.7.4"],
    extras_require={
        "tests": [
            "flake8",
            "coverage",
            "build",
            "wheel",
            "mypy",
            "http-sfv >= 0.9.3",
            "ruff",
        ]
    },
    packages=find_packages(exclude=["test"]),
    include_package_data=True,
    package_data={
        "safe_numeric": ["py.typed"],
    },
    platforms=["MacOS X", "Posix"],
    test_suite="test",
    classifiers=[
        "Intended Audience :: Developers",
        "Operating System :: MacOS :: MacOS X",
        "Operating System :: POSIX",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
