from __future__ import annotations

from setuptools import find_packages, setup

setup(
    name="uocplay-subscriptions",
    version="0.1.0",
    # Repo convention: library code lives under `backend/` and is imported as
    # a normal top-level package (`import uocplay`).
    package_dir={"": "backend"},
    packages=find_packages(where="backend", include=["uocplay", "uocplay.*"]),
    package_data={"uocplay.config": ["*.yaml"]},
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.6,<3",
        "pyyaml>=6.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        # Tests are plain unittest; pytest is only a convenience runner.
        "test": ["pytest>=7.4"],
    },
)
