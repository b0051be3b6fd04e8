from setuptools import find_packages, setup

setup(
    name="gfmlinks",
    version="0.1.0",
    description="GitHub-flavored heading links for note vaults",
    packages=find_packages(include=["gfmlinks", "gfmlinks.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",  # Configuration models
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "lizard",  # Cyclomatic complexity
            "types-setuptools",  # Type stubs
        ],
    },
)
