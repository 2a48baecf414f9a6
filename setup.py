from setuptools import setup, find_packages

setup(
    name="apicli",
    version="0.1.0",
    description="Resolve and call HTTP APIs described in a local catalog",
    author="Duy Nguyen",

    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.9",
    install_requires=[
        "pydantic>=2",
        "structlog",
        "typer",
        "rich",
        "requests",
        "tomli; python_version < '3.11'",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "apicli=apicli.cli.main:app",
        ],
    },
)
