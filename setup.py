from setuptools import setup, find_packages

setup(
    name="pip-sbom",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "license-expression",
        "requests",
        "scancode-toolkit",
        "typer",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
            "pytest-mock",
            "mypy",
            "black",
            "types-requests",
        ],
    },
    entry_points={
        "console_scripts": [
            "pip-sbom=pip_sbom.cli.main_cli:app",
        ],
    },
    author="Datadog, Inc.",
    author_email="opensource@datadoghq.com",
    description="Resolves the modules of a python project and links them in a dependency graph for SBOM generation",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
