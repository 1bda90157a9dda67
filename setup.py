from setuptools import setup, find_packages

setup(
    name="writeme",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={
        "writeme.document_generator": [
            "templates/*.j2",
            "templates/licenses/*.j2",
        ],
    },
    include_package_data=True,
    install_requires=[
        "agithub",
        "click",
        "giturlparse",
        "jinja2",
        "pytz",
        "typer",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
            "pytest-mock",
            "mypy",
            "black",
            "types-pytz",
        ],
    },
    entry_points={
        "console_scripts": [
            "writeme=writeme.cli.main_cli:app",
        ],
    },
    author="Datadog, Inc.",
    description="Generate README and CONTRIBUTING files from the metadata found in a project",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    url="https://github.com/DataDog/writeme",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
)
