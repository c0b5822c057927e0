"""SUBDIURNAL Package setup file."""
# Third Party Imports
import setuptools

setuptools.setup(
    name="subdiurnal",
    description="Tidal (subdiurnal) polar motion corrections following the IERS Conventions (2010)",
    version="1.0.0",
    packages=setuptools.find_packages("src"),
    package_dir={"": "src"},
    package_data={
        "subdiurnal.common": [
            "default_behavior.config",
        ],
    },
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.19",
    ],
    extras_require={
        "dev": [
            # Linting
            "ruff==0.1.1",
            "pylint==3.0.0",
            # Type Checking
            "mypy==1.6.0",
            # Formatters
            "black==23.9.1",
            "isort[colors]==5.12.0",
            "mdformat==0.7.17",
            "mdformat-myst==0.1.5",
            "mdformat-gfm==0.3.5",
            # Pre-commit stuff
            "pre-commit==3.5.0",
            # Misc.
            "check-manifest==0.49",
        ],
        "test": [
            "pytest>=7.4.2",
            "pytest-datafiles>=3.0.0",
            "pytest-randomly>=3.15.0",
            "coverage[toml]>=7.3.2; python_version < '3.11'",
            "coverage>=7.3.2; python_version >= '3.11'",
            "pytest-cov>=4.1.0",
        ],
        "doc": [
            "sphinx==6.1.3",
            "sphinx_rtd_theme==1.2.0",
            "myst-parser==1.0.0",
            "sphinx-copybutton==0.5.1",
            "sphinxcontrib-bibtex==2.5.0",
            "sphinx-gallery==0.12.2",
            "matplotlib>=3.3",
        ],
    },
    entry_points={
        "console_scripts": [
            "subdiurnal=subdiurnal:main",
        ]
    },
    zip_safe=False,
)
