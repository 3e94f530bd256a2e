"""Setup script for fe2o3 finite element data containers."""

from setuptools import setup, find_packages
from pathlib import Path

# Read README file
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text() if (this_directory / "README.md").exists() else ""

# Read version without importing the package
version_ns = {}
exec((this_directory / "src" / "fe2o3" / "_version.py").read_text(), version_ns)

setup(
    name="fe2o3",
    version=version_ns["__version__"],
    description="Shaped array containers, finite and infinite sets and mesh topology bases for finite element codes",
    long_description=long_description,
    long_description_content_type="text/markdown",

    packages=find_packages(where="src"),
    package_dir={"": "src"},

    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
        "pyyaml>=6.0",
    ],

    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
            "isort>=5.12.0",
        ],
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },

    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Developers",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: Implementation :: CPython",
        "Operating System :: OS Independent",
        "Natural Language :: English",
    ],

    keywords=[
        "finite-element", "mesh", "topology", "ndarray", "numpy",
        "scientific-computing", "computational-mathematics"
    ],

    zip_safe=False,
)
