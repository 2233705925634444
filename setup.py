"""
setup.py (editable-install helper)
---------------------------------
Packaging entry point for `pip install -e .` / `pip install .`.
"""

from pathlib import Path

from setuptools import find_packages, setup

ROOT = Path(__file__).resolve().parent
README = (ROOT / "README.md").read_text(encoding="utf-8")

setup(
    # ------------------------------------------------------------------
    # Core metadata
    # ------------------------------------------------------------------
    name="curve-interp",
    version="0.1.0",
    description="Cubic-spline, linear and flat 1-D interpolation for term-structure curves",
    long_description=README,
    long_description_content_type="text/markdown",
    author="Your-Desk-Quant-Team",
    license="MIT",
    python_requires=">=3.10",

    # ------------------------------------------------------------------
    # Package discovery – src layout
    # ------------------------------------------------------------------
    package_dir={"": "src"},
    packages=find_packages(where="src", exclude=("tests", "notebooks")),
    include_package_data=True,

    # ------------------------------------------------------------------
    # Dependencies
    # ------------------------------------------------------------------
    install_requires=[
        "numpy>=1.26",
        "scipy>=1.11",
        "numba>=0.59",          # jit kernels in interpolators/_core.py
        "matplotlib>=3.8",
        "pandas>=2.2",
        "PyYAML>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=8.0",
            "ruff>=0.3",
            "black>=24.3",
            "ipython",
        ]
    },
    entry_points={
        "console_scripts": [
            "curve-interp=curve_interp.cli.interpolate:main",
        ],
    },

    # ------------------------------------------------------------------
    # Trove classifiers
    # ------------------------------------------------------------------
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Intended Audience :: Financial and Insurance Industry",
        "Operating System :: OS Independent",
    ],

    zip_safe=False,
)
