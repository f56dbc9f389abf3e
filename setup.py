from setuptools import find_packages, setup

with open("README.rst") as f:
    long_description = f.read()

setup(
    name="gisframe",
    version="0.1.0",
    description="Tabular data wrangling and feature class I/O for GIS workflows",
    long_description=long_description,
    license="MIT",
    packages=find_packages(include=["gisframe", "gisframe.*"]),
    package_dir={"gisframe": "gisframe"},
    test_suite="gisframe/tests",
    python_requires=">=3.10",
    install_requires=[
        "geopandas>=1.0",
        "loguru",
        "matplotlib",
        "numpy",
        "pandas",
        "pyogrio",
        "pyproj",
        "shapely>=2",
        "toolz",
    ],
    extras_require={
        "dev": [
            "black",
            "pytest",
            "pytest-cov",
        ],
    },
    classifiers=[
        # https://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: GIS",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: Implementation :: CPython",
    ],
    keywords="gis geopandas dataframe dplyr feature class",
)
