"""Setup script for array_console."""
from setuptools import setup, find_packages

setup(
    # ------------------------- Project Implementation Details/Requirements ------------------------
    name="array_console",
    version="0.1.0",

    packages=find_packages(exclude=('tests', 'tests.*')),
    python_requires=">=3.8",
    install_requires=["numpy>=1.17"],
    extras_require={
        'test': ['pytest>=6.0'],
    },

    # -------------------------------- Metadata for upload to PyPI ---------------------------------
    description="Console extensions that read and write typed arrays, mappings and exceptions.",
    license="TBD",
    keywords="console stdin array parsing numpy",
    long_description="Typed bulk reads from line-oriented input, formatted dumps of "
                     "sequences and mappings, exception dumps, raw byte reads, array "
                     "cropping and unique random number generation.",
)
