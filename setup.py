#!python

import os.path, sys
from setuptools import setup, find_packages

sys.path.insert(0, os.path.abspath("src"))
from endianness import __version__


if __name__ == "__main__":
    setup(
        name="endianness",
        version=__version__,
        package_dir={'': 'src'},
        packages=find_packages("src"),

        author="Matt Chaput",
        author_email="matt@whoosh.ca",

        description="Conversion of fixed-width numbers between host, big-endian and little-endian byte order.",
        long_description=open("README.txt").read(),

        license="Two-clause BSD license",
        keywords="endian byteorder byteswap struct",

        zip_safe=True,
        python_requires=">=3.6",
        install_requires=["numpy"],
        extras_require={"test": ["pytest"]},

        classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries :: Python Modules",
        ],
    )
