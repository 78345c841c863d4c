from setuptools import setup, find_packages
import os
import io
import re

here = os.path.abspath(os.path.dirname(__file__))

# Read the version without importing the package
with io.open(os.path.join(here, "src", "whenpresent", "version.py"), encoding="utf-8") as ff:
    __version__ = re.search(r'__version__ = "([^"]+)"', ff.read()).group(1)

# Get the long description from the README file
with io.open(os.path.join(here, "src", "whenpresent", "README.when-present.rst"), encoding="utf-8") as ff:
    long_description = ff.read()

setup(
    name="whenpresent",
    version=__version__,
    description="Show which preprocessor conditions must hold for a line of C/C++ to be compiled",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    python_requires=">=3.9",
    license="GPLv3+",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Build Tools",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13"
    ],
    keywords="c++ preprocessor development",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={"whenpresent": ["README*", "samples/*.c"]},
    include_package_data=True,
    install_requires=[
        "configargparse>=1.5.3",
        "appdirs>=1.4.4",
    ],
    extras_require={
        "tests": ["pytest>=7.0"],
    },
    scripts=["when-present"],
)
