""" curveoracle build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import curveoracle

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=curveoracle.name,
    version=curveoracle.__version__,
    license=curveoracle.__license__,
    author=curveoracle.__author__,
    author_email=curveoracle.__author_email__,
    description="Elliptic curve point validation and enumeration over Fp",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["sympy"],
    extras_require={"test": ["pytest"]},
    keywords=(
        "elliptic-curves weierstrass finite-field modular-square-root "
        "tonelli-shanks NIST P-256 secp256r1 secp256k1 public-key-validation"
    ),
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
