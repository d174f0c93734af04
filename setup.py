"""Setup configuration for isogf."""

from setuptools import find_packages, setup

setup(
    name="isogf",
    version="0.1.0",
    description=(
        "Isochronous GF(2^8) arithmetic over the AES polynomial, free of "
        "data-dependent branches and table lookups"
    ),
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="isogf Contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "dev": [
            "pytest>=7.0",
        ],
        "bench": [
            "numpy>=1.24",
            "pandas>=2.0",
            "seaborn>=0.12",
            "matplotlib>=3.7",
            "tabulate>=0.9",
            "python-dotenv>=1.0",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering :: Mathematics",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
