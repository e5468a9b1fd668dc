from setuptools import setup, find_packages

setup(
    name="sectorfile",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "requests>=2.25.1",
        "pandas>=1.2.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "black>=21.0",
            "mypy>=0.900",
            "flake8>=3.9.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "sectorfile=sectorfile.cli:main",
        ]
    },
    description="A library for parsing radar sector files (.sct, .ese, .asr) and exporting them to GeoJSON",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.8",
)
