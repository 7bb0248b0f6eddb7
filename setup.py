"""Setup script for Fuzzy Marks"""
from setuptools import setup, find_packages

setup(
    name="fuzzy-marks",
    version="1.0.0",
    description="Fuzzy roster name matching for recording student marks",
    author="Fuzzy Marks Developers",
    packages=find_packages(include=["fuzzy_marks", "fuzzy_marks.*"]),
    install_requires=[
        "pandas>=2.0.0",
        "python-dotenv>=1.0.0",
        "rapidfuzz>=3.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
)
