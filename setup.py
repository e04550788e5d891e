# setup.py
from setuptools import setup, find_packages

setup(
    name="vec3f",
    version="1.0.0",
    description="Single-precision 3D vector primitive",
    packages=find_packages(include=["vec3f", "vec3f.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
