#!/usr/bin/env python3
"""
Setup script for the logistic growth method comparison
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="logistic-growth-methods",
    version="1.0.0",
    description="Euler, improved Euler and Runge-Kutta 4 compared against the exact logistic growth solution",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["logistic_growth", "logistic_growth.*", "viz", "viz.*"]),
    py_modules=["simulate_logistic"],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "dev": [
            "pytest>=8.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "simulate-logistic=simulate_logistic:main",
        ],
    },
    include_package_data=True,
)
