from setuptools import setup, find_packages

setup(
    name="quadrature-engine",
    version="0.1.0",
    description="Classical quadrature rules (rectangle, trapezoidal, Simpson) with adaptive refinement",
    author="adamfilli",
    packages=find_packages(include=["quadrature", "quadrature.*"]),
    install_requires=[
        "matplotlib",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    include_package_data=True,
    python_requires=">=3.11",
)
