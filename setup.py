from setuptools import setup, find_packages

setup(
    name="klima-indices",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    install_requires=[
        "numpy>=1.21.0",
        "pandas>=1.3.0",
        "matplotlib>=3.4.0",
        "seaborn>=0.11.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    author="Klima Dashboard Team",
    description="Climate indices (Thornthwaite PET, De Martonne) for the climate dashboard",
    python_requires=">=3.8",
)
