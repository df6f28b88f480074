# setup.py
from setuptools import setup, find_packages

setup(
    name="scenebake",
    version="1.0.0",
    description="Offline OBJ/MTL to normalized scene converter",
    packages=find_packages(include=["scenebake", "scenebake.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.20.0",
        "numba>=0.55.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["scenebake=scenebake.__main__:main"],
    },
)
