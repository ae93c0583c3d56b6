from setuptools import setup, find_packages

setup(
    name="connectn",
    version="0.1.0",
    description="Two-player Connect Four on any board size, played in the terminal",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
