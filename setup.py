"""
Setup script for the game-bridge package.
"""

from setuptools import setup, find_packages

setup(
    name="game-bridge",
    version="1.0.0",
    description="Game Bridge - drive and inspect a running game session over local TCP",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "game-bridge=game_bridge.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Games/Entertainment :: Board Games",
    ],
)
