from setuptools import setup, find_packages

setup(
    name="mission-puzzles",
    version="0.1.0",
    description="Grid puzzle generation and validation engine for Mission Control",
    author="Mission Control Team",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"mission_puzzles.templates": ["*.yaml"]},
    python_requires=">=3.9",
    install_requires=[
        line.strip()
        for line in open("requirements.txt").readlines()
        if line.strip() and not line.startswith("#")
    ],
    extras_require={
        "test": ["pytest>=7.0", "hypothesis>=6.0"],
    },
    entry_points={
        "console_scripts": [
            "mission-puzzles=mission_puzzles.cli:main",
        ],
    },
)
