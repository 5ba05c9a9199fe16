from setuptools import setup, find_packages

setup(
    name="label-finder",
    version="1.0.0",
    description="Rank GitHub repositories by issues matching a set of labels",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "label-finder=label_finder.main:main",
        ],
    },
)
