# setup.py
from setuptools import setup, find_packages

setup(
    name="treecraft",
    version="0.1.0",
    description="Create directory structures from plain-text tree diagrams",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={
        "treecraft": ["interface/locales/*.json"],
    },
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'treecraft=treecraft.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
