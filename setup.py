# setup.py
from setuptools import setup, find_packages

setup(
    name="deptreediff",
    version="1.0.0",
    description="Diff Gradle dependency resolution reports as trees or flat version changes",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'deptreediff=deptreediff.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
