# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="codebase-scanner",
    version="1.0.2",
    description="Generate a single markdown document describing a codebase's structure and sources",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["codebase_scanner", "codebase_scanner.*"]),
    python_requires=">=3.9",
    install_requires=[
        "pyuca",
        "tiktoken",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'codebase-scanner=codebase_scanner.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
