# setup.py
from setuptools import setup, find_packages

setup(
    name="filesearch",
    version="1.0.0",
    description="Incremental, cancellable file name search over directory trees",
    author="FileSearch Contributors",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={
        "filesearch": ["interface/locales/*.json"],
    },
    include_package_data=True,
    install_requires=[
        "customtkinter>=5.2",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        'console_scripts': [
            'filesearch=filesearch.main:main',
            'filesearch-cli=filesearch.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
