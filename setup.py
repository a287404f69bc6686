# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="npmfs",
    version="1.0.0",
    description="Filesystem elements and npm package structure validation",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["npmfs", "npmfs.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'npmfs=npmfs.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
