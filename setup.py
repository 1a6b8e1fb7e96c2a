# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="ara-source",
    version="0.1.0",
    description="Source-file loader for the Ara toolchain: discovers project and vendored sources",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["ara_source", "ara_source.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'ara-source=ara_source.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
