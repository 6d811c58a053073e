# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="dirmenu",
    version="1.0.0",
    description="Render HTML navigation menus from directory trees",
    packages=find_namespace_packages(where="src", include=["dirmenu*"]),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "beautifulsoup4",  # Title extraction from HTML documents
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'dirmenu=dirmenu.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
