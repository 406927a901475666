# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="dirscope",
    version="0.3.0",
    description="Directory tree viewer with colorized output and per-file metadata",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["dirscope", "dirscope.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        'console_scripts': [
            'dirscope=dirscope.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
)
