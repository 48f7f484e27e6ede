# setup.py
from setuptools import setup, find_packages

setup(
    name="mdl_parser",
    version="0.1.0",
    packages=find_packages(include=['mdl_parser', 'mdl_parser.*']),
    install_requires=[
        "construct>=2.10",
        "numpy>=1.21",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
    description="Decoder for game model definition blobs",
    keywords="model, mdl, binary, parser",
    entry_points={
        'console_scripts': [
            'mdl-dump=mdl_parser.main:main',
        ],
    }
)
