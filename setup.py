"""
Set up package.
Required modules: pydantic_core (maybe.py), pydantic (read.py), toolz (curried functions throughout)
Test modules: pytest, hypothesis
"""
from setuptools import setup, find_packages

setup(
    name='fplus',
    version='0.1',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    python_requires='>=3.10',
    install_requires=[
        'pydantic_core',
        'pydantic',
        'toolz',
    ],
    extras_require={
        'test': [
            'pytest',
            'hypothesis',
        ],
    },
)
