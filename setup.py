from setuptools import setup, find_packages

with open('requirements.txt') as f:
    required = f.read().splitlines()

setup(
    name = 'nettag',
    version = '0.1.0',
    description = 'Validated setting registry and config service for the NetTag file tracking server',
    packages = find_packages(include=['nettag', 'nettag.*']),
    python_requires = '>=3.10',
    install_requires = required,
    extras_require = {
        'test': ['pytest', 'pytest-cov'],
    },
    entry_points = {
        'console_scripts': ['nettag=nettag.cli:main'],
    },
)
