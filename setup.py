"""
Installation script for the Battleship board model
"""

from pathlib import Path

from setuptools import find_packages, setup

BASE_DIR = Path(__file__).parent

# Required packages
REQUIRED_PACKAGES = [
    'numpy',
]

TEST_PACKAGES = [
    'pytest',
]


setup(
    name='battleship-grid',
    version='0.1.0',
    description='Board, ship placement and game configuration model for Battleship-style games',
    long_description=(BASE_DIR / 'README.md').read_text(encoding='utf-8'),
    long_description_content_type='text/markdown',
    packages=find_packages(include=['battleship_grid', 'battleship_grid.*']),
    python_requires='>=3.8',
    install_requires=REQUIRED_PACKAGES,
    extras_require={'test': TEST_PACKAGES},
)
