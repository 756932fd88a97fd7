import os
import re

from setuptools import find_packages, setup


def get_version():
    """
    read the version from the package without importing it (pysam may not be installed yet)
    """
    with open(os.path.join(os.path.dirname(__file__), 'matepair', '__init__.py')) as fh:
        return re.search(r"^__version__ = '([^']+)'", fh.read(), re.MULTILINE).group(1)


TEST_REQS = [
    'coverage>=4.2',
    'pytest',
    'pytest-cov',
]


INSTALL_REQS = [
    'pysam>=0.15.2',
]

DEPLOY_REQS = ['twine', 'wheel']


setup(
    name='matepair',
    version=get_version(),
    packages=find_packages(exclude=['tests', 'tests.*']),
    description='Reconstructs paired-end read pairs from a stream of alignment records',
    install_requires=INSTALL_REQS,
    extras_require={
        'test': TEST_REQS,
        'dev': ['black', 'flake8'] + TEST_REQS + DEPLOY_REQS,
        'deploy': DEPLOY_REQS,
    },
    python_requires='>=3.6',
    test_suite='tests',
)
