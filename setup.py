from setuptools import find_packages, setup

VERSION = '1.0.0'

TEST_REQS = [
    'coverage>=4.2',
    'pytest',
    'pytest-cov',
]


INSTALL_REQS = [
    'biopython>=1.79',
    'snakemake',
]


setup(
    name='svinfer',
    version='{}'.format(VERSION),
    packages=find_packages('src', exclude=['tests']),
    package_dir={'': 'src'},
    package_data={'svinfer': ['schemas/*.json']},
    description='Novel adjacency inference and structural variant type classification',
    install_requires=INSTALL_REQS,
    extras_require={
        'test': TEST_REQS,
        'dev': ['black', 'flake8'] + TEST_REQS,
    },
    tests_require=TEST_REQS,
    python_requires='>=3.8',
    test_suite='tests',
)
