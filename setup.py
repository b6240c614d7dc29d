from setuptools import setup, find_packages

__version__ = '0.1.0'

requirements = [
    'coloredlogs',
    'sanic',
]

test_requirements = [
    'pytest',
    'sanic-testing',
]

setup(
    name='nftledger',
    version=__version__,
    description='Non-fungible token ledger: ownership, minting, transfers and approvals over a transactional store.',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=requirements,
    extras_require={
        'test': test_requirements,
    },
    python_requires='>=3.8',
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
    zip_safe=True,
    include_package_data=True,
)
