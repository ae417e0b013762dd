from setuptools import setup

setup(
    name='sprig',
    version='0.1.0',
    description='Pratt parser and shell for a small let/return expression language',
    package_dir={'': 'src'},
    packages=['sprig', 'sprig.parser', 'sprig.cli'],
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'click>=7.0',
        'rich>=10.0'
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'hypothesis>=6.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'sprig = sprig.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
