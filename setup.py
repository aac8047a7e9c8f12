from setuptools import setup

setup(
    name='scryptlang',
    version='0.1.0',
    description='Scrypt language interpreter: lexer, parser, tree-walking evaluator and formatter',
    package_dir={'scryptlang': 'src/scryptlang'},
    packages=[
        'scryptlang',
        'scryptlang.parser',
        'scryptlang.evaluator',
        'scryptlang.cli',
    ],
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'click>=7.0',
        'rich>=10.0'
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'scrypt = scryptlang.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
