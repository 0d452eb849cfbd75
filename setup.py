from setuptools import setup, find_packages
from pathlib import Path

# Read the long description from your README
long_description = Path(__file__).parent.joinpath("README.md").read_text()

setup(
    name='codeanalyzer',
    version='0.1.0',
    description='Static code-quality analysis of C# sources: long methods, magic numbers, naming, dead code',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='Giorgos Nicolaides',

    # Automatically find your package and subpackages
    packages=find_packages(exclude=["tests", "tests.*"]),

    # Runtime dependencies
    install_requires=[
        'tree-sitter>=0.23',
        'tree-sitter-c-sharp>=0.23',
        'toml>=0.10.0',
        'PyYAML>=5.1',
        'colorama>=0.4.0',
    ],
    # Optional dependencies for development
    extras_require={
        'dev': [
            'pytest>=6.0',
            'flake8',
        ],
    },

    # Define console entry point for the CLI
    entry_points={
        'console_scripts': [
            'codeanalyzer=codeanalyzer.cli:main',
        ],
    },

    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.9',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)
