import os
import setuptools


with open(os.path.join(
        os.path.dirname(__file__), 'ordtree', '_version.py')) as f:
    for line in f:
        if line.startswith('__version__ ='):
            _, _, version = line.partition('=')
            VERSION = version.strip(" \n'\"")
            break
    else:
        raise RuntimeError(
            'unable to read the version from ordtree/_version.py')


setuptools.setup(
    name='ordtree',
    version=VERSION,
    description='Ordered map on a binary search tree with rank and select',
    python_requires='>=3.6',
    packages=['ordtree'],
    package_data={'ordtree': ['py.typed', '*.pyi']},
    install_requires=[
        'typing-extensions>=3.7.4.3;python_version<"3.8"',
    ],
    extras_require={
        'test': [
            'pytest>=6.2.4',
        ],
        'benchmark': [
            'sortedcontainers>=2.4',
        ],
    },
)
