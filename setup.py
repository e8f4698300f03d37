import os
from setuptools import setup, find_packages


def get_version():
    data = {}
    fname = os.path.join('jacobipoisson', '__init__.py')
    exec(compile(open(fname).read(), fname, 'exec'), data)
    return data.get('__version__')


install_requires = ['numpy', 'numba']
tests_require = ['pytest']
docs_require = ['sphinx']

classes = '''
Development Status :: 4 - Beta
Intended Audience :: Developers
Intended Audience :: Science/Research
License :: OSI Approved :: BSD License
Natural Language :: English
Operating System :: MacOS :: MacOS X
Operating System :: POSIX
Operating System :: Unix
Programming Language :: Python
Programming Language :: Python :: 3
Topic :: Scientific/Engineering :: Mathematics
Topic :: Software Development :: Libraries
'''
classifiers = [x.strip() for x in classes.splitlines() if x]

setup(
    name='jacobipoisson',
    version=get_version(),
    description='Shared-memory Jacobi solver for the 2D Poisson equation',
    long_description=open('README.rst').read(),
    license="BSD",
    classifiers=classifiers,
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.7',
    install_requires=install_requires,
    extras_require={
        "docs": docs_require,
        "tests": tests_require,
        "dev": docs_require + tests_require,
    },
    entry_points={
        'console_scripts': ['jacobi-poisson = jacobipoisson.cli:main'],
    },
)
