import os
from setuptools import find_packages, setup


PKG_NAME = 'ffnn'

VERSION_MAJOR = 0
VERSION_MINOR = 0
VERSION_MICRO = 1
VERSION = f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_MICRO}"


def write_version():
    with open(os.path.join(PKG_NAME, '_version.py'), 'w') as f:
        f.write(f'version = "{VERSION}"\n')


if __name__ == '__main__':
    write_version()

    setup(
        author='Matt Hancock',
        author_email='not.matt.hancock@gmail.com',
        classifiers=[
            'Development Status :: 3 - Alpha',
            'Intended Audience :: Science/Research',
            'Intended Audience :: Developers',
            'License :: OSI Approved :: MIT License',
            'Programming Language :: Python',
            'Programming Language :: Python :: 3',
            'Topic :: Scientific/Engineering',
            'Topic :: Scientific/Engineering :: Artificial Intelligence',
            'Topic :: Scientific/Engineering :: Mathematics',
            'Operating System :: Microsoft :: Windows',
            'Operating System :: POSIX',
            'Operating System :: Unix',
            'Operating System :: MacOS',
        ],
        description=('Three layer feed-forward neural network with '
                     'backpropagation and momentum'),
        install_requires=[
            'h5py',
            'matplotlib',
            'numpy',
            'scikit_learn',
            'scipy',
        ],
        license='MIT',
        name=PKG_NAME,
        packages=find_packages(exclude=['examples', 'examples.*']),
        python_requires='>=3.6',
        version=VERSION,
    )
