# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
from setuptools import setup

setup(
    name='thermomatrix',
    packages=['thermomatrix',
              'thermomatrix.utils',
              'thermomatrix.utils.decorators',
              'thermomatrix.mixture',
              'thermomatrix.sources'],
    license='MIT',
    version='0.1.0',
    description="Binary interaction parameter matrices and component property sources",
    long_description=open('README.rst', encoding='utf-8').read(),
    author='Yoel Cortes-Pena',
    install_requires=['colorpalette>=0.3.3',
                      'pandas>=0.25.2',
                      'numpy>=1.18.1'],
    extras_require={
        'dev': [
            'pytest',
            'pytest-cov',
            'coveralls',
        ],
        'test': [
            'pytest',
            'pytest-cov',
        ],
    },
    package_data={
        'thermomatrix': [
            'utils/*',
            'utils/decorators/*',
            'mixture/*',
            'sources/*',
        ]
    },
    python_requires='>=3.8',
    platforms=['Windows', 'Mac', 'Linux'],
    author_email='yoelcortes@gmail.com',
    classifiers=['Development Status :: 3 - Alpha',
                 'Environment :: Console',
                 'License :: OSI Approved :: University of Illinois/NCSA Open Source License',
                 'License :: OSI Approved :: MIT License',
                 'Topic :: Scientific/Engineering',
                 'Topic :: Scientific/Engineering :: Chemistry',
                 'Intended Audience :: Developers',
                 'Intended Audience :: Science/Research',
                 'Natural Language :: English',
                 'Operating System :: OS Independent',
                 'Programming Language :: Python :: 3.8',
                 'Programming Language :: Python :: Implementation :: CPython'],
    keywords=['thermodynamics', 'chemical engineering', 'binary interaction parameters', 'material properties', 'mixtures'],
)
