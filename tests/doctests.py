# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
# 
# This module is under the UIUC open-source license. See 
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
This module contains all doctests for thermomatrix.

"""
import thermomatrix as tmx
import doctest
from doctest import testmod

__all__ = ('test_settings',
           'test_component',
           'test_record',
           'test_property_key',
           'test_matrix_data',
           'test_equation',
           'test_data',
           'test_readers',
           'test_utils',
)

kwargs = dict(optionflags=doctest.ELLIPSIS ^ doctest.NORMALIZE_WHITESPACE)

def test_settings():
    from thermomatrix import _settings
    testmod(_settings, **kwargs)
    tmx.settings.reset()

def test_component():
    from thermomatrix import _component
    testmod(_component, **kwargs)

def test_record(): 
    from thermomatrix import _record
    testmod(_record, **kwargs)

def test_property_key(): 
    from thermomatrix import _property_key
    testmod(_property_key, **kwargs)

def test_matrix_data():
    testmod(tmx.mixture._matrix_data, **kwargs)
    testmod(tmx.mixture._binary, **kwargs)

def test_equation(): 
    from thermomatrix import _equation
    testmod(_equation, **kwargs)

def test_data(): 
    from thermomatrix import _data
    testmod(_data, **kwargs)

def test_readers():
    testmod(tmx.readers, **kwargs)
    
def test_utils():
    testmod(tmx.utils.representation, **kwargs)
    
if __name__ == '__main__':
    test_settings()
    test_component()
    test_record()
    test_property_key()
    test_matrix_data()
    test_equation()
    test_data()
    test_readers()
    test_utils()
