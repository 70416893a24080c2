# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
# 
# This module is under the UIUC open-source license. See 
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
import thermomatrix as tmx
from thermomatrix import parse_property_key

def test_placeholder_forms():
    key = parse_property_key('a_i_j | Methanol | Ethanol')
    assert (key.prefix, key.delimiter, key.i, key.j) == ('a', '|', 'i', 'j')
    assert key.scope == ('Methanol', 'Ethanol')
    assert key.scope_placeholders == tmx.ComponentPlaceholders('Methanol', 'Ethanol')
    
    key = parse_property_key('  a | Methanol | Ethanol ')
    assert (key.prefix, key.delimiter, key.i, key.j) == ('a', '|', '', '')
    assert key.placeholders is None
    assert key.mode == 'component'
    assert key.scope == ('Methanol', 'Ethanol')
    
    key = parse_property_key('alpha_CH3OH_C2H5OH')
    assert (key.prefix, key.delimiter, key.i, key.j) == ('alpha', '_', 'CH3OH', 'C2H5OH')
    assert key.placeholders == tmx.ComponentPlaceholders('CH3OH', 'C2H5OH')
    assert key.scope == ()

def test_numeric_mode():
    key = parse_property_key('a_1_2')
    assert key.mode == 'numeric'
    assert key.placeholders == tmx.NumericPlaceholders(1, 2)
    assert parse_property_key('a_1_x').mode == 'component'
    assert parse_property_key('a_1').mode == 'component'
    assert parse_property_key('a | 2 | 1').scope_placeholders == tmx.NumericPlaceholders(2, 1)

def test_malformed_references():
    key = parse_property_key('alpha')
    assert (key.prefix, key.delimiter, key.i, key.j, key.scope) == ('alpha', '', '', '', ())
    assert key.placeholders is None
    key = parse_property_key('a_1')
    assert (key.prefix, key.i, key.j) == ('a', '1', '')
    assert key.placeholders is None
    key = parse_property_key('')
    assert key.prefix == ''
    
def test_custom_delimiters():
    key = parse_property_key('a_i_j | Methanol | Ethanol', ('_',))
    assert (key.prefix, key.i, key.j) == ('a', 'i', 'j | Methanol | Ethanol')
    key = parse_property_key('a-1-2', ('-',))
    assert (key.prefix, key.i, key.j, key.mode) == ('a', '1', '2', 'numeric')
    key = parse_property_key('a_1_2 : Methanol : Ethanol', (':', '_'))
    assert (key.prefix, key.i, key.j) == ('a', '1', '2')
    assert key.scope == ('Methanol', 'Ethanol')
    
def test_placeholder_resolution():
    methanol = tmx.Component('Methanol', 'CH3OH', 'l')
    ethanol = tmx.Component('Ethanol', 'C2H5OH', 'l')
    components = (methanol, ethanol)
    keys = tmx.settings.mixture_keys
    assert tmx.NumericPlaceholders(2, 1).resolve(components, keys) == (ethanol, methanol)
    assert tmx.NumericPlaceholders(3, 1).resolve(components, keys) == (None, methanol)
    assert tmx.NumericPlaceholders(1.5, 1).resolve(components, keys) == (None, methanol)
    assert tmx.ComponentPlaceholders('c2h5oh', 'Methanol-CH3OH').resolve(components, keys) == (ethanol, methanol)
    
def test_mixture_property_key():
    methanol = tmx.Component('Methanol', 'CH3OH', 'l')
    ethanol = tmx.Component('Ethanol', 'C2H5OH', 'l')
    assert tmx.mixture_property_key('a', methanol, ethanol) == 'a_Methanol-CH3OH_Ethanol-C2H5OH'
    assert tmx.mixture_property_key('a', ethanol, methanol, 'Formula', '|') == 'a|C2H5OH|CH3OH'
    
    
if __name__ == '__main__':
    test_placeholder_forms()
    test_numeric_mode()
    test_malformed_references()
    test_custom_delimiters()
    test_placeholder_resolution()
    test_mixture_property_key()
