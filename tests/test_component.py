# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
# 
# This module is under the UIUC open-source license. See 
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
import pickle
import pytest
import thermomatrix as tmx
from thermomatrix.exceptions import UnresolvedMixtureKey

methanol = tmx.Component('Methanol', 'CH3OH', 'l')
ethanol = tmx.Component('Ethanol', 'C2H5OH', 'l')

def test_component():
    assert methanol == tmx.Component('Methanol', 'CH3OH', 'l', mole_fraction=0.5)
    assert methanol != tmx.Component('Methanol', 'CH3OH', 'g')
    assert len({methanol, tmx.Component('Methanol', 'CH3OH', 'l')}) == 1
    assert tmx.as_component({'Name': 'Methanol', 'Formula': 'CH3OH', 'State': 'l'}) == methanol
    assert pickle.loads(pickle.dumps(methanol)) == methanol
    with pytest.raises(TypeError):
        methanol.state = 'g'
    with pytest.raises(ValueError, match='state'):
        tmx.as_component({'name': 'Methanol', 'formula': 'CH3OH'})
    with pytest.raises(TypeError):
        tmx.as_component('Methanol')

def test_component_id():
    assert tmx.component_id(methanol) == 'Methanol-CH3OH'
    assert tmx.component_id(methanol, 'Name') == 'Methanol'
    assert tmx.component_id(methanol, 'Name-State') == 'Methanol-l'
    assert tmx.component_id(methanol, 'formula-state') == 'CH3OH-l'
    with pytest.raises(ValueError):
        tmx.component_id(methanol, 'Name-CAS')
    with pytest.raises(ValueError):
        tmx.component_id(methanol, '')

def test_find_component_by_token():
    keys = ('Name', 'Formula', 'Name-Formula')
    assert tmx.find_component_by_token('ETHANOL', [methanol, ethanol], keys) is ethanol
    assert tmx.find_component_by_token(' CH3OH ', [methanol, ethanol], keys) is methanol
    assert tmx.find_component_by_token('Ethanol-C2H5OH', [methanol, ethanol], keys) is ethanol
    assert tmx.find_component_by_token('Water', [methanol, ethanol], keys) is None
    assert tmx.find_component_by_token('Ethanol', [methanol, ethanol], ('Formula',)) is None

def test_mixture_ids():
    assert tmx.mixture_ids([methanol, ethanol]) == ('Methanol|Ethanol', 'Ethanol|Methanol')
    assert tmx.mixture_ids([methanol, ethanol], 'Name-Formula', ' | ') == (
        'Methanol-CH3OH | Ethanol-C2H5OH', 'Ethanol-C2H5OH | Methanol-CH3OH'
    )
    with pytest.raises(ValueError):
        tmx.mixture_ids([methanol])
    assert tmx.mixture_id_candidates([methanol, ethanol], ('Name', 'Formula')) == (
        'Methanol|Ethanol', 'Ethanol|Methanol', 'CH3OH|C2H5OH', 'C2H5OH|CH3OH'
    )
    with pytest.raises(ValueError):
        tmx.mixture_id_candidates([methanol], ('Name', 'Formula'))

def test_mixture_delimiters():
    delimiters = ('|', ' | ', '_', ' _ ')
    assert tmx.find_mixture_delimiter('Methanol | Ethanol', delimiters) == ' | '
    assert tmx.find_mixture_delimiter('Methanol|Ethanol', delimiters) == '|'
    assert tmx.find_mixture_delimiter('Methanol _ Ethanol', delimiters) == ' _ '
    assert tmx.find_mixture_delimiter('Methanol', delimiters) is None
    assert tmx.normalize_mixture_id(' Methanol | ETHANOL ', delimiters) == 'methanol|ethanol'
    assert tmx.normalize_mixture_id('CH3OH_C2H5OH', delimiters) == 'ch3oh|c2h5oh'
    assert tmx.normalize_mixture_id('Methanol', delimiters) == 'methanol'

def test_infer_mixture_key():
    keys = ('Name', 'Formula', 'Name-Formula')
    assert tmx.infer_mixture_key('Ethanol | Methanol', [methanol, ethanol], keys, '|') == 'Name'
    assert tmx.infer_mixture_key('ch3oh|c2h5oh', [methanol, ethanol], keys, '|') == 'Formula'
    assert tmx.infer_mixture_key('Methanol-CH3OH_Ethanol-C2H5OH', [methanol, ethanol], keys, '_') == 'Name-Formula'
    with pytest.raises(UnresolvedMixtureKey, match='Name, Formula, Name-Formula'):
        tmx.infer_mixture_key('Methanol | Water', [methanol, ethanol], keys, '|')

def test_clean_records():
    records = [
        {'name': 'Name', 'symbol': 'Name', 'value': 'Methanol', 'unit': 'N/A'},
        {'name': 'cas', 'symbol': 'CAS', 'value': '67-56-1', 'unit': 'N/A'},
        {'name': 'Critical Temperature', 'symbol': 'Tc', 'value': 512.6, 'unit': 'K'},
        {'name': 'Critical Pressure', 'symbol': 'Pc', 'value': '80.97', 'unit': 'bar'},
        {'name': 'Boiling Point', 'symbol': 'Tb', 'value': '', 'unit': 'K'},
        {'name': 'Melting Point', 'symbol': 'Tm', 'value': float('nan'), 'unit': 'K'},
        {'name': 'Flag', 'symbol': 'flag', 'value': True, 'unit': 'N/A'},
        tmx.Record('Acentric Factor', 'w', '0.565'),
    ]
    cleaned = tmx.clean_records(records)
    assert cleaned == [
        tmx.Record('Critical Temperature', 'Tc', 512.6, 'K'),
        tmx.Record('Critical Pressure', 'Pc', 80.97, 'bar'),
        tmx.Record('Acentric Factor', 'w', 0.565, 'N/A'),
    ]
    assert records[3]['value'] == '80.97'
    assert [i.symbol for i in tmx.clean_records(records, ignore_names=())] == ['Tc', 'Pc', 'w']
    assert [i.symbol for i in tmx.clean_records(records, ignore_names=('Critical Temperature',))] == ['Pc', 'w']

def test_to_num():
    assert tmx.to_num(1) == 1.0
    assert tmx.to_num('-2.5e1') == -25.0
    assert tmx.to_num(' 3 ') == 3.0
    for value in ('', 'abc', None, float('inf'), float('nan'), True, [1]):
        assert tmx.to_num(value) is None

def test_settings():
    settings = tmx.settings
    assert tmx.MatrixSettings() is settings
    assert settings.component_key == 'Name-Formula'
    try:
        settings.mixture_delimiter = '_'
        settings.mixture_keys = ['Formula']
        assert settings.mixture_delimiter == '_'
        assert settings.mixture_keys == ('Formula',)
        with pytest.raises(ValueError):
            settings.mixture_delimiter = ''
        with pytest.raises(ValueError):
            settings.component_key = 'Name-CAS'
        with pytest.raises(ValueError):
            settings.scale_operation = 'add'
        with pytest.raises(ValueError):
            settings.property_delimiters = ()
    finally:
        settings.reset()
    assert settings.mixture_delimiter == '|'
    assert settings.mixture_keys == ('Name', 'Formula', 'Name-Formula')
    
    
if __name__ == '__main__':
    test_component()
    test_component_id()
    test_find_component_by_token()
    test_mixture_ids()
    test_mixture_delimiters()
    test_infer_mixture_key()
    test_clean_records()
    test_to_num()
    test_settings()
