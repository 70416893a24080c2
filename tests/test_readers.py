# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
# 
# This module is under the UIUC open-source license. See 
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
import pytest
import pandas as pd
import thermomatrix as tmx
from numpy.testing import assert_allclose

def test_records_from_frame():
    frame = pd.DataFrame({
        'No.': [1, 2],
        'Mixture': ['methanol|ethanol', 'methanol|ethanol'],
        'Name': ['Methanol', 'Ethanol'],
        'Formula': ['CH3OH', 'C2H5OH'],
        'State': ['l', 'l'],
        'a_i_j_1': [0.0, 0.5],
        'a_i_j_2': [0.3, 0.0],
        'CAS': ['67-56-1', None],
    })
    groups = tmx.records_from_frame(frame, units={'a_i_j_1': '1', 'a_i_j_2': '1'}, 
                                    skip_columns=['No.'])
    assert len(groups) == 2
    assert [i.name for i in groups[0]] == ['Mixture', 'Name', 'Formula', 'State', 'a_i_j_1', 'a_i_j_2', 'CAS']
    assert groups[0][0] == tmx.Record('Mixture', 'Mixture', 'methanol|ethanol', 'N/A')
    assert groups[1][-1].value is None
    assert isinstance(groups[1][-3].value, float)
    data = tmx.MatrixData(groups)
    methanol = tmx.Component('Methanol', 'CH3OH', 'l')
    ethanol = tmx.Component('Ethanol', 'C2H5OH', 'l')
    assert_allclose(data.get_property_matrix('a', 'methanol|ethanol'), [[0., 0.3], [0.5, 0.]])
    assert_allclose(data.mat('a', [ethanol, methanol]), [[0., 0.5], [0.3, 0.]])
    assert_allclose(data.mat('a', [methanol, ethanol]), [[0., 0.3], [0.5, 0.]])

def test_records_from_table():
    groups = tmx.records_from_table(
        ['Name', 'Formula', 'State', 'Critical Temperature'],
        ['Name', 'Formula', 'State', 'Tc'],
        ['', '', '', 'K'],
        [['Methane', 'CH4', 'g', 190.6],
         ['Ethane', 'C2H6', 'g', 305.3]],
    )
    tc = groups[1][-1]
    assert tc.symbol == 'Tc' and tc.unit == 'K'
    assert_allclose(tc.value, 305.3)
    data = tmx.ComponentData(groups[0])
    assert data.get_data_by_name('Critical Temperature') == tmx.Quantity('Tc', 190.6, 'K')
    with pytest.raises(ValueError):
        tmx.records_from_table(['Name'], ['Name', 'Formula'], [''], [['Methane']])
    
    
if __name__ == '__main__':
    test_records_from_frame()
    test_records_from_table()
