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
import thermomatrix as tmx
from thermomatrix.exceptions import MissingArgument, UndefinedComponent
from numpy.testing import assert_allclose

methane = tmx.Component('Methane', 'CH4', 'g')
ethane = tmx.Component('Ethane', 'C2H6', 'g')

def create_model_source():
    linear = tmx.create_equation(
        {'A': {'name': 'Intercept', 'symbol': 'A', 'unit': '-'},
         'B': {'name': 'Slope', 'symbol': 'B', 'unit': '1/K'}},
        {'T': {'name': 'Temperature', 'symbol': 'T', 'unit': 'K'}},
        {'Y': {'name': 'Example Property', 'symbol': 'Y', 'unit': '-'}},
        lambda p, a: p['A'].value + p['B'].value * a['T'].value,
        'Linear Example',
    )
    molar = tmx.create_equation(
        {},
        {'MW': {'name': 'Molecular Weight', 'symbol': 'MW', 'unit': 'g/mol'},
         'T': {'name': 'Temperature', 'symbol': 'T', 'unit': 'K'}},
        {'Y2': {'name': 'Molar Example', 'symbol': 'Y2', 'unit': 'g*K/mol'}},
        lambda p, a: a['MW'].value * a['T'].value,
        'Molar Example',
    )
    methane_data = [
        {'name': 'Intercept', 'symbol': 'A', 'value': 1.0, 'unit': '-'},
        {'name': 'Slope', 'symbol': 'B', 'value': 0.01, 'unit': '1/K'},
    ]
    ethane_data = [
        {'name': 'Intercept', 'symbol': 'A', 'value': 2.0, 'unit': '-'},
        {'name': 'Slope', 'symbol': 'B', 'value': 0.02, 'unit': '1/K'},
    ]
    data_source = {
        'Methane-g': {
            'A': tmx.Quantity('A', 1.0, '-'),
            'B': tmx.Quantity('B', 0.01, '1/K'),
            'MW': {'value': 16.04, 'unit': 'g/mol', 'symbol': 'MW'},
        },
        'Ethane-g': {
            'constants': {'A': {'value': 2.0, 'unit': '-'}, 
                          'MW': {'value': 30.07, 'unit': 'g/mol'}},
            'slopes': {'B': {'value': 0.02, 'unit': '1/K'}},
        },
    }
    equation_source = {
        'Methane-g': {'Y': linear.configure(methane_data), 'Y2': molar.configure([])},
        'Ethane-g': {'Y': linear.configure(ethane_data)},
    }
    return tmx.ModelSource(data_source, equation_source)

def test_source_data():
    source = tmx.Source(create_model_source())
    assert source.get_component_id(methane) == 'Methane-g'
    assert source.get_data('Methane-g', 'MW') == tmx.Quantity('MW', 16.04, 'g/mol')
    assert set(source.component_data('Ethane-g')) == {'A', 'MW', 'B'}
    assert source.get_data('Ethane-g', 'B').value == 0.02
    assert source.component_data('Propane-g') is None
    assert source.is_prop_available('Methane-g', 'Y')
    assert source.is_prop_available('Methane-g', 'MW')
    assert not source.is_prop_eq_available('Methane-g', 'MW')
    assert not source.is_prop_data_available('Ethane-g', 'Y')
    data = source.get_component_data('Methane-g', [methane, ethane])
    assert {'A', 'B', 'MW', 'Y', 'Y2'} == set(data)
    with pytest.raises(UndefinedComponent):
        source.get_component_data('Propane-g', [methane, ethane])

def test_source_from_mapping():
    model_source = create_model_source()
    source = tmx.Source({'data_source': model_source.data_source, 
                         'equation_source': model_source.equation_source})
    assert source.resolve('Ethane-g', 'Y') is model_source.equation_source['Ethane-g']['Y']
    with pytest.raises(ValueError):
        tmx.Source({'data_source': {}})
    with pytest.raises(TypeError):
        tmx.Source([])

def test_build_and_execute_equations():
    source = tmx.Source(create_model_source())
    sources = source.build_equations([methane, ethane], 'Y')
    assert set(sources) == {'Methane-g', 'Ethane-g'}
    assert sources['Methane-g'].inputs['T'].value is None
    values, results = source.execute([methane, ethane], sources, {'T': 300})
    assert_allclose(values, [4., 8.])
    assert results['Ethane-g']['property_name'] == 'Example Property'
    assert results['Ethane-g']['symbol'] == 'Y'
    assert results['Ethane-g']['unit'] == '-'
    with pytest.raises(MissingArgument):
        source.execute([methane, ethane], sources)
    assert source.build_equations([methane, ethane], 'Y2') is None
    with pytest.raises(ValueError):
        source.build_equations([methane], ' ')

def test_prefilled_arguments():
    source = tmx.Source(create_model_source())
    sources = source.build_equations([methane], 'Y2')
    assert sources['Methane-g'].inputs['MW'].value == 16.04
    values, results = source.execute([methane], sources, {'T': 2.0})
    assert_allclose(values, [32.08])
    assert_allclose(source.execute([methane], sources, {'T': 2.0, 'MW': 10.})[0], [20.])
    with pytest.raises(MissingArgument):
        source.check_args('Methane-g', {'Z': {'name': 'Other', 'symbol': 'Z'}})
    with pytest.raises(UndefinedComponent):
        source.check_args('Propane-g', {})

def test_calc_eq():
    source = tmx.Source(create_model_source())
    equation = source.build_equations([methane], 'Y')['Methane-g']
    result = tmx.calc_eq(equation, {'T': 300})
    assert result.symbol == 'Y' and result.unit == '-'
    assert_allclose(result.value, 4.)
    assert_allclose(tmx.calc_eq(equation, {'T': 100}, '-').value, 2.)
    with pytest.raises(NotImplementedError):
        tmx.calc_eq(equation, {'T': 300}, 'K')
    with pytest.raises(MissingArgument):
        tmx.calc_eq(equation, {})
    with pytest.raises(ValueError):
        tmx.calc_eq(equation, {'T': float('inf')})

def test_data_source_core():
    model_source = create_model_source()
    data = tmx.mkdt(methane, model_source, 'Name-State')
    assert set(data.props()) == {'A', 'B', 'MW'}
    assert data.prop('MW') == tmx.Quantity('MW', 16.04, 'g/mol')
    assert data.prop('Cp') is None
    assert tmx.mkdt(ethane, model_source).props() == []
    assert tmx.mkdt({'name': 'Methane'}, model_source) is None
    assert tmx.mkdt(methane, {'data_source': {}}) is None

def test_equation_source_core():
    model_source = create_model_source()
    eq = tmx.mkeq('Y', methane, model_source, 'Name-State')
    assert eq.return_symbol == 'Y'
    assert eq.arg_symbols == ['T']
    assert_allclose(eq.calc({'T': 300}).value, 4.)
    assert eq.calc() is None
    assert eq.calc({'T': float('nan')}) is None
    assert_allclose(tmx.mkeq('Y2', methane, model_source, 'Name-State').calc({'T': 1.}).value, 16.04)
    assert tmx.mkeq('Y2', ethane, model_source, 'Name-State') is None
    assert tmx.mkeq('', methane, model_source, 'Name-State') is None
    assert tmx.mkeq('Y', methane, model_source) is None
    
def test_equation_sources_core():
    model_source = create_model_source()
    eqs = tmx.mkeqs(methane, model_source, 'Name-State')
    assert eqs.equations() == ['Y', 'Y2']
    assert_allclose(eqs.eq('Y').calc({'T': 300}).value, 4.)
    assert eqs.eq('Cp') is None
    assert tmx.mkeqs(methane, model_source).equations() == []
    assert tmx.mkeqs(methane, None) is None
    
    
if __name__ == '__main__':
    test_source_data()
    test_source_from_mapping()
    test_build_and_execute_equations()
    test_prefilled_arguments()
    test_calc_eq()
    test_data_source_core()
    test_equation_source_core()
    test_equation_sources_core()
