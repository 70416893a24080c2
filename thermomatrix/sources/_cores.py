# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
# 
# This module is under the UIUC open-source license. See 
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
Convenience wrappers around :class:`~thermomatrix.Source` for a single 
component. Unlike the rest of thermomatrix, these wrappers return None 
(or an empty list) when a component, property or argument is not 
available instead of raising.

"""
from __future__ import annotations
from collections.abc import Mapping
from typing import Optional
from ..exceptions import UndefinedComponent, UndefinedProperty
from .._record import Quantity
from .._component import Component, as_component, component_id
from ._source import ModelSource, Source

__all__ = ('DataSourceCore', 
           'EquationSourceCore', 
           'EquationSourcesCore',
           'mkdt', 
           'mkeq', 
           'mkeqs')

#: Errors that wrappers report as unavailable results.
unavailable_errors = (ValueError, TypeError, KeyError, ArithmeticError,
                      NotImplementedError, UndefinedComponent, UndefinedProperty)

# %% Wrappers

class DataSourceCore:
    """Data records of a single component."""
    __slots__ = ('component', 'source', 'component_key', 'component_id', 'component_data')
    
    def __init__(self, component, source: Source, component_key: str='Name-Formula'):
        self.component = as_component(component)
        self.source = source
        self.component_key = source.component_key = component_key
        self.component_id = component_id(self.component, component_key)
        self.component_data = source.component_data(self.component_id)
    
    def props(self) -> list[str]:
        """Return the symbols of all available data records."""
        return list(self.component_data) if self.component_data else []
    
    def prop(self, symbol: str) -> Optional[Quantity]:
        """Return a data record, or None if not available."""
        if not self.component_data: return None
        record = self.component_data.get(symbol)
        if record is None: return None
        try:
            value = float(record.value)
        except unavailable_errors:
            return None
        return Quantity(record.symbol, value, record.unit)
    
    def __repr__(self):
        return f"<{type(self).__name__}: {self.component_id}>"


class EquationSourceCore:
    """Equation of a single component property."""
    __slots__ = ('name', 'component', 'source', 'component_key', 
                 'component_id', 'component_equation')
    
    def __init__(self, name: str, component, source: Source, component_key: str='Name-Formula'):
        self.name = name
        self.component = as_component(component)
        self.source = source
        self.component_key = source.component_key = component_key
        self.component_id = component_id(self.component, component_key)
        equations = source.build_equations([self.component], name)
        if not equations:
            raise UndefinedProperty(
                name, f"no {name!r} equation found for component {self.component_id!r}"
            )
        self.component_equation = equations[self.component_id]
    
    eq = property(lambda self: self.component_equation.source)
    fn = property(lambda self: self.component_equation.fn)
    inputs = property(lambda self: self.component_equation.inputs)
    args = property(lambda self: self.component_equation.args)
    arg_symbols = property(lambda self: self.component_equation.arg_symbols)
    returns = property(lambda self: self.component_equation.returns)
    return_symbols = property(lambda self: self.component_equation.return_symbols)
    return_unit = property(lambda self: self.component_equation.return_unit)
    
    @property
    def return_symbol(self) -> str:
        symbols = self.return_symbols
        return symbols[0] if symbols else ''
    
    def _args(self, values: Optional[Mapping[str, float]]) -> dict[str, Quantity]:
        merged = {key: i.value for key, i in self.inputs.items() if i.value is not None}
        if values: merged.update(values)
        args = {}
        for key, structure in self.args.items():
            symbol = structure.symbol or key
            value = merged[key] if key in merged else merged.get(symbol)
            if value is None or value != value:
                raise ValueError(f"missing argument value for {key!r} ({symbol})")
            args[key] = Quantity(symbol, value, structure.unit)
        return args
    
    def calc(self, values: Optional[Mapping[str, float]]=None) -> Optional[Quantity]:
        """Evaluate the equation, or return None if arguments are missing or invalid."""
        try:
            return self.eq.calc(self._args(values))
        except unavailable_errors:
            return None
    
    def __repr__(self):
        return f"<{type(self).__name__}: {self.component_id}.{self.name}>"


class EquationSourcesCore:
    """All equations of a single component."""
    __slots__ = ('component', 'source', 'component_key', 'component_id', 'component_equations')
    
    def __init__(self, component, source: Source, component_key: str='Name-Formula'):
        self.component = as_component(component)
        self.source = source
        self.component_key = source.component_key = component_key
        self.component_id = component_id(self.component, component_key)
        self.component_equations = source.component_equations(self.component_id)
    
    def equations(self) -> list[str]:
        return list(self.component_equations) if self.component_equations else []
    
    def eq(self, name: str) -> Optional[EquationSourceCore]:
        """Return the equation of a property, or None if not available."""
        if not self.component_equations: return None
        if not self.source.is_prop_eq_available(self.component_id, name): return None
        try:
            return EquationSourceCore(name, self.component, self.source, self.component_key)
        except unavailable_errors:
            return None
    
    def __repr__(self):
        return f"<{type(self).__name__}: {self.component_id}>"

# %% Factories

def is_valid_component(component, component_key: str) -> bool:
    if isinstance(component, Component): return True
    if not isinstance(component, Mapping): return False
    fields = {str(i).lower(): j for i, j in component.items()}
    required = ['name', 'formula']
    if 'state' in component_key.lower(): required.append('state')
    return all([isinstance(fields.get(i), str) and fields[i] for i in required])

def is_valid_model_source(model_source) -> bool:
    if isinstance(model_source, ModelSource): return True
    return (isinstance(model_source, Mapping) 
            and 'data_source' in model_source 
            and 'equation_source' in model_source)

def make_source(component, model_source, component_key):
    if not (is_valid_model_source(model_source) 
            and is_valid_component(component, component_key)):
        return None
    try:
        return Source(model_source, component_key), as_component(component)
    except unavailable_errors:
        return None

def mkdt(component, model_source, component_key: str='Name-Formula') -> Optional[DataSourceCore]:
    """Return a DataSourceCore object, or None if the input is invalid."""
    made = make_source(component, model_source, component_key)
    if made is None: return None
    source, component = made
    return DataSourceCore(component, source, component_key)

def mkeq(name: str, component, model_source, component_key: str='Name-Formula') -> Optional[EquationSourceCore]:
    """Return an EquationSourceCore object, or None if the equation is not available."""
    if not name or not isinstance(name, str): return None
    made = make_source(component, model_source, component_key)
    if made is None: return None
    source, component = made
    if not source.is_prop_eq_available(component_id(component, component_key), name): return None
    try:
        return EquationSourceCore(name, component, source, component_key)
    except unavailable_errors:
        return None

def mkeqs(component, model_source, component_key: str='Name-Formula') -> Optional[EquationSourcesCore]:
    """Return an EquationSourcesCore object, or None if the input is invalid."""
    made = make_source(component, model_source, component_key)
    if made is None: return None
    source, component = made
    return EquationSourcesCore(component, source, component_key)
