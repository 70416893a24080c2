# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
# 
# This module is under the UIUC open-source license. See 
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
from __future__ import annotations
from collections.abc import Mapping
from math import isfinite
from numbers import Real
from typing import Iterable, Optional, Sequence
from ..utils import read_only, repr_listed_values
from ..exceptions import MissingArgument, UndefinedComponent
from .._record import Quantity
from .._component import as_component, component_id
from .._equation import ConfiguredEquation, Structure, as_structures

__all__ = ('ModelSource', 'ComponentEquationSource', 'Source', 'calc_eq')

setattr = object.__setattr__

#: Symbols of arguments that are always supplied by the caller.
state_symbols = ('P', 'T')

# %% Model sources

@read_only
class ModelSource:
    """
    Create a ModelSource object that bundles component data and configured
    equations.

    Parameters
    ----------
    data_source : Mapping[str, Mapping[str, Quantity|Mapping]]
        Data by component id and symbol. Data may also be nested one level 
        deeper, e.g. by data set name.
    equation_source : Mapping[str, Mapping[str, ConfiguredEquation]]
        Configured equations by component id and return symbol.
    
    """
    __slots__ = ('data_source', 'equation_source')
    
    def __init__(self, data_source: Optional[Mapping]=None, equation_source: Optional[Mapping]=None):
        setattr(self, 'data_source', {} if data_source is None else data_source)
        setattr(self, 'equation_source', {} if equation_source is None else equation_source)
    
    @classmethod
    def from_mapping(cls, mapping: Mapping):
        if 'data_source' not in mapping or 'equation_source' not in mapping:
            raise ValueError("model source must have 'data_source' and 'equation_source' keys")
        return cls(mapping['data_source'], mapping['equation_source'])
    
    def __repr__(self):
        return f"{type(self).__name__}(data_source=[{', '.join(self.data_source)}], equation_source=[{', '.join(self.equation_source)}])"


def as_model_source(model_source) -> ModelSource:
    if model_source is None:
        return ModelSource()
    elif isinstance(model_source, ModelSource):
        return model_source
    elif isinstance(model_source, Mapping):
        return ModelSource.from_mapping(model_source)
    else:
        raise TypeError(f"model source must be a 'ModelSource' object or a mapping, "
                        f"not a '{type(model_source).__name__}' object")

def as_data_quantity(symbol, record) -> Optional[Quantity]:
    if isinstance(record, Quantity):
        return record
    elif isinstance(record, Mapping):
        value = record.get('value')
        unit = record.get('unit')
        if isinstance(value, Real) and not isinstance(value, bool) and isinstance(unit, str):
            return Quantity(record.get('symbol', symbol), value, unit)
    return None

def as_record_map(data) -> Optional[dict[str, Quantity]]:
    if not isinstance(data, Mapping): return None
    records = {}
    for symbol, record in data.items():
        quantity = as_data_quantity(symbol, record)
        if quantity is None: return None
        records[symbol] = quantity
    return records

# %% Equation sources

@read_only
class ComponentEquationSource:
    """Configured equation of a component together with its prefilled inputs."""
    __slots__ = ('source', 'inputs')
    
    def __init__(self, source: ConfiguredEquation, inputs: dict[str, Quantity]):
        setattr(self, 'source', source)
        setattr(self, 'inputs', inputs)
    
    args = property(lambda self: self.source.arguments)
    arg_symbols = property(lambda self: self.source.argument_symbols)
    returns = property(lambda self: self.source.returns)
    return_symbols = property(lambda self: self.source.return_symbols)
    return_unit = property(lambda self: self.source.return_unit)
    fn = property(lambda self: self.source.calc)
    
    def __repr__(self):
        return f"<{type(self).__name__}: {self.source.name}>"


class Source:
    """
    Create a Source object that resolves components and property symbols
    to data records and configured equations.

    Parameters
    ----------
    model_source : ModelSource or Mapping, optional
        Data and equations by component id.
    component_key : str, optional
        Key template of component ids. Defaults to 'Name-State'.
    
    """
    __slots__ = ('model_source', 'component_key')
    
    def __init__(self, model_source=None, component_key: str='Name-State'):
        self.model_source = as_model_source(model_source)
        self.component_key = component_key
    
    @property
    def datasource(self) -> Mapping:
        return self.model_source.data_source
    
    @property
    def equationsource(self) -> Mapping:
        return self.model_source.equation_source
    
    def get_component_id(self, component) -> str:
        return component_id(component, self.component_key)
    
    # %% Extractors
    
    def resolve(self, component_id: str, symbol: str) -> Optional[ConfiguredEquation]:
        """Return the configured equation of a component property, or None."""
        equations = self.equationsource.get(component_id)
        if equations is None: return None
        return equations.get(symbol)
    
    def component_equations(self, component_id: str) -> Optional[Mapping]:
        return self.equationsource.get(component_id)
    
    def component_data(self, component_id: str) -> Optional[dict[str, Quantity]]:
        """Return the data of a component by symbol, merging nested data sets, or None."""
        data = self.datasource.get(component_id)
        if not isinstance(data, Mapping): return None
        records = as_record_map(data)
        if records is not None: return records
        merged = {}
        for value in data.values():
            records = as_record_map(value)
            if records: merged.update(records)
        return merged or None
    
    def get_data(self, component_id: str, symbol: str) -> Optional[Quantity]:
        """Return a data record of a component, or None."""
        data = self.component_data(component_id)
        if data is None: return None
        return data.get(symbol)
    
    # %% Arguments
    
    def check_args(self, component_id: str, args: Mapping) -> dict[str, Structure]:
        """
        Return argument configurations by symbol, checking that each one is
        either in the data of the component or is a state variable (P, T).
        
        """
        data = self.component_data(component_id)
        if data is None:
            raise UndefinedComponent(component_id, f"component {component_id!r} not in data source")
        available = {*data, *state_symbols}
        required = {}
        for structure in as_structures(args).values():
            symbol = structure.symbol
            if symbol not in available:
                raise MissingArgument(
                    symbol, f"argument {symbol!r} of component {component_id!r} not in data source"
                )
            required[symbol] = structure
        return required
    
    def build_args(self, component_id: str, args: Mapping, 
                   ignore_symbols: Iterable[str]=()) -> dict[str, Quantity]:
        """
        Return argument inputs by symbol, prefilled with component data where 
        available and with None values otherwise.
        
        """
        data = self.component_data(component_id)
        if data is None:
            raise UndefinedComponent(component_id, f"component {component_id!r} not in data source")
        ignore_symbols = set(ignore_symbols)
        inputs = {}
        for structure in as_structures(args).values():
            symbol = structure.symbol
            if symbol not in ignore_symbols and symbol in data:
                value = data[symbol].value
            else:
                value = None
            inputs[symbol] = Quantity(symbol, value, structure.unit)
        return inputs
    
    # %% Equations
    
    def build_equations(self, components: Sequence, symbol: str) -> Optional[dict[str, ComponentEquationSource]]:
        """
        Return the equation source of a property for each component by
        component id, or None if any component lacks the equation.
        
        """
        if not symbol or not symbol.strip():
            raise ValueError('property symbol must not be empty')
        IDs = [self.get_component_id(i) for i in components]
        equations = [self.resolve(i, symbol) for i in IDs]
        if None in equations: return None
        sources = {}
        for ID, equation in zip(IDs, equations):
            required = self.check_args(ID, equation.arguments)
            sources[ID] = ComponentEquationSource(equation, self.build_args(ID, required))
        return sources
    
    def execute(self, components: Sequence, sources: Mapping[str, ComponentEquationSource],
                values: Optional[Mapping[str, float]]=None) -> tuple[list, dict]:
        """
        Evaluate the equation source of each component with prefilled inputs
        overridden by the given values.

        Returns
        -------
        values : list[float]
            Results in component order.
        results : dict[str, dict]
            Property name, value, unit and symbol by component id.
        
        """
        IDs = [self.get_component_id(i) for i in components]
        missing = [i for i in IDs if i not in sources]
        if missing:
            raise UndefinedComponent(missing, f"no equation source for {repr_listed_values(missing)}")
        results = {}
        output = []
        for ID in IDs:
            source = sources[ID]
            inputs = dict(source.inputs)
            if values:
                for symbol, value in values.items():
                    if symbol in inputs: inputs[symbol] = Quantity(symbol, value, inputs[symbol].unit)
            missing = [i for i, j in inputs.items() if j.value is None]
            if missing:
                raise MissingArgument(missing, f"missing argument values for {', '.join(missing)}")
            result = source.fn(inputs)
            output.append(result.value)
            results[ID] = {
                'property_name': ', '.join([i.name for i in source.returns.values()]),
                'value': result.value,
                'unit': result.unit,
                'symbol': result.symbol or ', '.join(source.return_symbols),
            }
        return output, results
    
    def get_component_data(self, component_id: str, components: Sequence) -> dict:
        """Return the data and equations of one of the given components."""
        if component_id not in [self.get_component_id(i) for i in components]:
            raise UndefinedComponent(component_id, f"component {component_id!r} not among components")
        data = dict(self.component_data(component_id) or {})
        data.update(self.component_equations(component_id) or {})
        return data
    
    # %% Availability
    
    def is_prop_available(self, component_id: str, symbol: str) -> bool:
        return (self.is_prop_eq_available(component_id, symbol) 
                or self.is_prop_data_available(component_id, symbol))
    
    def is_prop_eq_available(self, component_id: str, symbol: str) -> bool:
        return self.resolve(component_id, symbol) is not None
    
    def is_prop_data_available(self, component_id: str, symbol: str) -> bool:
        data = self.component_data(component_id)
        return data is not None and symbol in data
    
    def __repr__(self):
        return f"{type(self).__name__}({self.model_source!r}, component_key={self.component_key!r})"


def calc_eq(source: ComponentEquationSource, variables: Mapping[str, float], 
            output_unit: Optional[str]=None) -> Quantity:
    """
    Evaluate an equation source with its prefilled inputs overridden by the
    given variables (by argument key or symbol).
    
    Unit conversion is not supported; `output_unit` must match the unit 
    of the result (case-insensitive).
    
    """
    merged = {key: i.value for key, i in source.inputs.items() if i.value is not None}
    merged.update(variables)
    args = {}
    for key, structure in source.args.items():
        symbol = structure.symbol or key
        if key in merged:
            value = merged[key]
        elif symbol in merged:
            value = merged[symbol]
        else:
            raise MissingArgument(key, f"missing argument {key!r} for equation calculation")
        args[key] = Quantity(symbol, value, structure.unit)
    result = source.fn(args)
    value = result.value
    if not isinstance(value, Real) or isinstance(value, bool) or not isfinite(value):
        raise ValueError(f"equation returned an invalid value {value!r}")
    if output_unit and result.unit and output_unit.lower() != result.unit.lower():
        raise NotImplementedError(
            'unit conversion is not implemented; output unit must equal the result unit'
        )
    return Quantity(result.symbol, value, result.unit)
