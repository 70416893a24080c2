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
from numbers import Real
from typing import Callable, Iterable, Optional, Sequence
from .utils import read_only, repr_kwargs
from .exceptions import MissingParameter, MissingArgument, UndefinedComponent
from ._settings import settings
from ._record import Quantity, clean_records, identity_of
from ._component import Component, as_component, component_id

__all__ = ('Structure',
           'Equation',
           'ConfiguredEquation',
           'create_equation',
           'build_component_equation',
           'build_components_equation')

setattr = object.__setattr__

# %% Configuration structures

@read_only
class Structure:
    """
    Create a Structure object that describes an equation parameter, argument
    or return value.

    Parameters
    ----------
    name : str
        Name of the matching data record (e.g. 'Intercept').
    symbol : str
        Symbol (e.g. 'A').
    unit : str
        Unit of measure.
    scale : float, optional
        Factor applied to the data value of a parameter.
    
    """
    __slots__ = ('name', 'symbol', 'unit', 'scale')
    
    def __init__(self, name: str, symbol: str, unit: str='N/A', scale: Optional[float]=None):
        setattr(self, 'name', name)
        setattr(self, 'symbol', symbol)
        setattr(self, 'unit', unit)
        setattr(self, 'scale', scale)
    
    def __repr__(self):
        kwargs = {'name': self.name, 'symbol': self.symbol, 'unit': self.unit, 'scale': self.scale}
        return f"{type(self).__name__}({repr_kwargs(kwargs, start='')})"


def as_structure(key, structure) -> Structure:
    if isinstance(structure, Structure):
        return structure
    elif isinstance(structure, Mapping):
        return Structure(structure.get('name', key), structure.get('symbol', key),
                         structure.get('unit', 'N/A'), structure.get('scale'))
    else:
        raise TypeError(f"configuration of {key!r} must be a 'Structure' object or a mapping, "
                        f"not a '{type(structure).__name__}' object")

def as_structures(structures: Mapping) -> dict[str, Structure]:
    return {key: as_structure(key, value) for key, value in structures.items()}

def as_quantity(key, value, structure: Structure) -> Optional[Quantity]:
    if isinstance(value, Quantity):
        return value
    elif isinstance(value, Mapping):
        return Quantity(value.get('symbol', structure.symbol), value.get('value'),
                        value.get('unit', structure.unit))
    elif value is None:
        return None
    else:
        return Quantity(structure.symbol, value, structure.unit)

# %% Equations

class Equation:
    """
    Create an Equation object, a template of a parametric equation. 
    Parameters are bound from component data with :meth:`configure` 
    and the resulting :class:`ConfiguredEquation` is evaluated with 
    arguments.

    Parameters
    ----------
    name : str
        Name of the equation.
    description : str
        Description of the equation.
    parameters : Mapping[str, Structure|Mapping]
        Parameter configurations by key.
    arguments : Mapping[str, Structure|Mapping]
        Argument configurations by key.
    returns : Mapping[str, Structure|Mapping]
        Return value configurations by key.
    function : Callable(parameters, arguments)
        Equation body. Takes dictionaries of :class:`Quantity` objects by key 
        and returns a Quantity, a mapping with value, unit and symbol, or a 
        number.
    scale_operation : str, optional
        'multiply' or 'divide'. Defaults to `settings.scale_operation`.

    Examples
    --------
    >>> from thermomatrix import create_equation
    >>> eq = create_equation(
    ...     {'A': {'name': 'Intercept', 'symbol': 'A', 'unit': '-'},
    ...      'B': {'name': 'Slope', 'symbol': 'B', 'unit': '1/K'}},
    ...     {'T': {'name': 'Temperature', 'symbol': 'T', 'unit': 'K'}},
    ...     {'Y': {'name': 'Example Property', 'symbol': 'Y', 'unit': '-'}},
    ...     lambda p, a: p['A'].value + p['B'].value * a['T'].value,
    ...     name='Linear')
    >>> linear = eq.configure([{'name': 'Intercept', 'symbol': 'A', 'value': 1.0},
    ...                        {'name': 'Slope', 'symbol': 'B', 'value': 0.5}])
    >>> linear.calc({'T': 10.0})
    Quantity(symbol='Y', value=6.0, unit='-')
    
    """
    __slots__ = ('name', 'description', 'parameters', 'arguments', 
                 'returns', 'function', 'scale_operation')
    
    def __init__(self, name: str, description: str, 
                 parameters: Mapping, arguments: Mapping, returns: Mapping,
                 function: Callable, scale_operation: Optional[str]=None):
        if scale_operation is None: scale_operation = settings.scale_operation
        if scale_operation not in ('multiply', 'divide'):
            raise ValueError(f"scale operation must be 'multiply' or 'divide', not {scale_operation!r}")
        if not callable(function):
            raise TypeError('equation function must be callable')
        self.name = name
        self.description = description
        self.parameters = as_structures(parameters)
        self.arguments = as_structures(arguments)
        self.returns = as_structures(returns)
        if not self.returns: raise ValueError('equation must have at least one return value')
        self.function = function
        self.scale_operation = scale_operation
    
    @property
    def parameter_list(self) -> list[str]:
        return list(self.parameters)
    @property
    def parameter_symbols(self) -> list[str]:
        return [i.symbol for i in self.parameters.values()]
    @property
    def argument_list(self) -> list[str]:
        return list(self.arguments)
    @property
    def argument_symbols(self) -> list[str]:
        return [i.symbol for i in self.arguments.values()]
    @property
    def return_list(self) -> list[str]:
        return list(self.returns)
    @property
    def return_symbols(self) -> list[str]:
        return [i.symbol for i in self.returns.values()]
    @property
    def return_symbol(self) -> str:
        return self.return_symbols[0]
    @property
    def return_unit(self) -> str:
        return next(iter(self.returns.values())).unit
    
    def scale(self, value: float, scale: Optional[float]) -> float:
        if not scale: return value
        return value * scale if self.scale_operation == 'multiply' else value / scale
    
    def get_parameters(self, data: Iterable) -> dict[str, Quantity]:
        """
        Return scaled parameters bound from data records, matched by name
        (case-insensitive) and then by symbol. Records are not modified.
        
        """
        records = clean_records(data)
        parameters = {}
        for key, structure in self.parameters.items():
            name = structure.name.lower()
            record = None
            for i in records:
                if i.name.lower() == name:
                    record = i
                    break
            else:
                for i in records:
                    if i.symbol == structure.symbol:
                        record = i
                        break
            if record is None:
                raise MissingParameter(
                    key, f"missing data for parameter {structure.name!r} ({structure.symbol})"
                )
            parameters[key] = Quantity(structure.symbol, 
                                       self.scale(record.value, structure.scale),
                                       structure.unit)
        return parameters
    
    def configure(self, data: Iterable) -> ConfiguredEquation:
        """Return a configured equation with parameters bound from data records."""
        return ConfiguredEquation(self, self.get_parameters(data))
    
    def __repr__(self):
        return f"<{type(self).__name__}: {self.name}>"


@read_only
class ConfiguredEquation:
    """
    Equation with bound parameters. Use :meth:`Equation.configure` to
    create one.
    
    """
    __slots__ = ('equation', 'parameters')
    
    def __init__(self, equation: Equation, parameters: dict[str, Quantity]):
        setattr(self, 'equation', equation)
        setattr(self, 'parameters', parameters)
    
    name = property(lambda self: self.equation.name)
    arguments = property(lambda self: self.equation.arguments)
    returns = property(lambda self: self.equation.returns)
    argument_symbols = property(lambda self: self.equation.argument_symbols)
    return_symbols = property(lambda self: self.equation.return_symbols)
    return_symbol = property(lambda self: self.equation.return_symbol)
    return_unit = property(lambda self: self.equation.return_unit)
    
    def get_arguments(self, args: Mapping) -> dict[str, Quantity]:
        arguments = {}
        for key, structure in self.equation.arguments.items():
            value = args.get(key)
            if value is None: value = args.get(structure.symbol)
            quantity = as_quantity(key, value, structure)
            if quantity is None or quantity.value is None:
                raise MissingArgument(
                    key, f"missing argument {structure.name!r} ({structure.symbol})"
                )
            arguments[key] = quantity
        return arguments
    
    def calc(self, args: Mapping) -> Quantity:
        """
        Evaluate the equation.

        Parameters
        ----------
        args : Mapping[str, Quantity|Mapping|float]
            Argument values by key or symbol.
        
        """
        result = self.equation.function(self.parameters, self.get_arguments(args))
        if isinstance(result, Quantity):
            return result
        elif isinstance(result, Mapping):
            return Quantity(result.get('symbol', self.return_symbol), result.get('value'),
                            result.get('unit', self.return_unit))
        elif isinstance(result, Real):
            return Quantity(self.return_symbol, result, self.return_unit)
        else:
            raise TypeError(f"equation {self.name!r} returned a '{type(result).__name__}' object; "
                            "a Quantity, mapping or number is expected")
    
    def __repr__(self):
        return f"<{type(self).__name__}: {self.name}>"


def create_equation(parameters: Mapping, arguments: Mapping, returns: Mapping,
                    function: Callable, name: str='', description: str='',
                    scale_operation: Optional[str]=None) -> Equation:
    """Return an Equation object."""
    return Equation(name, description, parameters, arguments, returns, 
                    function, scale_operation)

# %% Component equations

def build_component_equation(component, equation: Equation, data: Iterable,
                             component_keys: Sequence[str]=('Name-Formula',)) -> dict:
    """
    Return the equation configured with the data of a component, by
    component id (under each key) and return symbol.
    
    """
    component = as_component(component)
    configured = equation.configure(data)
    return {component_id(component, key): {i: configured for i in equation.return_symbols}
            for key in component_keys}

def build_components_equation(components: Sequence, equation: Equation, 
                              data_groups: Iterable[Iterable],
                              component_keys: Sequence[str]=('Name-Formula',),
                              match_key: str='Name-Formula') -> dict:
    """
    Return the equation configured for each component with its own record
    group, matched through the group's Name, Formula and State records.
    
    """
    groups = {}
    for records in data_groups:
        records = list(records)
        fields = identity_of(records)
        if len(fields) != 3: continue
        ID = component_id(Component(fields['name'], fields['formula'], fields['state']), match_key)
        groups.setdefault(ID.lower(), records)
    equations = {}
    for component in components:
        component = as_component(component)
        ID = component_id(component, match_key)
        records = groups.get(ID.lower())
        if records is None:
            raise UndefinedComponent(ID, f"no data found for component {ID!r}")
        equations.update(build_component_equation(component, equation, records, component_keys))
    return equations
