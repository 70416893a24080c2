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
from typing import Iterable, Optional
from .utils import read_only, repr_kwargs
from ._settings import settings

__all__ = ('Record', 
           'Quantity', 
           'CustomProperty', 
           'as_record', 
           'to_num', 
           'clean_records',
           'find_record_value',
           'identity_of')

setattr = object.__setattr__

# %% Records

@read_only
class Record:
    """
    Create a Record object, a single named value of a component or mixture
    row group.

    Parameters
    ----------
    name : str
        Descriptive name (e.g. 'Mixture', 'Name', 'a_i_j_1').
    symbol : str
        Symbol (e.g. 'a_i_j_1').
    value : float or str
        Raw value.
    unit : str, optional
        Unit of measure. Defaults to 'N/A'.
    
    """
    __slots__ = ('name', 'symbol', 'value', 'unit')
    
    def __init__(self, name: str, symbol: str, value, unit: Optional[str]='N/A'):
        setattr(self, 'name', str(name))
        setattr(self, 'symbol', str(symbol))
        setattr(self, 'value', value)
        setattr(self, 'unit', 'N/A' if unit is None else str(unit))
    
    def copy(self, **fields):
        """Return a copy with the given fields replaced."""
        kwargs = dict(name=self.name, symbol=self.symbol, value=self.value, unit=self.unit)
        kwargs.update(fields)
        return Record(**kwargs)
    
    def __eq__(self, other):
        if isinstance(other, Record):
            return (self.name, self.symbol, self.value, self.unit) == (other.name, other.symbol, other.value, other.unit)
        return NotImplemented
    
    def __hash__(self):
        return hash((self.name, self.symbol, self.unit))
    
    def __reduce__(self):
        return Record, (self.name, self.symbol, self.value, self.unit)
    
    def __repr__(self):
        return f"{type(self).__name__}({self.name!r}, {self.symbol!r}, {self.value!r}, {self.unit!r})"


def as_record(record) -> Record:
    if isinstance(record, Record):
        return record
    elif isinstance(record, Mapping):
        fields = {str(i).lower(): j for i, j in record.items()}
        if 'name' not in fields: raise ValueError(f"record {record!r} has no name")
        name = fields['name']
        return Record(name, fields.get('symbol', name), fields.get('value'), fields.get('unit'))
    else:
        raise TypeError(f"record must be a 'Record' object or a mapping, "
                        f"not a '{type(record).__name__}' object")


@read_only
class Quantity:
    """
    Create a Quantity object, a symbol bound to a numerical value and unit.

    Examples
    --------
    >>> from thermomatrix import Quantity
    >>> Quantity('a_Methanol_Ethanol', 1.0, 'N/A')
    Quantity(symbol='a_Methanol_Ethanol', value=1.0, unit='N/A')
    
    """
    __slots__ = ('symbol', 'value', 'unit')
    
    def __init__(self, symbol: str, value, unit: Optional[str]='N/A'):
        setattr(self, 'symbol', symbol)
        setattr(self, 'value', value)
        setattr(self, 'unit', unit)
    
    def __iter__(self):
        yield self.symbol
        yield self.value
        yield self.unit
    
    def __eq__(self, other):
        if isinstance(other, Quantity):
            return tuple(self) == tuple(other)
        return NotImplemented
    
    def __hash__(self):
        return hash((self.symbol, self.unit))
    
    def __reduce__(self):
        return type(self), tuple(self)
    
    def __repr__(self):
        kwargs = {'symbol': self.symbol, 'value': self.value, 'unit': self.unit}
        return f"{type(self).__name__}({repr_kwargs(kwargs, start='')})"


class CustomProperty(Quantity):
    """Quantity of a component pair, with a synthesized symbol (e.g. 'a_Methanol_Ethanol')."""
    __slots__ = ()

# %% Cleaning

def to_num(value) -> Optional[float]:
    """
    Return the value as a finite float, or None if it is not one.

    Examples
    --------
    >>> from thermomatrix import to_num
    >>> to_num('1.5'), to_num(''), to_num('nan'), to_num('x')
    (1.5, None, None, None)
    
    """
    if isinstance(value, bool): return None
    if isinstance(value, Real):
        value = float(value)
    elif isinstance(value, str):
        value = value.strip()
        if not value: return None
        try: value = float(value)
        except ValueError: return None
    else:
        return None
    return value if isfinite(value) else None

def clean_records(records: Iterable, ignore_names: Optional[Iterable[str]]=None) -> list[Record]:
    """
    Return new records with numerical values, dropping identity records
    (by name, case-insensitive) and records whose value is not a finite
    number.

    Examples
    --------
    >>> from thermomatrix import clean_records
    >>> clean_records([{'name': 'Name', 'symbol': 'Name', 'value': 'Methanol'},
    ...                {'name': 'a_i_j_1', 'symbol': 'a_i_j_1', 'value': '2'},
    ...                {'name': 'b_i_j_1', 'symbol': 'b_i_j_1', 'value': ''}])
    [Record('a_i_j_1', 'a_i_j_1', 2.0, 'N/A')]
    
    """
    if ignore_names is None: ignore_names = settings.ignore_names
    ignored = {i.lower() for i in ignore_names}
    cleaned = []
    for record in records:
        record = as_record(record)
        if record.name.lower() in ignored: continue
        value = to_num(record.value)
        if value is None: continue
        cleaned.append(record.copy(value=value))
    return cleaned

def find_record_value(records: Iterable, name: str):
    """Return the value of the first record with the given name (case-insensitive), or None."""
    name = name.lower()
    for record in records:
        record = as_record(record)
        if record.name.lower() == name: return record.value
    return None

def identity_of(records: Iterable) -> dict[str, str]:
    """
    Return the non-empty 'name', 'formula' and 'state' values of a row group
    (record names matched case-insensitively, first occurrence wins).
    
    """
    fields = {}
    for record in records:
        record = as_record(record)
        field = record.name.lower()
        if field in ('name', 'formula', 'state') and field not in fields:
            value = record.value
            if value is not None and str(value).strip(): fields[field] = str(value).strip()
    return fields
