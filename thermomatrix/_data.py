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
from typing import Iterable, Optional, Sequence
from .exceptions import UndefinedProperty
from ._record import Quantity, Record, as_record, clean_records
from ._component import as_component, component_id

__all__ = ('ComponentData', 'build_component_data')

# %% Component data

class ComponentData:
    """
    Create a ComponentData object that holds the raw records of a component
    and their cleaned numerical counterparts.

    Parameters
    ----------
    records : Iterable[Record|Mapping]
        Raw records.
    name : str, optional
        Name of the data set.
    description : str, optional
        Description of the data set.
    
    Examples
    --------
    >>> from thermomatrix import ComponentData
    >>> data = ComponentData([{'name': 'Name', 'symbol': 'Name', 'value': 'Methane'},
    ...                       {'name': 'Critical Temperature', 'symbol': 'Tc', 'value': '190.6', 'unit': 'K'}])
    >>> data.get_data_by_symbol('Tc')
    Quantity(symbol='Tc', value=190.6, unit='K')
    >>> data.get_data_by_name('critical temperature').value
    190.6
    
    """
    __slots__ = ('name', 'description', 'raw_data', 'data')
    
    def __init__(self, records: Iterable, name: Optional[str]=None, 
                 description: Optional[str]=None):
        self.name = name or 'Thermo Data'
        self.description = description or 'A collection of thermodynamic data records'
        self.raw_data = [as_record(i) for i in records]
        self.data = clean_records(self.raw_data)
    
    def get_data(self) -> list[Record]:
        return self.data
    
    def get_raw_data(self) -> list[Record]:
        return self.raw_data
    
    def _get_record(self, symbol: str) -> Record:
        for record in self.data:
            if record.symbol == symbol: return record
        raise UndefinedProperty(symbol, f"symbol {symbol!r} not found in {self.name!r}")
    
    def get_data_by_symbol(self, symbol: str) -> Quantity:
        record = self._get_record(symbol)
        return Quantity(record.symbol, record.value, record.unit)
    
    def get_data_by_name(self, name: str) -> Quantity:
        lowered = name.lower()
        for record in self.data:
            if record.name.lower() == lowered:
                return Quantity(record.symbol, record.value, record.unit)
        raise UndefinedProperty(name, f"name {name!r} not found in {self.name!r}")
    
    def get_data_as_map(self) -> dict[str, Quantity]:
        return {i.symbol: Quantity(i.symbol, i.value, i.unit) for i in self.data}
    
    def add_record(self, record):
        self.add_records([record])
    
    def add_records(self, records: Iterable):
        self.raw_data.extend([as_record(i) for i in records])
        self.data = clean_records(self.raw_data)
    
    def remove_record_by_symbol(self, symbol: str):
        self.raw_data = [i for i in self.raw_data if i.symbol != symbol]
        self.data = [i for i in self.data if i.symbol != symbol]
    
    def update_record_by_symbol(self, symbol: str, value: float, unit: Optional[str]=None):
        record = self._get_record(symbol)
        fields = {'value': value}
        if unit: fields['unit'] = unit
        self.raw_data = [i.copy(**fields) if i.symbol == symbol else i for i in self.raw_data]
        self.data = [record.copy(**fields) if i is record else i for i in self.data]
    
    def clear_data(self):
        self.raw_data = []
        self.data = []
    
    def __repr__(self):
        return f"{type(self).__name__}([{', '.join([i.symbol for i in self.data])}])"


def build_component_data(component, records: Iterable, 
                         component_keys: Sequence[str]=('Name-Formula',),
                         name: Optional[str]=None, 
                         description: Optional[str]=None) -> dict[str, dict[str, Quantity]]:
    """Return the cleaned records of a component as a map, by component id under each key."""
    component = as_component(component)
    data = ComponentData(records, name, description).get_data_as_map()
    return {component_id(component, key): dict(data) for key in component_keys}
