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
from typing import Iterable

__all__ = ('settings', 'MatrixSettings')

# %% Defaults

#: Component fields that may take part in a component key (e.g. 'Name-Formula').
identity_fields = ('name', 'formula', 'state')

defaults = dict(
    mixture_delimiter='|',
    mixture_delimiters=('|', ' | ', '_', ' _ '),
    property_delimiters=('|', '_'),
    prop_identifier='_i_j',
    component_key='Name-Formula',
    mixture_keys=('Name', 'Formula', 'Name-Formula'),
    ignore_names=('Name', 'Formula', 'State', 'CAS', 'InChI', 'SMILES'),
    key_delimiter='_',
    pair_delimiter=' | ',
    scale_operation='multiply',
)

def check_component_key(key):
    if not isinstance(key, str) or not key.strip():
        raise ValueError(f"component key must be a non-empty string, not {key!r}")
    for part in key.split('-'):
        if part.strip().lower() not in identity_fields:
            raise ValueError(
                f"invalid component key {key!r}; key parts must be "
                "'Name', 'Formula' or 'State' joined by '-'"
            )
    return key

def check_delimiters(name, delimiters):
    if isinstance(delimiters, str): delimiters = (delimiters,)
    delimiters = tuple(delimiters)
    if not delimiters or not all([isinstance(i, str) and i for i in delimiters]):
        raise ValueError(f"{name} must be a sequence of non-empty strings")
    return delimiters

def check_delimiter(name, delimiter):
    if not isinstance(delimiter, str) or not delimiter:
        raise ValueError(f"{name} must be a non-empty string, not {delimiter!r}")
    return delimiter

# %%
    
class MatrixSettings:
    """
    A compilation of all settings that affect how mixture records are parsed
    and how components and mixtures are identified.

    Examples
    --------
    Access or change the delimiter used to split mixture labels:
        
    >>> from thermomatrix import settings
    >>> settings.mixture_delimiter
    '|'

    Access the key templates tried when matching mixtures:
        
    >>> settings.mixture_keys
    ('Name', 'Formula', 'Name-Formula')

    Invalid component keys are rejected:
        
    >>> settings.component_key = 'Name-CAS'
    Traceback (most recent call last):
    ValueError: invalid component key 'Name-CAS'; key parts must be 'Name', 'Formula' or 'State' joined by '-'

    """
    __slots__ = (
        '_mixture_delimiter',
        '_mixture_delimiters',
        '_property_delimiters',
        '_prop_identifier',
        '_component_key',
        '_mixture_keys',
        '_ignore_names',
        '_key_delimiter',
        '_pair_delimiter',
        '_scale_operation',
    )
    
    def __new__(cls):
        return settings
    
    def reset(self):
        """Restore all default settings."""
        for name, value in defaults.items(): setattr(self, name, value)
    
    @property
    def mixture_delimiter(self) -> str:
        """Delimiter between the two component ids of a mixture label."""
        return self._mixture_delimiter
    @mixture_delimiter.setter
    def mixture_delimiter(self, delimiter):
        self._mixture_delimiter = check_delimiter('mixture_delimiter', delimiter)
    
    @property
    def mixture_delimiters(self) -> tuple[str, ...]:
        """Candidate delimiters tried (in order) when searching for mixture labels."""
        return self._mixture_delimiters
    @mixture_delimiters.setter
    def mixture_delimiters(self, delimiters: Iterable[str]):
        self._mixture_delimiters = check_delimiters('mixture_delimiters', delimiters)
    
    @property
    def property_delimiters(self) -> tuple[str, ...]:
        """Delimiters of property references in priority order."""
        return self._property_delimiters
    @property_delimiters.setter
    def property_delimiters(self, delimiters: Iterable[str]):
        self._property_delimiters = check_delimiters('property_delimiters', delimiters)
    
    @property
    def prop_identifier(self) -> str:
        """Text that marks a record symbol as a member of a property family (e.g. 'a_i_j_1')."""
        return self._prop_identifier
    @prop_identifier.setter
    def prop_identifier(self, identifier):
        self._prop_identifier = check_delimiter('prop_identifier', identifier)
    
    @property
    def component_key(self) -> str:
        """Default key template of component ids (e.g. 'Name-Formula')."""
        return self._component_key
    @component_key.setter
    def component_key(self, key):
        self._component_key = check_component_key(key)
    
    @property
    def mixture_keys(self) -> tuple[str, ...]:
        """Key templates in which mixture labels may be written."""
        return self._mixture_keys
    @mixture_keys.setter
    def mixture_keys(self, keys: Iterable[str]):
        if isinstance(keys, str): keys = (keys,)
        keys = tuple([check_component_key(i) for i in keys])
        if not keys: raise ValueError('mixture_keys must not be empty')
        self._mixture_keys = keys
    
    @property
    def ignore_names(self) -> tuple[str, ...]:
        """Record names dropped when cleaning raw records (matched case-insensitively)."""
        return self._ignore_names
    @ignore_names.setter
    def ignore_names(self, names: Iterable[str]):
        if isinstance(names, str): names = (names,)
        self._ignore_names = tuple(names)
    
    @property
    def key_delimiter(self) -> str:
        """Delimiter of synthesized property symbols (e.g. 'a_Methanol_Ethanol')."""
        return self._key_delimiter
    @key_delimiter.setter
    def key_delimiter(self, delimiter):
        self._key_delimiter = check_delimiter('key_delimiter', delimiter)
    
    @property
    def pair_delimiter(self) -> str:
        """Delimiter of component pair keys returned by `MatrixData.ijs`."""
        return self._pair_delimiter
    @pair_delimiter.setter
    def pair_delimiter(self, delimiter):
        self._pair_delimiter = check_delimiter('pair_delimiter', delimiter)
    
    @property
    def scale_operation(self) -> str:
        """How parameter scales are applied to data values ('multiply' or 'divide')."""
        return self._scale_operation
    @scale_operation.setter
    def scale_operation(self, operation):
        if operation not in ('multiply', 'divide'):
            raise ValueError(f"scale operation must be 'multiply' or 'divide', not {operation!r}")
        self._scale_operation = operation
    
    def __repr__(self):
        return f"{type(self).__name__}()"
    
    def show(self):
        print(type(self).__name__ + ':')
        for name in defaults: print(f"    {name}: {getattr(self, name)!r}")
    _ipython_display_ = show

#: 
settings: MatrixSettings = object.__new__(MatrixSettings)
settings.reset()
