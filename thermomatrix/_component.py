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
from typing import Iterable, Optional, Sequence
from .utils import read_only, repr_kwargs, repr_listed_values
from .exceptions import UnresolvedMixtureKey
from ._settings import identity_fields

__all__ = ('Component',
           'as_component',
           'component_id',
           'find_component_by_token',
           'infer_mixture_key',
           'mixture_ids',
           'mixture_id_candidates',
           'find_mixture_delimiter',
           'normalize_mixture_id')

setattr = object.__setattr__

# %% Component identity

@read_only
class Component:
    """
    Create a Component object that identifies a chemical species by name,
    formula and state. Components are immutable and compare by value.

    Parameters
    ----------
    name : str
        Common name (e.g. 'Methanol').
    formula : str
        Chemical formula (e.g. 'CH3OH').
    state : str
        Phase state (e.g. 'l', 'g', 's').
    mole_fraction : float, optional
        Mole fraction in a mixture.

    Examples
    --------
    >>> from thermomatrix import Component
    >>> methanol = Component('Methanol', 'CH3OH', 'l')
    >>> methanol
    Component(name='Methanol', formula='CH3OH', state='l')
    >>> methanol == Component('Methanol', 'CH3OH', 'l')
    True
    >>> methanol.name = 'Ethanol'
    Traceback (most recent call last):
    TypeError: 'Component' object is read-only
    
    """
    __slots__ = ('name', 'formula', 'state', 'mole_fraction')
    
    def __init__(self, name: str, formula: str, state: str, mole_fraction: Optional[float]=None):
        setattr(self, 'name', str(name))
        setattr(self, 'formula', str(formula))
        setattr(self, 'state', str(state))
        setattr(self, 'mole_fraction', None if mole_fraction is None else float(mole_fraction))
    
    @classmethod
    def from_mapping(cls, mapping: Mapping):
        """Return a Component from a mapping with name, formula and state keys (any case)."""
        fields = {str(i).lower().replace('-', '_'): j for i, j in mapping.items()}
        missing = [i for i in identity_fields if fields.get(i) is None]
        if missing:
            raise ValueError(f"component is missing {repr_listed_values(missing)}")
        return cls(fields['name'], fields['formula'], fields['state'],
                   fields.get('mole_fraction'))
    
    def get_field(self, field: str) -> str:
        """Return the identity field with the given case-insensitive name."""
        field = field.strip().lower()
        if field not in identity_fields:
            raise ValueError(f"invalid component field {field!r}")
        return getattr(self, field)
    
    def __eq__(self, other):
        if isinstance(other, Component):
            return (self.name, self.formula, self.state) == (other.name, other.formula, other.state)
        return NotImplemented
    
    def __hash__(self):
        return hash((self.name, self.formula, self.state))
    
    def __reduce__(self):
        return Component, (self.name, self.formula, self.state, self.mole_fraction)
    
    def __repr__(self):
        kwargs = {'name': self.name, 'formula': self.formula, 'state': self.state,
                  'mole_fraction': self.mole_fraction}
        return f"{type(self).__name__}({repr_kwargs(kwargs, start='')})"


def as_component(component) -> Component:
    if isinstance(component, Component):
        return component
    elif isinstance(component, Mapping):
        return Component.from_mapping(component)
    else:
        raise TypeError(f"component must be a 'Component' object or a mapping, "
                        f"not a '{type(component).__name__}' object")

# %% Identity projections

def component_id(component, key: str='Name-Formula') -> str:
    """
    Return the id of a component under a key template, joining the fields
    named by the dash separated parts of the key with '-'.

    Examples
    --------
    >>> from thermomatrix import Component, component_id
    >>> methanol = Component('Methanol', 'CH3OH', 'l')
    >>> component_id(methanol, 'Name-Formula')
    'Methanol-CH3OH'
    >>> component_id(methanol, 'formula')
    'CH3OH'
    
    """
    component = as_component(component)
    if not isinstance(key, str) or not key.strip():
        raise ValueError(f"component key must be a non-empty string, not {key!r}")
    return '-'.join([component.get_field(i) for i in key.split('-')])

def find_component_by_token(token: str, candidates: Iterable[Component], keys: Sequence[str]):
    """
    Return the first candidate whose id under any of the keys (tried in order)
    matches the token case-insensitively, or None.
    
    """
    token = token.strip().lower()
    candidates = tuple(candidates)
    for key in keys:
        for component in candidates:
            if component_id(component, key).lower() == token: return component
    return None

def find_mixture_delimiter(label: str, delimiters: Iterable[str]) -> Optional[str]:
    """Return the longest delimiter found in the label, or None."""
    for delimiter in sorted(delimiters, key=len, reverse=True):
        if delimiter in label: return delimiter
    return None

def split_mixture_label(label: str, delimiter: str) -> list[str]:
    return [i.strip() for i in label.split(delimiter)]

def infer_mixture_key(label: str, components: Sequence[Component], keys: Sequence[str], delimiter: str) -> str:
    """
    Return the key template in which a mixture label was written, i.e. the
    first key under which the ids of all components appear among the label
    tokens.
    
    """
    tokens = {i.lower() for i in split_mixture_label(label, delimiter)}
    for key in keys:
        if all([component_id(i, key).lower() in tokens for i in components]): return key
    raise UnresolvedMixtureKey(
        f"could not infer the key of mixture {label!r}; "
        f"attempted keys: {', '.join(keys)}"
    )

def mixture_ids(components: Sequence[Component], key: str='Name', delimiter: str='|') -> tuple[str, str]:
    """
    Return both orderings of the mixture id of two components.

    Examples
    --------
    >>> from thermomatrix import Component, mixture_ids
    >>> methanol = Component('Methanol', 'CH3OH', 'l')
    >>> ethanol = Component('Ethanol', 'C2H5OH', 'l')
    >>> mixture_ids([methanol, ethanol], 'Formula')
    ('CH3OH|C2H5OH', 'C2H5OH|CH3OH')
    
    """
    if len(components) != 2:
        raise ValueError(f"a mixture id requires exactly 2 components, not {len(components)}")
    id_a, id_b = [component_id(i, key) for i in components]
    return (f"{id_a}{delimiter}{id_b}", f"{id_b}{delimiter}{id_a}")

def mixture_id_candidates(components: Sequence[Component], keys: Sequence[str], delimiter: str='|') -> tuple[str, ...]:
    """Return unique mixture ids of two components over all key templates."""
    candidates = []
    for key in keys:
        try:
            ids = mixture_ids(components, key, delimiter)
        except ValueError:
            continue
        for i in ids:
            if i not in candidates: candidates.append(i)
    if not candidates:
        raise ValueError(f"no mixture id could be formatted with keys {', '.join(keys)}")
    return tuple(candidates)

def normalize_mixture_id(mixture_id: str, delimiters: Iterable[str]) -> str:
    """
    Return a lower-case mixture id with trimmed tokens joined by '|'.

    Examples
    --------
    >>> from thermomatrix import normalize_mixture_id
    >>> normalize_mixture_id('Methanol _ Ethanol', ('|', '_', ' _ '))
    'methanol|ethanol'
    
    """
    mixture_id = mixture_id.strip()
    delimiter = find_mixture_delimiter(mixture_id, delimiters)
    if delimiter is None: return mixture_id.lower()
    return '|'.join(split_mixture_label(mixture_id.lower(), delimiter.lower()))
