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
from typing import Optional, Sequence
from .utils import read_only
from ._record import to_num
from ._component import Component, component_id, find_component_by_token
from ._settings import settings

__all__ = ('PropertyKey', 
           'NumericPlaceholders',
           'ComponentPlaceholders',
           'parse_property_key',
           'mixture_property_key')

setattr = object.__setattr__

# %% Placeholders

@read_only
class Placeholders:
    __slots__ = ('i', 'j')
    mode = None
    
    def __init__(self, i, j):
        setattr(self, 'i', i)
        setattr(self, 'j', j)
    
    def __eq__(self, other):
        if type(self) is type(other):
            return (self.i, self.j) == (other.i, other.j)
        return NotImplemented
    
    def __hash__(self):
        return hash((self.mode, self.i, self.j))
    
    def __repr__(self):
        return f"{type(self).__name__}({self.i!r}, {self.j!r})"


class NumericPlaceholders(Placeholders):
    """1-based positions of two components in declaration order."""
    __slots__ = ()
    mode = 'numeric'
    
    def resolve(self, components: Sequence[Component], keys: Sequence[str]) -> tuple:
        N = len(components)
        resolved = []
        for position in (self.i, self.j):
            index = int(position) - 1 if float(position).is_integer() else -1
            resolved.append(components[index] if 0 <= index < N else None)
        return tuple(resolved)


class ComponentPlaceholders(Placeholders):
    """Component identifier tokens (any key template, case-insensitive)."""
    __slots__ = ()
    mode = 'component'
    
    def resolve(self, components: Sequence[Component], keys: Sequence[str]) -> tuple:
        return tuple([find_component_by_token(i, components, keys) for i in (self.i, self.j)])


def placeholders_from_tokens(i: str, j: str) -> Optional[Placeholders]:
    if not (i and j): return None
    if to_num(i) is None or to_num(j) is None:
        return ComponentPlaceholders(i, j)
    else:
        return NumericPlaceholders(to_num(i), to_num(j))

# %% Property keys

@read_only
class PropertyKey:
    """
    Parsed property reference. Use :func:`parse_property_key` to create one.

    Parameters
    ----------
    prefix : str
        Property prefix (e.g. 'a').
    delimiter : str
        Main delimiter found, or an empty string.
    i, j : str
        Placeholder tokens, empty strings when absent.
    scope : tuple[str]
        Component tokens following the main delimiter in the
        'prefix_i_j | comp1 | comp2' and 'prefix | comp1 | comp2' forms.
    
    """
    __slots__ = ('prefix', 'delimiter', 'i', 'j', 'scope', 'placeholders')
    
    def __init__(self, prefix: str, delimiter: str='', i: str='', j: str='', scope: tuple=()):
        setattr(self, 'prefix', prefix)
        setattr(self, 'delimiter', delimiter)
        setattr(self, 'i', i)
        setattr(self, 'j', j)
        setattr(self, 'scope', tuple(scope))
        setattr(self, 'placeholders', placeholders_from_tokens(i, j))
    
    @property
    def mode(self) -> str:
        """'numeric' if both placeholders are numbers, 'component' otherwise."""
        placeholders = self.placeholders
        return 'component' if placeholders is None else placeholders.mode
    
    @property
    def scope_placeholders(self) -> Optional[Placeholders]:
        """Placeholders built from the first two scope tokens, if any."""
        scope = self.scope
        if len(scope) < 2: return None
        return placeholders_from_tokens(scope[0], scope[1])
        
    def __repr__(self):
        return (f"{type(self).__name__}(prefix={self.prefix!r}, delimiter={self.delimiter!r}, "
                f"i={self.i!r}, j={self.j!r}, scope={self.scope!r})")


def parse_property_key(symbol: str, delimiters: Optional[Sequence[str]]=None) -> PropertyKey:
    """
    Parse a property reference in any of the following forms:
    
    * 'prefix_i_j | comp1 | comp2'
    * 'prefix | comp1 | comp2'
    * 'prefix_comp1_comp2' (or 'prefix_1_2')
    
    Missing parts are returned as empty strings; this function never raises
    on malformed text.

    Parameters
    ----------
    symbol : str
        Property reference.
    delimiters : Sequence[str], optional
        Delimiters in priority order. Defaults to `settings.property_delimiters`.

    Examples
    --------
    >>> from thermomatrix import parse_property_key
    >>> key = parse_property_key('a_1_2')
    >>> key.prefix, key.i, key.j, key.mode
    ('a', '1', '2', 'numeric')
    >>> key = parse_property_key('a_i_j | Methanol | Ethanol')
    >>> key.prefix, key.i, key.j, key.mode, key.scope
    ('a', 'i', 'j', 'component', ('Methanol', 'Ethanol'))
    >>> key = parse_property_key('a | Methanol | Ethanol')
    >>> key.prefix, key.i, key.j, key.scope
    ('a', '', '', ('Methanol', 'Ethanol'))
    >>> parse_property_key('alpha').prefix
    'alpha'
    
    """
    if delimiters is None: delimiters = settings.property_delimiters
    symbol = str(symbol).strip()
    main = None
    for delimiter in delimiters:
        if delimiter in symbol:
            main = delimiter
            break
    if main is None: return PropertyKey(symbol)
    parts = [i.strip() for i in symbol.split(main)]
    head = parts[0]
    nested = None
    for delimiter in delimiters:
        if delimiter != main and delimiter in head:
            nested = delimiter
            break
    if nested is not None:
        # prefix_i_j | comp1 | comp2
        tokens = [i.strip() for i in head.split(nested)]
        tokens += [''] * (3 - len(tokens))
        return PropertyKey(tokens[0], main, tokens[1], tokens[2], parts[1:])
    elif main == delimiters[0] and len(delimiters) > 1:
        # prefix | comp1 | comp2
        return PropertyKey(head, main, scope=parts[1:])
    else:
        # prefix_comp1_comp2
        parts += [''] * (3 - len(parts))
        return PropertyKey(parts[0], main, parts[1], parts[2])

def mixture_property_key(prefix: str, component_i, component_j, 
                         component_key: Optional[str]=None,
                         delimiter: Optional[str]=None) -> str:
    """
    Return the property symbol of a component pair.

    Examples
    --------
    >>> from thermomatrix import Component, mixture_property_key
    >>> methanol = Component('Methanol', 'CH3OH', 'l')
    >>> ethanol = Component('Ethanol', 'C2H5OH', 'l')
    >>> mixture_property_key('a', methanol, ethanol, 'Name')
    'a_Methanol_Ethanol'
    
    """
    if component_key is None: component_key = settings.component_key
    if delimiter is None: delimiter = settings.key_delimiter
    return delimiter.join([prefix, 
                           component_id(component_i, component_key),
                           component_id(component_j, component_key)])
