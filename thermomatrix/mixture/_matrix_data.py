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
import numpy as np
from typing import Iterable, Optional, Sequence
from ..utils import read_only, frozen_mapping, repr_quoted_values
from ..exceptions import UndefinedComponent, UndefinedMixture, try_method_with_object_stamp
from .._settings import settings
from .._record import CustomProperty, as_record
from .._component import (
    Component, as_component, component_id, mixture_id_candidates, normalize_mixture_id,
)
from .._property_key import parse_property_key, mixture_property_key
from ._normalize import MixtureEntry, normalize_mixtures
from ._matrix import build_matrices

__all__ = ('MatrixData',)

setattr = object.__setattr__

# %% Mixture matrix engine

@read_only
class MatrixData:
    """
    Create a MatrixData object that indexes binary mixture records and
    builds property matrices, where each property is indexed by an ordered
    pair of components. All mixtures and matrices are built on creation
    and the object is read-only thereafter.

    Parameters
    ----------
    data : Iterable[Iterable[Record|Mapping]]
        Component row groups. Each group must have 'Mixture', 'Name',
        'Formula' and 'State' records and coefficient records named 
        '<prefix>_i_j_<n>', where n is the matrix column.
    name : str, optional
        Name of the data set.
    description : str, optional
        Description of the data set.
    mixture_delimiter : str, optional
        Delimiter of mixture labels. Defaults to `settings.mixture_delimiter`.
    prop_identifier : str, optional
        Property family marker. Defaults to `settings.prop_identifier`.
    component_key : str, optional
        Key template of the ids of stored records. Defaults to `settings.component_key`.
    mixture_keys : Sequence[str], optional
        Key templates used to recognize mixtures and components. Defaults to
        `settings.mixture_keys`.
    property_delimiters : Sequence[str], optional
        Delimiters of property references. Defaults to `settings.property_delimiters`.
    
    Examples
    --------
    >>> from thermomatrix import MatrixData, Component
    >>> def group(name, formula, values):
    ...     return [{'name': 'Mixture', 'symbol': '-', 'value': 'Methanol | Ethanol'},
    ...             {'name': 'Name', 'symbol': '-', 'value': name},
    ...             {'name': 'Formula', 'symbol': '-', 'value': formula},
    ...             {'name': 'State', 'symbol': '-', 'value': 'l'},
    ...             {'name': 'a_i_j_1', 'symbol': 'a_i_j_1', 'value': values[0]},
    ...             {'name': 'a_i_j_2', 'symbol': 'a_i_j_2', 'value': values[1]}]
    >>> data = MatrixData([group('Methanol', 'CH3OH', [0, 1]),
    ...                    group('Ethanol', 'C2H5OH', [2, 3])])
    >>> data
    MatrixData(['Methanol | Ethanol'])
    
    Access cells by position (1-based) or by component ids:
    
    >>> data.ij('a_1_2', 'Methanol | Ethanol').value
    1.0
    >>> data.ij('a_Ethanol_Methanol', 'ethanol|methanol').value
    2.0
    
    Build a matrix for any ordering of components:
    
    >>> methanol = Component('Methanol', 'CH3OH', 'l')
    >>> ethanol = Component('Ethanol', 'C2H5OH', 'l')
    >>> data.mat('a', [methanol, ethanol]).tolist()
    [[0.0, 1.0], [2.0, 3.0]]
    >>> data.mat('a', [ethanol, methanol]).tolist()
    [[3.0, 2.0], [1.0, 0.0]]
    
    """
    __slots__ = ('name',
                 'description',
                 'raw_data',
                 'mixtures',
                 'matrices',
                 'mixture_delimiter',
                 'prop_identifier',
                 'component_key',
                 'mixture_keys',
                 'property_delimiters')
    
    def __init__(self, data: Iterable[Iterable], 
                 name: Optional[str]=None, 
                 description: Optional[str]=None,
                 mixture_delimiter: Optional[str]=None,
                 prop_identifier: Optional[str]=None,
                 component_key: Optional[str]=None,
                 mixture_keys: Optional[Sequence[str]]=None,
                 property_delimiters: Optional[Sequence[str]]=None):
        if mixture_delimiter is None: mixture_delimiter = settings.mixture_delimiter
        if prop_identifier is None: prop_identifier = settings.prop_identifier
        if component_key is None: component_key = settings.component_key
        if mixture_keys is None: mixture_keys = settings.mixture_keys
        if property_delimiters is None: property_delimiters = settings.property_delimiters
        raw_data = tuple([tuple([as_record(j) for j in i]) for i in data])
        mixtures = normalize_mixtures(raw_data, mixture_delimiter, component_key,
                                      prop_identifier, mixture_keys)
        setattr(self, 'name', name)
        setattr(self, 'description', description)
        setattr(self, 'raw_data', raw_data)
        setattr(self, 'mixture_delimiter', mixture_delimiter)
        setattr(self, 'prop_identifier', prop_identifier)
        setattr(self, 'component_key', component_key)
        setattr(self, 'mixture_keys', tuple(mixture_keys))
        setattr(self, 'property_delimiters', tuple(property_delimiters))
        setattr(self, 'mixtures', frozen_mapping(mixtures))
        setattr(self, 'matrices', build_matrices(mixtures))
    
    # %% Stored data
    
    def get_raw_data(self) -> tuple:
        """Return the raw row groups as given (converted to records)."""
        return self.raw_data
    
    def get_data(self):
        """Return normalized mixture entries by label."""
        return self.mixtures
    
    def get_mixture_names(self) -> tuple[str, ...]:
        """Return all mixture labels in first-seen order."""
        return tuple(self.mixtures)
    
    def get_entry(self, mixture_id: str) -> MixtureEntry:
        """
        Return the mixture entry of a label or an alias (any key template, 
        either order, any delimiter, any case).
        
        """
        mixtures = self.mixtures
        if mixture_id in mixtures: return mixtures[mixture_id]
        if isinstance(mixture_id, str):
            alias = normalize_mixture_id(
                mixture_id, (self.mixture_delimiter, *settings.mixture_delimiters)
            )
            for entry in mixtures.values():
                if alias in entry.aliases: return entry
        raise UndefinedMixture(mixture_id, f"mixture {mixture_id!r} not found")
    
    def get_components(self, mixture_id: str) -> tuple[Component, ...]:
        """Return the components of a mixture in declaration order."""
        return self.get_entry(mixture_id).components
    
    def get_component_index(self, mixture_id: str) -> dict[str, int]:
        """Return the matrix row of each component id (under `component_key`)."""
        entry = self.get_entry(mixture_id)
        return {component_id(j, self.component_key): i for i, j in enumerate(entry.components)}
    
    def get_mixture_property_symbols(self, mixture_id: str) -> tuple[str, ...]:
        """Return the property prefixes defined for a mixture."""
        return tuple([i.symbol for i in self.get_entry(mixture_id).props])
    
    def get_property_unit(self, symbol: str, mixture_id: str) -> str:
        prefix = parse_property_key(symbol, self.property_delimiters).prefix
        return self.get_entry(mixture_id).get_prop(prefix).unit
    
    def get_property_matrix(self, symbol: str, mixture_id: str) -> np.ndarray:
        """Return the read-only matrix of a property in declaration order."""
        entry = self.get_entry(mixture_id)
        prefix = parse_property_key(symbol, self.property_delimiters).prefix
        entry.get_prop(prefix)
        return self.matrices[entry.label][prefix]
    
    # %% Mixture search
    
    def find_mixture_id(self, component_ids: Sequence[str]) -> str:
        """
        Return the label of the mixture of the given component ids, trying 
        both orderings.
        
        """
        if not component_ids:
            raise ValueError('component ids must not be empty')
        tokens = [str(i).strip().lower() for i in component_ids]
        forward = '|'.join(tokens)
        reverse = '|'.join(tokens[::-1])
        for label, entry in self.mixtures.items():
            aliases = entry.aliases
            if forward in aliases or reverse in aliases: return label
        raise UndefinedMixture(
            component_ids, f"no mixture found for components {repr_quoted_values(component_ids)}"
        )
    
    def find_mixture_label(self, mixture_ids: Sequence[str]) -> str:
        """Return the label of the first mixture matching any of the given ids."""
        if not mixture_ids:
            raise ValueError('mixture ids must not be empty')
        for mixture_id in mixture_ids:
            try:
                return self.get_entry(mixture_id).label
            except UndefinedMixture:
                continue
        raise UndefinedMixture(
            mixture_ids, f"no mixture found for ids {repr_quoted_values(mixture_ids)}"
        )
    
    # %% Property access
    
    def _resolve_component(self, entry: MixtureEntry, component) -> int:
        index = entry.index(as_component(component), self.mixture_keys)
        if index == -1:
            raise UndefinedComponent(
                component, f"component {component!r} not found in mixture {entry.label!r}"
            )
        return index
    
    def get_property(self, symbol: str, component, mixture_id: str) -> np.ndarray:
        """Return the matrix row of a component for the given property."""
        entry = self.get_entry(mixture_id)
        index = self._resolve_component(entry, component)
        return self.get_property_matrix(symbol, entry.label)[index]
    
    def _pair_property(self, entry, prefix, component_i, component_j, 
                       component_key, key_delimiter) -> CustomProperty:
        prop = entry.get_prop(prefix)
        matrix = self.matrices[entry.label][prefix]
        i = self._resolve_component(entry, component_i)
        j = self._resolve_component(entry, component_j)
        if j >= matrix.shape[1]:
            raise UndefinedComponent(
                component_j, f"property {prefix!r} of mixture {entry.label!r} "
                             f"has no column {j + 1}"
            )
        symbol = mixture_property_key(prefix, component_i, component_j, 
                                      component_key, key_delimiter)
        return CustomProperty(symbol, float(matrix[i, j]), prop.unit)
    
    def get_matrix_property(self, symbol: str, components: Sequence, mixture_id: str,
                            component_key: Optional[str]=None, 
                            key_delimiter: Optional[str]=None) -> CustomProperty:
        """
        Return the property of an ordered pair of components, i.e. 
        matrix[index(components[0])][index(components[1])].
        
        Parameters
        ----------
        symbol : str
            Property prefix or reference (e.g. 'a', 'a_i_j').
        components : Sequence[Component|Mapping]
            Ordered pair of components.
        mixture_id : str
            Mixture label or alias.
        component_key : str, optional
            Key template of the ids in the returned symbol. Defaults to 
            `settings.component_key`.
        key_delimiter : str, optional
            Delimiter of the returned symbol. Defaults to `settings.key_delimiter`.
        
        """
        if len(components) != 2:
            raise ValueError(f"exactly 2 components are required, not {len(components)}")
        entry = self.get_entry(mixture_id)
        prefix = parse_property_key(symbol, self.property_delimiters).prefix
        component_i, component_j = [as_component(i) for i in components]
        return self._pair_property(entry, prefix, component_i, component_j, 
                                   component_key, key_delimiter)
    
    def ij(self, symbol: str, mixture_id: str, 
           component_key: Optional[str]=None, 
           key_delimiter: Optional[str]=None) -> CustomProperty:
        """
        Return the property of a component pair referenced by placeholders,
        either 1-based positions ('a_1_2') or component ids in any key
        template ('a_Methanol_Ethanol', 'a | Methanol | Ethanol').
        
        """
        key = parse_property_key(symbol, self.property_delimiters)
        entry = self.get_entry(mixture_id)
        pair = None
        for placeholders in (key.placeholders, key.scope_placeholders):
            if placeholders is None: continue
            pair = placeholders.resolve(entry.components, self.mixture_keys)
            if None not in pair: break
        else:
            if pair is None:
                raise ValueError(f"property reference {symbol!r} does not refer to 2 components")
            raise UndefinedComponent(
                symbol, f"components of {symbol!r} not found in mixture {entry.label!r}"
            )
        return self._pair_property(entry, key.prefix, *pair, component_key, key_delimiter)
    
    def ijs(self, symbol: str, component_key: Optional[str]=None) -> dict[str, float]:
        """
        Return the property of every ordered component pair of the mixture
        referenced by the property reference, keyed by 'idI | idJ'. The
        mixture is given by scope tokens ('a | Methanol | Ethanol') or by
        placeholders ('a_Methanol_Ethanol') in either order.

        """
        if component_key is None: component_key = settings.component_key
        key = parse_property_key(symbol, self.property_delimiters)
        tokens = key.scope[:2] if len(key.scope) >= 2 else (key.i, key.j)
        if not all(tokens):
            raise ValueError(f"property reference {symbol!r} does not identify a mixture")
        entry = self.mixtures[self.find_mixture_id(tokens)]
        pair_delimiter = settings.pair_delimiter
        values = {}
        for component_i in entry.components:
            for component_j in entry.components:
                value = self._pair_property(entry, key.prefix, component_i, component_j,
                                            component_key, None).value
                ID = (component_id(component_i, component_key) + pair_delimiter 
                      + component_id(component_j, component_key))
                values[ID] = value
        return values
    
    def _build_matrix(self, symbol, components, component_key, key_delimiter):
        if not isinstance(symbol, str) or not symbol.strip():
            raise ValueError('property symbol must not be empty')
        if not components:
            raise ValueError('components must not be empty')
        components = [as_component(i) for i in components]
        if len(components) < 2:
            raise ValueError('at least 2 components are required to find a mixture')
        if component_key is None: component_key = settings.component_key
        if key_delimiter is None: key_delimiter = settings.key_delimiter
        prefix = parse_property_key(symbol, self.property_delimiters).prefix
        candidates = mixture_id_candidates(components[:2], self.mixture_keys)
        entry = self.mixtures[self.find_mixture_label(candidates)]
        N = len(components)
        matrix = np.zeros([N, N])
        values = {}
        for i, component_i in enumerate(components):
            for j, component_j in enumerate(components):
                value = self._pair_property(entry, prefix, component_i, component_j,
                                            component_key, key_delimiter).value
                ID = (component_id(component_i, component_key) + key_delimiter
                      + component_id(component_j, component_key))
                matrix[i, j] = values[ID] = value
        return matrix, values
    
    def mat(self, symbol: str, components: Sequence, 
            component_key: Optional[str]=None,
            key_delimiter: Optional[str]=None) -> np.ndarray:
        """
        Return an N x N array of a property for the given components in the
        given order, where cell [i, j] is the property of the pair 
        (components[i], components[j]).
        
        """
        return try_method_with_object_stamp(
            self, self._build_matrix, (symbol, components, component_key, key_delimiter)
        )[0]
    
    def mat_dict(self, symbol: str, components: Sequence, 
                 component_key: Optional[str]=None,
                 key_delimiter: Optional[str]=None) -> dict[str, float]:
        """
        Return the same cells as :meth:`mat`, keyed by the ids of each
        component pair joined by `key_delimiter` (e.g. 'Methanol-CH3OH_Ethanol-C2H5OH').
        
        """
        return try_method_with_object_stamp(
            self, self._build_matrix, (symbol, components, component_key, key_delimiter)
        )[1]
    
    # %% Representation
    
    def __repr__(self):
        return f"{type(self).__name__}([{repr_quoted_values(self.mixtures)}])"
    
    def _info(self):
        info = type(self).__name__ + (f": {self.name}" if self.name else '')
        for label, entry in self.mixtures.items():
            props = ', '.join([i.symbol for i in entry.props]) or '-'
            info += f"\n {label} ({entry.mixture_key}): {props}"
        return info
    
    def show(self):
        print(self._info())
    _ipython_display_ = show
