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
from ..utils import read_only, frozen_mapping, repr_listed_values
from ..exceptions import MissingIdentityRecord, NonBinaryMixture, UndefinedProperty
from .._settings import settings
from .._record import as_record, clean_records, identity_of
from .._component import (
    Component, component_id, infer_mixture_key, mixture_ids,
    split_mixture_label, normalize_mixture_id,
)

__all__ = ('Prop', 'MixtureEntry', 'normalize_mixtures', 'find_mixture_record')

setattr = object.__setattr__

# %% Normalized mixture data

@read_only
class Prop:
    """
    Property family of a mixture (e.g. symbol 'a' for the records 'a_i_j_1', 
    'a_i_j_2', ...).
    
    """
    __slots__ = ('symbol', 'family', 'unit')
    
    def __init__(self, symbol: str, family: str, unit: str):
        setattr(self, 'symbol', symbol)
        setattr(self, 'family', family)
        setattr(self, 'unit', unit)
    
    def __repr__(self):
        return f"{type(self).__name__}({self.symbol!r}, {self.family!r}, {self.unit!r})"


@read_only
class MixtureEntry:
    """
    Normalized records of a binary mixture. Use :func:`normalize_mixtures` 
    to create entries.
    
    """
    __slots__ = ('label', 
                 'mixture_key', 
                 'mixture_ids', 
                 'mixture_component_ids',
                 'components', 
                 'records', 
                 'props', 
                 'component_key', 
                 'aliases')
    
    def __init__(self, label, mixture_key, mixture_ids, mixture_component_ids,
                 components, records, props, component_key, aliases):
        setattr(self, 'label', label)
        setattr(self, 'mixture_key', mixture_key)
        setattr(self, 'mixture_ids', tuple(mixture_ids))
        setattr(self, 'mixture_component_ids', tuple(mixture_component_ids))
        setattr(self, 'components', tuple(components))
        setattr(self, 'records', frozen_mapping({i: tuple(j) for i, j in records.items()}))
        setattr(self, 'props', tuple(props))
        setattr(self, 'component_key', component_key)
        setattr(self, 'aliases', frozenset(aliases))
    
    def get_prop(self, symbol: str) -> Prop:
        for prop in self.props:
            if prop.symbol == symbol: return prop
        raise UndefinedProperty(
            symbol, f"property {symbol!r} is not defined for mixture {self.label!r}"
        )
    
    def get_records(self, component: Component) -> tuple:
        return self.records[component_id(component, self.component_key)]
    
    def index(self, component: Component, keys: Sequence[str]) -> int:
        """Return the declaration index of a component, matched under any key (case-insensitive)."""
        for key in keys:
            ID = component_id(component, key).lower()
            for index, other in enumerate(self.components):
                if component_id(other, key).lower() == ID: return index
        return -1
    
    def __repr__(self):
        return f"<{type(self).__name__}: {self.label}>"

# %% Normalization

def find_mixture_record(records: Iterable) -> Optional[str]:
    """Return the value of the 'mixture' record (case-insensitive), or None."""
    for record in records:
        record = as_record(record)
        if record.name.lower() == 'mixture':
            if record.value is None: return None
            return str(record.value).strip()
    return None

def merge_props(props: list, records: Iterable, prop_identifier: str):
    existing = {i.symbol for i in props}
    for record in records:
        symbol = record.symbol
        if prop_identifier not in symbol: continue
        prefix = symbol[:symbol.index(prop_identifier)]
        if prefix in existing: continue
        existing.add(prefix)
        props.append(Prop(prefix, prefix + prop_identifier, record.unit))

def normalize_mixtures(data: Iterable[Iterable], 
                       mixture_delimiter: Optional[str]=None, 
                       component_key: Optional[str]=None,
                       prop_identifier: Optional[str]=None,
                       mixture_keys: Optional[Sequence[str]]=None,
                       ignore_names: Optional[Iterable[str]]=None,
                       mixture_delimiters: Optional[Iterable[str]]=None) -> dict[str, MixtureEntry]:
    """
    Group raw component row groups by their mixture label and return a
    dictionary of normalized mixture entries by label (in first-seen order).

    Parameters
    ----------
    data : Iterable[Iterable[Record|Mapping]]
        Row groups, each with 'Mixture', 'Name', 'Formula' and 'State' records
        and coefficient records such as 'a_i_j_1'. Groups without a 'Mixture'
        record are ignored.
    mixture_delimiter : str, optional
        Delimiter of mixture labels. Defaults to `settings.mixture_delimiter`.
    component_key : str, optional
        Key template of record ids. Defaults to `settings.component_key`.
    prop_identifier : str, optional
        Property family marker. Defaults to `settings.prop_identifier`.
    mixture_keys : Sequence[str], optional
        Key templates a label may be written in. Defaults to `settings.mixture_keys`.
    ignore_names : Iterable[str], optional
        Record names dropped when cleaning. Defaults to `settings.ignore_names`.
    mixture_delimiters : Iterable[str], optional
        Delimiters recognized when normalizing aliases. Defaults to 
        `settings.mixture_delimiters`.
    
    """
    if mixture_delimiter is None: mixture_delimiter = settings.mixture_delimiter
    if component_key is None: component_key = settings.component_key
    if prop_identifier is None: prop_identifier = settings.prop_identifier
    if mixture_keys is None: mixture_keys = settings.mixture_keys
    if ignore_names is None: ignore_names = settings.ignore_names
    if mixture_delimiters is None: mixture_delimiters = settings.mixture_delimiters
    mixture_delimiters = (mixture_delimiter, *mixture_delimiters)
    groups = []
    for records in data:
        records = [as_record(i) for i in records]
        label = find_mixture_record(records)
        if label: groups.append((label, records))
    labels = {}
    for label, records in groups:
        if label in labels: continue
        tokens = split_mixture_label(label, mixture_delimiter)
        if len(tokens) != 2 or not all(tokens):
            raise NonBinaryMixture(
                f"mixture label {label!r} does not split into 2 component ids "
                f"with delimiter {mixture_delimiter!r}"
            )
        labels[label] = dict(
            mixture_ids=('|'.join(tokens), '|'.join(tokens[::-1])),
            mixture_component_ids=tokens,
            components=[],
            records={},
            props=[],
        )
    for label, records in groups:
        fields = identity_of(records)
        missing = [i.capitalize() for i in ('name', 'formula', 'state') if i not in fields]
        if missing:
            raise MissingIdentityRecord(
                f"missing required component identity records "
                f"({repr_listed_values(missing)}) in mixture {label!r}"
            )
        component = Component(fields['name'], fields['formula'], fields['state'])
        entry = labels[label]
        ID = component_id(component, component_key)
        if ID in entry['records']:
            raise NonBinaryMixture(f"component {ID!r} is repeated in mixture {label!r}")
        cleaned = clean_records(records, ignore_names)
        entry['components'].append(component)
        entry['records'][ID] = cleaned
        merge_props(entry['props'], cleaned, prop_identifier)
    mixtures = {}
    for label, entry in labels.items():
        components = entry['components']
        N = len(components)
        if N != 2:
            raise NonBinaryMixture(
                f"Expected exactly 2 components for mixture '{label}', but got {N}"
            )
        mixture_key = infer_mixture_key(label, components, mixture_keys, mixture_delimiter)
        aliases = {normalize_mixture_id(label, mixture_delimiters)}
        for key in mixture_keys:
            aliases.update([i.lower() for i in mixture_ids(components, key, '|')])
        mixtures[label] = MixtureEntry(
            label, mixture_key, entry['mixture_ids'], entry['mixture_component_ids'],
            components, entry['records'], entry['props'], component_key, aliases
        )
    return mixtures
