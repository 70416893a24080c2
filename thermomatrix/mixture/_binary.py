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
from warnings import warn
from typing import Iterable, Optional, Sequence
from ..utils import read_only, repr_quoted_values
from ..exceptions import UndefinedMixture
from .._settings import settings
from .._record import as_record
from .._component import as_component, component_id, mixture_ids
from ._normalize import find_mixture_record
from ._matrix_data import MatrixData

__all__ = ('BinaryMixtureRecords',
           'build_matrix_data',
           'extract_binary_mixture_data',
           'build_binary_mixture_data',
           'build_binary_mixtures_data')

setattr = object.__setattr__

# %% Binary mixture records

@read_only
class BinaryMixtureRecords:
    """Row groups of a binary mixture and the label convention they were found under."""
    __slots__ = ('mixture_id', 'mixture_ids', 'mixture_key', 'mixture_delimiter', 'records')
    
    def __init__(self, mixture_id, mixture_ids, mixture_key, mixture_delimiter, records):
        setattr(self, 'mixture_id', mixture_id)
        setattr(self, 'mixture_ids', tuple(mixture_ids))
        setattr(self, 'mixture_key', mixture_key)
        setattr(self, 'mixture_delimiter', mixture_delimiter)
        setattr(self, 'records', tuple(records))
    
    def __repr__(self):
        return f"<{type(self).__name__}: {self.mixture_id}>"


def build_matrix_data(data: Iterable[Iterable], name: Optional[str]=None, 
                      description: Optional[str]=None):
    """Return normalized mixture entries of raw row groups by label."""
    return MatrixData(data, name, description).get_data()

def extract_binary_mixture_data(components: Sequence, data: Iterable[Iterable],
                                mixture_keys: Optional[Sequence[str]]=None,
                                mixture_delimiters: Optional[Sequence[str]]=None) -> BinaryMixtureRecords:
    """
    Return the two row groups of a binary mixture. Every key template is
    tried with every delimiter (in order) and the first combination that
    matches exactly two row groups is used.

    Parameters
    ----------
    components : Sequence[Component|Mapping]
        The two components of the mixture.
    data : Iterable[Iterable[Record|Mapping]]
        Row groups of any number of mixtures.
    mixture_keys : Sequence[str], optional
        Defaults to `settings.mixture_keys`.
    mixture_delimiters : Sequence[str], optional
        Defaults to `settings.mixture_delimiters`.
    
    """
    if len(components) != 2:
        raise ValueError(
            f"Expected exactly 2 components for binary mixture data, but got {len(components)}"
        )
    if mixture_keys is None: mixture_keys = settings.mixture_keys
    if mixture_delimiters is None: mixture_delimiters = settings.mixture_delimiters
    components = [as_component(i) for i in components]
    groups = []
    for records in data:
        records = [as_record(i) for i in records]
        label = find_mixture_record(records)
        if label: groups.append((label, records))
    attempted = []
    for key in mixture_keys:
        for delimiter in mixture_delimiters:
            ids = mixture_ids(components, key, delimiter)
            attempted.extend([i for i in ids if i not in attempted])
            candidates = {i.lower() for i in ids}
            matches = [(label, records) for label, records in groups 
                       if label.lower() in candidates]
            if len(matches) == 2:
                return BinaryMixtureRecords(
                    matches[0][0], ids, key, delimiter, [i for _, i in matches]
                )
    names = [i.name for i in components]
    raise UndefinedMixture(
        names, f"no binary mixture data found for {repr_quoted_values(names)}; "
               f"attempted: {repr_quoted_values(attempted)}"
    )

def build_binary_mixture_data(components: Sequence, data: Iterable[Iterable],
                              alias_keys: Optional[Sequence[str]]=None,
                              mixture_delimiters: Optional[Sequence[str]]=None,
                              mixture_keys: Optional[Sequence[str]]=None) -> dict[str, dict[str, MatrixData]]:
    """
    Return a dictionary of property engines by alias, where every alias of
    the binary mixture (under every key template, in both orders, joined by
    '|') maps every property prefix to the same :class:`MatrixData` object.

    Parameters
    ----------
    components : Sequence[Component|Mapping]
        The two components of the mixture.
    data : Iterable[Iterable[Record|Mapping]]
        Row groups of any number of mixtures.
    alias_keys : Sequence[str], optional
        Key templates of the published aliases. Defaults to `settings.mixture_keys`.
    mixture_delimiters : Sequence[str], optional
        Delimiters tried when searching for the mixture label. Defaults to
        `settings.mixture_delimiters`.
    mixture_keys : Sequence[str], optional
        Key templates tried when searching for the mixture label. Defaults
        to `settings.mixture_keys`.
    
    """
    if alias_keys is None: alias_keys = settings.mixture_keys
    extracted = extract_binary_mixture_data(components, data, mixture_keys, mixture_delimiters)
    delimiter = extracted.mixture_delimiter
    engine = MatrixData(extracted.records, mixture_delimiter=delimiter.strip() or delimiter)
    label = extracted.mixture_id
    symbols = engine.get_mixture_property_symbols(label)
    components = [as_component(i) for i in components]
    aliases = [label]
    for key in alias_keys:
        aliases.extend([i for i in mixture_ids(components, key, '|') if i not in aliases])
    return {i: {j: engine for j in symbols} for i in aliases}

def build_binary_mixtures_data(pairs: Iterable[Sequence], data: Iterable[Iterable],
                               alias_keys: Optional[Sequence[str]]=None,
                               mixture_delimiters: Optional[Sequence[str]]=None,
                               mixture_keys: Optional[Sequence[str]]=None) -> dict[str, dict[str, MatrixData]]:
    """
    Return the merged aliases of several binary mixtures. When two pairs
    share an alias the last one wins and a RuntimeWarning is issued.
    
    """
    data = [list(i) for i in data]
    merged = {}
    for components in pairs:
        built = build_binary_mixture_data(components, data, alias_keys,
                                          mixture_delimiters, mixture_keys)
        for alias, engines in built.items():
            if alias in merged:
                names = [component_id(i, 'Name') for i in components]
                warn(RuntimeWarning(
                    f"alias {alias!r} was replaced by the data of "
                    f"{repr_quoted_values(names)}"
                ), stacklevel=2)
            merged[alias] = engines
    return merged
