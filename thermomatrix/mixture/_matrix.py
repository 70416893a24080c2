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
from typing import Mapping
from ..utils import frozen_mapping
from ..exceptions import MixtureDataError, NonBinaryMixture, UndefinedProperty
from .._component import component_id
from ._normalize import MixtureEntry

__all__ = ('build_property_matrix', 'build_matrices')

# %% Property matrices

def column_index(symbol: str, head: str, label: str) -> int:
    suffix = symbol[len(head):]
    try:
        return int(suffix)
    except ValueError:
        raise MixtureDataError(
            f"record {symbol!r} of mixture {label!r} has a non-integer "
            f"column suffix {suffix!r}"
        ) from None

def build_property_matrix(entry: MixtureEntry, prefix: str, delimiter: str='_') -> np.ndarray:
    """
    Return the read-only property matrix of a mixture, where rows follow the
    declaration order of components and columns follow the integer suffix of
    the '<family>_<n>' records of each component.
    
    """
    label = entry.label
    components = entry.components
    N = len(components)
    if N != 2:
        raise NonBinaryMixture(
            f"Expected exactly 2 components for mixture '{label}', but got {N}"
        )
    head = entry.get_prop(prefix).family + delimiter
    rows = []
    for component in components:
        ID = component_id(component, entry.component_key)
        series = [(column_index(i.symbol, head, label), i.value)
                  for i in entry.records[ID] if i.symbol.startswith(head)]
        if not series:
            raise UndefinedProperty(
                prefix, f"property {prefix!r} is not defined for component "
                        f"{ID!r} of mixture {label!r}"
            )
        columns = [i for i, _ in series]
        if len(set(columns)) != len(columns):
            raise MixtureDataError(
                f"property {prefix!r} of component {ID!r} in mixture {label!r} "
                "has repeated columns"
            )
        series.sort(key=lambda x: x[0])
        rows.append([j for _, j in series])
    sizes = {len(i) for i in rows}
    if len(sizes) != 1:
        raise MixtureDataError(
            f"property {prefix!r} of mixture {label!r} has rows of different lengths"
        )
    matrix = np.array(rows, dtype=float)
    matrix.setflags(0)
    return matrix

def build_matrices(mixtures: Mapping[str, MixtureEntry], delimiter: str='_') -> Mapping:
    """Return read-only property matrices by mixture label and property prefix."""
    return frozen_mapping({
        label: frozen_mapping({i.symbol: build_property_matrix(entry, i.symbol, delimiter)
                               for i in entry.props})
        for label, entry in mixtures.items()
    })
