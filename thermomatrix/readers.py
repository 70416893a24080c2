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
import pandas as pd
from typing import Iterable, Mapping, Optional, Sequence
from ._record import Record

__all__ = ('records_from_frame', 'records_from_table')

# %% Readers

def to_value(value):
    if pd.isna(value): return None
    return value.item() if hasattr(value, 'item') else value

def records_from_frame(frame: pd.DataFrame, 
                       symbols: Optional[Mapping[str, str]]=None,
                       units: Optional[Mapping[str, str]]=None,
                       skip_columns: Iterable[str]=()) -> list[list[Record]]:
    """
    Return one group of raw records per row of a data frame, where each 
    column is a record name.

    Parameters
    ----------
    frame : pandas.DataFrame
        Table of component (or mixture component) data.
    symbols : Mapping[str, str], optional
        Symbol of each column. Defaults to the column name.
    units : Mapping[str, str], optional
        Unit of each column. Defaults to 'N/A'.
    skip_columns : Iterable[str], optional
        Columns to leave out (e.g. a row number).
    
    Examples
    --------
    >>> import pandas as pd
    >>> from thermomatrix import records_from_frame
    >>> frame = pd.DataFrame({'Name': ['Methane'], 'Formula': ['CH4'], 'State': ['g'], 
    ...                       'Tc': [190.6]})
    >>> records_from_frame(frame, units={'Tc': 'K'})[0][-1]
    Record('Tc', 'Tc', 190.6, 'K')
    
    """
    symbols = symbols or {}
    units = units or {}
    skip_columns = set(skip_columns)
    columns = [i for i in frame.columns if i not in skip_columns]
    groups = []
    for _, row in frame[columns].iterrows():
        groups.append([
            Record(name, symbols.get(name, name), to_value(row[name]), units.get(name, 'N/A'))
            for name in columns
        ])
    return groups

def records_from_table(columns: Sequence[str], symbols: Sequence[str], 
                       units: Sequence[str], values: Iterable[Sequence]) -> list[list[Record]]:
    """
    Return one group of raw records per row of a table given as column 
    names, symbols and units, and rows of values.
    
    """
    N = len(columns)
    if len(symbols) != N or len(units) != N:
        raise ValueError('columns, symbols and units must have the same length')
    frame = pd.DataFrame(list(values), columns=list(columns))
    return records_from_frame(frame, dict(zip(columns, symbols)), dict(zip(columns, units)))
