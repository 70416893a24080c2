# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020, Yoel Cortes-Pena <yoelcortes@gmail.com>
# 
# This module is under the UIUC open-source license. See 
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
__all__ = ('repr_kwargs', 'repr_listed_values', 'repr_quoted_values')

def repr_kwargs(kwargs, dlim=", ", start=None):
    """
    Represent key word arguments, skipping those that are None.

    Parameters
    ----------
    kwargs : dict[str: Any]
        Key word arguments.
    dlim : str, optional
        Delimiter. The default is ", ".
    start : str, optional
        Start of return value. Defaults to delimiter value.

    Examples
    --------
    >>> repr_kwargs({'symbol': 'a', 'unit': None})
    ", symbol='a'"
    
    >>> repr_kwargs({'symbol': 'a', 'value': 1.0}, start="")
    "symbol='a', value=1.0"
    
    """
    items = [f"{key}={value!r}" for key, value in kwargs.items() if value is not None]
    if items:
        start = dlim if start is None else start
        return start + dlim.join(items)
    else:
        return ""

def repr_listed_values(values):
    """
    Represent values for messages.
    
    Examples
    --------
    >>> repr_listed_values(['Name', 'Formula', 'State'])
    'Name, Formula and State'
    
    """
    *values, last = values 
    if values:
        return ", ".join(values) + ' and ' + last
    else:
        return last

def repr_quoted_values(values):
    """
    Represent values as a comma separated list of quoted strings.
    
    Examples
    --------
    >>> repr_quoted_values(['Methanol|Ethanol', 'Ethanol|Methanol'])
    "'Methanol|Ethanol', 'Ethanol|Methanol'"
    
    """
    return ", ".join([repr(i) for i in values])
