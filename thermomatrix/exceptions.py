# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2021, Yoel Cortes-Pena <yoelcortes@gmail.com>
# 
# This module is under the UIUC open-source license. See 
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
from .utils import colors

__all__ = ('UndefinedComponent',
           'UndefinedMixture',
           'UndefinedProperty',
           'MixtureDataError',
           'MissingIdentityRecord',
           'NonBinaryMixture',
           'UnresolvedMixtureKey',
           'MissingParameter',
           'MissingArgument',
           'message_with_object_stamp',
           'try_method_with_object_stamp',
           'raise_error_with_object_stamp')

class UndefinedComponent(Exception):
    """Exception regarding components that cannot be resolved."""
    def __init__(self, ID, msg=None): 
        self.ID = ID
        if msg is None: msg = repr(ID)
        super().__init__(msg)

class UndefinedMixture(Exception):
    """Exception regarding mixtures that cannot be found."""
    def __init__(self, ID, msg=None): 
        self.ID = ID
        if msg is None: msg = repr(ID)
        super().__init__(msg)

class UndefinedProperty(Exception):
    """Exception regarding properties that are not defined for a component or mixture."""
    def __init__(self, ID, msg=None): 
        self.ID = ID
        if msg is None: msg = repr(ID)
        super().__init__(msg)

class MixtureDataError(ValueError):
    """ValueError regarding malformed mixture records."""

class MissingIdentityRecord(MixtureDataError):
    """MixtureDataError regarding a component row group without Name, Formula or State records."""

class NonBinaryMixture(MixtureDataError):
    """MixtureDataError regarding a mixture that does not hold exactly two components."""

class UnresolvedMixtureKey(MixtureDataError):
    """MixtureDataError regarding a mixture label that matches no key template."""

class MissingParameter(ValueError):
    """ValueError regarding an equation parameter absent from component data."""
    def __init__(self, parameter, msg=None):
        self.parameter = parameter
        if msg is None: msg = f"missing parameter {parameter!r}"
        super().__init__(msg)

class MissingArgument(ValueError):
    """ValueError regarding an equation argument that was not given."""
    def __init__(self, argument, msg=None):
        self.argument = argument
        if msg is None: msg = f"missing argument {argument!r}"
        super().__init__(msg)
    
def message_with_object_stamp(object, msg):
    object_name = str(repr(object))
    if object_name in msg:
        return msg
    else:
        return colors.violet(object_name) + ' ' + msg

def raise_error_with_object_stamp(object, error):
    args = error.args
    if args and isinstance(args[0], str):
        msg, *args = args
        error.args = (message_with_object_stamp(object, msg), *args)
    raise error

def try_method_with_object_stamp(object, method, args=()):
    try:
        return method(*args)
    except KeyError as error:
        raise error
    except Exception as error:
        raise_error_with_object_stamp(object, error)
