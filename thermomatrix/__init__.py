# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
# 
# This module is under the UIUC open-source license. See 
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
__version__ = "0.1.0"

from . import (
    utils,
    exceptions,
    readers,
)
from ._settings import settings, MatrixSettings
from ._component import *
from ._record import *
from ._property_key import *
from ._data import *
from ._equation import *
from . import (
    mixture,
    sources,
)
from .mixture import *
from .sources import *
from .readers import *
from . import _component, _record, _property_key, _data, _equation

__all__ = ('settings', 'MatrixSettings', 'utils', 'exceptions', 'readers',
           'mixture', 'sources',
           *_component.__all__, *_record.__all__, *_property_key.__all__,
           *_data.__all__, *_equation.__all__, *mixture.__all__,
           *sources.__all__, *readers.__all__)
