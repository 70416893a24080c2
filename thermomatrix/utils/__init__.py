# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
# 
# This module is under the UIUC open-source license. See 
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
from . import representation
from . import decorators
from . import colors

__all__ = (*representation.__all__,
           *decorators.__all__,
           *colors.__all__,
)

from .representation import *
from .decorators import *
from .colors import *
