# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020-2023, Yoel Cortes-Pena <yoelcortes@gmail.com>
# 
# This module is under the UIUC open-source license. See 
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
from . import _normalize
from . import _matrix
from . import _matrix_data
from . import _binary

__all__ = (*_normalize.__all__,
           *_matrix.__all__,
           *_matrix_data.__all__,
           *_binary.__all__)

from ._normalize import *
from ._matrix import *
from ._matrix_data import *
from ._binary import *
