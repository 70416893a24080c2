# -*- coding: utf-8 -*-
# BioSTEAM: The Biorefinery Simulation and Techno-Economic Analysis Modules
# Copyright (C) 2020, Yoel Cortes-Pena <yoelcortes@gmail.com>
# 
# This module is under the UIUC open-source license. See 
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
This module includes the console color used to stamp error messages.

"""
from colorpalette import Color, Palette

__all__ = ('colors',)

# %% Console colors

colors = Palette()
colors.violet = Color('strong purple', '#e53fe5')
