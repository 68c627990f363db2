# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/11/02 15:02:44
# @Author : Kariko Lin

from enum import Enum


class GeckoSection(str, Enum):
    CODES = 'Gecko'
    ENABLED = 'Gecko_Enabled'


class GeckoMark(str, Enum):
    HEADER = '$'  # also marks names in [Gecko_Enabled]
    NOTE = '*'
