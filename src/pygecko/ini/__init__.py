# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 14:19:30
# @Author : Kariko Lin

from .model import IniClass
from .parser import IniParser

__all__ = ['IniClass', 'IniParser']
