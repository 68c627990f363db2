# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 14:05:40
# @Author : Kariko Lin

import logging

from .ini import IniClass, IniParser
from .gecko import (
    GeckoCode, GeckoCodeLine, GeckoProfile, GeckoYamlParser,
    parse_codes, mark_enabled_codes, mark_bootstrap_codes,
    merge_codes, bootstrap_lines, fill_lines,
    load_codes, save_codes, bootstrap_local_config
)

__all__ = [
    'IniClass', 'IniParser',
    'GeckoCode', 'GeckoCodeLine', 'GeckoProfile', 'GeckoYamlParser',
    'parse_codes', 'mark_enabled_codes', 'mark_bootstrap_codes',
    'merge_codes', 'bootstrap_lines', 'fill_lines',
    'load_codes', 'save_codes', 'bootstrap_local_config'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
