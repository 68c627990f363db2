# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 15:00:18
# @Author : Kariko Lin

from .consts import GeckoMark, GeckoSection
from .model import GeckoCode, GeckoCodeLine
from .parser import (
    GeckoFormatWarning,
    parse_codes,
    mark_enabled_codes,
    mark_bootstrap_codes
)
from .config import (
    GeckoProfile,
    merge_codes,
    bootstrap_lines,
    fill_lines,
    read_codes,
    load_codes,
    bootstrap_local_config,
    save_codes
)
from .export import GeckoYamlParser, InvalidGeckoDocument
