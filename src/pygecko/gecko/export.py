# -*- encoding: utf-8 -*-
# @File   : export.py
# @Time   : 2024/11/05 21:48:09
# @Author : Kariko Lin

"""Share gecko codes as YAML, friendlier than INI lines for diffs and PRs.

    - name: Infinite Health
      creator: Author
      enabled: true
      notes:
      - grants invincibility
      codes:
      - 04000000 3C000000
"""

from typing import TypedDict
from warnings import warn

import yaml

from ..abstract import FileHandler
from .model import GeckoCode, GeckoCodeLine
from .parser import GeckoFormatWarning


class InvalidGeckoDocument(Exception):
    """To record errors when reading gecko YAML files."""
    pass


class _YamlCodePack(TypedDict, total=False):
    name: str
    creator: str
    enabled: bool
    notes: list[str]
    codes: list[str]


class GeckoYamlParser(FileHandler[list[GeckoCode]]):
    """Imported codes are always user defined,
    as they have to be saved into the local INI."""

    def __init__(self, filename: str, encoding: str = 'utf-8') -> None:
        super().__init__(filename, encoding)

    @staticmethod
    def __to_pack(gcode: GeckoCode) -> _YamlCodePack:
        ret = _YamlCodePack(name=gcode.name)
        if gcode.creator:
            ret['creator'] = gcode.creator
        ret['enabled'] = gcode.enabled
        if gcode.notes:
            ret['notes'] = list(gcode.notes)
        ret['codes'] = [i.original_line for i in gcode.codes]
        return ret

    @staticmethod
    def _getbool(val: str | None) -> bool:
        return bool(val) and str(val)[0].lower() in ('1', 'y', 't')

    @staticmethod
    def _getlist(val: str | list[str] | None) -> list[str]:
        # a lone scalar counts as a one-item list.
        if not val:
            return []
        if isinstance(val, str):
            return [val]
        return [str(i) for i in val]

    @staticmethod
    def __parse_pack(pack: _YamlCodePack) -> GeckoCode:
        return GeckoCode(
            name=str(pack['name']).strip(),
            creator=str(pack.get('creator') or ''),
            notes=GeckoYamlParser._getlist(pack.get('notes')),
            codes=[GeckoCodeLine.from_line(i)
                   for i in GeckoYamlParser._getlist(pack.get('codes'))],
            enabled=GeckoYamlParser._getbool(pack.get('enabled')),
            user_defined=True)

    def read(self) -> list[GeckoCode]:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            # BaseLoader keeps every scalar a string, so `04000000` or `yes`
            # come back exactly as written.
            src = yaml.load(fp, Loader=yaml.BaseLoader)
        if src is None:
            return []
        if not isinstance(src, list):
            raise InvalidGeckoDocument(
                f'`{self._fn}` 的根节点应为列表，实际为 {type(src).__name__}。')
        ret: list[GeckoCode] = []
        for idx, pack in enumerate(src):
            if (not isinstance(pack, dict)
                    or not str(pack.get('name') or '').strip()):
                warn(f'第 {idx} 个 Gecko 代码没有名称，已跳过。',
                     GeckoFormatWarning)
                continue
            ret.append(self.__parse_pack(pack))
        return ret

    def write(self, instance: list[GeckoCode]) -> None:
        packs = [self.__to_pack(i) for i in instance if i.name]
        with open(self._fn, 'w', encoding=self._codec) as fp:
            yaml.safe_dump(packs, fp, allow_unicode=True, sort_keys=False)
