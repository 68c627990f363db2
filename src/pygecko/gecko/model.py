# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/11/02 15:10:12
# @Author : Kariko Lin

from dataclasses import dataclass, field
from re import compile as regex

from .consts import GeckoMark

_HEX_TOKEN = regex(r'(?:0[xX])?([0-9a-fA-F]+)')
_U32_MAX = 0xFFFFFFFF


def _read_hex(token: str) -> int | None:
    """Leading hex digits of `token`, or None if unreadable."""
    if (m := _HEX_TOKEN.match(token)) is None:
        return None
    value = int(m.group(1), 16)
    return None if value > _U32_MAX else value


@dataclass
class GeckoCodeLine:
    """One `AAAAAAAA DDDDDDDD` line.

    `original_line` is what gets saved,
    so hex case and padding survive a load/save cycle.
    """
    address: int = 0
    data: int = 0
    original_line: str = ''

    @classmethod
    def from_line(cls, line: str) -> 'GeckoCodeLine':
        ret = cls(original_line=line)
        tokens = line.split()
        # a broken address stops the read, data stays 0 as well.
        if tokens and (addr := _read_hex(tokens[0])) is not None:
            ret.address = addr
            if len(tokens) > 1:
                ret.data = _read_hex(tokens[1]) or 0
        return ret


@dataclass(kw_only=True)
class GeckoCode:
    name: str = ''
    creator: str = ''
    notes: list[str] = field(default_factory=list)
    codes: list[GeckoCodeLine] = field(default_factory=list)
    # the flags below are never part of the [Gecko] body.
    enabled: bool = False
    bootstrap_enabled: bool = False
    user_defined: bool = False

    @property
    def header(self) -> str:
        ret = f'{GeckoMark.HEADER.value}{self.name}'
        if self.creator:
            ret += f' [{self.creator}]'
        return ret
