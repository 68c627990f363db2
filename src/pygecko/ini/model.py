# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/11/02 14:21:47
# @Author : Kariko Lin

"""
Line based INI structure, as the emulator game configs use it.

Unlike the usual `key = value` INI, sections like `[Gecko]` hold
free-form lines whose meaning belongs to whoever reads them,
so the store keeps every section as an ordered list of raw lines.
"""

from collections.abc import Iterable, MutableMapping
from typing import Iterator


class IniClass(MutableMapping[str, list[str]]):
    """INI document as section name -> raw lines.

    ```ini
    ; lines before any section live in `self.header`.
    [Gecko]
    $Infinite Health [Author]
    04000000 3C000000
    *grants invincibility
    [Gecko_Enabled]
    $Infinite Health
    ```

    Section order follows declaration (or first assignment) order.
    """
    def __init__(self) -> None:
        self.__raw: dict[str, list[str]] = {}
        self.header: list[str] = []

    def __getitem__(self, key: str) -> list[str]:
        return self.__raw[key]

    def __setitem__(self, key: str, value: Iterable[str]) -> None:
        # shouldn't keep ptr to external list.
        self.__raw[key] = list(value)

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __len__(self) -> int:
        return len(self.__raw)

    def __repr__(self) -> str:
        return 'IniClass { .sections = %s }' % list(self.__raw)

    def get_lines(self, section: str) -> list[str]:
        """Lines of `section` with surrounding spaces stripped.

        A missing section reads as empty.
        """
        return [i.strip() for i in self.__raw.get(section, ())]

    def set_lines(self, section: str, lines: Iterable[str]) -> None:
        """Replace the whole content of `section`."""
        self[section] = lines

    def setdefault(  # type: ignore[override]
        self, section: str, default: Iterable[str] = ()
    ) -> list[str]:
        if section not in self.__raw:
            self.__raw[section] = list(default)
        return self.__raw[section]

    def clear(self) -> None:
        self.header.clear()
        self.__raw.clear()
