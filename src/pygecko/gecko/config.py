# -*- encoding: utf-8 -*-
# @File   : config.py
# @Time   : 2024/11/03 10:12:37
# @Author : Kariko Lin

"""Global + local INI handling of gecko codes.

A game has two INIs: the *global* one shipped with the emulator,
and the *local* (user) one. Codes from both are merged into a
working set, while only the user's codes and the enabled list
ever get written back (into the local INI).
"""

import logging
from collections.abc import Iterable
from typing import Protocol

from .consts import GeckoMark, GeckoSection
from .model import GeckoCode
from .parser import mark_bootstrap_codes, mark_enabled_codes, parse_codes
from ..ini import IniClass, IniParser


class LineStore(Protocol):
    """Anything holding named sections of raw lines, like `IniClass`."""
    def get_lines(self, section: str) -> list[str]: ...

    def set_lines(self, section: str, lines: Iterable[str]) -> None: ...


def merge_codes(
    global_codes: Iterable[GeckoCode], local_codes: Iterable[GeckoCode]
) -> list[GeckoCode]:
    """All the global codes, then local ones not named like any before.

    Global wins on collision. Enabled flags are *not* touched here.
    """
    working_set = list(global_codes)
    names = {i.name for i in working_set}
    for i in local_codes:
        if i.name in names:
            logging.debug('Local gecko code "%s" shadowed by global.', i.name)
            continue
        names.add(i.name)
        working_set.append(i)
    return working_set


def bootstrap_lines(global_codes: Iterable[GeckoCode]) -> list[str]:
    """`[Gecko_Enabled]` lines of a fresh local INI."""
    return [
        f'{GeckoMark.HEADER.value}{i.name}'
        for i in global_codes if i.bootstrap_enabled
    ]


def fill_lines(codes: Iterable[GeckoCode]) -> tuple[list[str], list[str]]:
    """Convert codes back to `([Gecko] lines, [Gecko_Enabled] lines)`.

    Bodies of global codes are skipped since they already live in the
    global INI. Codes without a name are skipped entirely.
    Notes always follow the code lines.
    """
    lines: list[str] = []
    enabled_lines: list[str] = []
    for i in codes:
        # nameless codes can't be read back, never save them.
        if not i.name:
            continue
        if i.enabled:
            enabled_lines.append(f'{GeckoMark.HEADER.value}{i.name}')
        if not i.user_defined:
            continue
        lines.append(i.header)
        lines.extend(j.original_line for j in i.codes)
        lines.extend(f'{GeckoMark.NOTE.value}{j}' for j in i.notes)
    return lines, enabled_lines


def read_codes(ini: LineStore, is_user_ini: bool) -> list[GeckoCode]:
    return parse_codes(ini.get_lines(GeckoSection.CODES.value), is_user_ini)


def load_codes(global_ini: LineStore, local_ini: LineStore) -> list[GeckoCode]:
    """Working set with both `enabled` and `bootstrap_enabled` marked."""
    working_set = merge_codes(
        read_codes(global_ini, False), read_codes(local_ini, True))
    mark_enabled_codes(
        local_ini.get_lines(GeckoSection.ENABLED.value), working_set)
    mark_bootstrap_codes(
        global_ini.get_lines(GeckoSection.ENABLED.value), working_set)
    return working_set


def bootstrap_local_config(
    local_ini: LineStore, global_codes: Iterable[GeckoCode]
) -> None:
    """Enable the global defaults in a local INI, overwriting its list."""
    enabled_lines = bootstrap_lines(global_codes)
    local_ini.set_lines(GeckoSection.ENABLED.value, enabled_lines)
    logging.info('Bootstrapped %d default gecko code(s).', len(enabled_lines))


def save_codes(ini: LineStore, codes: Iterable[GeckoCode]) -> None:
    lines, enabled_lines = fill_lines(codes)
    ini.set_lines(GeckoSection.CODES.value, lines)
    ini.set_lines(GeckoSection.ENABLED.value, enabled_lines)


class GeckoProfile:
    """The gecko codes of one game, backed by a global and a local INI.

    Only the local INI is ever written.
    """
    def __init__(
        self, global_path: str, local_path: str,
        encoding: str | None = None
    ) -> None:
        self._global = IniParser(global_path, encoding)
        self._local = IniParser(local_path, encoding)
        self.global_ini = IniClass()
        self.local_ini = IniClass()

    @staticmethod
    def _read_or_empty(parser: IniParser) -> IniClass:
        try:
            return parser.read()
        except FileNotFoundError as e:
            logging.warning(f"INI not found, treated as empty:\n  {e}")
            return IniClass()

    def load(self) -> list[GeckoCode]:
        """Read both INIs and return the merged working set.

        A local INI without `[Gecko_Enabled]` gets it bootstrapped
        from the global defaults first.
        """
        self.global_ini = self._read_or_empty(self._global)
        self.local_ini = self._read_or_empty(self._local)
        if GeckoSection.ENABLED.value not in self.local_ini:
            global_codes = mark_bootstrap_codes(
                self.global_ini.get_lines(GeckoSection.ENABLED.value),
                read_codes(self.global_ini, False))
            bootstrap_local_config(self.local_ini, global_codes)
        return load_codes(self.global_ini, self.local_ini)

    def save(self, codes: Iterable[GeckoCode], *, blank_lines: int = 1) -> None:
        save_codes(self.local_ini, codes)
        self._local.write(self.local_ini, blank_lines=blank_lines)
        logging.info('Gecko codes saved to `%s`.', self._local)

    def __str__(self) -> str:
        return f'GeckoProfile({self._global} + {self._local})'
