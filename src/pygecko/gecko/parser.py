# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/11/02 15:31:58
# @Author : Kariko Lin

"""Gecko code lines -> `GeckoCode` records.

The `[Gecko]` grammar, line by line:

    $Name [Creator]     ; starts a new code, `[Creator]` is optional
    *some note          ; note of the current code
    04000000 3C000000   ; anything else is a code line

And in `[Gecko_Enabled]`, each `$Name` line turns on every code called so.
"""

import logging
from collections.abc import Iterable
from enum import Enum
from warnings import warn

from .consts import GeckoMark
from .model import GeckoCode, GeckoCodeLine


class GeckoFormatWarning(UserWarning):
    """Lines dropped while reading a [Gecko] section."""
    pass


class ParserState(Enum):
    NO_RECORD = 0
    IN_RECORD = 1


def _split_header(line: str) -> tuple[str, str]:
    # no bracket balancing, just the first `[` and the `]` after it.
    name, bracket, rest = line[1:].partition('[')
    creator = rest.partition(']')[0] if bracket else ''
    return name.strip(), creator


def parse_codes(
    lines: Iterable[str], is_user_ini: bool = False
) -> list[GeckoCode]:
    """Build codes from the lines of a `[Gecko]` section.

    Codes come out in declaration order, duplicated names included.
    Notes and code lines that don't belong to a named code
    are dropped with a `GeckoFormatWarning`.
    """
    ret: list[GeckoCode] = []
    state = ParserState.NO_RECORD
    gcode = GeckoCode()

    for line in lines:
        if not line:
            continue
        match line[0], state:
            case GeckoMark.HEADER, _:
                if state is ParserState.IN_RECORD:
                    ret.append(gcode)
                name, creator = _split_header(line)
                gcode = GeckoCode(
                    name=name, creator=creator, user_defined=is_user_ini)
                if name:
                    state = ParserState.IN_RECORD
                else:
                    state = ParserState.NO_RECORD
                    warn(f'Gecko 代码缺少名称，将被忽略："{line}"',
                         GeckoFormatWarning, stacklevel=2)
            case _, ParserState.NO_RECORD:
                warn(f'该行不属于任何 Gecko 代码，已跳过："{line}"',
                     GeckoFormatWarning, stacklevel=2)
            case GeckoMark.NOTE, ParserState.IN_RECORD:
                gcode.notes.append(line[1:])
            case _, ParserState.IN_RECORD:
                gcode.codes.append(GeckoCodeLine.from_line(line))

    # the end of section closes the last code too.
    if state is ParserState.IN_RECORD:
        ret.append(gcode)
    logging.debug('Parsed %d gecko code(s) (user: %s).', len(ret), is_user_ini)
    return ret


def _enabled_names(lines: Iterable[str]) -> set[str]:
    return {
        i[1:] for i in lines
        if i and i[0] == GeckoMark.HEADER
    }


def mark_enabled_codes(
    lines: Iterable[str], codes: list[GeckoCode]
) -> list[GeckoCode]:
    """Set `enabled` on every code listed in a `[Gecko_Enabled]` section.

    Lines not starting with `$` are ignored.
    """
    names = _enabled_names(lines)
    for i in codes:
        if i.name in names:
            i.enabled = True
    return codes


def mark_bootstrap_codes(
    lines: Iterable[str], codes: list[GeckoCode]
) -> list[GeckoCode]:
    """Same as `mark_enabled_codes()`, but for `bootstrap_enabled`.

    `lines` is expected to come from the *global* INI,
    where `[Gecko_Enabled]` means "on by default".
    """
    names = _enabled_names(lines)
    for i in codes:
        if i.name in names:
            i.bootstrap_enabled = True
    return codes
