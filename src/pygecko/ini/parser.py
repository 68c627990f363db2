# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/11/02 14:40:05
# @Author : Kariko Lin

"""Read and write line based INIs.

Note: There is **no key-value parsing** here. Every line inside a section
is kept as it is (newline removed), and it's up to the consumer,
like `pygecko.gecko`, to make sense of them.
"""

import logging
from io import StringIO, TextIOBase

import chardet

from .model import IniClass
from ..abstract import FileHandler


class IniParser(FileHandler[IniClass]):
    def __init__(self, filename: str, encoding: str | None = None) -> None:
        super().__init__(filename, encoding)

    @staticmethod
    def readstream(buf: TextIOBase, ins: IniClass | None = None) -> IniClass:
        """Read an already decoded text stream.

        Blank lines are dropped. Other lines are appended to `ins`
        if given, so a section declared twice simply continues
        where it left off.
        """
        if ins is None:
            ins = IniClass()
        this_sect = ins.header
        while i := buf.readline():
            i = i.rstrip('\r\n')
            # blank lines would pile up between sections on every save.
            if not i.strip():
                continue
            if i.startswith('['):
                decl = i.split(';', 1)[0].strip()
                if decl.endswith(']'):
                    this_sect = ins.setdefault(decl[1:-1].strip())
                    continue
            this_sect.append(i)
        logging.debug(
            'INI stream parsed: %d section(s), %d header line(s).',
            len(ins), len(ins.header))
        return ins

    def _decode_file(self) -> StringIO:
        with open(self._fn, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            codec = {'encoding': 'gbk'}
            buf = raw.decode('gbk')
        # save back with whatever actually decoded it.
        self._codec = codec['encoding']
        return StringIO(buf)

    def read(self) -> IniClass:
        """Read the file bound to this parser.

        If the file can't be decoded as configured, the encoding
        guessed by `chardet` is kept for later `write()` calls.
        May raise `OSError` (e.g. `FileNotFoundError`).
        """
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return self.readstream(fp)
        except UnicodeDecodeError:
            logging.info(
                '`%s` is not %s encoded, guessing with chardet.',
                self._fn, self._codec or 'default')
            return self.readstream(self._decode_file())

    @staticmethod
    def writestream(
        buf: TextIOBase, instance: IniClass, *, blank_lines: int = 1
    ) -> None:
        for i in instance.header:
            buf.write(f'{i}\n')
        if instance.header:
            buf.write('\n' * blank_lines)
        for sect, lines in instance.items():
            buf.write(f'[{sect}]\n')
            for i in lines:
                buf.write(f'{i}\n')
            buf.write('\n' * blank_lines)

    def write(self, instance: IniClass, *, blank_lines: int = 1) -> None:
        """Save to *one* INI file.

        The whole text is encoded before the file gets opened, so an
        `UnicodeEncodeError` leaves the old file untouched.

        Args:
            blank_lines: how many empty lines between sections?
        """
        buf = StringIO()
        self.writestream(buf, instance, blank_lines=blank_lines)
        codec = self._codec or 'utf-8'
        # raises before the target gets truncated.
        buf.getvalue().encode(codec)
        with open(self._fn, 'w', encoding=codec) as fp:
            fp.write(buf.getvalue())

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"
