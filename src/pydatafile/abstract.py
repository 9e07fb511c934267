# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/12 20:22:30

from abc import ABCMeta, abstractmethod
from io import StringIO, TextIOBase
from locale import getpreferredencoding
from typing import Generic, TypeVar

import chardet

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    """Text file <-> `T`. Subclasses only deal with decoded streams.

    Both `read()` and `write()` may raise `OSError` (or `UnicodeError`
    for text the codec can't handle), which is left to the caller.
    """

    def __init__(self, filename: str, encoding: str | None = None) -> None:
        self._fn = filename
        self._codec = encoding

    @property
    def encoding(self) -> str | None:
        """Codec used for IO, possibly detected by the last `read()`."""
        return self._codec

    @abstractmethod
    def readstream(self, buf: TextIOBase) -> T:
        raise NotImplementedError

    @abstractmethod
    def writestream(self, instance: T, buf: TextIOBase) -> None:
        raise NotImplementedError

    def _decode_file(self) -> StringIO:
        with open(self._fn, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec is None or codec['encoding'] is None \
                or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
            self._codec = codec['encoding']
        except UnicodeDecodeError:
            buf = raw.decode('latin-1')
            self._codec = 'latin-1'
        return StringIO(buf)

    def read(self) -> T:
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`,
            # remembering what it guessed for the next `write()`.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return self.readstream(fp)
        except UnicodeDecodeError:
            return self.readstream(self._decode_file())

    def write(self, instance: T) -> None:
        """Overwrite the whole file, never append.

        Everything is rendered and encoded up front, so an
        unencodable value raises `UnicodeEncodeError` before
        the target gets truncated.
        """
        buf = StringIO()
        self.writestream(instance, buf)
        text = buf.getvalue()
        text.encode(self._codec or getpreferredencoding(False))
        with open(self._fn, 'w', encoding=self._codec) as fp:
            fp.write(text)

    def __str__(self) -> str:
        return self._fn
