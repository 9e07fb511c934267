# -*- encoding: utf-8 -*-
# @File   : datafile.py
# @Time   : 2026/10/13 02:16:37

"""The data file store.

`DataFile` owns an ordered list of sections and never hands out
live references to them: lookups return index handles or copies of
plain values, and every change goes through a member method.
That keeps the `dirty` flag honest.
"""

from collections.abc import Iterator
from dataclasses import replace

from .consts import (
    COMMENT_INDICATORS,
    DEFAULT_FLAGS,
    EQUAL_INDICATORS,
    DebugLevel,
    Flags
)
from .model import Key, Section, SectionList
from .parser import DataFileParser, comment_str
from .report import Reporter, report
from .utils import trim

_TRUE_STRINGS = ('true', 'yes', '1')
_FALSE_STRINGS = ('false', 'no', '0')


class DataFileError(Exception):
    """Base of errors raised (not returned) by `DataFile`."""
    pass


class NoFileNameError(DataFileError):
    """`DataFile.save()` called before any file name got associated."""
    pass


class DataFile:
    """INI 风格数据文件的内存表示。

    ```ini
    ; global setting
    Debug=1            ; <- self.get_value('Debug')

    [Server]
    ; listen port
    Port=8080          ; <- self.get_int('Port', 'Server')
    ```

    All names are case-insensitive. Omitting `section` (or passing `''`)
    targets the default section, which always exists.
    """

    def __init__(
        self, filename: str | None = None, *,
        flags: Flags = DEFAULT_FLAGS,
        comment_indicators: str = COMMENT_INDICATORS,
        equal_indicators: str = EQUAL_INDICATORS,
        encoding: str | None = None,
        reporter: Reporter = report
    ) -> None:
        self.flags = flags
        self.comment_indicators = comment_indicators
        self.equal_indicators = equal_indicators
        self.encoding = encoding
        self._report = reporter
        self._sections = SectionList.empty()
        self._fn = filename
        self._dirty = False
        if filename is not None:
            # a missing file just leaves us empty, ready to be saved.
            self.load(filename)

    def _parser(self, filename: str) -> DataFileParser:
        return DataFileParser(
            filename, self.encoding,
            comment_indicators=self.comment_indicators,
            equal_indicators=self.equal_indicators)

    # File handling

    @property
    def filename(self) -> str | None:
        return self._fn

    def set_file_name(self, filename: str) -> None:
        """Associate a file for `save()` without loading it."""
        if self._fn is not None and self._fn != filename:
            self._report(
                DebugLevel.WARN,
                f'[DataFile.set_file_name] switching file from '
                f'"{self._fn}" to "{filename}". '
                'Contents will NOT be reloaded.')
        self._fn = filename

    def load(self, filename: str) -> bool:
        """Replace all contents with those parsed from `filename`.

        Returns `False` (and keeps current contents) if unreadable.
        """
        parser = self._parser(filename)
        try:
            sections = parser.read()
        except FileNotFoundError:
            self._report(
                DebugLevel.INFO,
                f'[DataFile.load] "{filename}" not found. Does it exist?')
            return False
        except (OSError, UnicodeError) as e:
            self._report(
                DebugLevel.ERROR,
                f'[DataFile.load] unable to read "{filename}": {e}')
            return False

        self._sections = sections
        self._fn = filename
        self.encoding = parser.encoding
        self._dirty = False
        self._report(
            DebugLevel.DEBUG,
            f'[DataFile.load] "{filename}": {self.section_count()} sections, '
            f'{self.key_count()} keys.')
        return True

    def save(self) -> bool:
        """Overwrite the associated file with current contents.

        Raises `NoFileNameError` if no file is associated.
        """
        if not self._fn:
            raise NoFileNameError(
                'No file name has been set. '
                'Call set_file_name() or load() first.')
        try:
            self._parser(self._fn).write(self._sections)
        except (OSError, UnicodeError) as e:
            self._report(
                DebugLevel.ERROR,
                f'[DataFile.save] unable to write "{self._fn}": {e}')
            return False
        self._dirty = False
        self._report(DebugLevel.DEBUG, f'[DataFile.save] "{self._fn}" saved.')
        return True

    @property
    def dirty(self) -> bool:
        """Whether there are changes since last load/save/clear."""
        return self._dirty

    def clear_dirty(self) -> None:
        """Forget pending changes, e.g. to skip an unwanted save.
        Data itself is untouched."""
        self._dirty = False

    def clear(self) -> None:
        """Drop everything except an empty default section.

        The associated file name is kept.
        """
        self._sections = SectionList.empty()
        self._dirty = False

    # Lookup

    def find_section(self, name: str) -> int | None:
        """Index of section `name`, or `None`.

        The index is only meaningful until the next mutation.
        """
        return self._sections.find(trim(name))

    def check_section_name(self, name: str) -> bool:
        return self.find_section(name) is not None

    def find_key(self, key: str, section: str = '') -> tuple[int, int] | None:
        """`(section index, key index)` of `key`, or `None`."""
        if (i := self.find_section(section)) is None:
            return None
        if (j := self._sections[i].find(trim(key))) is None:
            return None
        return i, j

    def _get_section(self, name: str) -> Section | None:
        return self._sections.get(trim(name))

    def _get_key(self, key: str, section: str = '') -> Key | None:
        if (sect := self._get_section(section)) is None:
            return None
        return sect.get(trim(key))

    def section_names(self) -> list[str]:
        return [i.name for i in self._sections]

    def key_names(self, section: str = '') -> list[str]:
        if (sect := self._get_section(section)) is None:
            return []
        return [i.name for i in sect.keys]

    def section_count(self) -> int:
        return len(self._sections)

    def key_count(self) -> int:
        """Total number of keys across all sections."""
        return sum(len(i.keys) for i in self._sections)

    def __contains__(self, section: object) -> bool:
        return isinstance(section, str) and self.check_section_name(section)

    def __iter__(self) -> Iterator[str]:
        return iter(self.section_names())

    def __len__(self) -> int:
        return self.section_count()

    def __repr__(self) -> str:
        return 'DataFile(%r) { .sections = %d, .keys = %d%s }' % (
            self._fn, self.section_count(), self.key_count(),
            ', dirty' if self._dirty else '')

    # Reading values

    def get_value(self, key: str, section: str = '') -> str | None:
        """Raw text value of `key`, or `None` if there's no such key."""
        if (k := self._get_key(key, section)) is None:
            return None
        return k.value

    def get_string(self, key: str, section: str = '') -> str:
        """Like `get_value()`, but an absent key reads as `''`."""
        value = self.get_value(key, section)
        return '' if value is None else value

    def get_float(
        self, key: str, section: str = '', *, default: float = 0.0
    ) -> float:
        try:
            return float(trim(self.get_string(key, section)))
        except ValueError:
            return default

    def get_int(self, key: str, section: str = '', *, default: int = 0) -> int:
        try:
            return int(trim(self.get_string(key, section)))
        except ValueError:
            return default

    def get_bool(
        self, key: str, section: str = '', *, default: bool = False
    ) -> bool:
        """`true`/`yes`/`1` and `false`/`no`/`0`, any case.

        Anything else (absent key included) gives `default`.
        """
        value = trim(self.get_string(key, section)).casefold()
        if value in _TRUE_STRINGS:
            return True
        if value in _FALSE_STRINGS:
            return False
        return default

    def get_key_comment(self, key: str, section: str = '') -> str | None:
        """Comment lines preceding `key`, or `None` if there's no such key.

        Comments are stored normalized: each line carries its indicator,
        so `set_value(..., comment='hi')` reads back as `'; hi'`.
        """
        if (k := self._get_key(key, section)) is None:
            return None
        return k.comment

    def get_section_comment(self, section: str) -> str | None:
        """Like `get_key_comment()`, indicators included."""
        if (sect := self._get_section(section)) is None:
            return None
        return sect.comment

    # Mutation

    def _comment_str(self, comment: str) -> str:
        return comment_str(comment, self.comment_indicators)

    def _bad_key(self, name: str, value: str = '') -> str | None:
        """Why `name`/`value` wouldn't survive a save and reload, if so."""
        if not name:
            return 'empty key name'
        if name[0] in self.comment_indicators or name[0] == '[':
            return f'key "{name}" would read back as a comment or header'
        if any(i in name for i in self.equal_indicators):
            return f'key "{name}" contains an equal indicator'
        if any(i in name or i in value for i in '\r\n'):
            return f'key "{name}" or its value spans lines'
        return None

    @staticmethod
    def _bad_section(name: str) -> str | None:
        if any(i in name for i in '\r\n'):
            return f'section name "{name}" spans lines'
        return None

    def set_value(
        self, key: str, value: str, comment: str = '', section: str = ''
    ) -> bool:
        """Set the value of `key`, creating it if flags allow.

        A missing section is created only with `AUTOCREATE_SECTIONS`,
        a missing key only with `AUTOCREATE_KEYS`. An empty `comment`
        leaves the existing one alone.
        """
        return self._set_value(key, value, comment, section, self.flags)

    def _set_value(
        self, key: str, value: str, comment: str, section: str, flags: Flags
    ) -> bool:
        key, section = trim(key), trim(section)
        if (why := self._bad_key(key, value) or self._bad_section(section)):
            self._report(DebugLevel.WARN, f'[DataFile.set_value] {why}.')
            return False
        sect = self._get_section(section)
        k = None if sect is None else sect.get(key)

        # check both first, so a refused call changes nothing.
        if sect is None and not flags & Flags.AUTOCREATE_SECTIONS:
            self._report(
                DebugLevel.DEBUG,
                f'[DataFile.set_value] no section [{section}], '
                'and AUTOCREATE_SECTIONS is off.')
            return False
        if k is None and not flags & Flags.AUTOCREATE_KEYS:
            self._report(
                DebugLevel.DEBUG,
                f'[DataFile.set_value] no key "{key}" in [{section}], '
                'and AUTOCREATE_KEYS is off.')
            return False

        comment = self._comment_str(comment)
        if sect is None:
            sect = self._sections.setdefault(section)
        if k is None:
            sect.keys.append(Key(name=key, value=value, comment=comment))
            self._dirty = True
            return True
        if k.value != value:
            k.value = value
            self._dirty = True
        if comment and k.comment != comment:
            k.comment = comment
            self._dirty = True
        return True

    def set_float(
        self, key: str, value: float, comment: str = '', section: str = ''
    ) -> bool:
        return self.set_value(key, repr(float(value)), comment, section)

    def set_int(
        self, key: str, value: int, comment: str = '', section: str = ''
    ) -> bool:
        return self.set_value(key, str(int(value)), comment, section)

    def set_bool(
        self, key: str, value: bool, comment: str = '', section: str = ''
    ) -> bool:
        return self.set_value(
            key, 'True' if value else 'False', comment, section)

    def create_key(
        self, key: str, value: str, comment: str = '', section: str = ''
    ) -> bool:
        """Create `key` regardless of `AUTOCREATE_KEYS`.

        The section still needs `AUTOCREATE_SECTIONS` if absent.
        An existing key gets updated in place, never duplicated.
        """
        return self._set_value(
            key, value, comment, section, self.flags | Flags.AUTOCREATE_KEYS)

    def create_section(
        self, name: str, comment: str = '',
        keys: list[Key] | None = None
    ) -> bool:
        """Append a new section, optionally filled with copies of `keys`.

        Succeeds without doing anything if the section already exists.
        Repeated key names collapse onto the first entry, later value
        (and later non-empty comment) winning. Any key that couldn't
        be saved and reloaded refuses the whole call.
        """
        name = trim(name)
        if self.check_section_name(name):
            self._report(
                DebugLevel.INFO,
                f'[DataFile.create_section] [{name}] already exists.')
            return True
        keys = [replace(i, name=trim(i.name)) for i in keys or ()]
        why = self._bad_section(name)
        for i in keys:
            why = why or self._bad_key(i.name, i.value)
        if why:
            self._report(DebugLevel.WARN, f'[DataFile.create_section] {why}.')
            return False

        sect = Section(name=name, comment=self._comment_str(comment))
        for i in keys:
            # copies already, no ptr to caller's keys kept.
            i.comment = self._comment_str(i.comment)
            if (exist := sect.get(i.name)) is None:
                sect.keys.append(i)
                continue
            exist.value = i.value
            if i.comment:
                exist.comment = i.comment
        self._sections.append(sect)
        self._dirty = True
        return True

    def delete_key(self, key: str, section: str = '') -> bool:
        if (pos := self.find_key(key, section)) is None:
            return False
        i, j = pos
        del self._sections[i].keys[j]
        self._dirty = True
        return True

    def delete_section(self, name: str) -> bool:
        """Remove section `name` with all its keys.

        The default section can't be removed.
        """
        if (i := self.find_section(name)) is None:
            return False
        if self._sections[i].is_default:
            self._report(
                DebugLevel.WARN,
                '[DataFile.delete_section] refusing to delete '
                'the default section.')
            return False
        del self._sections[i]
        self._dirty = True
        return True

    def set_key_comment(
        self, key: str, comment: str, section: str = ''
    ) -> bool:
        """Overwrite the comment of `key`. `''` clears it."""
        if (k := self._get_key(key, section)) is None:
            return False
        comment = self._comment_str(comment)
        if k.comment != comment:
            k.comment = comment
            self._dirty = True
        return True

    def set_section_comment(self, section: str, comment: str) -> bool:
        """Overwrite the comment of `section`. `''` clears it."""
        if (sect := self._get_section(section)) is None:
            return False
        comment = self._comment_str(comment)
        if sect.comment != comment:
            sect.comment = comment
            self._dirty = True
        return True
