# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/13 01:04:45

"""Read and write INI-style data files.

Supported syntax (whitespace around every line is insignificant):

    ```ini
    ; comments PRECEDE what they describe,
    # and consecutive comment lines stack up.
    Debug=1          ; <- NOT a trailing comment, it's part of the value.

    [Server]
    Port = 8080
    Url: http://localhost:8080/   ; split at the FIRST indicator only.
    ```
"""

from io import TextIOBase
from warnings import warn

from .abstract import FileHandler
from .consts import COMMENT_INDICATORS, EQUAL_INDICATORS
from .model import Key, Section, SectionList
from .utils import get_next_word, trim


def comment_str(
    comment: str, comment_indicators: str = COMMENT_INDICATORS
) -> str:
    """Normalize comment text into proper comment lines.

    Blank lines are dropped, and lines missing an indicator
    get the canonical one (`comment_indicators[0]`) prepended.
    """
    lines = []
    for line in comment.splitlines():
        if not (line := trim(line)):
            continue
        if line[0] not in comment_indicators:
            line = f'{comment_indicators[0]} {line}'
        lines.append(line)
    return '\n'.join(lines)


class DataFileParser(FileHandler[SectionList]):
    def __init__(
        self, filename: str, encoding: str | None = None, *,
        comment_indicators: str = COMMENT_INDICATORS,
        equal_indicators: str = EQUAL_INDICATORS
    ) -> None:
        super().__init__(filename, encoding)
        if not comment_indicators or not equal_indicators:
            raise ValueError('indicator sets must not be empty.')
        self.comment_indicators = comment_indicators
        self.equal_indicators = equal_indicators

    def readstream(self, buf: TextIOBase) -> SectionList:
        """读取解码好的字符串流。

        如没有特殊需求，直接调用`self.read()`便是。
        """
        ret = SectionList.empty()
        this_sect = ret[0]
        seen: set[str] = set()
        comment: list[str] = []
        for n, line in enumerate(buf):
            if n == 0:
                line = line.lstrip('\ufeff')  # BOM
            line = trim(line)
            if not line:
                continue
            if line[0] in self.comment_indicators:
                comment.append(line)
            elif line[0] == '[' and line[-1] == ']':
                name = trim(line[1:-1])
                if name.casefold() in seen:
                    warn(f'小节 [{name}] 重复出现，其键值对将合并到第一次出现的位置。')
                seen.add(name.casefold())
                this_sect = ret.setdefault(name)
                if comment and not this_sect.comment:
                    this_sect.comment = '\n'.join(comment)
                comment.clear()
            else:
                name, value = get_next_word(line, self.equal_indicators)
                if value is None or not name:
                    continue  # unrecognized, keep pending comment.
                self.__put_key(this_sect, name, value, '\n'.join(comment))
                comment.clear()
        # dangling comment at EOF belongs to nothing.
        return ret

    @staticmethod
    def __put_key(
        section: Section, name: str, value: str, comment: str
    ) -> None:
        if (key := section.get(name)) is None:
            section.keys.append(Key(name=name, value=value, comment=comment))
            return
        warn(
            f'[{section.name}] 中存在重复的键 "{name}"，'
            f'旧值 "{key.value}" 将被覆盖。')
        key.value = value
        if comment:
            key.comment = comment

    def comment_str(self, comment: str) -> str:
        return comment_str(comment, self.comment_indicators)

    def __output_section(self, section: Section) -> list[str]:
        ret = []
        if section.comment:
            ret.append(self.comment_str(section.comment))
        # default section goes headless, unless its comment needs an anchor.
        if not section.is_default or section.comment:
            ret.append(f'[{section.name}]')
        for key in section.keys:
            if key.comment:
                ret.append(self.comment_str(key.comment))
            ret.append(f'{key.name}{self.equal_indicators[0]}{key.value}')
        return ret

    def writestream(self, sections: SectionList, buf: TextIOBase) -> None:
        first = True
        for section in sections:
            if not (lines := self.__output_section(section)):
                continue
            if not first:
                buf.write('\n')
            buf.write('\n'.join(lines))
            buf.write('\n')
            first = False

    def __str__(self) -> str:
        return "data file: " + super().__str__() + f"({self._codec})"
