# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/13 00:57:10

"""
Passive document model: keys grouped into ordered sections.

Names are matched case-insensitively everywhere, but stored as written.
The section named `''` is the default (global) one, holding the pairs
that appear before any `[Section]` header.
"""

from dataclasses import dataclass, field

from .utils import compare_no_case


@dataclass(kw_only=True)
class Key:
    name: str
    value: str = ''
    # comment lines PRECEDING the key, indicators included.
    comment: str = ''


@dataclass(kw_only=True)
class Section:
    name: str = ''
    comment: str = ''
    keys: list[Key] = field(default_factory=list)

    def find(self, name: str) -> int | None:
        """Index of the first key called `name`, `None` if absent."""
        for i, key in enumerate(self.keys):
            if compare_no_case(key.name, name) == 0:
                return i
        return None

    def get(self, name: str) -> Key | None:
        i = self.find(name)
        return None if i is None else self.keys[i]

    @property
    def is_default(self) -> bool:
        return self.name == ''

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self.name, len(self.keys))


class SectionList(list[Section]):
    """Ordered sections of a whole data file."""

    def find(self, name: str) -> int | None:
        for i, section in enumerate(self):
            if compare_no_case(section.name, name) == 0:
                return i
        return None

    def get(self, name: str) -> Section | None:
        i = self.find(name)
        return None if i is None else self[i]

    def setdefault(self, name: str, comment: str = '') -> Section:
        """Return the section called `name`, appending it if absent."""
        if (section := self.get(name)) is None:
            section = Section(name=name, comment=comment)
            self.append(section)
        return section

    @classmethod
    def empty(cls) -> 'SectionList':
        """A list holding just the default section."""
        return cls([Section()])
