from datetime import datetime
from typing import Any, NamedTuple, Sequence, Union

__all__ = [
    "NumericRef",
    "TextRef",
    "UnrecognizedRef",
    "Reference",
    "ChangeItem",
    "VersionEntry",
    "ChangelogDocument",
]


class NumericRef(NamedTuple):
    """Issue number, rendered as ``#<number>``"""

    number: int


class TextRef(NamedTuple):
    """Free-text tag such as a CVE id, rendered verbatim"""

    text: str


class UnrecognizedRef(NamedTuple):
    """Any other closes value, kept so that rendering can drop it explicitly"""

    value: Any


Reference = Union[NumericRef, TextRef, UnrecognizedRef]


class ChangeItem(NamedTuple):
    desc: str = ""
    closes: Sequence[Reference] = ()


class VersionEntry(NamedTuple):
    version: str
    urgency: str
    stable: bool
    date: datetime
    changes: Sequence[ChangeItem] = ()

    @property
    def stability(self) -> str:
        return "stable" if self.stable else "unstable"


class ChangelogDocument(NamedTuple):
    project: str = ""
    maintainer: str = ""
    entries: Sequence[VersionEntry] = ()
