from pkgchangelog.dates import format_debian_date, format_rpm_date, parse_date
from pkgchangelog.errors import (
    ChangelogError,
    DateFormatError,
    InputReadError,
    ParseError,
    SchemaError,
)
from pkgchangelog.loader import load_changelog, read_changelog, sort_entries
from pkgchangelog.models import (
    ChangeItem,
    ChangelogDocument,
    NumericRef,
    TextRef,
    UnrecognizedRef,
    VersionEntry,
)
from pkgchangelog.render import RENDERERS, format_closes, render, render_deb, render_rpm
from pkgchangelog.version import VERSION as __version__

__all__ = [
    "ChangeItem",
    "ChangelogDocument",
    "ChangelogError",
    "DateFormatError",
    "InputReadError",
    "NumericRef",
    "ParseError",
    "RENDERERS",
    "SchemaError",
    "TextRef",
    "UnrecognizedRef",
    "VersionEntry",
    "format_closes",
    "format_debian_date",
    "format_rpm_date",
    "load_changelog",
    "parse_date",
    "read_changelog",
    "render",
    "render_deb",
    "render_rpm",
    "sort_entries",
]
