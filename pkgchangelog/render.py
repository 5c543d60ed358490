from logging import getLogger
from typing import Callable, Dict, Iterable, List

from pkgchangelog.dates import format_debian_date, format_rpm_date
from pkgchangelog.models import (
    ChangelogDocument,
    NumericRef,
    Reference,
    TextRef,
    UnrecognizedRef,
)

__all__ = [
    "RENDERERS",
    "format_closes",
    "render_deb",
    "render_rpm",
    "render",
]

_logger = getLogger(__name__)


def _closes_tokens(references: Iterable[Reference]) -> List[str]:
    tokens = []
    for reference in references:
        if isinstance(reference, NumericRef):
            tokens.append("#%d" % reference.number)
        elif isinstance(reference, TextRef):
            tokens.append(reference.text)
        elif isinstance(reference, UnrecognizedRef):
            # neither a number nor text, dropped without error
            _logger.debug("drop closes reference: %r", reference.value)
    return tokens


def format_closes(references: Iterable[Reference]) -> str:
    """Join references as ``#3, CVE-2024-1, #7``

    Numbers get a ``#`` prefix, text is kept verbatim and any other value is
    dropped. Returns an empty string when nothing is left to close.
    """
    return ", ".join(_closes_tokens(references))


def render_deb(document: ChangelogDocument) -> str:
    """Render entries in their current order as a debian/changelog"""
    lines = []
    for entry in document.entries:
        lines.append(
            "%s (%s) %s; urgency=%s"
            % (document.project, entry.version, entry.stability, entry.urgency)
        )
        lines.append("")
        for change in entry.changes:
            lines.append("  * %s" % change.desc)
            closes = format_closes(change.closes)
            if closes:
                lines.append("  Closes: %s" % closes)
        lines.append("")
        lines.append(
            " -- %s  %s" % (document.maintainer, format_debian_date(entry.date))
        )
        lines.append("")
    return "".join(line + "\n" for line in lines)


def render_rpm(document: ChangelogDocument) -> str:
    """Render entries in their current order as an rpm %changelog section"""
    lines = []
    for entry in document.entries:
        lines.append(
            "* %s %s - %s"
            % (format_rpm_date(entry.date), document.maintainer, entry.version)
        )
        for change in entry.changes:
            line = "- %s" % change.desc
            closes = format_closes(change.closes)
            if closes:
                line += "  (Closes: %s)" % closes
            lines.append(line)
        lines.append("")
    return "".join(line + "\n" for line in lines)


RENDERERS: Dict[str, Callable[[ChangelogDocument], str]] = {
    "deb": render_deb,
    "rpm": render_rpm,
}


def render(document: ChangelogDocument, fmt: str) -> str:
    """
    :param document: Document with entries already sorted
    :param fmt: Output format, one of :data:`RENDERERS`
    :raises ValueError: If fmt is not a known format
    """
    try:
        renderer = RENDERERS[fmt]
    except KeyError:
        raise ValueError(
            "Unknown format: %r, expected one of %s" % (fmt, ", ".join(RENDERERS))
        )
    _logger.debug("render %d entries with %s", len(document.entries), fmt)
    return renderer(document)
