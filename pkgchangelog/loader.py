from logging import getLogger
from typing import IO, Dict, Iterable, List, Optional, Union

import yaml
from yaml.nodes import MappingNode, Node, ScalarNode, SequenceNode

from pkgchangelog.dates import parse_date
from pkgchangelog.errors import InputReadError, SchemaError
from pkgchangelog.models import (
    ChangeItem,
    ChangelogDocument,
    NumericRef,
    Reference,
    TextRef,
    UnrecognizedRef,
    VersionEntry,
)

__all__ = [
    "read_changelog",
    "load_changelog",
    "sort_entries",
]

_logger = getLogger(__name__)

_NULL_TAG = "tag:yaml.org,2002:null"
_BOOL_TAG = "tag:yaml.org,2002:bool"
_INT_TAG = "tag:yaml.org,2002:int"
_STR_TAG = "tag:yaml.org,2002:str"

# misspelled key still found in older changelog documents
_LEGACY_MAINTAINER_KEY = "maintaner"


def _is_null(node: Optional[Node]) -> bool:
    return node is None or (isinstance(node, ScalarNode) and node.tag == _NULL_TAG)


class _DocumentBuilder:
    """Build a ChangelogDocument from a composed YAML node tree.

    Working on nodes rather than on ``yaml.safe_load`` output keeps text
    fields exactly as written, ``version: 1.10`` stays ``"1.10"``.
    """

    def __init__(self, loader: yaml.SafeLoader):
        self._loader = loader

    def _mapping(self, node: Optional[Node], location: str) -> Dict[str, Node]:
        if _is_null(node):
            return {}
        if not isinstance(node, MappingNode):
            raise SchemaError("expected a mapping", location)
        fields = {}
        for key_node, value_node in node.value:
            if isinstance(key_node, ScalarNode):
                if key_node.value in fields:
                    raise SchemaError("duplicate key %r" % key_node.value, location)
                fields[key_node.value] = value_node
        return fields

    def _sequence(self, node: Optional[Node], location: str) -> List[Node]:
        if _is_null(node):
            return []
        if not isinstance(node, SequenceNode):
            raise SchemaError("expected a sequence", location)
        return node.value

    def _text(self, node: Optional[Node], location: str) -> str:
        if _is_null(node):
            return ""
        if not isinstance(node, ScalarNode):
            raise SchemaError("expected a scalar", location)
        return node.value

    def _flag(self, node: Optional[Node], location: str) -> bool:
        if _is_null(node):
            return False
        if not isinstance(node, ScalarNode) or node.tag != _BOOL_TAG:
            raise SchemaError("expected a boolean", location)
        try:
            return self._loader.construct_yaml_bool(node)
        except KeyError as error:
            raise SchemaError("expected a boolean", location) from error

    def _reference(self, node: Node, location: str) -> Reference:
        if isinstance(node, ScalarNode):
            if node.tag == _STR_TAG:
                return TextRef(node.value)
            if node.tag == _INT_TAG:
                try:
                    return NumericRef(self._loader.construct_yaml_int(node))
                except (ValueError, IndexError) as error:
                    raise SchemaError("expected an integer", location) from error
        # explicit tags such as !!float or !!timestamp on bad text fail in the
        # constructor itself
        try:
            value = self._loader.construct_object(node, deep=True)
        except (yaml.YAMLError, ValueError, TypeError, AttributeError) as error:
            raise SchemaError(str(error), location) from error
        return UnrecognizedRef(value)

    def _change(self, node: Node, location: str) -> ChangeItem:
        fields = self._mapping(node, location)
        closes = self._sequence(fields.get("closes"), location + ".closes")
        return ChangeItem(
            desc=self._text(fields.get("desc"), location + ".desc"),
            closes=[
                self._reference(item, "%s.closes[%d]" % (location, index))
                for index, item in enumerate(closes)
            ],
        )

    def _entry(self, node: Node, location: str) -> VersionEntry:
        fields = self._mapping(node, location)
        date_node = fields.get("date")
        if _is_null(date_node):
            raise SchemaError("missing date", location + ".date")
        date = parse_date(
            self._text(date_node, location + ".date"), location + ".date"
        )
        changes = self._sequence(fields.get("changes"), location + ".changes")
        return VersionEntry(
            version=self._text(fields.get("version"), location + ".version"),
            urgency=self._text(fields.get("urgency"), location + ".urgency"),
            stable=self._flag(fields.get("stable"), location + ".stable"),
            date=date,
            changes=[
                self._change(item, "%s.changes[%d]" % (location, index))
                for index, item in enumerate(changes)
            ],
        )

    def build(self, root: Optional[Node]) -> ChangelogDocument:
        fields = self._mapping(root, "document")
        maintainer = fields.get("maintainer")
        if maintainer is None:
            maintainer = fields.get(_LEGACY_MAINTAINER_KEY)
        entries = self._sequence(fields.get("changelog"), "changelog")
        return ChangelogDocument(
            project=self._text(fields.get("project"), "project"),
            maintainer=self._text(maintainer, "maintainer"),
            entries=[
                self._entry(item, "changelog[%d]" % index)
                for index, item in enumerate(entries)
            ],
        )


def _compose(data: Union[str, bytes]):
    try:
        loader = yaml.SafeLoader(data)
        return loader, loader.get_single_node()
    except yaml.YAMLError as error:
        raise SchemaError("malformed YAML: %s" % error) from error


def load_changelog(data: Union[str, bytes]) -> ChangelogDocument:
    """Parse a YAML changelog document.

    Entries keep their input order, use :func:`sort_entries` to order them.

    :param data: Whole YAML document
    :returns: Parsed document, empty when data holds no document
    :raises SchemaError: If data is not well-formed YAML of the expected shape
    :raises DateFormatError: If an entry date does not match the fixed format
    """
    loader, root = _compose(data)
    try:
        document = _DocumentBuilder(loader).build(root)
    finally:
        loader.dispose()
    _logger.debug(
        "loaded %d changelog entries for project %r",
        len(document.entries),
        document.project,
    )
    return document


def read_changelog(fileobj: IO, name: str = "stdin") -> ChangelogDocument:
    """Read the whole stream, then parse it with :func:`load_changelog`

    :raises InputReadError: If the stream cannot be read
    """
    try:
        data = fileobj.read()
    except (OSError, UnicodeDecodeError) as error:
        raise InputReadError(error, name) from error
    return load_changelog(data)


def sort_entries(entries: Iterable[VersionEntry]) -> List[VersionEntry]:
    """Order entries newest first.

    Entries with equal dates keep their relative input order.
    """
    return sorted(entries, key=lambda entry: entry.date, reverse=True)
