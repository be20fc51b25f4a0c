"""Decode YAML bytes into an ordered document.

PyYAML's ``safe_load`` builds plain dicts, which drop duplicate keys and
cannot hold mappings as keys. The decoder works on the composed node graph
instead and builds :class:`Record` pairs directly from each mapping node.
"""

from __future__ import annotations

import logging

import yaml
from yaml.nodes import MappingNode, ScalarNode, SequenceNode

from ..errors import DecodeError
from .nodes import Document, Node, Record, RecordList, Scalar

logger = logging.getLogger(__name__)

_NULL_TAG = "tag:yaml.org,2002:null"

# Scalars kept as their source text instead of being constructed
_VERBATIM_TAGS = {
    "tag:yaml.org,2002:timestamp",
    "tag:yaml.org,2002:binary",
    "tag:yaml.org,2002:value",
}


def decode_document(data: bytes) -> Document:
    """Decode the first YAML document in ``data``.

    The list-of-records shape is tried first, then the single-record shape.

    Args:
        data: Raw YAML bytes (UTF-8/UTF-16, LF or CRLF line endings)

    Returns:
        A RecordList of Records, or a single Record

    Raises:
        DecodeError: if the text is not valid YAML or fits neither shape
    """
    try:
        # The reader decodes the first bytes eagerly.
        loader = yaml.SafeLoader(data)
    except yaml.YAMLError as e:
        raise DecodeError(str(e)) from e

    try:
        try:
            root = loader.get_node() if loader.check_node() else None
        except yaml.YAMLError as e:
            raise DecodeError(str(e)) from e

        if root is None or _is_null(root):
            logger.debug("Empty YAML document, decoding as empty record")
            return Record()

        converter = _Converter(loader)

        list_problem = _record_list_problem(root)
        if list_problem is None:
            logger.debug("Decoded YAML as list of %d records", len(root.value))
            return converter.convert(root)

        if isinstance(root, MappingNode):
            logger.debug("Decoded YAML as single record")
            return converter.convert(root)

        raise DecodeError(
            f"not a list of records ({list_problem}); "
            f"not a record (found {_node_kind(root)})"
        )
    except RecursionError as e:
        raise DecodeError("document nesting is too deep") from e
    finally:
        loader.dispose()


def _is_null(node: yaml.Node) -> bool:
    return isinstance(node, ScalarNode) and node.tag == _NULL_TAG


def _node_kind(node: yaml.Node) -> str:
    if isinstance(node, MappingNode):
        return "mapping"
    if isinstance(node, SequenceNode):
        return "sequence"
    return "scalar"


def _record_list_problem(node: yaml.Node) -> str | None:
    """Return why ``node`` is not a sequence of mappings, or None if it is."""
    if not isinstance(node, SequenceNode):
        return f"found {_node_kind(node)}"
    for index, item in enumerate(node.value):
        if not isinstance(item, MappingNode):
            return f"element {index} is a {_node_kind(item)}"
    return None


class _Converter:
    """Convert composed YAML nodes into document nodes.

    Aliased nodes are converted once and shared. A node that is reached again
    while it is still being converted is a recursive alias and is rejected.
    """

    def __init__(self, loader: yaml.SafeLoader) -> None:
        self._loader = loader
        self._done: dict[int, Node] = {}
        self._active: set[int] = set()

    def convert(self, node: yaml.Node) -> Node:
        key = id(node)
        if key in self._done:
            return self._done[key]
        if key in self._active:
            raise DecodeError(
                f"recursive alias at line {node.start_mark.line + 1}, "
                f"column {node.start_mark.column + 1}"
            )

        self._active.add(key)
        try:
            if isinstance(node, MappingNode):
                result: Node = self.record(node)
            elif isinstance(node, SequenceNode):
                result = self.record_list(node)
            else:
                result = self.scalar(node)
        finally:
            self._active.discard(key)

        self._done[key] = result
        return result

    def record(self, node: MappingNode) -> Record:
        try:
            # Resolves `<<` merge keys in place, as the safe loader does.
            self._loader.flatten_mapping(node)
        except yaml.YAMLError as e:
            raise DecodeError(str(e)) from e
        return Record(
            tuple((self.convert(key), self.convert(value)) for key, value in node.value)
        )

    def record_list(self, node: SequenceNode) -> RecordList:
        return RecordList(tuple(self.convert(item) for item in node.value))

    def scalar(self, node: ScalarNode) -> Scalar:
        if node.tag in _VERBATIM_TAGS:
            return Scalar(node.value)
        try:
            value = self._loader.construct_object(node, deep=True)
        except yaml.YAMLError as e:
            raise DecodeError(str(e)) from e
        return Scalar(value)
