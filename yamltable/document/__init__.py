"""YAML document decoding."""

from .decode import decode_document
from .front_matter import split_front_matter, strip_front_matter
from .nodes import Document, Node, Record, RecordList, Scalar, describe

__all__ = [
    "decode_document",
    "split_front_matter",
    "strip_front_matter",
    "Document",
    "Node",
    "Record",
    "RecordList",
    "Scalar",
    "describe",
]
