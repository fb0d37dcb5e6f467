__version__ = "0.1.0"

from .document import Document
from .navigator import DisplayOptions, Navigator
from .node import Kind, Node, kind_of
from .path import Path, breadcrumb, parse_path, resolve
from .printer import pretty_print
from .tree import ExpansionState, JsonTree

__all__ = [
    "Document",
    "DisplayOptions",
    "Navigator",
    "Kind",
    "Node",
    "kind_of",
    "Path",
    "breadcrumb",
    "parse_path",
    "resolve",
    "pretty_print",
    "ExpansionState",
    "JsonTree",
]
