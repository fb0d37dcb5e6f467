import json

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .path import Path, ROOT_LABEL
from .utils import truncate

VALUE_MAX_LENGTH = 50

EXPANDED_GLYPH = "▼"
COLLAPSED_GLYPH = "▶"


class Kind(Enum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"

    @property
    def is_container(self) -> bool:
        return self in (Kind.OBJECT, Kind.ARRAY)


def kind_of(value: Any) -> Kind:
    # bool is a subclass of int, test it first
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if value is None:
        return Kind.NULL
    if isinstance(value, dict):
        return Kind.OBJECT
    if isinstance(value, list):
        return Kind.ARRAY
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, (int, float)):
        return Kind.NUMBER
    raise TypeError("Unsupported type %s" % type(value))


def value_repr(value: Any, max_length: int = VALUE_MAX_LENGTH) -> str:
    """Short textual projection of a scalar value, as displayed next to its key.

    Strings are wrapped in double quotes (without escaping), other scalars are displayed as their JSON literal.
    Projection longer than `max_length` characters is truncated and ends with an ellipsis.
    """
    kind = kind_of(value)
    if kind.is_container:
        raise ValueError("No value representation for %s nodes" % kind.value)
    if kind is Kind.STRING:
        text = '"%s"' % value
    else:
        text = json.dumps(value)
    return truncate(text, max_length)


@dataclass
class Node:
    """Node of a displayed JSON tree.

    :param identifier: absolute path of the node from the document root
    :param key: displayed key, object key or "[i]" for array elements, None for the displayed tree top
    :param data: JSON value held at this location
    :param expanded: whether node children are displayed (containers only)
    """

    identifier: Path
    key: Optional[str]
    data: Any = None
    expanded: bool = False

    @property
    def kind(self) -> Kind:
        return kind_of(self.data)

    @property
    def accept_children(self) -> bool:
        return self.kind.is_container

    @property
    def size(self) -> Optional[int]:
        if self.accept_children:
            return len(self.data)
        return None

    @property
    def display_key(self) -> str:
        if self.key is None:
            return ROOT_LABEL
        return self.key

    @property
    def glyph(self) -> str:
        if not self.accept_children:
            return " "
        return EXPANDED_GLYPH if self.expanded else COLLAPSED_GLYPH

    def line_repr(
        self,
        show_types: bool = False,
        show_values: bool = False,
        with_glyph: bool = True,
    ) -> str:
        """Control how node is displayed in tree.

        ▼ Root (object, 2 items)
          ▶ a (array, 3 items)
            b (string) "x"

        Container headers only display types (kind and count), scalars may display their kind and/or their value.
        """
        parts = [self.display_key]
        if self.accept_children:
            if show_types:
                parts.append("(%s, %d items)" % (self.kind.value, self.size))
        else:
            if show_types:
                parts.append("(%s)" % self.kind.value)
            if show_values:
                parts.append(value_repr(self.data))
        line = " ".join(parts)
        if with_glyph:
            return "%s %s" % (self.glyph, line)
        return line
