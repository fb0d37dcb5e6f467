#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging

from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, cast

from .exceptions import NotFoundNodeError
from .node import Node, kind_of
from .path import MISSING, Path, child
from .utils import STYLES

logger = logging.getLogger(__name__)

LocatedNode = Tuple[Tuple[bool, ...], Node]


class ExpansionState(object):
    """Expanded/collapsed flag of container nodes, keyed by absolute node path.

    Nodes that were never toggled are collapsed.
    """

    def __init__(self) -> None:
        self._expanded: Dict[Path, bool] = {}

    def __contains__(self, identifier: Sequence[str]) -> bool:
        return tuple(identifier) in self._expanded

    def __len__(self) -> int:
        return len(self._expanded)

    def is_expanded(self, identifier: Sequence[str]) -> bool:
        return self._expanded.get(tuple(identifier), False)

    def set(self, identifier: Sequence[str], expanded: bool) -> None:
        self._expanded[tuple(identifier)] = expanded

    def toggle(self, identifier: Sequence[str]) -> bool:
        """Flip node flag, return new value."""
        expanded = not self.is_expanded(identifier)
        self.set(identifier, expanded)
        return expanded

    def clear(self) -> None:
        self._expanded.clear()

    def snapshot(self) -> Dict[Path, bool]:
        return dict(self._expanded)


class JsonTree(object):

    """Lazily expanded view of a JSON value.

    Principles:
    - the displayed value is a subtree of a document, located at `root_path` from the document root
    - each node is identified by its absolute path from the document root, so that the same location keeps the same
      identifier (and expansion state) whatever the displayed subtree
    - "object" children are referenced by their key, and displayed in insertion order
    - "array" children are referenced by their index, and displayed as "[i]"
    - nodes are built on the fly: children of collapsed containers are never visited
    """

    def __init__(
        self,
        data: Any,
        root_path: Sequence[str] = (),
        expansion: Optional[ExpansionState] = None,
    ) -> None:
        self.data = data
        self.root_path: Path = tuple(root_path)
        self.expansion = expansion if expansion is not None else ExpansionState()

    @property
    def root(self) -> Node:
        return self._make_node(self.root_path, None, self.data)

    def _make_node(self, identifier: Path, key: Optional[str], data: Any) -> Node:
        kind = kind_of(data)
        return Node(
            identifier=identifier,
            key=key,
            data=data,
            expanded=kind.is_container and self.expansion.is_expanded(identifier),
        )

    def _value_at(self, identifier: Sequence[str]) -> Any:
        nid: Path = tuple(identifier)
        depth = len(self.root_path)
        if nid[:depth] != self.root_path:
            raise NotFoundNodeError(
                "Node <%s> is not below displayed root <%s>"
                % ("/".join(nid), "/".join(self.root_path))
            )
        value = self.data
        for segment in nid[depth:]:
            value = child(value, segment)
            if value is MISSING:
                raise NotFoundNodeError(
                    "Node <%s> doesn't exist in tree" % "/".join(identifier)
                )
        return value

    def get(self, identifier: Sequence[str]) -> Node:
        """Get a node by its absolute path.
        :raises NotFoundNodeError: if identifier is not part of displayed subtree
        """
        nid: Path = tuple(identifier)
        value = self._value_at(nid)
        key: Optional[str] = None
        if nid != self.root_path:
            key = self._child_key(self._value_at(nid[:-1]), nid[-1])
        return self._make_node(nid, key, value)

    @staticmethod
    def _child_key(parent: Any, segment: str) -> str:
        if isinstance(parent, list):
            return "[%s]" % segment
        return segment

    def children(self, identifier: Sequence[str]) -> List[Node]:
        """Return node children, in display order. Scalars have none."""
        nid: Path = tuple(identifier)
        return self._child_nodes(nid, self._value_at(nid))

    def _child_nodes(self, identifier: Path, value: Any) -> List[Node]:
        if isinstance(value, dict):
            return [
                self._make_node(identifier + (k,), k, v) for k, v in value.items()
            ]
        if isinstance(value, list):
            return [
                self._make_node(identifier + (str(i),), "[%d]" % i, v)
                for i, v in enumerate(value)
            ]
        return []

    def toggle(self, identifier: Sequence[str]) -> bool:
        """Flip expansion flag of a container node, return new value.
        :raises ValueError: if node is a scalar
        """
        node = self.get(identifier)
        if not node.accept_children:
            raise ValueError(
                "Cannot expand %s node <%s>"
                % (node.kind.value, "/".join(node.identifier))
            )
        expanded = self.expansion.toggle(node.identifier)
        logger.debug("Node <%s> expanded: %s", "/".join(node.identifier), expanded)
        return expanded

    def containers(self, identifier: Optional[Sequence[str]] = None) -> Iterator[Node]:
        """Iterate over all container nodes below `identifier` (displayed root by default), expanded or not."""
        start = self.get(identifier if identifier is not None else self.root_path)
        if not start.accept_children:
            return
        stack = [start]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(
                reversed(
                    [
                        c
                        for c in self._child_nodes(node.identifier, node.data)
                        if c.accept_children
                    ]
                )
            )

    def set_all(self, expanded: bool) -> int:
        """Expand (or collapse) every container of displayed subtree, return number of affected nodes."""
        count = 0
        for node in self.containers():
            self.expansion.set(node.identifier, expanded)
            count += 1
        return count

    def expand_tree(self) -> Iterable[Node]:
        """Python generator yielding visible nodes, depth first, in display order."""
        for _, node in self._iter_nodes_with_location(self.root):
            yield node

    def _iter_nodes_with_location(
        self,
        node: Node,
        is_last_list: Optional[List[bool]] = None,
    ) -> Iterable[LocatedNode]:
        """Yield visible nodes with information on how they are placed.
        :param node: starting node
        :param is_last_list: list of booleans, each indicating if node is the last yielded one at this depth
        :return: tuple of booleans, node
        """
        is_last_list = is_last_list or []
        yield tuple(is_last_list), node
        if not node.expanded:
            return
        children = self._child_nodes(node.identifier, node.data)
        idxlast: int = len(children) - 1
        for idx, child_node in enumerate(children):
            is_last_list.append(idx == idxlast)
            for item in self._iter_nodes_with_location(
                child_node, is_last_list=is_last_list
            ):
                yield item
            is_last_list.pop()

    def rows(self) -> List[Tuple[int, Node]]:
        """Visible nodes along with their depth below displayed root."""
        return [
            (len(is_last_list), node)
            for is_last_list, node in self._iter_nodes_with_location(self.root)
        ]

    def show(
        self,
        show_types: bool = False,
        show_values: bool = False,
        line_type: str = "ascii-ex",
        limit: Optional[int] = None,
        line_max_length: Optional[int] = None,
    ) -> str:
        """Return visible part of the tree in hierarchy style.

        ▼ Root
        ├── ▶ a
        └── b

        :param show_types: display node kinds (and container item counts)
        :param show_values: display scalar values
        :param line_type: display type choice, see `jsonexplorer.utils.STYLES`
        :param limit: int, truncate tree display to this number of lines
        :param line_max_length: int, truncate lines longer than this
        """
        if line_type not in STYLES:
            raise ValueError("Unknown line type '%s'" % line_type)
        output = ""
        total = 0
        for is_last_list, node in self._iter_nodes_with_location(self.root):
            total += 1
            if limit is not None and total > limit:
                continue
            prefix = self._line_prefix_repr(line_type, is_last_list)
            line = prefix + node.line_repr(
                show_types=show_types,
                show_values=show_values,
                with_glyph=node.accept_children,
            )
            if line_max_length is not None and len(line) > line_max_length:
                line = line[: max(line_max_length - 3, 0)] + "..."
            output += "%s\n" % line
        if limit is not None and total > limit:
            output += "...\n(truncated, total number of visible nodes: %d)\n" % total
        return output

    @staticmethod
    def _line_prefix_repr(line_type: str, is_last_list: Tuple[bool, ...]) -> str:
        if not is_last_list:
            return ""
        dt_vertical_line, dt_line_box, dt_line_corner = STYLES[line_type]
        leading: str = "".join(
            [
                dt_vertical_line + " " * 3 if not is_last else " " * 4
                for is_last in cast(Iterable[bool], is_last_list[0:-1])
            ]
        )
        lasting: str = dt_line_corner if is_last_list[-1] else dt_line_box
        return leading + lasting

    def __str__(self) -> str:
        return self.show()

    def __repr__(self) -> str:
        return self.__str__()
