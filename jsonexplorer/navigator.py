#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from .document import Document
from .exceptions import JsonExplorerError
from .node import Node
from .path import Path, breadcrumb, resolve
from .printer import pretty_print
from .tree import ExpansionState, JsonTree

logger = logging.getLogger(__name__)


@dataclass
class DisplayOptions:
    """Runtime toggleable display options, not persisted."""

    show_node_types: bool = False
    show_node_values: bool = False


class Navigator(object):
    """Application state of the explorer: loaded document, navigation path, expansion state and selected text.

    All operations are synchronous. The current subtree and the default selected text are derived from the
    document and the navigation path, and recomputed on each navigation.

    >>> nav = Navigator()
    >>> nav.load_text('{"a": [1, 2, {"b": "x"}]}')
    >>> nav.navigate_to(["a", "9"])
    ('a',)
    >>> nav.path_string
    'a'
    """

    def __init__(self, options: Optional[DisplayOptions] = None) -> None:
        self.options = options if options is not None else DisplayOptions()
        self.document: Optional[Document] = None
        self.navigation_path: Path = ()
        self.current: Any = None
        self.expansion = ExpansionState()
        self.selected_text: str = ""

    # loading

    @property
    def has_document(self) -> bool:
        # a document whose root is null is still a document
        return self.document is not None

    def load_file(self, path: str) -> None:
        """Replace document by content of file at `path`.

        On failure, error is logged and raised, and state is left untouched.
        :raises FileReadError:
        :raises ParseError:
        """
        try:
            document = Document.load(path)
        except JsonExplorerError as e:
            logger.error("Error loading file: %s", e)
            raise
        self._set_document(document)
        logger.info("Loaded %s", path)

    def load_text(self, text: str, path: Optional[str] = None) -> None:
        """Replace document by parsed `text`, same semantics as `load_file`."""
        try:
            document = Document.from_text(text, path=path)
        except JsonExplorerError as e:
            logger.error("Error loading document: %s", e)
            raise
        self._set_document(document)

    def _set_document(self, document: Document) -> None:
        self.document = document
        self.navigation_path = ()
        self.current = document.root
        self.expansion.clear()
        self._update_selected_text()

    # navigation

    def navigate_to(self, path: Sequence[str]) -> Path:
        """Display subtree at `path`, truncated to its longest valid prefix. Return the path actually reached."""
        if self.document is None:
            return self.navigation_path
        valid_path, value = resolve(self.document.root, path)
        if len(valid_path) < len(path):
            logger.info(
                "Path %s truncated to %s", breadcrumb(path), breadcrumb(valid_path)
            )
        self.navigation_path = valid_path
        self.current = value
        self._update_selected_text()
        logger.debug("Navigated to %s", self.path_string)
        return valid_path

    @property
    def can_go_back(self) -> bool:
        return bool(self.navigation_path)

    def go_back(self) -> bool:
        """Navigate to parent of current subtree. Return False (doing nothing) if already at root."""
        if not self.can_go_back:
            return False
        self.navigate_to(self.navigation_path[:-1])
        return True

    # tree interactions

    @property
    def tree(self) -> Optional[JsonTree]:
        if self.document is None:
            return None
        return JsonTree(
            self.current, root_path=self.navigation_path, expansion=self.expansion
        )

    def _require_tree(self) -> JsonTree:
        tree = self.tree
        if tree is None:
            raise JsonExplorerError("No document loaded")
        return tree

    def node(self, identifier: Sequence[str]) -> Node:
        return self._require_tree().get(identifier)

    def toggle(self, identifier: Sequence[str]) -> bool:
        """Flip expansion of a container node, without navigating."""
        return self._require_tree().toggle(identifier)

    def select(self, identifier: Sequence[str]) -> str:
        """Display pretty printed value of node `identifier` in selected text, until next navigation or load."""
        node = self.node(identifier)
        self.selected_text = pretty_print(node.data)
        logger.debug("Selected %s", breadcrumb(node.identifier))
        return self.selected_text

    def click(self, identifier: Sequence[str]) -> None:
        """Single click: container headers toggle expansion, scalars get selected."""
        node = self.node(identifier)
        if node.accept_children:
            self.toggle(node.identifier)
        else:
            self.select(node.identifier)

    def double_click(
        self, identifier: Sequence[str], after_click: bool = False
    ) -> None:
        """Double click: container headers become the displayed root, scalars are ignored.

        :param after_click: the first press was already handled as a single click, whose expansion toggle is undone
        """
        node = self.node(identifier)
        if node.accept_children:
            if after_click:
                self.toggle(node.identifier)
            self.navigate_to(node.identifier)

    def expand_all(self) -> int:
        return self._require_tree().set_all(True)

    def collapse_all(self) -> int:
        return self._require_tree().set_all(False)

    # display

    def set_show_node_types(self, value: bool) -> None:
        self.options.show_node_types = value

    def set_show_node_values(self, value: bool) -> None:
        self.options.show_node_values = value

    def label(self, node: Node) -> str:
        return node.line_repr(
            show_types=self.options.show_node_types,
            show_values=self.options.show_node_values,
        )

    def show(self, **kwargs: Any) -> str:
        """Text rendering of visible tree, see `JsonTree.show`."""
        tree = self.tree
        if tree is None:
            return ""
        return tree.show(
            show_types=self.options.show_node_types,
            show_values=self.options.show_node_values,
            **kwargs
        )

    @property
    def path_string(self) -> str:
        return breadcrumb(self.navigation_path)

    @property
    def file_name(self) -> Optional[str]:
        if self.document is None:
            return None
        return self.document.name

    def _update_selected_text(self) -> None:
        self.selected_text = pretty_print(self.current)
