import json
import math
import os

from dataclasses import dataclass
from typing import Any, NoReturn, Optional

from .exceptions import FileReadError, ParseError

ENCODING = "utf-8"


def _reject_constant(name: str) -> NoReturn:
    # python json decoder accepts NaN, Infinity, -Infinity which are not part of JSON
    raise ValueError("Invalid JSON constant %s" % name)


def _parse_float(text: str) -> float:
    # numbers out of float range would silently become infinite
    value = float(text)
    if math.isinf(value):
        raise ValueError("Number %s is out of range" % text)
    return value


@dataclass(frozen=True)
class Document:
    """Parsed JSON document, replaced as a whole on each load.

    :param root: root JSON value, can be of any kind (including null)
    :param path: path of the file it was read from, if any
    """

    root: Any
    path: Optional[str] = None

    @property
    def name(self) -> Optional[str]:
        if self.path is None:
            return None
        return os.path.basename(os.path.normpath(self.path))

    @classmethod
    def from_text(cls, text: str, path: Optional[str] = None) -> "Document":
        try:
            root = json.loads(
                text, parse_constant=_reject_constant, parse_float=_parse_float
            )
        except json.JSONDecodeError as e:
            raise ParseError(
                "Invalid JSON in %s: %s" % (path or "<text>", e),
                path=path,
                lineno=e.lineno,
                colno=e.colno,
            ) from e
        except (ValueError, RecursionError) as e:
            raise ParseError(
                "Invalid JSON in %s: %s" % (path or "<text>", e), path=path
            ) from e
        return cls(root=root, path=path)

    @classmethod
    def load(cls, path: str) -> "Document":
        """Read whole file at `path` as UTF-8 text and parse it.

        :raises FileReadError: file cannot be opened, read or decoded
        :raises ParseError: content is not valid JSON
        """
        path = os.fspath(path)
        try:
            with open(path, "r", encoding=ENCODING) as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError("Cannot read %s: %s" % (path, e), path=path) from e
        return cls.from_text(content, path=path)
