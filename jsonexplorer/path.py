import re

from typing import Any, List, Sequence, Tuple

# ordered segments from document root: object keys, or array indices as canonical decimal strings
Path = Tuple[str, ...]

ROOT_LABEL = "Root"
BREADCRUMB_SEPARATOR = " → "

_INDEX_PATTERN = re.compile(r"0|[1-9][0-9]*", flags=re.ASCII)

# returned by `child` when segment doesn't lead anywhere
MISSING = object()


def is_index_segment(segment: Any) -> bool:
    """Return whether `segment` is an array index written in canonical decimal form.

    >>> is_index_segment("12"), is_index_segment("012"), is_index_segment("-1")
    (True, False, False)
    """
    return isinstance(segment, str) and _INDEX_PATTERN.fullmatch(segment) is not None


def child(value: Any, segment: str) -> Any:
    """Return child of `value` designated by `segment`, or `MISSING` if segment isn't valid against `value`."""
    if isinstance(value, dict):
        if isinstance(segment, str) and segment in value:
            return value[segment]
        return MISSING
    if isinstance(value, list):
        if not is_index_segment(segment):
            return MISSING
        index = int(segment)
        if index >= len(value):
            return MISSING
        return value[index]
    return MISSING


def resolve(root: Any, path: Sequence[str]) -> Tuple[Path, Any]:
    """Walk `path` from `root`, stopping at the first segment that is not valid.

    Return the longest valid prefix of `path`, and the value reached by it. Never raises: a stale or invalid path
    degrades to its deepest still valid ancestor.

    >>> resolve({"a": [1, 2, {"b": "x"}]}, ["a", "9"])
    (('a',), [1, 2, {'b': 'x'}])
    """
    current = root
    valid: List[str] = []
    for segment in path:
        next_ = child(current, segment)
        if next_ is MISSING:
            break
        current = next_
        valid.append(segment)
    return tuple(valid), current


def breadcrumb(path: Sequence[str], separator: str = BREADCRUMB_SEPARATOR) -> str:
    """Human readable representation of a navigation path."""
    if not path:
        return ROOT_LABEL
    return separator.join(path)


def parse_path(text: str, separator: str = ".") -> Path:
    """Split a path expression such as "a.2.b" into segments, empty text meaning root."""
    if not separator:
        raise ValueError("Path separator cannot be empty")
    if not text:
        return ()
    return tuple(text.split(separator))
