"""
Path-addressed access to nested dict/list trees.

A path is a string of dot-separated keys and bracketed sequence positions:

    "foo.bar[3].baz"  ->  ('foo', 'bar', 3, 'baz')

Nodes are a tagged union of three kinds:
- mapping: dict, addressed by key segments
- sequence: list, addressed by index segments
- leaf: anything else

None is the absent value. Reads return None for missing structure, and a
None leaf counts as "nothing set" when checking emptiness.
"""
import re
from functools import lru_cache
from typing import Any, List, Tuple, Union


Segment = Union[str, int]

_KEY = re.compile(r'[^.\[\]]+')
_INDEX = re.compile(r'\[(\d+)\]')


def parse_path(path: str) -> Tuple[Segment, ...]:
    """Split a path string into key (str) and index (int) segments.

    Args:
        path: Dotted/bracketed path, e.g. "foo.bar[3].baz" or "rows[0][1]"

    Returns:
        Tuple of segments

    Raises:
        ValueError: If the path is empty or malformed
    """
    if not isinstance(path, str) or not path:
        raise ValueError(f"Path must be a non-empty string, got {path!r}")
    return _parse(path)


@lru_cache(maxsize=1024)
def _parse(path: str) -> Tuple[Segment, ...]:
    segments: List[Segment] = []
    pos = 0
    while pos < len(path):
        char = path[pos]
        if char == '[':
            match = _INDEX.match(path, pos)
            if match is None:
                raise ValueError(f"Malformed index at position {pos} in path {path!r}")
            segments.append(int(match.group(1)))
        else:
            if segments:
                if char != '.':
                    raise ValueError(f"Expected '.' or '[' at position {pos} in path {path!r}")
                pos += 1
            match = _KEY.match(path, pos)
            if match is None:
                raise ValueError(f"Missing key at position {pos} in path {path!r}")
            segments.append(match.group(0))
        pos = match.end()

    return tuple(segments)


def _format_path(segments: Tuple[Segment, ...]) -> str:
    parts = []
    for segment in segments:
        if isinstance(segment, int):
            parts.append(f'[{segment}]')
        else:
            parts.append(f'.{segment}' if parts else segment)
    return ''.join(parts)


def _read(node: Any, segment: Segment) -> Any:
    if isinstance(node, dict) and not isinstance(segment, int):
        return node.get(segment)
    if isinstance(node, list) and isinstance(segment, int):
        return node[segment] if segment < len(node) else None
    return None


def _container_for(segment: Segment) -> Union[dict, list]:
    return [] if isinstance(segment, int) else {}


def _write(node: Union[dict, list], segment: Segment, value: Any, segments: Tuple[Segment, ...]) -> None:
    if isinstance(node, dict):
        if isinstance(segment, int):
            raise TypeError(
                f"Cannot address index {segment!r} inside a mapping (path {_format_path(segments)!r})"
            )
        node[segment] = value
        return
    if not isinstance(segment, int):
        raise TypeError(
            f"Cannot address key {segment!r} inside a sequence (path {_format_path(segments)!r})"
        )
    if segment >= len(node):
        node.extend([None] * (segment + 1 - len(node)))
    node[segment] = value


class PathStore:
    """Stateless read/write/delete/emptiness operations on a nested tree.

    Every operation works on whatever root mapping it is given; the store
    itself holds nothing.
    """

    @staticmethod
    def get(root: Any, path: str) -> Any:
        """Return the value at path, or None if any segment is missing."""
        node = root
        for segment in parse_path(path):
            node = _read(node, segment)
            if node is None:
                return None
        return node

    @staticmethod
    def set(root: Union[dict, list], path: str, value: Any) -> Union[dict, list]:
        """Write value at path, creating intermediate dicts/lists as needed.

        A key segment creates a dict, an index segment creates a list padded
        with None holes. A leaf standing where a container is needed gets
        replaced; sibling subtrees are never touched.

        Returns:
            The same root, for chaining
        """
        segments = parse_path(path)
        node = root
        for position, segment in enumerate(segments[:-1]):
            child = _read(node, segment)
            if not isinstance(child, (dict, list)):
                child = _container_for(segments[position + 1])
                _write(node, segment, child, segments[:position + 1])
            node = child
        _write(node, segments[-1], value, segments)
        return root

    @staticmethod
    def delete(root: Any, path: str) -> None:
        """Remove exactly the node at path.

        Dict entries are removed. List positions become None holes so that
        sibling indices stay stable; trailing holes are trimmed. Ancestors
        are left in place even when they end up empty. Missing paths are a
        no-op.
        """
        segments = parse_path(path)
        parent = root
        for segment in segments[:-1]:
            parent = _read(parent, segment)
            if parent is None:
                return

        last = segments[-1]
        if isinstance(parent, dict) and not isinstance(last, int):
            parent.pop(last, None)
        elif isinstance(parent, list) and isinstance(last, int) and last < len(parent):
            parent[last] = None
            while parent and parent[-1] is None:
                parent.pop()

    @staticmethod
    def empty(root: Any) -> bool:
        """True iff no leaf anywhere under root holds a value other than None."""
        if isinstance(root, dict):
            return all(PathStore.empty(child) for child in root.values())
        if isinstance(root, list):
            return all(PathStore.empty(child) for child in root)
        return root is None
