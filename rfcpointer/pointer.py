"""JSON Pointer (RFC 6901) lookup and assignment on plain Python JSON trees.

A JSON tree is made of ``dict`` (objects), ``list`` (arrays) and scalar
values.  Lookups return references into the tree rather than copies, and
assignments modify the tree in place.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "PointerError",
    "InvalidPointerError",
    "PointerNotFoundError",
    "unescape_token",
    "get_pointer",
    "get_pointer_f",
    "set_pointer",
    "set_pointer_f",
]

_DIGITS = frozenset("0123456789")


class PointerError(Exception):
    """Base class for all JSON Pointer failures."""


class InvalidPointerError(PointerError, ValueError):
    """The pointer or one of its array indexes is malformed."""


class PointerNotFoundError(PointerError, LookupError):
    """The pointer names a location that does not exist in the tree."""


def unescape_token(token: str) -> str:
    """Decode a reference token: every ``~1`` becomes ``/``, then every ``~0`` becomes ``~``."""
    return token.replace("~1", "/").replace("~0", "~")


def _array_index(array: list, token: str) -> int:
    """Validate *token* as a base-10 index into *array* and return it."""
    if len(token) == 1:
        if token not in _DIGITS:
            raise InvalidPointerError(f"invalid array index {token!r}")
        index = int(token)
    else:
        # Leading zeros are not allowed, and only plain decimal digits are.
        if token.startswith("0") or any(ch not in _DIGITS for ch in token):
            raise InvalidPointerError(f"invalid array index {token!r}")
        index = int(token) if token else 0
    if index >= len(array):
        raise PointerNotFoundError(f"array index {index} out of range")
    return index


def _step(obj: Any, token: str) -> Any:
    """Descend one level from *obj* following *token*."""
    if isinstance(obj, list):
        item = obj[_array_index(obj, token)]
        if item is None:
            raise PointerNotFoundError(f"no entry at array index {token!r}")
        return item
    key = unescape_token(token)
    if isinstance(obj, dict) and key in obj:
        return obj[key]
    raise PointerNotFoundError(f"no member named {key!r}")


def _resolve(obj: Any, path: str) -> Any:
    """Follow a non-empty pointer *path* from *obj*."""
    if not path.startswith("/"):
        raise InvalidPointerError(f"pointer {path!r} must start with '/'")
    for token in path[1:].split("/"):
        obj = _step(obj, token)
    return obj


def _assign(parent: Any, token: str, value: Any) -> None:
    """Store *value* in *parent* under the (unescaped as given) *token*."""
    if isinstance(parent, list):
        # RFC 6901 section 4: '-' designates the position past the last element.
        if token == "-":
            parent.append(value)
            return
        parent[_array_index(parent, token)] = value
        return
    if isinstance(parent, dict):
        parent[token] = value
        return
    raise PointerNotFoundError(f"cannot set {token!r} inside a {type(parent).__name__}")


def _format(path_fmt: str | None, args: tuple) -> str:
    if path_fmt is None:
        raise InvalidPointerError("pointer format must not be None")
    try:
        return path_fmt % args
    except (TypeError, ValueError) as exc:
        raise InvalidPointerError(f"cannot format pointer {path_fmt!r}: {exc}") from exc


def get_pointer(obj: Any, path: str) -> Any:
    """Return the value inside *obj* at *path*; the empty pointer returns *obj* itself."""
    if obj is None or path is None:
        raise InvalidPointerError("object and pointer must not be None")
    if path == "":
        return obj
    return _resolve(obj, path)


def get_pointer_f(obj: Any, path_fmt: str, *args: Any) -> Any:
    """Like :func:`get_pointer`, with the pointer built as ``path_fmt % args``."""
    if obj is None or path_fmt is None:
        raise InvalidPointerError("object and pointer format must not be None")
    path = _format(path_fmt, args)
    if path == "":
        return obj
    return _resolve(obj, path)


def _set(obj: Any, path: str, value: Any) -> Any:
    if path == "":
        return value
    if not path.startswith("/"):
        raise InvalidPointerError(f"pointer {path!r} must start with '/'")
    last = path.rfind("/")
    parent = obj if last == 0 else _resolve(obj, path[:last])
    _assign(parent, path[last + 1:], value)
    return obj


def set_pointer(obj: Any, path: str, value: Any) -> Any:
    """Place *value* at *path* inside *obj* and return the resulting root.

    Containers are modified in place; the empty pointer replaces the whole
    tree, so the returned root is *value* in that case.
    """
    if path is None:
        raise InvalidPointerError("pointer must not be None")
    return _set(obj, path, value)


def set_pointer_f(obj: Any, value: Any, path_fmt: str, *args: Any) -> Any:
    """Like :func:`set_pointer`, with the pointer built as ``path_fmt % args``."""
    return _set(obj, _format(path_fmt, args), value)