# rfcpointer

Read and write values inside JSON documents with JSON Pointer strings
(RFC 6901). Documents are ordinary Python data: `dict`, `list`, `str`,
numbers, `bool` and `None`, as returned by `json.loads`. Everything lives
in the `rfcpointer.pointer` module; there are no other dependencies.

## Installing

```
pip install rfcpointer
```

## Reading

```python
import json
from rfcpointer.pointer import get_pointer, get_pointer_f

doc = json.loads('{"foo": ["bar", "baz"], "a/b": 1, "m~n": 8}')

get_pointer(doc, "")        # the whole document
get_pointer(doc, "/foo/0")  # "bar"
get_pointer(doc, "/a~1b")   # 1   (~1 stands for "/")
get_pointer(doc, "/m~0n")   # 8   (~0 stands for "~")

get_pointer_f(doc, "/%s/%d", "foo", 1)  # "baz"
```

Lookups return the value stored in the document itself, not a copy.

The `_f` variants build the path as `path_fmt % args`, so a literal `%` in
a path is written `%%` there.

## Writing

```python
from rfcpointer.pointer import set_pointer, set_pointer_f

doc = set_pointer(doc, "/foo/1", "cod")       # replace an array item
doc = set_pointer(doc, "/fud", {})            # add or replace an object member
doc = set_pointer(doc, "/fud/gaw", [1, 2, 3])
doc = set_pointer(doc, "/fud/gaw/-", 4)       # "-" appends to an array
doc = set_pointer_f(doc, 0, "/fud/gaw/%d", 0)

doc = set_pointer(doc, "", 10)                # replaces the whole document
```

Changes are made in place; the setters return the document so that the
empty path, which replaces the document itself, works the same way as the
others. Always keep the returned value.

When setting, the tokens leading to the parent are decoded (`~1`, `~0`) as
for reading, but the last token is used as the member name exactly as
written.

## Array indexes

Array indexes are plain base-10 numbers with no leading zeros; `0` on its
own is fine, `01`, `-1` and `a` are not. An empty token is taken as index
0. Reading or setting an index that is not already in the array fails;
when setting, use `-` to append. A `null` item in an array is treated as
missing when reading.

## Errors

All failures raise `PointerError` or one of its subclasses:

- `InvalidPointerError` (also a `ValueError`) for a `None` path, document
  or format, a path without its leading `/`, a format that cannot be
  applied to its arguments, or an array index that is not a valid number
  (including `-` when reading).
- `PointerNotFoundError` (also a `LookupError`) for a member or index that
  is not there, or when a path passes through a string, number, boolean or
  null.

## Helpers

`unescape_token(token)` turns one reference token into its key by
replacing every `~1` with `/` and then every `~0` with `~`.

## What it does not do

There is no JSON parser, serializer or command-line tool here: use the
standard `json` module to load and dump documents, and pass the resulting
Python data to these functions.