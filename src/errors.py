"""

# Errors (not Exceptions)

Structured Error values assembled from typed Fragments.

```python
from structerr.errors import E, Op, Path, Kind

err = E(Op("open"), Path("/tmp/x"), Kind.NotExist)
str(err) # 'open|/tmp/x|item does not exist'
```

"""
from __future__ import annotations
import enum, os
from dataclasses import dataclass, replace
from typing import Any, Iterator, Protocol, runtime_checkable
from loguru import logger

__all__ = [
  'Op', 'Path', 'Ref',
  'Kind', 'describe',
  'ErrorLike', 'Error', 'E',
  'causes', 'is_kind',
]

SEPARATOR = '|'
"""Placed between the rendered Fields of an Error"""

class Op(str):
  """The Operation that failed; ex. a function or step name"""

class Path(str):
  """The filesystem or resource Path relevant to the failure"""

class Ref(str):
  """An opaque Reference token relevant to the failure; ex. a resource ID"""

class Kind(enum.IntEnum):
  """The Class of Error. NOTE: New Kinds may only be appended; never reorder or remove them."""
  Other = 0
  """Unclassified"""
  Invalid = 1
  """Operation not permitted for this item"""
  Permission = 2
  """The caller lacks permission"""
  IO = 3
  """Error reading or writing; could be a file, the network, etc."""
  Exists = 4
  """Item already exists"""
  NotExist = 5
  """Item does not exist"""
  IsDir = 6
  """Item is a directory"""
  NotDir = 7
  """Item is not a directory"""
  NotEmpty = 8
  """Directory is not empty"""
  Private = 9
  """Requested item is private"""
  Internal = 10
  """Internal invariant violation"""
  BrokenLink = 11
  """Link target could not be found"""

  def __str__(self) -> str: return describe(self)
  def __format__(self, format_spec: str) -> str: return format(describe(self), format_spec)

_kind_descriptions: dict[int, str] = {
  Kind.Other: "unknown error",
  Kind.Invalid: "invalid operation",
  Kind.Permission: "permission denied",
  Kind.IO: "I/O error",
  Kind.Exists: "item already exists",
  Kind.NotExist: "item does not exist",
  Kind.IsDir: "item is a directory",
  Kind.NotDir: "item is not a directory",
  Kind.NotEmpty: "directory is not empty",
  Kind.Private: "requested item is private",
  Kind.Internal: "internal error",
  Kind.BrokenLink: "link target could not be found",
}
def describe(kind: int) -> str:
  """Lookup the human readable description of a Kind; values outside the known range describe as an unknown error kind"""
  return _kind_descriptions.get(int(kind), "unknown error kind")

@runtime_checkable
class ErrorLike(Protocol):
  """An Error value (not an Exception) produced elsewhere"""

  kind: Any
  """The Kind of Error"""
  message: str
  """A Human Readable description about the Error"""

@dataclass(frozen=True)
class Error:
  """A Structured Error; build it w/ `E` instead of calling this directly."""

  operation: Op | None = None
  """The Operation that failed"""
  path: Path | None = None
  """The Path relevant to the failure"""
  kind: Kind | None = None
  """The Kind of Error; `None` if it was never classified"""
  message: str | None = None
  """Free text explaining the failure"""
  reference: Ref | None = None
  """A Reference token relevant to the failure"""
  wrapped: Error | BaseException | ErrorLike | None = None
  """The underlying cause"""

  def _fields(self) -> list[str]:
    """This Error's own set Fields, in render order; the wrapped cause is excluded."""
    fields: list[str] = []
    if self.operation: fields.append(self.operation)
    if self.path: fields.append(self.path)
    if self.kind is not None and self.kind != Kind.Other: fields.append(describe(self.kind))
    if self.message: fields.append(self.message)
    if self.reference: fields.append(self.reference)
    return fields

  def __str__(self) -> str:
    """Render the set Fields, in order, as a single `|` delimited line; wrapped causes are rendered inline."""
    parts: list[str] = []
    # Iterative; chains may be arbitrarily deep
    for cause in causes(self):
      if isinstance(cause, Error): parts.extend(cause._fields())
      else: parts.append(str(cause))
    return SEPARATOR.join(p for p in parts if p)

def _is_foreign_error(arg: Any) -> bool:
  return isinstance(arg, BaseException) or isinstance(arg, ErrorLike)

def E(*args: Op | Path | os.PathLike | Kind | str | Ref | Error | BaseException | ErrorLike) -> Error | TypeError:
  """Assemble an Error from the given Fragments.

  Each Fragment is routed to a Field by its type; a later Fragment of the same type replaces an earlier one.

  - `Op`, `Path`, `Kind`, `Ref` set their respective Field.
  - Any other `os.PathLike` is taken as a `Path`.
  - A plain `str` is the message.
  - An `Error` is wrapped as a copy; changes to the original won't be reflected.
  - An Exception (or `ErrorLike`) is wrapped as is.

  Calling `E` w/o any Fragments is a programming error & raises a `TypeError`.

  An unrecognized Fragment is logged (attributed to the caller) & a `TypeError` describing it is returned in place of the Error; it is never raised.
  """
  if len(args) == 0: raise TypeError("E() requires at least one Fragment")
  fields: dict[str, Any] = {}
  for arg in args:
    if isinstance(arg, Kind): fields['kind'] = arg
    elif isinstance(arg, Op): fields['operation'] = arg
    elif isinstance(arg, Path): fields['path'] = arg
    elif isinstance(arg, Ref): fields['reference'] = arg
    elif isinstance(arg, str): fields['message'] = arg
    elif isinstance(arg, os.PathLike): fields['path'] = Path(os.fspath(arg))
    elif isinstance(arg, Error): fields['wrapped'] = replace(arg)
    elif _is_foreign_error(arg): fields['wrapped'] = arg
    else:
      logger.opt(depth=1).warning(f"E received a broken call; unrecognized Fragment of type {type(arg).__name__}: {arg!r}")
      return TypeError(f"unknown type: {type(arg).__name__}, value: {arg}")
  return Error(**fields)

def causes(err: Error | BaseException | ErrorLike | None) -> Iterator[Error | BaseException | ErrorLike]:
  """Walk the causal chain, starting w/ the Error itself."""
  _err = err
  while _err is not None:
    yield _err
    if not isinstance(_err, Error): break
    _err = _err.wrapped

def is_kind(kind: Kind, err: Error | BaseException | ErrorLike | None) -> bool:
  """Is the Error of the given Kind?

  The first Error in the chain w/ a Kind other than `Other` decides; foreign errors are never of any Kind.
  """
  for cause in causes(err):
    if not isinstance(cause, Error): return False
    if cause.kind is not None and cause.kind != Kind.Other: return cause.kind == kind
  return False
