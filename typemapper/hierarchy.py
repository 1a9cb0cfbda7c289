"""
Type hierarchy queries used by the object converter search.

Python classes can have several bases. The first base is treated as the
superclass and forms the chain that is walked up to ``object``; the remaining
bases are the interfaces the class declares, kept in declaration order.

A class that lists a mixin first keeps its real ancestors off that chain, so
``ancestors`` exposes the full linearization for the search to fall back on.
"""

from typing import Iterator
from typing import Optional
from typing import Tuple


def superclass(cls: type) -> Optional[type]:
    """Direct superclass of `cls`, or None for `object`."""
    bases = cls.__bases__
    return bases[0] if bases else None


def declared_interfaces(cls: type) -> Tuple[type, ...]:
    """Interfaces `cls` declares itself, in declaration order."""
    return cls.__bases__[1:]


def ancestors(cls: type) -> Tuple[type, ...]:
    """`cls` and every class it inherits from, in MRO order, minus `object`."""
    return tuple(c for c in cls.__mro__ if c is not object)


def walk(cls: type) -> Iterator[Tuple[type, Tuple[type, ...]]]:
    """
    Yield (class, declared_interfaces) from `cls` up its superclass chain.
    `object` is never yielded.
    """
    current: Optional[type] = cls
    while current is not None and current is not object:
        yield current, declared_interfaces(current)
        current = superclass(current)
