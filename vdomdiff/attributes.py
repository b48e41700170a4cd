"""Work out which attributes and events differ between two elements."""

from __future__ import annotations

from vdomdiff.vnode import AttributeValue, EventHandler, VElement


def attributes_to_add(old: VElement, new: VElement) -> dict[str, AttributeValue]:
    """Return the attributes of ``new`` that ``old`` lacks or holds with another value."""
    return {
        name: value
        for name, value in new.attrs.items()
        if name not in old.attrs or old.attrs[name] != value
    }


def attributes_to_remove(
    old: VElement, new: VElement, to_add: dict[str, AttributeValue]
) -> list[str]:
    """Return the names of attributes on ``old`` that ``new`` no longer has.

    Names already in ``to_add`` are left out, since adding them overwrites
    the old value anyway.
    """
    return [
        name
        for name, value in old.attrs.items()
        if name not in to_add
        and (name not in new.attrs or new.attrs[name] != value)
    ]


def events_to_add(old: VElement, new: VElement) -> dict[str, EventHandler]:
    """Return the events of ``new`` whose names ``old`` does not have."""
    return {
        name: handler
        for name, handler in new.events.items()
        if name not in old.events
    }


def events_to_remove(
    old: VElement, new: VElement, to_add: dict[str, EventHandler]
) -> list[tuple[str, EventHandler]]:
    """Return the events of ``old``, with their handlers, that ``new`` no longer has."""
    return [
        (name, handler)
        for name, handler in old.events.items()
        if name not in to_add and name not in new.events
    ]