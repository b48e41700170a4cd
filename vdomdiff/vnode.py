"""Virtual DOM nodes: elements, text nodes and their special attributes."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Union

AttributeValue = Union[str, bool]
EventHandler = Callable[..., Any]
ElementCallback = Callable[[Any], Any]


@dataclass
class SpecialAttributes:
    """Attributes that are not rendered but drive lifecycle behaviour.

    Two sets of special attributes are equal when their callback keys and
    inner HTML are equal; the callbacks themselves are not compared.
    """

    dangerous_inner_html: str | None = None
    _on_create_key: str | None = field(default=None, repr=False)
    _on_create_func: ElementCallback | None = field(
        default=None, repr=False, compare=False
    )
    _on_remove_key: str | None = field(default=None, repr=False)
    _on_remove_func: ElementCallback | None = field(
        default=None, repr=False, compare=False
    )

    def set_on_create_element(self, key: str, func: ElementCallback) -> None:
        """Register a function called when the element is created.

        The key identifies the function: a new node whose key matches the old
        node's key does not have its function called again.
        """
        self._on_create_key = key
        self._on_create_func = func

    def set_on_remove_element(self, key: str, func: ElementCallback) -> None:
        """Register a function called when the element is removed."""
        self._on_remove_key = key
        self._on_remove_func = func

    def on_create_element_key(self) -> str | None:
        """Return the key of the on-create function, if one is set."""
        return self._on_create_key

    def on_remove_element_key(self) -> str | None:
        """Return the key of the on-remove function, if one is set."""
        return self._on_remove_key

    def maybe_call_on_create_element(self, element: Any) -> None:
        """Call the on-create function with ``element`` if one is set."""
        if self._on_create_func is not None:
            self._on_create_func(element)

    def maybe_call_on_remove_element(self, element: Any) -> None:
        """Call the on-remove function with ``element`` if one is set."""
        if self._on_remove_func is not None:
            self._on_remove_func(element)


@dataclass
class VText:
    """A text node."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(eq=False)
class VElement:
    """An element node with attributes, events, children and special attributes.

    Equality compares event names only, since handlers cannot be compared.
    """

    tag: str
    attrs: dict[str, AttributeValue] = field(default_factory=dict)
    events: dict[str, EventHandler] = field(default_factory=dict)
    children: list[VirtualNode] = field(default_factory=list)
    special_attributes: SpecialAttributes = field(default_factory=SpecialAttributes)

    def has_events(self) -> bool:
        """Return whether any event handler is attached."""
        return bool(self.events)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VElement):
            return NotImplemented
        return (
            self.tag == other.tag
            and self.attrs == other.attrs
            and self.events.keys() == other.events.keys()
            and self.children == other.children
            and self.special_attributes == other.special_attributes
        )

    __hash__ = None  # type: ignore[assignment]


VirtualNode = Union[VElement, VText]


def _flatten_children(items: Iterable[Any]) -> Iterable[VirtualNode]:
    for item in items:
        if isinstance(item, (VElement, VText)):
            yield item
        elif isinstance(item, str):
            yield VText(item)
        elif isinstance(item, Iterable):
            yield from _flatten_children(item)
        else:
            raise TypeError(f"cannot use {type(item).__name__!r} as a child node")


def element(tag: str, *args: Any, **kwargs: Any) -> VElement:
    """Build an element.

    Positional arguments are children: nodes, strings (made into text nodes)
    or iterables of these. Keyword arguments are attributes, except callables
    under names starting with ``on``, which become event handlers. A trailing
    underscore is dropped from a keyword name so that ``class_`` sets ``class``.
    """
    node = VElement(tag)
    node.children.extend(_flatten_children(args))
    for raw_name, value in kwargs.items():
        name = raw_name[:-1] if raw_name.endswith("_") else raw_name
        if name.startswith("on") and callable(value):
            node.events[name] = value
        elif isinstance(value, (str, bool)):
            node.attrs[name] = value
        else:
            raise TypeError(
                f"attribute {name!r} must be a string or a bool, "
                f"not {type(value).__name__!r}"
            )
    return node


def text(value: Any) -> VText:
    """Build a text node from ``value``."""
    return VText(str(value))