"""Patches: single operations that turn an old DOM tree into a new one.

Every patch names the node it applies to by that node's index in the old
tree. Nodes are numbered depth first, the root being 0, its first child 1,
that child's first child 2, and so on. Some patches also carry the index
the node will have in the new tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from vdomdiff.vnode import AttributeValue, EventHandler, VirtualNode, VText


class Patch:
    """Base of all patches."""

    __slots__ = ()

    node_idx: int

    def old_node_idx(self) -> int:
        """Return the index, in the old tree, of the node this patch applies to."""
        return self.node_idx


@dataclass(frozen=True)
class AppendChildren(Patch):
    """Append new child nodes, each with its index in the new tree."""

    old_idx: int
    new_nodes: list[tuple[int, VirtualNode]] = field(default_factory=list)

    def old_node_idx(self) -> int:
        return self.old_idx


@dataclass(frozen=True)
class TruncateChildren(Patch):
    """Remove all children of a node but the first ``length``."""

    node_idx: int
    length: int


@dataclass(frozen=True)
class Replace(Patch):
    """Replace a node with another, as happens when a node's tag changes."""

    old_idx: int
    new_idx: int
    new_node: VirtualNode

    def old_node_idx(self) -> int:
        return self.old_idx


@dataclass(frozen=True)
class ValueAttributeUnchanged(Patch):
    """Set the unchanged value attribute again, overwriting anything typed in."""

    node_idx: int
    value: AttributeValue


@dataclass(frozen=True)
class AddAttributes(Patch):
    """Add attributes that are new or whose value changed."""

    node_idx: int
    attributes: dict[str, AttributeValue] = field(default_factory=dict)


@dataclass(frozen=True)
class RemoveAttributes(Patch):
    """Remove attributes that the new node no longer has."""

    node_idx: int
    names: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ChangeText(Patch):
    """Change the text of a text node."""

    node_idx: int
    text: VText


@dataclass(frozen=True)
class RemoveEventsId(Patch):
    """Remove the events id from a node that no longer has any events."""

    node_idx: int


@dataclass(frozen=True)
class SetEventsId(Patch):
    """Set a node's events id to its index in the new tree."""

    old_idx: int
    new_idx: int

    def old_node_idx(self) -> int:
        return self.old_idx


@dataclass(frozen=True, eq=False)
class AddEvents(Patch):
    """Register event handlers for a node.

    Handlers cannot be compared, so equality looks at event names only.
    """

    node_idx: int
    events: dict[str, EventHandler] = field(default_factory=dict)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddEvents):
            return NotImplemented
        return (
            self.node_idx == other.node_idx
            and self.events.keys() == other.events.keys()
        )

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True, eq=False)
class RemoveEvents(Patch):
    """Unregister event handlers from a node.

    Handlers cannot be compared, so equality looks at the ordered event names only.
    """

    node_idx: int
    events: list[tuple[str, EventHandler]] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RemoveEvents):
            return NotImplemented
        return self.node_idx == other.node_idx and [
            name for name, _ in self.events
        ] == [name for name, _ in other.events]

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class RemoveAllManagedEventsWithNodeIdx(Patch):
    """Forget every managed event of a node that left the DOM."""

    node_idx: int


@dataclass(frozen=True)
class CallOnCreateElem(Patch):
    """Call the on-create function of ``node`` on the DOM element."""

    node_idx: int
    node: VirtualNode


@dataclass(frozen=True)
class CallOnRemoveElem(Patch):
    """Call the on-remove function of ``node`` on the DOM element."""

    node_idx: int
    node: VirtualNode


@dataclass(frozen=True)
class SetDangerousInnerHtml(Patch):
    """Set the element's inner HTML from ``node``'s dangerous inner HTML."""

    node_idx: int
    node: VirtualNode


@dataclass(frozen=True)
class RemoveDangerousInnerHtml(Patch):
    """Set the element's inner HTML to the empty string."""

    node_idx: int