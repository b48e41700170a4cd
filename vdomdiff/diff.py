"""Diff two virtual trees into the patches that turn the old one into the new one."""

from __future__ import annotations

from vdomdiff.attributes import (
    attributes_to_add,
    attributes_to_remove,
    events_to_add,
    events_to_remove,
)
from vdomdiff.patch import (
    AddAttributes,
    AddEvents,
    AppendChildren,
    CallOnCreateElem,
    CallOnRemoveElem,
    ChangeText,
    Patch,
    RemoveAllManagedEventsWithNodeIdx,
    RemoveAttributes,
    RemoveDangerousInnerHtml,
    RemoveEvents,
    RemoveEventsId,
    Replace,
    SetDangerousInnerHtml,
    SetEventsId,
    TruncateChildren,
    ValueAttributeUnchanged,
)
from vdomdiff.vnode import VElement, VirtualNode, VText


def diff(old: VirtualNode, new: VirtualNode) -> list[Patch]:
    """Return the patches that turn the DOM built from ``old`` into that of ``new``."""
    differ = _Differ()
    differ.diff_node(old, new)
    return differ.patches


class _Differ:
    """Walks both trees depth first, tracking each node's index in the old and new tree."""

    def __init__(self) -> None:
        self.old_idx = 0
        self.new_idx = 0
        self.patches: list[Patch] = []

    def diff_node(self, old: VirtualNode, new: VirtualNode) -> None:
        if type(old) is not type(new) or (
            isinstance(old, VElement)
            and isinstance(new, VElement)
            and old.tag != new.tag
        ):
            self._replace(old, new)
            return

        if isinstance(old, VText) and isinstance(new, VText):
            if old.text != new.text:
                self.patches.append(ChangeText(self.old_idx, new))
            return

        assert isinstance(old, VElement) and isinstance(new, VElement)
        self._diff_element(old, new)

    def _replace(self, old: VirtualNode, new: VirtualNode) -> None:
        if isinstance(old, VElement) and old.has_events():
            self.patches.append(RemoveAllManagedEventsWithNodeIdx(self.old_idx))

        replaced_old_idx = self.old_idx
        if isinstance(old, VElement):
            for child in old.children:
                self._skip_deleted(child)

        self.patches.append(Replace(replaced_old_idx, self.new_idx, new))

        if (
            isinstance(old, VElement)
            and old.special_attributes.on_remove_element_key() is not None
        ):
            self.patches.append(CallOnRemoveElem(self.old_idx, old))

        if isinstance(new, VElement):
            for child in new.children:
                self._count_new(child)

    def _diff_element(self, old: VElement, new: VElement) -> None:
        idx = self.old_idx

        added_attrs = attributes_to_add(old, new)
        if "value" in new.attrs and "value" not in added_attrs and "value" in old.attrs:
            self.patches.append(ValueAttributeUnchanged(idx, new.attrs["value"]))
        removed_attrs = attributes_to_remove(old, new, added_attrs)

        added_events = events_to_add(old, new)
        removed_events = events_to_remove(old, new, added_events)

        if added_attrs:
            self.patches.append(AddAttributes(idx, added_attrs))
        if removed_attrs:
            self.patches.append(RemoveAttributes(idx, removed_attrs))
        if removed_events:
            self.patches.append(RemoveEvents(idx, removed_events))
        if added_events:
            self.patches.append(AddEvents(idx, added_events))

        self._diff_special_attributes(old, new)
        self._diff_events_id(old, new)
        self._diff_children(old, new)

    def _diff_special_attributes(self, old: VElement, new: VElement) -> None:
        idx = self.old_idx
        old_special = old.special_attributes
        new_special = new.special_attributes

        old_html = old_special.dangerous_inner_html
        new_html = new_special.dangerous_inner_html
        if new_html is not None and old_html != new_html:
            self.patches.append(SetDangerousInnerHtml(idx, new))
        elif old_html is not None and new_html is None:
            self.patches.append(RemoveDangerousInnerHtml(idx))

        new_create = new_special.on_create_element_key()
        if new_create is not None and new_create != old_special.on_create_element_key():
            self.patches.append(CallOnCreateElem(idx, new))

        old_remove = old_special.on_remove_element_key()
        if old_remove is not None and old_remove != new_special.on_remove_element_key():
            self.patches.append(CallOnRemoveElem(idx, old))

    def _diff_events_id(self, old: VElement, new: VElement) -> None:
        old_has = old.has_events()
        new_has = new.has_events()
        if new_has and (not old_has or self.old_idx != self.new_idx):
            self.patches.append(SetEventsId(self.old_idx, self.new_idx))
        elif old_has and not new_has:
            self.patches.append(RemoveEventsId(self.old_idx))

    def _diff_children(self, old: VElement, new: VElement) -> None:
        parent_old_idx = self.old_idx
        old_count = len(old.children)
        new_count = len(new.children)

        if new_count < old_count:
            self.patches.append(TruncateChildren(parent_old_idx, new_count))

        for old_child, new_child in zip(old.children, new.children):
            self.old_idx += 1
            self.new_idx += 1
            self.diff_node(old_child, new_child)

        if new_count < old_count:
            for child in old.children[new_count:]:
                self._skip_deleted(child)
        elif new_count > old_count:
            appended: list[tuple[int, VirtualNode]] = []
            for node in new.children[old_count:]:
                self.new_idx += 1
                appended.append((self.new_idx, node))
                if isinstance(node, VElement):
                    for child in node.children:
                        self._count_new(child)
            self.patches.append(AppendChildren(parent_old_idx, appended))

    def _skip_deleted(self, node: VirtualNode) -> None:
        """Account for a deleted old node and its descendants, releasing their events."""
        self.old_idx += 1
        if not isinstance(node, VElement):
            return
        if node.events:
            self.patches.append(RemoveAllManagedEventsWithNodeIdx(self.old_idx))
        if node.special_attributes.on_remove_element_key() is not None:
            self.patches.append(CallOnRemoveElem(self.old_idx, node))
        for child in node.children:
            self._skip_deleted(child)

    def _count_new(self, node: VirtualNode) -> None:
        """Account for a new node and its descendants, depth first."""
        self.new_idx += 1
        if isinstance(node, VElement):
            for child in node.children:
                self._count_new(child)