# vdomdiff

`vdomdiff` compares two virtual DOM trees. It returns the ordered list of
patches that would turn a DOM built from the old tree into one that matches
the new tree.

Nodes are numbered depth first. The root is 0, its first child is 1, and that
child's first child is 2. Each patch names the node it applies to by that
node's index in the old tree, which `patch.old_node_idx()` returns. Some
patches also carry the index a node will have in the new tree: `Replace`,
`SetEventsId` and `AppendChildren`.

## Installing

```
pip install vdomdiff
```

## Building trees

The node types are in `vdomdiff.vnode`.

```python
from vdomdiff.vnode import element, text

old = element("div", element("b"))
new = element(
    "div",
    element("b"),
    element("span", "hello"),
    id="main",
    class_="box",
    onclick=lambda: None,
)
```

`element(tag, *children, **attrs)` builds a `VElement`.

- Positional arguments are children. They may be nodes, strings (each string becomes a `VText`), or iterables of these.
- Keyword arguments are attributes, and each value must be a `str` or a `bool`.
- A callable given under a name that starts with `on` becomes an event handler instead of an attribute.
- A trailing underscore is dropped from a keyword name, so `class_` sets `class`.
- Any other value raises `TypeError`.

`text(value)` builds a `VText` from `str(value)`.

A `VElement` has these fields:

- `tag`
- `attrs`
- `events`, a dict from event name to handler
- `children`
- `special_attributes`, a `SpecialAttributes` object

`VElement.has_events()` tells whether the element has any handler.

Through `SpecialAttributes` you can:

- register callbacks by key with `set_on_create_element(key, func)` and `set_on_remove_element(key, func)`;
- read the keys back with `on_create_element_key()` and `on_remove_element_key()`;
- run the callbacks with `maybe_call_on_create_element(elem)` and `maybe_call_on_remove_element(elem)`;
- set raw inner HTML through the `dangerous_inner_html` field.

The callback keys are what the diff compares. If the new node's key matches the old node's key, no call patch is produced.

## Diffing

```python
from vdomdiff.diff import diff

for p in diff(old, new):
    print(p, p.old_node_idx())
```

The patch types live in `vdomdiff.patch` and all derive from `Patch`:

| Patch | Meaning |
| --- | --- |
| `AppendChildren(old_idx, new_nodes)` | Append children; `new_nodes` is a list of `(new_idx, node)` pairs. |
| `TruncateChildren(node_idx, length)` | Keep only the first `length` children. |
| `Replace(old_idx, new_idx, new_node)` | Replace a node whose kind or tag changed. |
| `ValueAttributeUnchanged(node_idx, value)` | Set an unchanged `value` attribute again. |
| `AddAttributes(node_idx, attributes)` | Add new attributes, or attributes whose value changed. |
| `RemoveAttributes(node_idx, names)` | Remove attributes the new node no longer has. |
| `ChangeText(node_idx, text)` | Change the text of a text node. |
| `SetEventsId(old_idx, new_idx)` | Set the node's events id to its new index. |
| `RemoveEventsId(node_idx)` | Remove the events id from a node that no longer has events. |
| `AddEvents(node_idx, events)` | Register event handlers. |
| `RemoveEvents(node_idx, events)` | Unregister handlers, given as `(name, handler)` pairs. |
| `RemoveAllManagedEventsWithNodeIdx(node_idx)` | Forget every event of a node that left the tree. |
| `CallOnCreateElem(node_idx, node)` | Call `node`'s on-create callback. |
| `CallOnRemoveElem(node_idx, node)` | Call `node`'s on-remove callback. |
| `SetDangerousInnerHtml(node_idx, node)` | Set inner HTML from `node`'s `dangerous_inner_html`. |
| `RemoveDangerousInnerHtml(node_idx)` | Clear inner HTML. |

Patches are dataclasses and compare by value, so you can check a diff directly
against an expected list. Handlers cannot be compared, so equality works
differently in two places:

- `AddEvents` and `RemoveEvents` compare event names, not handlers.
- Elements compare the names of their events, not the handlers, and ignore the callbacks registered in `SpecialAttributes`.

The helpers in `vdomdiff.attributes` work out the attribute and event
differences between two elements:

- `attributes_to_add(old, new)`
- `attributes_to_remove(old, new, to_add)`
- `events_to_add(old, new)`
- `events_to_remove(old, new, to_add)`

## Ordering guarantees

- When a node is replaced, `RemoveAllManagedEventsWithNodeIdx` patches for the node and its removed descendants come before the `Replace` patch.
- `RemoveEvents` comes before `AddEvents` for the same node.
- A `value` attribute that has not changed still produces a `ValueAttributeUnchanged` patch. This lets the field be reset even if the user typed into it.
- When an earlier part of the tree gains or loses nodes, later nodes with events get a `SetEventsId` patch carrying their new index.

## What it does not do

`vdomdiff` only computes patches. It does not:

- build or modify a real DOM;
- apply patches;
- render HTML;
- dispatch or delegate events.

Applying the patches is left to the caller.

## Running the tests

```
pip install -e ".[test]"
pytest
```