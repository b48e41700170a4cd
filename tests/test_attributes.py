from vdomdiff.attributes import (
    attributes_to_add,
    attributes_to_remove,
    events_to_add,
    events_to_remove,
)
from vdomdiff.vnode import element


def _noop():
    return None


def _other():
    return None


def test_add_new_attribute():
    old = element("div")
    new = element("div", id="hello")
    assert attributes_to_add(old, new) == {"id": "hello"}


def test_add_changed_attribute():
    old = element("div", id="foobar")
    new = element("div", id="hello")
    assert attributes_to_add(old, new) == {"id": "hello"}


def test_unchanged_attribute_not_added():
    old = element("input", value="abc")
    new = element("input", value="abc")
    assert attributes_to_add(old, new) == {}


def test_bool_and_string_values_differ():
    old = element("button", disabled="true")
    new = element("button", disabled=True)
    assert attributes_to_add(old, new) == {"disabled": True}


def test_remove_missing_attribute():
    old = element("div", id="hey-there")
    new = element("div")
    to_add = attributes_to_add(old, new)
    assert attributes_to_remove(old, new, to_add) == ["id"]


def test_changed_attribute_not_removed():
    old = element("div", id="hey-there")
    new = element("div", id="changed")
    to_add = attributes_to_add(old, new)
    assert to_add == {"id": "changed"}
    assert attributes_to_remove(old, new, to_add) == []


def test_remove_keeps_old_order():
    old = element("div", id="a", class_="b", style="c")
    new = element("div", class_="b")
    to_add = attributes_to_add(old, new)
    assert attributes_to_remove(old, new, to_add) == ["id", "style"]


def test_names_in_to_add_are_skipped():
    old = element("div", id="x")
    new = element("div")
    assert attributes_to_remove(old, new, {"id": "y"}) == []


def test_events_to_add_only_new_names():
    old = element("div", onclick=_noop)
    new = element("div", onclick=_other, oninput=_noop)
    added = events_to_add(old, new)
    assert list(added) == ["oninput"]
    assert added["oninput"] is _noop


def test_events_same_names_nothing_added_or_removed():
    old = element("div", onclick=_noop)
    new = element("div", onclick=_other)
    to_add = events_to_add(old, new)
    assert to_add == {}
    assert events_to_remove(old, new, to_add) == []


def test_events_to_remove_carries_handler():
    old = element("div", oninput=_noop)
    new = element("div", onmousemove=_other)
    to_add = events_to_add(old, new)
    assert list(to_add) == ["onmousemove"]
    assert events_to_remove(old, new, to_add) == [("oninput", _noop)]


def test_events_removed_when_none_left():
    old = element("div", onclick=_noop)
    new = element("div")
    to_add = events_to_add(old, new)
    assert events_to_remove(old, new, to_add) == [("onclick", _noop)]


def test_events_in_to_add_are_skipped():
    old = element("div", onclick=_noop)
    new = element("div")
    assert events_to_remove(old, new, {"onclick": _other}) == []


def test_add_and_remove_are_disjoint():
    old = element("div", id="1", title="t", onclick=_noop, oninput=_noop)
    new = element("div", id="2", lang="en", onclick=_noop, onkeyup=_noop)
    attrs_added = attributes_to_add(old, new)
    attrs_removed = attributes_to_remove(old, new, attrs_added)
    assert set(attrs_added).isdisjoint(attrs_removed)
    assert set(attrs_added) | set(attrs_removed) == {"id", "lang", "title"}
    ev_added = events_to_add(old, new)
    ev_removed = events_to_remove(old, new, ev_added)
    assert set(ev_added).isdisjoint(name for name, _ in ev_removed)
    assert list(ev_added) == ["onkeyup"]
    assert [name for name, _ in ev_removed] == ["oninput"]