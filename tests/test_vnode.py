import pytest

from vdomdiff.vnode import SpecialAttributes, VElement, VText, element, text


def test_text_node_holds_string():
    assert text("Old") == VText("Old")
    assert text(5).text == "5"


def test_string_children_become_text_nodes():
    node = element("b", "1")
    assert node.children == [VText("1")]


def test_nested_children_are_flattened():
    node = element("i", ["1", text("2")], element("br"))
    assert node.children == [VText("1"), VText("2"), VElement("br")]


def test_keyword_attributes():
    node = element("div", id="hello", class_="two classes", disabled=True)
    assert node.attrs == {"id": "hello", "class": "two classes", "disabled": True}
    assert node.events == {}


def test_callable_on_keywords_become_events():
    def handler():
        return None

    node = element("div", onclick=handler)
    assert node.events == {"onclick": handler}
    assert node.has_events() is True
    assert element("div").has_events() is False


def test_invalid_child_raises():
    with pytest.raises(TypeError):
        element("div", 42)


def test_invalid_attribute_raises():
    with pytest.raises(TypeError):
        element("div", id=3)


def test_special_attribute_keys():
    special = SpecialAttributes()
    assert special.on_create_element_key() is None
    assert special.on_remove_element_key() is None
    special.set_on_create_element("150", lambda elem: None)
    special.set_on_remove_element("key", lambda elem: None)
    assert special.on_create_element_key() == "150"
    assert special.on_remove_element_key() == "key"


def test_special_attribute_callbacks_are_called():
    seen = []
    special = SpecialAttributes()
    special.set_on_create_element("a", lambda elem: seen.append(("create", elem)))
    special.set_on_remove_element("b", lambda elem: seen.append(("remove", elem)))
    special.maybe_call_on_create_element("x")
    special.maybe_call_on_remove_element("y")
    assert seen == [("create", "x"), ("remove", "y")]


def test_special_attributes_equality_ignores_functions():
    first = SpecialAttributes()
    second = SpecialAttributes()
    first.set_on_create_element("70", lambda elem: None)
    second.set_on_create_element("70", lambda elem: 1)
    assert first == second
    second.set_on_create_element("99", lambda elem: None)
    assert not first == second


def test_inner_html_affects_equality():
    first = element("div")
    second = element("div")
    first.special_attributes.dangerous_inner_html = "hi"
    assert not first == second
    second.special_attributes.dangerous_inner_html = "hi"
    assert first == second


def test_element_equality_compares_event_names_only():
    assert element("div", onclick=lambda: 1) == element("div", onclick=lambda: 2)
    assert not element("div", onclick=lambda: 1) == element("div", oninput=lambda: 1)


def test_element_equality_compares_structure():
    assert element("div", element("span")) == element("div", element("span"))
    assert not element("div", element("span")) == element("div", element("em"))
    assert not element("div") == element("span")
    assert not element("div") == VText("div")


def test_children_can_be_appended():
    child = element("em")
    parent = element("div")
    parent.children.append(child)
    assert parent == element("div", element("em"))