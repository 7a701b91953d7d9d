import pytest

from parley.expression import Expression
from parley.script import (
    Edge,
    EdgeType,
    EventNode,
    GosubNode,
    Node,
    NodeType,
    Script,
    SetNode,
    TextNode,
)
from parley.value import RANDOM_ITEM_SELECT_VAR


def link(a, b, edge_type=EdgeType.CONTINUE, **kwargs):
    edge = Edge(b, edge_type, **kwargs)
    a.add_edge(edge)
    return edge


def test_next_node_by_edge_count():
    script = Script()
    a = Node(NodeType.SELECT)
    b = TextNode("NPC", "Hi")
    c = TextNode("NPC", "Bye")
    assert script.next_node(a) is None
    link(a, b)
    assert script.next_node(a) is b
    link(a, c)
    assert script.next_node(a) is None


def test_first_and_header_nodes():
    empty = Script()
    assert empty.first_node() is None
    assert empty.header_node() is None
    first = TextNode("NPC", "Hello")
    header = SetNode("x", Expression.parse("1"))
    script = Script(nodes=[first], header_nodes=[header])
    assert script.first_node() is first
    assert script.header_node() is header


def test_node_lookup():
    text = TextNode("NPC", "Hello", text_key="@abc@")
    gosub = GosubNode("sub", gosub_id="GS1")
    ret = Node(NodeType.RETURN)
    script = Script(nodes=[text, gosub, ret], labels={"sub": 2})
    assert script.node_by_label("sub") is ret
    assert script.node_by_label("missing") is None
    assert script.node_by_text_id("@abc@") is text
    assert script.node_by_text_id("nope") is None
    assert script.node_by_gosub_id("GS1") is gosub
    assert script.node_by_gosub_id("GS2") is None


def test_text_id_falls_back_to_text():
    node = TextNode("NPC", "Hello there")
    assert node.text_id() == "Hello there"
    edge = Edge(text="Pick me", text_key="@k@")
    assert edge.text_id() == "@k@"


def test_parameters():
    node = TextNode("NPC", "Hello {PlayerName}, you have {Count} coins")
    assert node.parameter_names() == ["PlayerName", "Count"]
    assert node.has_parameters()
    plain = Edge(text="No params")
    assert not plain.has_parameters()
    assert Edge(text="Take {Item}").parameter_names() == ["Item"]


def test_edge_lookup():
    node = Node(NodeType.CHOICE)
    edge = link(node, None, EdgeType.DECISION, text="a")
    assert node.edge(0) is edge
    assert node.edge(1) is None
    assert node.edge(-1) is None
    assert node.edge_count == 1


def test_is_random_select():
    select = Node(NodeType.SELECT)
    link(select, None, EdgeType.CONDITION,
         condition=Expression.parse("{" + RANDOM_ITEM_SELECT_VAR + "} == 0"))
    assert select.is_random_select()
    other = Node(NodeType.SELECT)
    link(other, None, EdgeType.CONDITION, condition=Expression.parse("{x} == 0"))
    assert not other.is_random_select()
    assert not Node(NodeType.SELECT).is_random_select()


def test_finish_import_marks_choice_after_set():
    text = TextNode("NPC", "Pick")
    setter = SetNode("x", Expression.parse("1"))
    choice = Node(NodeType.CHOICE)
    answer = TextNode("Player", "Yes")
    link(text, setter)
    link(setter, choice)
    link(choice, answer, EdgeType.DECISION, text="Yes")
    script = Script(nodes=[text, setter, choice, answer])
    script.finish_import()
    assert text.may_have_choices
    assert not answer.may_have_choices


def test_text_then_text_has_no_choice():
    first = TextNode("NPC", "One")
    second = TextNode("NPC", "Two")
    link(first, second)
    script = Script(nodes=[first, second])
    assert not script.does_any_path_after_lead_to_choice(first)


def test_select_any_path_leading_to_choice():
    text = TextNode("NPC", "Maybe")
    select = Node(NodeType.SELECT)
    choice = Node(NodeType.CHOICE)
    other = TextNode("NPC", "Other")
    link(text, select)
    link(select, other, EdgeType.CONDITION, condition=Expression.parse("{a}"))
    link(select, choice, EdgeType.CONDITION, condition=Expression.parse(""))
    script = Script(nodes=[text, select, other, choice])
    assert script.does_any_path_after_lead_to_choice(text)


def test_gosub_into_choice_and_through_event():
    text = TextNode("NPC", "Before")
    gosub = GosubNode("sub")
    ret = Node(NodeType.RETURN)
    event = EventNode("Bang", [Expression.parse("1")])
    choice = Node(NodeType.CHOICE)
    link(text, gosub)
    link(gosub, event)
    link(event, choice)
    script = Script(nodes=[text, gosub, event, choice, ret], labels={"sub": 4})
    assert script.does_any_path_after_lead_to_choice(text)
    script.finish_import()
    assert gosub.may_have_choices


def test_gosub_with_text_inside_stops_search():
    text = TextNode("NPC", "Before")
    gosub = GosubNode("sub")
    inner = TextNode("NPC", "Inside")
    choice = Node(NodeType.CHOICE)
    link(text, gosub)
    link(gosub, choice)
    script = Script(nodes=[text, gosub, choice, inner], labels={"sub": 3})
    assert not script.does_any_path_after_lead_to_choice(text)


def test_speaker_voices():
    script = Script(speakers=["NPC"])
    assert script.speaker_voice("NPC") is None
    voice = object()
    script.set_speaker_voice("NPC", voice)
    assert script.speaker_voice("NPC") is voice


@pytest.mark.parametrize("node_type", [NodeType.RETURN, NodeType.CHOICE])
def test_node_type_kept(node_type):
    assert Node(node_type, 7).node_type is node_type