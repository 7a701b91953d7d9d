"""Dialogue script graph: nodes, edges and the script that links them."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Iterable

from .expression import Expression
from .textformat import format_argument_names

log = logging.getLogger(__name__)


class NodeType(Enum):
    """The role a node plays in a script."""

    TEXT = "Text"
    CHOICE = "Choice"
    SELECT = "Select"
    SET_VARIABLE = "SetVariable"
    EVENT = "Event"
    GOSUB = "Gosub"
    RETURN = "Return"


class EdgeType(Enum):
    """How an edge leads from one node to the next."""

    CONTINUE = "Continue"
    DECISION = "Decision"
    CONDITION = "Condition"
    CHAINED = "Chained"


class Edge:
    """A link between nodes, optionally carrying choice text or a condition."""

    def __init__(
        self,
        target_node: "Node | None" = None,
        type: EdgeType = EdgeType.CONTINUE,
        source_line_no: int = 0,
        text: str = "",
        text_key: str = "",
        condition: Expression | None = None,
    ) -> None:
        self.target_node = target_node
        self.type = type
        self.source_line_no = source_line_no
        self.text = text
        self.text_key = text_key
        self.condition = condition if condition is not None else Expression()

    def text_id(self) -> str:
        """Identifier of the choice text; the text itself when no key was given."""
        return self.text_key or self.text

    def parameter_names(self) -> list[str]:
        return format_argument_names(self.text)

    def has_parameters(self) -> bool:
        return bool(self.parameter_names())

    def __repr__(self) -> str:
        return f"Edge({self.type.name}, line={self.source_line_no}, text={self.text!r})"


class Node:
    """A node in the script graph."""

    def __init__(self, node_type: NodeType, source_line_no: int = 0) -> None:
        self.node_type = node_type
        self.source_line_no = source_line_no
        self.edges: list[Edge] = []

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def add_edge(self, edge: Edge) -> None:
        self.edges.append(edge)

    def edge(self, index: int) -> Edge | None:
        """The edge at index, or None if there is none."""
        if 0 <= index < len(self.edges):
            return self.edges[index]
        return None

    def is_random_select(self) -> bool:
        return (
            self.node_type is NodeType.SELECT
            and bool(self.edges)
            and self.edges[0].condition.is_random_condition()
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.node_type.name}, line={self.source_line_no})"


class TextNode(Node):
    """A line spoken by a speaker."""

    def __init__(
        self,
        speaker_id: str,
        text: str,
        source_line_no: int = 0,
        text_key: str = "",
        wave: Any = None,
    ) -> None:
        super().__init__(NodeType.TEXT, source_line_no)
        self.speaker_id = speaker_id
        self.text = text
        self.text_key = text_key
        self.wave = wave
        self.may_have_choices = False

    def text_id(self) -> str:
        """Identifier of the line; the text itself when no key was given."""
        return self.text_key or self.text

    def parameter_names(self) -> list[str]:
        return format_argument_names(self.text)

    def has_parameters(self) -> bool:
        return bool(self.parameter_names())


class SetNode(Node):
    """Assigns the result of an expression to a variable."""

    def __init__(self, identifier: str, expression: Expression, source_line_no: int = 0) -> None:
        super().__init__(NodeType.SET_VARIABLE, source_line_no)
        self.identifier = identifier
        self.expression = expression


class EventNode(Node):
    """Raises a named event with evaluated arguments."""

    def __init__(self, event_name: str, args: Iterable[Expression] = (), source_line_no: int = 0) -> None:
        super().__init__(NodeType.EVENT, source_line_no)
        self.event_name = event_name
        self.args = list(args)


class GosubNode(Node):
    """Jumps to a label, returning here when a return node is reached."""

    def __init__(self, label_name: str, gosub_id: str = "", source_line_no: int = 0) -> None:
        super().__init__(NodeType.GOSUB, source_line_no)
        self.label_name = label_name
        self.gosub_id = gosub_id
        self.may_have_choices = False


_CHOICE_FOUND = 1
_NOT_FOUND_BEFORE_END = 0
_NOT_FOUND_BEFORE_TEXT = -1


class Script:
    """A compiled dialogue script: body and header nodes, labels and speakers."""

    def __init__(
        self,
        name: str = "",
        nodes: Iterable[Node] = (),
        header_nodes: Iterable[Node] = (),
        labels: dict[str, int] | None = None,
        header_labels: dict[str, int] | None = None,
        speakers: Iterable[str] = (),
    ) -> None:
        self.name = name
        self.nodes: list[Node] = list(nodes)
        self.header_nodes: list[Node] = list(header_nodes)
        self.labels: dict[str, int] = dict(labels or {})
        self.header_labels: dict[str, int] = dict(header_labels or {})
        self.speakers: list[str] = list(speakers)
        self.speaker_voices: dict[str, Any] = {}

    def next_node(self, node: Node) -> Node | None:
        """The single follow-on node; None at the end or when the node branches."""
        if node.edge_count == 0:
            return None
        if node.edge_count == 1:
            return node.edges[0].target_node
        log.error("Called next_node on a node with more than one edge")
        return None

    def header_node(self) -> Node | None:
        return self.header_nodes[0] if self.header_nodes else None

    def first_node(self) -> Node | None:
        return self.nodes[0] if self.nodes else None

    def node_by_label(self, label: str) -> Node | None:
        index = self.labels.get(label)
        return None if index is None else self.nodes[index]

    def node_by_text_id(self, text_id: str) -> TextNode | None:
        return next(
            (n for n in self.nodes if isinstance(n, TextNode) and n.text_id() == text_id),
            None,
        )

    def node_by_gosub_id(self, gosub_id: str) -> GosubNode | None:
        return next(
            (n for n in self.nodes if isinstance(n, GosubNode) and n.gosub_id == gosub_id),
            None,
        )

    def does_any_path_after_lead_to_choice(self, node: Node) -> bool:
        """Whether any path after node reaches a choice before another text line."""
        return self._look_for_choice(self.next_node(node)) == _CHOICE_FOUND

    def _look_for_choice(self, node: Node | None) -> int:
        while node is not None:
            kind = node.node_type
            if kind is NodeType.TEXT:
                return _NOT_FOUND_BEFORE_TEXT
            if kind is NodeType.CHOICE:
                return _CHOICE_FOUND
            if kind is NodeType.SELECT:
                worst = _NOT_FOUND_BEFORE_END
                for edge in node.edges:
                    if edge.target_node is not None:
                        result = self._look_for_choice(edge.target_node)
                        if result == _CHOICE_FOUND:
                            return _CHOICE_FOUND
                        worst = min(worst, result)
                return worst
            if kind in (NodeType.EVENT, NodeType.SET_VARIABLE):
                node = self.next_node(node)
            elif kind is NodeType.GOSUB:
                if isinstance(node, GosubNode):
                    result = self._look_for_choice(self.node_by_label(node.label_name))
                    if result != _NOT_FOUND_BEFORE_END:
                        return result
                node = self.next_node(node)
            else:
                return _NOT_FOUND_BEFORE_END
        return _NOT_FOUND_BEFORE_END

    def finish_import(self) -> None:
        """Mark text and gosub nodes that may be followed by choices."""
        for node in self.nodes:
            if isinstance(node, (TextNode, GosubNode)) and self.does_any_path_after_lead_to_choice(node):
                node.may_have_choices = True

    def speaker_voice(self, speaker_id: str) -> Any:
        return self.speaker_voices.get(speaker_id)

    def set_speaker_voice(self, speaker_id: str, voice: Any) -> None:
        self.speaker_voices[speaker_id] = voice