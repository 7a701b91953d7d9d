# parley

`parley` provides the building blocks for branching game dialogue. It has typed values, a small expression language for conditions and assignments, and a script graph of speaker lines, choices, selects, variable assignments, events and gosubs. It also has typed variable storage, participants that react to dialogue notifications, and a saveable dialogue state.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `parley.value`: `Value` holds text, an int, a float, a boolean, a `Gender`, a name or a variable reference. It supports `+ - * / %`, comparisons, `logical_and`, `logical_or`, `logical_not`, `as_bool`, and `to_dict` / `from_dict`. An unresolved variable or an empty value counts as false. Division or modulo by zero gives an empty value.
- `parley.expression`: `Expression.parse(text)` reads an expression into postfix form. It raises `ExpressionError` for unknown tokens, mismatched parentheses or malformed expressions. An empty expression evaluates to true. `parse_operator` and `parse_operand` handle single tokens.
- `parley.names`: `is_global_variable(name)` checks for a `global.` prefix, ignoring case. `global_variable_name(name)` strips that prefix.
- `parley.textformat`: `format_argument_names(text)` lists the `{Name}` placeholders in a line. `format_text(text, args)` fills them in and leaves unknown placeholders as they are. A backtick escapes the character after it.
- `parley.script`: `Script`, `Node`, `TextNode`, `SetNode`, `EventNode`, `GosubNode`, `Edge`, `NodeType` and `EdgeType`.
- `parley.variables`: `VariableStore` has typed setters and getters. A getter returns the type's default for a missing variable, and raises `TypeError` for one of an incompatible type.
- `parley.participant`: `Participant` and `sort_participants`.
- `parley.state`: `DialogueState`, a saved dialogue position that can be stored as a plain dict.
- `parley.editor_settings`: `EditorSettings`, `AssetLocation` and `output_dir`. They decide where generated voice assets go.

## Expressions

```python
from parley.expression import Expression
from parley.value import Value

expr = Expression.parse("{Gold} >= 10 and not {MetBefore}")
expr.variable_names                           # ['Gold', 'MetBefore']
expr.evaluate_boolean({"Gold": Value(12)}, {})  # True: MetBefore is unset, so false

Expression.parse("{global.Rep} > 5").evaluate_boolean({}, {"Rep": Value(7)})  # True
```

Variables named `global.Something` are looked up as `Something` in the global mapping first. If they are not found there, they are looked up by their full name in the local mapping.

## Scripts

```python
from parley.script import Edge, EdgeType, Node, NodeType, Script, TextNode

line = TextNode("Vendor", "Hello, {Name}!", source_line_no=1)
choice = Node(NodeType.CHOICE, 2)
bye = TextNode("Player", "Goodbye.", source_line_no=3)
line.add_edge(Edge(choice))
choice.add_edge(Edge(bye, EdgeType.DECISION, 2, text="Leave"))

script = Script("shop", nodes=[line, choice, bye], labels={"start": 0})
script.finish_import()
line.may_have_choices          # True
script.node_by_label("start")  # line
line.parameter_names()         # ['Name']
```

## Variables, participants and state

```python
from parley.participant import Participant, sort_participants
from parley.state import DialogueState
from parley.textformat import format_text
from parley.value import Value
from parley.variables import VariableStore

store = VariableStore()
store.set_int("Gold", 3)
store.get_float("Gold")   # 3.0

format_text("Hello, {Name}!", {"Name": "Ada"})   # 'Hello, Ada!'

seen = []
listener = Participant(priority=5, handlers={"on_event": lambda d, name, args: seen.append(name)})
sort_participants([listener, Participant()])   # the priority-0 participant comes first

state = DialogueState(text_node_id="Hello", variables={"Gold": Value(3)})
DialogueState.from_dict(state.to_dict()) == state   # True
```

## What this package does not do

The package does not include a dialogue runner. Nothing here walks a `Script` from line to line, offers choices, runs set and event nodes as the dialogue moves on, or notifies participants on its own. That work is left to your code, which can use the graph, expressions and participant hooks above. There is also no shared store of global variables. Callers pass their own global mapping to `Expression.evaluate`. There is no command-line tool and no script file parser, so `Script` graphs are built in code.