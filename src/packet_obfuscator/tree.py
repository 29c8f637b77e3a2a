"""Value tree: a tagged variant for parsed JSON documents.

    tree = build_tree(json.loads(raw))
    SomeVisitor().visit(tree)        # may rewrite StringNode.value in place
    json.dumps(tree.to_python())

Each node class carries a ``kind`` tag and NodeVisitor dispatches on it to
``visit_<kind>``, so walkers never inspect raw Python types.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, ClassVar


class Node:
    """Base class for value tree nodes."""
    kind: ClassVar[str] = ""

    def to_python(self) -> Any:
        raise NotImplementedError


@dataclass(slots=True)
class NullNode(Node):
    kind: ClassVar[str] = "null"

    def to_python(self) -> None:
        return None


@dataclass(slots=True)
class BoolNode(Node):
    value: bool
    kind: ClassVar[str] = "bool"

    def to_python(self) -> bool:
        return self.value


@dataclass(slots=True)
class NumberNode(Node):
    value: int | float
    kind: ClassVar[str] = "number"

    def to_python(self) -> int | float:
        return self.value


@dataclass(slots=True)
class StringNode(Node):
    value: str
    kind: ClassVar[str] = "string"

    def to_python(self) -> str:
        return self.value


@dataclass(slots=True)
class ObjectNode(Node):
    members: dict[str, Node] = field(default_factory=dict)
    kind: ClassVar[str] = "object"

    def to_python(self) -> dict[str, Any]:
        return {key: child.to_python() for key, child in self.members.items()}


@dataclass(slots=True)
class ArrayNode(Node):
    items: list[Node] = field(default_factory=list)
    kind: ClassVar[str] = "array"

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.items]


def build_tree(data: Any) -> Node:
    """Convert decoded JSON (dict/list/str/int/float/bool/None) into nodes."""
    # bool is a subclass of int, so it has to be checked first
    if data is None:
        return NullNode()
    if isinstance(data, bool):
        return BoolNode(data)
    if isinstance(data, (int, float)):
        return NumberNode(data)
    if isinstance(data, str):
        return StringNode(data)
    if isinstance(data, dict):
        return ObjectNode({str(k): build_tree(v) for k, v in data.items()})
    if isinstance(data, (list, tuple)):
        return ArrayNode([build_tree(v) for v in data])
    raise TypeError(f"unsupported value in tree: {type(data).__name__}")


class NodeVisitor:
    """Walks a value tree, calling ``visit_<kind>`` for every node.

    The default handlers descend into objects and arrays and ignore leaves;
    subclasses override the kinds they care about.
    """

    def visit(self, node: Node) -> None:
        getattr(self, f"visit_{node.kind}")(node)

    def visit_object(self, node: ObjectNode) -> None:
        for child in node.members.values():
            self.visit(child)

    def visit_array(self, node: ArrayNode) -> None:
        for item in node.items:
            self.visit(item)

    def visit_string(self, node: StringNode) -> None:
        pass

    def visit_number(self, node: NumberNode) -> None:
        pass

    def visit_bool(self, node: BoolNode) -> None:
        pass

    def visit_null(self, node: NullNode) -> None:
        pass
