"""Unit tests for the Python front-end's tree queries."""

import ast

import pytest

from astmeter.core.models import NodeKind
from astmeter.languages.python import PythonTree


def tree_for(source: str) -> PythonTree:
    return PythonTree(ast.parse(source))


def first_stmt(tree: PythonTree) -> ast.AST:
    return next(iter(tree.children(tree.root)))


class TestPythonKinds:
    """Tests for mapping Python nodes to metric categories."""

    @pytest.mark.parametrize(
        ("source", "kind"),
        [
            ("if x:\n    pass\n", NodeKind.CONDITIONAL),
            ("for i in x:\n    pass\n", NodeKind.LOOP),
            ("while x:\n    pass\n", NodeKind.LOOP),
            ("x = 1\n", NodeKind.VARIABLE_DECL),
            ("x: int = 1\n", NodeKind.VARIABLE_DECL),
            ("x += 1\n", NodeKind.OTHER),
            ("def f():\n    pass\n", NodeKind.OTHER),
        ],
    )
    def test_statement_kinds(self, source: str, kind: NodeKind) -> None:
        tree = tree_for(source)
        assert tree.kind(first_stmt(tree)) is kind

    def test_ternary(self) -> None:
        tree = tree_for("y = a if b else c\n")
        value = tree.root.body[0].value
        assert tree.kind(value) is NodeKind.TERNARY

    def test_match_cases(self) -> None:
        tree = tree_for("match x:\n    case 1:\n        pass\n    case _:\n        pass\n")
        match = first_stmt(tree)
        kinds = [tree.kind(c) for c in tree.children(match)]
        assert kinds.count(NodeKind.CASE) == 2


class TestPythonLabels:
    """Tests for node labels."""

    def test_module_label(self) -> None:
        tree = tree_for("")
        assert tree.label(tree.root) == "Module"

    def test_named_nodes(self) -> None:
        tree = tree_for("def main():\n    pass\n")
        assert tree.label(first_stmt(tree)) == "FunctionDef: main"

    def test_constant_is_truncated(self) -> None:
        tree = tree_for("'" + "x" * 50 + "'\n")
        constant = tree.root.body[0].value
        label = tree.label(constant)
        assert label.startswith("Constant: 'xxx")
        assert label.endswith("...")
        assert len(label) == len("Constant: ") + 20

    def test_plain_node_has_class_name(self) -> None:
        tree = tree_for("pass\n")
        assert tree.label(first_stmt(tree)) == "Pass"


class TestPythonChildren:
    """Tests for child enumeration."""

    def test_expression_context_is_skipped(self) -> None:
        tree = tree_for("x = y\n")
        assign = first_stmt(tree)
        target, value = list(tree.children(assign))

        assert isinstance(target, ast.Name)
        assert list(tree.children(target)) == []
        assert list(tree.children(value)) == []

    def test_children_in_source_order(self) -> None:
        tree = tree_for("a = 1\nb = 2\nc = 3\n")
        labels = [tree.label(c) for c in tree.children(tree.root)]
        assert labels == ["Assign", "Assign", "Assign"]
