"""Shared fixtures and utilities for Arith tests."""

from typing import List

import pytest

from arith import (
    ArithExpression, ArithNumber, ArithVariable, ArithBinaryOperation, ArithFunctionCall,
    ArithCopyTransformer, ArithConstantFolder
)


@pytest.fixture
def copier():
    """Create a fresh copy transformer for each test."""
    return ArithCopyTransformer()


@pytest.fixture
def folder():
    """Create a fresh constant folder for each test."""
    return ArithConstantFolder()


@pytest.fixture
def sample_tree():
    """Build abs(var * sqrt(32 - 16))."""
    minus = ArithBinaryOperation(ArithNumber(32.0), '-', ArithNumber(16.0))
    call_sqrt = ArithFunctionCall("sqrt", minus)
    mult = ArithBinaryOperation(ArithVariable("var"), '*', call_sqrt)
    return ArithFunctionCall("abs", mult)


class ArithTestHelpers:
    """Helper utilities for Arith testing."""

    @staticmethod
    def all_nodes(expr: ArithExpression) -> List[ArithExpression]:
        """Collect every node of a tree in pre-order."""
        nodes = [expr]
        if isinstance(expr, ArithBinaryOperation):
            nodes.extend(ArithTestHelpers.all_nodes(expr.left))
            nodes.extend(ArithTestHelpers.all_nodes(expr.right))

        elif isinstance(expr, ArithFunctionCall):
            nodes.extend(ArithTestHelpers.all_nodes(expr.argument))

        return nodes

    @staticmethod
    def assert_no_shared_nodes(first: ArithExpression, second: ArithExpression) -> None:
        """Assert that two trees have no node objects in common."""
        first_ids = {id(node) for node in ArithTestHelpers.all_nodes(first)}
        second_ids = {id(node) for node in ArithTestHelpers.all_nodes(second)}
        shared = first_ids & second_ids
        assert not shared, f"Trees share {len(shared)} node(s)"

    @staticmethod
    def contains_variable(expr: ArithExpression) -> bool:
        """Check whether any node of the tree is a variable."""
        return any(isinstance(node, ArithVariable) for node in ArithTestHelpers.all_nodes(expr))

    @staticmethod
    def build_nested_sum(depth: int, leaf: ArithExpression | None = None) -> ArithExpression:
        """Build 1+(1+(1+...leaf)) nested to the given depth."""
        expr: ArithExpression = leaf if leaf is not None else ArithNumber(1.0)
        for _ in range(depth):
            expr = ArithBinaryOperation(ArithNumber(1.0), '+', expr)

        return expr


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return ArithTestHelpers
