"""
Arith transformer base class.

A transformer derives a new expression tree from an existing one.  It provides
one method per expression kind; ArithExpression.transform() calls the method
matching the node's own kind, so the transformer never needs to inspect node
types itself.

New transformations are added by subclassing ArithTransformer.  Expression
node classes are never changed to support a new transformation.
"""

from abc import ABC, abstractmethod

from arith.arith_ast import (
    ArithExpression, ArithNumber, ArithVariable, ArithBinaryOperation, ArithFunctionCall
)


class ArithTransformer(ABC):
    """
    Base class for tree-to-tree transformations.

    Implementations must not mutate the input tree and must not reuse any of
    its nodes in the output: every returned node is newly built.
    """

    def apply(self, expr: ArithExpression) -> ArithExpression:
        """
        Transform a whole tree, starting at its root.

        Subclasses that keep per-run state override this to reset it.

        Args:
            expr: Root of the input tree

        Returns:
            The newly built tree
        """
        return expr.transform(self)

    @abstractmethod
    def transform_number(self, number: ArithNumber) -> ArithExpression:
        """
        Transform a number node.

        Args:
            number: Input node

        Returns:
            New expression replacing the node
        """

    @abstractmethod
    def transform_variable(self, variable: ArithVariable) -> ArithExpression:
        """
        Transform a variable node.

        Args:
            variable: Input node

        Returns:
            New expression replacing the node
        """

    @abstractmethod
    def transform_binary_operation(self, binop: ArithBinaryOperation) -> ArithExpression:
        """
        Transform a binary operation node.

        Args:
            binop: Input node

        Returns:
            New expression replacing the node
        """

    @abstractmethod
    def transform_function_call(self, call: ArithFunctionCall) -> ArithExpression:
        """
        Transform a function call node.

        Args:
            call: Input node

        Returns:
            New expression replacing the node
        """
