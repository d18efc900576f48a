"""Arith copy transformer - builds a deep structural clone of a tree."""

from arith.arith_ast import (
    ArithExpression, ArithNumber, ArithVariable, ArithBinaryOperation, ArithFunctionCall
)
from arith.arith_transformer import ArithTransformer


class ArithCopyTransformer(ArithTransformer):
    """
    Identity transformation.

    The result compares equal to the input and prints identically, but shares
    no node objects with it.

    Usage::

        clone = expr.transform(ArithCopyTransformer())
    """

    def transform_number(self, number: ArithNumber) -> ArithExpression:
        return ArithNumber(number.value)

    def transform_variable(self, variable: ArithVariable) -> ArithExpression:
        return ArithVariable(variable.name)

    def transform_binary_operation(self, binop: ArithBinaryOperation) -> ArithExpression:
        return ArithBinaryOperation(
            binop.left.transform(self),
            binop.operator,
            binop.right.transform(self)
        )

    def transform_function_call(self, call: ArithFunctionCall) -> ArithExpression:
        return ArithFunctionCall(call.name, call.argument.transform(self))
