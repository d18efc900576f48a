"""
Arith Constant Folder - collapses constant sub-expressions into numbers.

The folder works bottom-up.  Children are transformed first; a binary
operation or function call whose transformed children are all numbers is
replaced by a single number holding its computed value.  Anything involving a
variable keeps its structure, although constant parts beneath it are still
folded.

Examples:
    2+3              → 5.000000
    sqrt(32-16)      → 4.000000
    var*sqrt(32-16)  → var*4.000000
    abs(x)           → abs(x)

Folding preserves the value of evaluate() and is idempotent: folding an
already folded tree produces an equal tree.
"""

import logging

from arith.arith_ast import (
    ArithExpression, ArithNumber, ArithVariable, ArithBinaryOperation, ArithFunctionCall
)
from arith.arith_transformer import ArithTransformer


class ArithConstantFolder(ArithTransformer):
    """
    Fold constant expressions into numbers.

    Like every transformer this builds a new tree and never mutates its input.

    Usage::

        folder = ArithConstantFolder()
        folded = folder.fold(expr)
        print(folder.folds)
    """

    def __init__(self) -> None:
        self._folds = 0
        self._logger = logging.getLogger("ArithConstantFolder")

    @property
    def folds(self) -> int:
        """Number of nodes collapsed by the most recent fold() or apply() call."""
        return self._folds

    def fold(self, expr: ArithExpression) -> ArithExpression:
        """
        Return a constant-folded copy of expr.

        Args:
            expr: Root of the tree to fold

        Returns:
            The folded tree
        """
        self._folds = 0
        folded = expr.transform(self)
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug("Folded %d node(s): %s -> %s", self._folds, expr.print(), folded.print())

        return folded

    def apply(self, expr: ArithExpression) -> ArithExpression:
        return self.fold(expr)

    def transform_number(self, number: ArithNumber) -> ArithExpression:
        # Numbers are already constant, so just return a copy
        return ArithNumber(number.value)

    def transform_variable(self, variable: ArithVariable) -> ArithExpression:
        # Variables have no fixed value, so they never fold
        return ArithVariable(variable.name)

    def transform_binary_operation(self, binop: ArithBinaryOperation) -> ArithExpression:
        left = binop.left.transform(self)
        right = binop.right.transform(self)

        if isinstance(left, ArithNumber) and isinstance(right, ArithNumber):
            result = ArithNumber(binop.operator.apply(left.value, right.value))
            self._record_fold(binop, result)
            return result

        return ArithBinaryOperation(left, binop.operator, right)

    def transform_function_call(self, call: ArithFunctionCall) -> ArithExpression:
        argument = call.argument.transform(self)
        folded_call = ArithFunctionCall(call.name, argument)

        if isinstance(argument, ArithNumber):
            result = ArithNumber(folded_call.evaluate())
            self._record_fold(call, result)
            return result

        return folded_call

    def _record_fold(self, original: ArithExpression, result: ArithNumber) -> None:
        """Count a collapsed node and log it."""
        self._folds += 1
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug("Folded %s %s to %s", original.type_name(), original.print(), result.print())
