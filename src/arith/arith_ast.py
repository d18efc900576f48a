"""Arith expression node hierarchy.

This module defines the four expression kinds that make up an arithmetic tree:
numbers, variables, binary operations and function calls.  The set of kinds is
closed; new behaviour over trees is added by writing an ArithTransformer, not
by adding node types.

All nodes are immutable.  Every node validates itself on construction, so a
tree that exists is always well formed:
- binary operations always have two operands and one of the four operators
- function calls always have an argument and name one of ARITH_FUNCTIONS
- variables always have a non-empty name

Evaluation follows IEEE-754 float semantics: division by zero and the square
root of a negative number produce infinities or NaN rather than exceptions.
Variables have no environment to look up, so they evaluate to 0.0.
"""

import math
import operator
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping

from arith.arith_error import ArithConstructionError, ArithInvariantError

if TYPE_CHECKING:
    from arith.arith_transformer import ArithTransformer


# Value every variable evaluates to
VARIABLE_PLACEHOLDER = 0.0


def _divide(left: float, right: float) -> float:
    """Divide with IEEE-754 results for a zero divisor."""
    try:
        return left / right

    except ZeroDivisionError:
        if left == 0.0 or math.isnan(left):
            return math.nan

        return math.copysign(math.inf, left) * math.copysign(1.0, right)


def _sqrt(value: float) -> float:
    """Square root that yields NaN for negative input."""
    if value < 0.0:
        return math.nan

    return math.sqrt(value)


class ArithOperator(Enum):
    """Binary operators, valued by their printed symbol."""
    PLUS = '+'
    MINUS = '-'
    DIV = '/'
    MUL = '*'

    @property
    def symbol(self) -> str:
        """The single character used when printing this operator."""
        return self.value

    def apply(self, left: float, right: float) -> float:
        """
        Combine two operand values.

        Args:
            left: Value of the left operand
            right: Value of the right operand

        Returns:
            The arithmetic result
        """
        return _OPERATOR_JUMP_TABLE[self](left, right)


_OPERATOR_JUMP_TABLE: Dict[ArithOperator, Callable[[float, float], float]] = {
    ArithOperator.PLUS: operator.add,
    ArithOperator.MINUS: operator.sub,
    ArithOperator.DIV: _divide,
    ArithOperator.MUL: operator.mul,
}


# Functions that may appear in a function call, by name (read-only)
ARITH_FUNCTIONS: Mapping[str, Callable[[float], float]] = MappingProxyType({
    'sqrt': _sqrt,
    'abs': math.fabs,
})


def _describe_received(value: Any) -> str:
    """Short description of a rejected constructor argument."""
    if value is None:
        return "nothing (None)"

    return f"{type(value).__name__} {value!r}"


@dataclass(frozen=True)
class ArithExpression(ABC):
    """
    Abstract base class for all Arith expression nodes.

    Every concrete node can be evaluated to a float, printed as infix text and
    transformed into a new tree by an ArithTransformer.
    """

    @abstractmethod
    def evaluate(self) -> float:
        """Compute the numeric value of this expression."""

    @abstractmethod
    def print(self) -> str:
        """Render this expression as precedence-unaware infix text."""

    @abstractmethod
    def transform(self, transformer: 'ArithTransformer') -> 'ArithExpression':
        """
        Build a new tree from this node using a transformer.

        The node calls the one transformer method matching its own kind and
        returns whatever that method produces.

        Args:
            transformer: The transformation to apply

        Returns:
            A newly built expression tree
        """

    @abstractmethod
    def type_name(self) -> str:
        """Return the node kind name for error messages."""

    def describe(self) -> str:
        """Describe the expression."""
        return self.print()


@dataclass(frozen=True)
class ArithNumber(ArithExpression):
    """A floating-point constant."""
    value: float

    def __post_init__(self) -> None:
        """Validate the value and store it as a float."""
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise ArithConstructionError(
                message="Number value must be a real number",
                received=_describe_received(self.value),
                expected="int or float",
                example="ArithNumber(2.5)"
            )

        try:
            value = float(self.value)

        except OverflowError as e:
            raise ArithConstructionError(
                message="Number value is too large for a float",
                received=f"{type(self.value).__name__} of {self.value.bit_length()} bits",
                expected="a value within the float range"
            ) from e

        # Use object.__setattr__ because dataclass is frozen
        object.__setattr__(self, 'value', value)

    def evaluate(self) -> float:
        return self.value

    def print(self) -> str:
        return f"{self.value:f}"

    def transform(self, transformer: 'ArithTransformer') -> ArithExpression:
        return transformer.transform_number(self)

    def type_name(self) -> str:
        return "number"


@dataclass(frozen=True)
class ArithVariable(ArithExpression):
    """A named variable.  There is no environment, so its value is always 0.0."""
    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ArithConstructionError(
                message="Variable name must be a non-empty string",
                received=_describe_received(self.name),
                example='ArithVariable("x")'
            )

    def evaluate(self) -> float:
        return VARIABLE_PLACEHOLDER

    def print(self) -> str:
        return self.name

    def transform(self, transformer: 'ArithTransformer') -> ArithExpression:
        return transformer.transform_variable(self)

    def type_name(self) -> str:
        return "variable"


@dataclass(frozen=True)
class ArithBinaryOperation(ArithExpression):
    """
    A binary arithmetic operation: left <operator> right.

    The operator may be given as an ArithOperator or as its symbol ('+', '-',
    '/', '*'); it is always stored as an ArithOperator.
    """
    left: ArithExpression
    operator: ArithOperator
    right: ArithExpression

    def __post_init__(self) -> None:
        """Validate operands and normalize the operator."""
        for side, operand in (("left", self.left), ("right", self.right)):
            if not isinstance(operand, ArithExpression):
                raise ArithConstructionError(
                    message=f"Binary operation requires a {side} operand",
                    received=_describe_received(operand),
                    expected="an ArithExpression",
                    example="ArithBinaryOperation(ArithNumber(2), '+', ArithNumber(3))"
                )

        try:
            op = ArithOperator(self.operator)

        except (ValueError, TypeError) as e:
            valid = ", ".join(f"'{o.symbol}'" for o in ArithOperator)
            raise ArithConstructionError(
                message="Unknown binary operator",
                received=_describe_received(self.operator),
                expected=f"one of {valid}"
            ) from e

        object.__setattr__(self, 'operator', op)

    def evaluate(self) -> float:
        left = self.left.evaluate()
        right = self.right.evaluate()

        # Unreachable for nodes built through the constructor
        if not isinstance(self.operator, ArithOperator):
            raise ArithInvariantError(
                message="Binary operation holds an unknown operator",
                received=_describe_received(self.operator)
            )

        return self.operator.apply(left, right)

    def print(self) -> str:
        return self.left.print() + self.operator.symbol + self.right.print()

    def transform(self, transformer: 'ArithTransformer') -> ArithExpression:
        return transformer.transform_binary_operation(self)

    def type_name(self) -> str:
        return "binary-operation"


@dataclass(frozen=True)
class ArithFunctionCall(ArithExpression):
    """A call to one of the built-in functions in ARITH_FUNCTIONS."""
    name: str
    argument: ArithExpression

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or self.name not in ARITH_FUNCTIONS:
            raise ArithConstructionError(
                message="Unsupported function",
                received=_describe_received(self.name),
                expected="one of " + ", ".join(f"'{name}'" for name in ARITH_FUNCTIONS),
                example='ArithFunctionCall("sqrt", ArithNumber(16))'
            )

        if not isinstance(self.argument, ArithExpression):
            raise ArithConstructionError(
                message=f"Function call '{self.name}' requires an argument",
                received=_describe_received(self.argument),
                expected="an ArithExpression"
            )

    def evaluate(self) -> float:
        function = ARITH_FUNCTIONS.get(self.name)
        if function is None:
            raise ArithInvariantError(
                message=f"No implementation for function '{self.name}'",
                context="Function names are validated when a function call is constructed"
            )

        return function(self.argument.evaluate())

    def print(self) -> str:
        return f"{self.name}({self.argument.print()})"

    def transform(self, transformer: 'ArithTransformer') -> ArithExpression:
        return transformer.transform_function_call(self)

    def type_name(self) -> str:
        return "function-call"
