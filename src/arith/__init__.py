"""Arith package: arithmetic expression trees with pluggable transformations."""

# Exceptions
from arith.arith_error import ArithError, ArithConstructionError, ArithInvariantError

# Expression types
from arith.arith_ast import (
    ArithExpression, ArithNumber, ArithVariable, ArithBinaryOperation, ArithFunctionCall,
    ArithOperator, ARITH_FUNCTIONS
)

# Transformations
from arith.arith_transformer import ArithTransformer
from arith.arith_copy_transformer import ArithCopyTransformer
from arith.arith_constant_folder import ArithConstantFolder
from arith.arith_pipeline import ArithPipeline

__all__ = [
    # Exceptions
    "ArithError", "ArithConstructionError", "ArithInvariantError",

    # Expression types
    "ArithExpression", "ArithNumber", "ArithVariable", "ArithBinaryOperation", "ArithFunctionCall",
    "ArithOperator", "ARITH_FUNCTIONS",

    # Transformations
    "ArithTransformer", "ArithCopyTransformer", "ArithConstantFolder", "ArithPipeline",
]
