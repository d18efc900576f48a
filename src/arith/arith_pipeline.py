"""Arith Pipeline - runs a sequence of transformers over an expression tree.

The pipeline always starts with a deep copy, so its result never shares nodes
with the input even when no optimization passes are configured.
"""

import logging
from typing import List

from arith.arith_ast import ArithExpression
from arith.arith_constant_folder import ArithConstantFolder
from arith.arith_copy_transformer import ArithCopyTransformer
from arith.arith_error import ArithConstructionError
from arith.arith_transformer import ArithTransformer


class ArithPipeline:
    """
    Transformation pass manager.
    """

    def __init__(self, optimize: bool = True, passes: List[ArithTransformer] | None = None):
        """
        Initialize the pipeline with its passes.

        Args:
            optimize: Enable optimization passes; when False only the copy pass runs
            passes: Optional explicit optimization passes, replacing the default
                constant folder (ignored when optimize is False)
        """
        self._optimize = optimize
        self._logger = logging.getLogger("ArithPipeline")

        self._passes: List[ArithTransformer] = [ArithCopyTransformer()]
        if optimize:
            self._passes.extend(passes if passes is not None else [ArithConstantFolder()])

    @property
    def optimize(self) -> bool:
        """Whether optimization passes were configured."""
        return self._optimize

    @property
    def passes(self) -> List[ArithTransformer]:
        """The configured passes, in run order."""
        return list(self._passes)

    def run(self, expr: ArithExpression) -> ArithExpression:
        """
        Run every pass over an expression tree.

        Args:
            expr: Root of the input tree (never modified)

        Returns:
            The tree produced by the last pass
        """
        if not isinstance(expr, ArithExpression):
            raise ArithConstructionError(
                message="Pipeline input must be an expression",
                received=f"{type(expr).__name__} {expr!r}",
                expected="an ArithExpression"
            )

        for transform_pass in self._passes:
            result = transform_pass.apply(expr)
            if self._logger.isEnabledFor(logging.DEBUG):
                self._logger.debug(
                    "%s: %s -> %s", transform_pass.__class__.__name__, expr.print(), result.print()
                )

            expr = result

        return expr
