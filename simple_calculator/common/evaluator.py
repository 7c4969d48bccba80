"""Evaluate a single binary arithmetic operation."""
from collections.abc import Callable as ABCCallable
import operator
import sys
from typing import Callable, Dict, Optional, TextIO

from simple_calculator.common.logger import logger
from simple_calculator.common.operations import Operator


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn: ABCCallable[[float, float], float] = Callable[[float, float], float]

# Mapping of operator symbols to their arithmetic function
OPERATORS: Dict[str, OperatorFn] = {
    Operator.ADD.value: operator.add,
    Operator.SUBTRACT.value: operator.sub,
    Operator.MULTIPLY.value: operator.mul,
    Operator.DIVIDE.value: operator.truediv,
}

DIVISION_BY_ZERO_WARNING: str = "Warning: Division by zero, returning 0"


class UnexpectedOperatorError(RuntimeError):
    """Raised when a symbol outside the operator set reaches the evaluator."""


class Evaluator:
    """
    Apply one of the four arithmetic operators to two operands.

    Rules:
        - "+", "-" and "*" follow IEEE-754 double semantics (overflow gives inf, NaN propagates)
        - "/" by an exact zero is not an error: a warning is written and 0.0 is returned
        - Any other symbol is a caller defect and raises UnexpectedOperatorError
    """

    @staticmethod
    def _resolve(symbol: str) -> OperatorFn:
        """
        Look up the arithmetic function for an operator symbol.

        :param str symbol: Operator symbol

        :return: Function taking two floats and returning a float
        :rtype: OperatorFn
        :raises UnexpectedOperatorError: If the symbol is not a known operator
        """
        try:
            return OPERATORS[symbol]
        except KeyError:
            raise UnexpectedOperatorError(f"Unexpected operator: {symbol!r}") from None

    @staticmethod
    def evaluate(left: float, right: float, symbol: str, out: Optional[TextIO] = None) -> float:
        """
        Evaluate ``left <symbol> right``.

        :param float left: First operand
        :param float right: Second operand
        :param str symbol: One of "+", "-", "*", "/"
        :param TextIO out: Stream receiving the division-by-zero warning, defaults to stdout

        :return: Computed result as float
        :rtype: float
        :raises UnexpectedOperatorError: If the symbol is not a known operator
        """
        fn: OperatorFn = Evaluator._resolve(symbol)

        # -0.0 compares equal to 0.0 and is treated the same way
        if symbol == Operator.DIVIDE.value and right == 0.0:
            logger.warning(f"➗⚠️ Division of {left} by zero, returning 0.0")
            stream: TextIO = out if out is not None else sys.stdout
            stream.write(DIVISION_BY_ZERO_WARNING + "\n")
            return 0.0

        result: float = fn(float(left), float(right))
        logger.debug(f"🧮 {left} {symbol} {right} = {result}")
        return result
