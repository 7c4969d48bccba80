"""Pydantic models for calculator operators and calculation results."""
from enum import Enum
from typing import FrozenSet

from pydantic import BaseModel, ConfigDict, Field


class Operator(str, Enum):
    """Closed set of binary operators understood by the calculator."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @classmethod
    def symbols(cls) -> FrozenSet[str]:
        """Return the external symbols of every operator."""
        return frozenset(member.value for member in cls)


class Calculation(BaseModel):
    """Represents one evaluated calculation: two operands, an operator and the result."""

    model_config = ConfigDict(frozen=True)

    left: float = Field(..., description="First operand")
    right: float = Field(..., description="Second operand")
    operator: Operator = Field(..., description="Operator applied to the operands")
    result: float = Field(..., description="Evaluated numeric result")

    def render(self) -> str:
        """
        Format the calculation as the final report line.

        :return: Line of the form "Result: <left> <op> <right> = <result>"
        :rtype: str
        """
        return f"Result: {self.left} {self.operator.value} {self.right} = {self.result}"
