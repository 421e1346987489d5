"""Calculator tool: the four basic arithmetic operations."""

from __future__ import annotations

import logging
from typing import Literal

from langchain_core.tools import tool
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

Operation = Literal["add", "subtract", "multiply", "divide"]


class CalculatorInput(BaseModel):
    """Arguments for the calculator tool."""

    a: float = Field(description="The first number.")
    b: float = Field(description="The second number.")
    operation: Operation = Field(
        description="The operation to perform: add, subtract, multiply, divide."
    )


def calculate(a: float, b: float, operation: str) -> float | None:
    """Apply ``operation`` to ``a`` and ``b``.

    Returns None for an unknown operation or a division by zero.
    """
    if operation == "add":
        return a + b
    if operation == "subtract":
        return a - b
    if operation == "multiply":
        return a * b
    if operation == "divide":
        return a / b if b != 0 else None
    return None


def _fmt(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


@tool(
    "calculator",
    args_schema=CalculatorInput,
    description=(
        "Performs basic math operations: addition, subtraction, "
        "multiplication and division."
    ),
)
def calculator(a: float, b: float, operation: str) -> str:
    logger.info("calculator called: a=%s, b=%s, operation=%s", a, b, operation)
    result = calculate(a, b, operation)
    if result is None:
        return "Invalid operation or division by zero."
    logger.info("calculator result: %s", result)
    return (
        f"The result of {operation} between {_fmt(a)} and {_fmt(b)} "
        f"is {_fmt(result)}."
    )
