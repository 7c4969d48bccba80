"""Interactive calculator session: read operands and operator, evaluate, report."""
from pydantic import BaseModel, Field

from simple_calculator.common.evaluator import Evaluator
from simple_calculator.common.logger import logger
from simple_calculator.common.operations import Calculation, Operator
from simple_calculator.console.reader import ConsoleReader


BANNER: str = "=== Simple Calculator ==="
FIRST_NUMBER_PROMPT: str = "Enter first number: "
SECOND_NUMBER_PROMPT: str = "Enter second number: "


class CalculatorSession(BaseModel):
    """
    One run of the console calculator.

    Features:
        - Reads the first operand, the second operand, then the operator, in that order.
        - Re-prompts on invalid input until a valid value is entered.
        - Writes the result line to the same stream the prompts go to.
    """

    reader: ConsoleReader = Field(default_factory=ConsoleReader, description="Source of operands and operator")

    def run(self) -> Calculation:
        """
        Run the calculator dialogue once.

        Steps:
            1. Print the banner.
            2. Read the first and second operands.
            3. Read the operator.
            4. Evaluate the operation.
            5. Print the result line.

        :return: The completed calculation
        :rtype: Calculation
        :raises EndOfInputError: If the input ends before all values were read
        """
        out = self.reader.stdout
        out.write(f"{BANNER}\n\n")
        logger.info("🧮 Calculator session started")

        left: float = self.reader.read_number(FIRST_NUMBER_PROMPT)
        right: float = self.reader.read_number(SECOND_NUMBER_PROMPT)
        symbol: str = self.reader.read_operator()

        result: float = Evaluator.evaluate(left, right, symbol, out=out)
        calculation = Calculation(left=left, right=right, operator=Operator(symbol), result=result)

        out.write(f"\n{calculation.render()}\n")
        out.flush()
        logger.info(f"🧮✅ Calculator session finished: {calculation.render()}")
        return calculation
