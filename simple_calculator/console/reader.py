"""Line-oriented console reader for operands and operators."""
import io
import re
import sys
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from simple_calculator.common.logger import logger
from simple_calculator.common.operations import Operator


INVALID_NUMBER_MESSAGE: str = "Please enter a valid number."
INVALID_OPERATOR_MESSAGE: str = "Invalid operator. Please use +, -, *, or /"
OPERATOR_PROMPT: str = "Enter operator (+, -, *, /): "

# ASCII decimal number, optionally signed, fractional or with exponent; or NaN / Infinity
NUMBER_PATTERN: re.Pattern = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|NaN|Infinity)", re.ASCII
)


class EndOfInputError(EOFError):
    """Raised when the input stream is exhausted before a valid value was read."""


class ConsoleReader(BaseModel):
    """
    Prompt for values on a text stream until a valid one is entered.

    The console reader:
    - writes a prompt to the output stream
    - reads exactly one line per attempt from the input stream
    - writes a fixed message and prompts again on invalid input, without a retry limit
    - raises EndOfInputError when the input stream is closed
    """

    # Make the Pydantic instance immutable (read-only)
    # Allow arbitrary types like io.TextIOBase
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    stdin: io.TextIOBase = Field(default_factory=lambda: sys.stdin, description="Stream answers are read from")
    stdout: io.TextIOBase = Field(default_factory=lambda: sys.stdout, description="Stream prompts are written to")

    def _ask(self, prompt: str) -> str:
        """
        Write the prompt and read one line of input.

        :param str prompt: Text written before reading

        :return: Line read, including its trailing newline if any
        :rtype: str
        :raises EndOfInputError: If the input stream has no more lines
        """
        self.stdout.write(prompt)
        self.stdout.flush()
        line: str = self.stdin.readline()
        # readline() returns "" only at end of stream; a blank line is "\n"
        if not line:
            raise EndOfInputError(f"Input ended while waiting for: {prompt.strip()}")
        return line

    def _say(self, message: str) -> None:
        self.stdout.write(message + "\n")

    @staticmethod
    def parse_number(text: str) -> Optional[float]:
        """
        Convert a line of text to a float.

        :param str text: Raw text entered by the user

        :return: Parsed number, or None if the text is not a decimal number
        :rtype: Optional[float]
        """
        text = text.strip()
        # float() alone would also accept "1_000", non-ASCII digits and "inf"
        if not NUMBER_PATTERN.fullmatch(text):
            return None
        return float(text)

    @staticmethod
    def parse_operator(text: str) -> Optional[str]:
        """
        Match a line of text against the operator symbols.

        :param str text: Raw text entered by the user

        :return: The trimmed symbol, or None if it is not an exact operator symbol
        :rtype: Optional[str]
        """
        symbol: str = text.strip()
        return symbol if symbol in Operator.symbols() else None

    def read_number(self, prompt: str) -> float:
        """
        Prompt until the user enters a valid number.

        :param str prompt: Prompt written before each attempt

        :return: The number entered
        :rtype: float
        :raises EndOfInputError: If the input stream is closed before a valid number
        """
        while True:
            line: str = self._ask(prompt)
            number: Optional[float] = self.parse_number(line)
            if number is not None:
                return number
            logger.debug(f"🔢❌ Rejected number input: {line.rstrip()!r}")
            self._say(INVALID_NUMBER_MESSAGE)

    def read_operator(self) -> str:
        """
        Prompt until the user enters one of "+", "-", "*", "/".

        :return: The operator symbol entered
        :rtype: str
        :raises EndOfInputError: If the input stream is closed before a valid operator
        """
        while True:
            line: str = self._ask(OPERATOR_PROMPT)
            symbol: Optional[str] = self.parse_operator(line)
            if symbol is not None:
                return symbol
            logger.debug(f"➕❌ Rejected operator input: {line.rstrip()!r}")
            self._say(INVALID_OPERATOR_MESSAGE)
