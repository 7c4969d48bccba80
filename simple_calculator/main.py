"""
Console entrypoint of the calculator.

This script:
- Parses and validates the optional command-line arguments
- Configures the package logger
- Runs one calculator session on stdin or on an answers file

Exit codes:
- 0: the calculation completed
- 1: the input ended before both operands and the operator were read
- 2: invalid command-line usage
"""

import argparse
import sys
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, FilePath, ValidationError

from simple_calculator.common.logger import logger, set_level
from simple_calculator.console.reader import ConsoleReader, EndOfInputError
from simple_calculator.console.session import CalculatorSession


INCOMPLETE_INPUT_MESSAGE: str = "Input ended before the calculation was complete."

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    input_file : Optional[FilePath]
        File whose lines answer the prompts, instead of stdin.
    log_level : LogLevel
        Level of the diagnostic logger.
    """

    model_config = ConfigDict(frozen=True)

    input_file: Optional[FilePath] = None
    log_level: LogLevel = "WARNING"


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param list argv: Arguments to parse, defaults to sys.argv[1:]

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        prog="simple-calculator",
        description="Interactive calculator for two numbers and one of + - * /",
    )

    parser.add_argument(
        "--input",
        dest="input_file",
        default=None,
        help="Read answers line by line from this file instead of stdin",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostic log level written to stderr (default: WARNING)",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(input_file=args.input_file, log_level=args.log_level)
    except ValidationError as exc:
        parser.error(str(exc))


def run_session(reader: ConsoleReader) -> int:
    """
    Run one calculator session and map its outcome to an exit code.

    :param ConsoleReader reader: Reader bound to the input and output streams

    :return: Process exit code
    :rtype: int
    """
    try:
        CalculatorSession(reader=reader).run()
    except EndOfInputError as exc:
        logger.error(f"📄❌ {exc}")
        reader.stdout.write(f"\n{INCOMPLETE_INPUT_MESSAGE}\n")
        reader.stdout.flush()
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function executed by the console script.

    :param list argv: Arguments to parse, defaults to sys.argv[1:]

    :return: Process exit code
    :rtype: int
    """
    cli_args = parse_args(argv)
    set_level(cli_args.log_level)

    if cli_args.input_file is None:
        return run_session(ConsoleReader())

    logger.info(f"📄 Reading answers from {cli_args.input_file}")
    with cli_args.input_file.open("r", encoding="utf-8") as f_in:
        return run_session(ConsoleReader(stdin=f_in))


def run() -> None:
    """Console script wrapper exiting with the code returned by main()."""
    sys.exit(main())


if __name__ == "__main__":
    run()
