"""Text menu front end for the loan registry.

Usage::

    loan-calc
    loan-calc --day-count ACT/360 --output json
    loan-calc --demo-loans 5 --seed 42
"""

import argparse
import re
import sys
from dataclasses import fields, replace
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import IntEnum
from typing import Any, Callable

from loan_calc import __version__
from loan_calc.config import LOG_FORMATS, OUTPUT_FORMATS, LoanCalcConfig, OutputConfig
from loan_calc.exceptions import ConfigurationError, LoanCalcError, ValidationError
from loan_calc.generators import LoanGenerator
from loan_calc.interest import InterestCalculator
from loan_calc.logging import get_logger, setup_logging
from loan_calc.models import Currency, DayCountConvention, Loan
from loan_calc.sinks import ConsoleSink
from loan_calc.store import LoanRegistry

logger = get_logger(__name__)

DATE_FORMAT = "%Y-%m-%d"

# Commas are accepted only as thousands separators: 1,250,000.50
_GROUPED_NUMBER = re.compile(r"^[+-]?\d{1,3}(,\d{3})+(\.\d*)?$")


class MenuCommand(IntEnum):
    ADD = 1
    UPDATE = 2
    SHOW = 3
    SHOW_ALL = 4
    EXIT = 5

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, raw: str) -> "MenuCommand | None":
        """Resolve a menu choice, or None when it is not a listed option."""
        try:
            return cls(int(raw.strip()))
        except ValueError:
            return None


_LABELS = {
    MenuCommand.ADD: "Add Loan",
    MenuCommand.UPDATE: "Update Loan",
    MenuCommand.SHOW: "Show Loan Information",
    MenuCommand.SHOW_ALL: "Show All Loans",
    MenuCommand.EXIT: "Exit",
}


# Input parsing


def parse_date(raw: str, name: str) -> date:
    try:
        return datetime.strptime(raw.strip(), DATE_FORMAT).date()
    except ValueError:
        raise ValidationError(f"{name} must be a date in YYYY-MM-DD format, got {raw!r}") from None


def parse_decimal(raw: str, name: str) -> Decimal:
    text = raw.strip()
    if "," in text:
        if not _GROUPED_NUMBER.match(text):
            raise ValidationError(
                f"{name} must use commas only as thousands separators, got {raw!r}"
            )
        text = text.replace(",", "")
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise ValidationError(f"{name} must be a number, got {raw!r}") from None
    if not value.is_finite():
        raise ValidationError(f"{name} must be a finite number, got {raw!r}")
    return value


def parse_currency(raw: str) -> Currency:
    try:
        return Currency.parse(raw)
    except ValueError:
        raise ValidationError(f"currency {raw.strip()!r} is not a recognised code") from None


def parse_loan_id(raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise ValidationError(f"loan ID must be a whole number, got {raw!r}") from None


# (attribute, prompt, parser, formatter for the current value)
_LOAN_PROMPTS: list[tuple[str, str, Callable[[str], Any], Callable[[Any], str]]] = [
    ("start_date", "Start Date (YYYY-MM-DD)", lambda s: parse_date(s, "start date"), date.isoformat),
    ("end_date", "End Date (YYYY-MM-DD)", lambda s: parse_date(s, "end date"), date.isoformat),
    ("principal", "Loan Amount", lambda s: parse_decimal(s, "loan amount"), str),
    ("currency", "Loan Currency", parse_currency, lambda c: Currency.parse(c).value),
    ("base_rate", "Base Interest Rate (%)", lambda s: parse_decimal(s, "base interest rate"), str),
    ("margin", "Margin (%)", lambda s: parse_decimal(s, "margin"), str),
]


class LoanMenu:
    """Interactive menu over a registry and a calculator.

    Parameters
    ----------
    registry : LoanRegistry
        Loan records the menu reads and mutates.
    calculator : InterestCalculator
        Calculator used for "Show Loan Information".
    sink : ConsoleSink
        Output for loans and schedules.
    input_func : Callable[[str], str]
        Prompt reader (``input`` by default).
    """

    def __init__(
        self,
        registry: LoanRegistry,
        calculator: InterestCalculator,
        sink: ConsoleSink,
        input_func: Callable[[str], str] | None = None,
    ) -> None:
        self.registry = registry
        self.calculator = calculator
        self.sink = sink
        self._input = input_func or input

    def run(self) -> None:
        """Loop over the main menu until Exit or end of input."""
        print("Loan Interest Calculator")
        while True:
            self._print_menu()
            try:
                raw = self._input("Please enter your choice: ")
            except EOFError:
                print("\nExiting...")
                return

            command = MenuCommand.parse(raw)
            if command is None:
                print(f"\nInvalid choice! Please enter an integer from 1-{len(MenuCommand)}.")
                continue

            try:
                if not self.dispatch(command):
                    return
            except LoanCalcError as e:
                logger.warning("%s failed: %s", command.label, e)
                print(f"Error: {e}\n")
            except EOFError:
                print("\nExiting...")
                return

    def dispatch(self, command: MenuCommand) -> bool:
        """Run one menu command. Returns False when the menu should stop."""
        match command:
            case MenuCommand.ADD:
                self.add_loan()
            case MenuCommand.UPDATE:
                self.update_loan()
            case MenuCommand.SHOW:
                self.show_loan()
            case MenuCommand.SHOW_ALL:
                self.sink.write_loans(self.registry.list_all())
            case MenuCommand.EXIT:
                print("Exiting...")
                return False
        return True

    def add_loan(self) -> int:
        loan = self._prompt_loan(Loan.default())
        loan_id = self.registry.add(loan)
        print(f"Loan added with ID: {loan_id}\n")
        return loan_id

    def update_loan(self) -> None:
        loan_id = parse_loan_id(self._input("Enter the Loan ID to update: "))
        current = self.registry.get(loan_id)
        edited = self._prompt_loan(current)
        changes = {
            f.name: getattr(edited, f.name)
            for f in fields(Loan)
            if f.name != "loan_id" and getattr(edited, f.name) != getattr(current, f.name)
        }
        self.registry.update(loan_id, changes)
        print(f"Loan with ID {loan_id} updated successfully!\n")

    def show_loan(self) -> None:
        loan = self.registry.get(parse_loan_id(self._input("Enter the Loan ID: ")))
        self.sink.write_schedule(
            loan,
            self.calculator.compute_schedule(loan),
            total=self.calculator.compute_total(loan),
            total_no_margin=self.calculator.compute_total_no_margin(loan),
        )
        print()

    def _prompt_loan(self, template: Loan) -> Loan:
        """Ask for every loan field; a blank answer keeps the shown value."""
        print("Loan Parameters (press Enter to keep the value in brackets)")
        print("-" * 22)
        values: dict[str, Any] = {}
        for name, prompt, parse, show in _LOAN_PROMPTS:
            current = getattr(template, name)
            raw = self._input(f"{prompt} [{show(current)}]: ")
            values[name] = parse(raw) if raw.strip() else current
        return replace(template, **values)

    @staticmethod
    def _print_menu() -> None:
        print("-" * 24)
        for command in MenuCommand:
            print(f"{command.value}. {command.label}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loan-calc",
        description="Record loans and compute simple-interest schedules",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--day-count",
        choices=[c.value for c in DayCountConvention],
        help="Day-count convention (default: ACT/365, env LOAN_CALC_DAY_COUNT)",
    )
    parser.add_argument("--output", choices=OUTPUT_FORMATS, help="Output format (default: table)")
    parser.add_argument("--max-rows", type=int, help="Maximum schedule rows to print")
    parser.add_argument("--log-level", help="Log level (default: WARNING)")
    parser.add_argument("--log-format", choices=LOG_FORMATS, help="Log format (default: standard)")
    parser.add_argument(
        "--demo-loans", type=int, default=0, help="Pre-populate the registry with N sample loans"
    )
    parser.add_argument("--seed", type=int, help="Random seed for --demo-loans")
    return parser


def load_config(args: argparse.Namespace) -> LoanCalcConfig:
    """Read the environment, then apply command-line overrides."""
    config = LoanCalcConfig.from_env()
    return replace(
        config,
        day_count=DayCountConvention(args.day_count) if args.day_count else config.day_count,
        output=OutputConfig(
            format=args.output or config.output.format,
            max_schedule_rows=args.max_rows if args.max_rows is not None else config.output.max_schedule_rows,
        ),
        log_level=args.log_level or config.log_level,
        log_format=args.log_format or config.log_format,
        seed=args.seed if args.seed is not None else config.seed,
    )


def seed_registry(registry: LoanRegistry, count: int, seed: int | None = None) -> list[int]:
    """Add ``count`` generated loans to the registry."""
    generator = LoanGenerator(seed=seed)
    loan_ids = [registry.add(loan) for loan in generator.generate_batch(count)]
    logger.info("Seeded registry with %d demo loans", len(loan_ids))
    return loan_ids


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    setup_logging(config.log_level, config.log_format)
    logger.info("Starting loan-calc with %s day count", config.day_count.value)

    registry = LoanRegistry()
    if args.demo_loans > 0:
        seed_registry(registry, args.demo_loans, config.seed)

    menu = LoanMenu(
        registry,
        InterestCalculator(config.day_count),
        ConsoleSink(config.output.format, config.output.max_schedule_rows),
    )
    menu.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
