"Command-line validation of South African ID numbers"

import sys

from pydantic_settings import CliImplicitFlag, CliPositionalArg

from said.service.id import classify_gender, is_valid, parse_id
from said.util.argparse import PydanticArguments
from said.util.logging import setup_logging
from said.util.sentry import setup_sentry


class ValidateArguments(PydanticArguments):
    """
    Check a South African ID number. Exits 0 if it is valid and 1 if not.
    """

    id_number: CliPositionalArg[str]
    details: CliImplicitFlag[bool] = False

    def id_is_valid(self) -> bool:
        return is_valid(self.id_number.strip())

    def cli_cmd(self) -> None:
        id_number = self.id_number.strip()
        print(f"{'valid' if self.id_is_valid() else 'invalid'} gender={classify_gender(id_number)}")
        if self.details and self.id_is_valid():
            details = parse_id(id_number)
            print(f"date_of_birth={details.date_of_birth.isoformat()} citizenship={details.citizenship}")

    def exit_code(self) -> int:
        return 0 if self.id_is_valid() else 1


def setup() -> None:
    setup_sentry("sa-id")
    setup_logging()


def main() -> None:
    setup()
    sys.exit(ValidateArguments.run())
