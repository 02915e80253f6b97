import argparse

from pydantic import ValidationError
from pydantic_settings import CliApp, CliSettingsSource

from said.util.config import SaIdSettings


class PydanticArguments(SaIdSettings, cli_parse_args=True, cli_kebab_case=True):
    """
    Command-line arguments declared as pydantic fields, also picking up APP_ prefixed environment variables. Subclasses
    implement `cli_cmd()` to do the work and `exit_code()` to report the outcome.
    """

    def exit_code(self) -> int:
        return 0

    @classmethod
    def run(cls) -> int:
        css: CliSettingsSource[argparse.ArgumentParser] = CliSettingsSource(cls)
        try:
            args = CliApp.run(cls, cli_settings_source=css)
        except ValidationError as e:
            msg = ""
            for err in e.errors():
                msg += f"\nargument {err['loc'][0]}: {err['msg']}"
            css.root_parser.error(msg)
            return 2
        return args.exit_code()
