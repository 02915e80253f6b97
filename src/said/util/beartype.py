import os
import typing as t

from said.util.config import SaIdSettings


class BearSettings(SaIdSettings):
    use_beartype: bool = False


def maybe_setup_beartype(packages: t.Sequence[str] = ("said",)) -> bool:
    """
    Optionally check the type hints of the given packages at runtime with beartype. Always on under pytest, otherwise
    only when `APP_USE_BEARTYPE` is set. Must run before the packages are imported.
    """
    if os.environ.get("PYTEST_VERSION") is None and not BearSettings().use_beartype:
        return False

    from beartype.claw import beartype_packages

    beartype_packages(list(packages))
    return True
