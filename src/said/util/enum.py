import typing as t
from enum import StrEnum


class CaseInsensitiveEnum(StrEnum):
    """
    Like StrEnum but allows it to be instantiated with any case-insensitive version of themselves. Useful for CLI
    arguments and pydantic models to allow laxness in user input:

        class Gender(CaseInsensitiveEnum):
            FEMALE = enum.auto()
            MALE = enum.auto()

    str(Gender("MaLe")) # 'male'
    """

    @classmethod
    def _missing_(cls, value: object) -> t.Any | None:
        if not isinstance(value, str):
            return None
        value = value.lower()
        for member in cls:
            if member.lower() == value:
                return member
        return None
