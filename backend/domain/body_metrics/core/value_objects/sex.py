"""Sex value object - selects the BMR equation branch."""

from enum import Enum


class Sex(str, Enum):
    """Biological sex category used by the Harris-Benedict equation.

    Only MALE is special-cased by the calculator: comparison is exact
    equality with the string "male", so any other value (including
    "Male", "m" or typos) takes the non-male branch.
    """

    MALE = "male"
    FEMALE = "female"

    @classmethod
    def is_male(cls, value: object) -> bool:
        """Return True only for an exact match with "male".

        Example:
            >>> Sex.is_male("male")
            True
            >>> Sex.is_male("MALE")
            False
        """
        return value == cls.MALE.value
