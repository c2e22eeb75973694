"""Hospital families - the closed set of product families."""
from difflib import get_close_matches
from enum import Enum
from typing import List, Union


class UnknownHospitalFamilyError(ValueError):
    """Raised when a family tag names neither Field nor Capital."""

    def __init__(self, value: str, suggestions: List[str]):
        self.value = value
        self.suggestions = suggestions
        message = f"Unknown hospital family '{value}'."
        if suggestions:
            message += f" Did you mean: {', '.join(suggestions)}?"
        super().__init__(message)


class HospitalFamily(str, Enum):
    """Family tag shared by a building and the staff working in it."""

    FIELD = "field"
    CAPITAL = "capital"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: Union["HospitalFamily", str]) -> "HospitalFamily":
        """Resolve a family tag, ignoring case and surrounding whitespace.

        Args:
            value: Enum member or tag such as "Field" or "capital"

        Returns:
            Matching HospitalFamily

        Raises:
            UnknownHospitalFamilyError: If the tag matches no family
        """
        if isinstance(value, cls):
            return value

        normalized = str(value).strip().lower()
        for family in cls:
            if family.value == normalized:
                return family

        suggestions = get_close_matches(normalized, [f.value for f in cls], n=2, cutoff=0.5)
        raise UnknownHospitalFamilyError(str(value), suggestions)
