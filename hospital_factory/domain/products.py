"""Hospital products: buildings and the staff that work in them.

Each family supplies one building and one staff product. Products are
frozen pydantic models whose only data is their family tag, pinned to the
concrete class so a Field product can never claim the Capital family.
"""
from abc import ABC, abstractmethod
from typing import Literal
from pydantic import BaseModel

from hospital_factory.domain.family import HospitalFamily


class HospitalBuilding(BaseModel, ABC):
    """Abstract product A: the hospital building."""
    family: HospitalFamily

    class Config:
        frozen = True

    @abstractmethod
    def describe(self) -> str:
        """Return the fixed description of the building."""


class HospitalStaff(BaseModel, ABC):
    """Abstract product B: the hospital staff."""
    family: HospitalFamily

    class Config:
        frozen = True

    @abstractmethod
    def describe(self) -> str:
        """Return the fixed description of the staff."""

    @abstractmethod
    def interact_with(self, building: HospitalBuilding) -> str:
        """Describe how the staff works in the given building.

        The building description is embedded verbatim in the result.
        """


# -----------------
# FIELD HOSPITAL
# -----------------

class FieldHospitalBuilding(HospitalBuilding):
    """Tent or temporary structure of a field hospital."""
    family: Literal[HospitalFamily.FIELD] = HospitalFamily.FIELD

    def describe(self) -> str:
        return "Будівля: Намет/тимчасова споруда для польового госпіталю (Field)."


class FieldHospitalStaff(HospitalStaff):
    """Field surgeons and nurses trained for rapid deployment."""
    family: Literal[HospitalFamily.FIELD] = HospitalFamily.FIELD

    def describe(self) -> str:
        return "Персонал: Польові хірурги та медсестри (швидке розгортання) (Field)."

    def interact_with(self, building: HospitalBuilding) -> str:
        return f"Персонал польового госпіталю працює в умовах: ({building.describe()})"


# -----------------
# CAPITAL HOSPITAL
# -----------------

class CapitalHospitalBuilding(HospitalBuilding):
    """Permanent multi-storey building with departments."""
    family: Literal[HospitalFamily.CAPITAL] = HospitalFamily.CAPITAL

    def describe(self) -> str:
        return "Будівля: Багатоповерхова капітальна будівля з відділеннями (Capital)."


class CapitalHospitalStaff(HospitalStaff):
    """Specialist doctors and permanent medical staff."""
    family: Literal[HospitalFamily.CAPITAL] = HospitalFamily.CAPITAL

    def describe(self) -> str:
        return "Персонал: Вузькоспеціалізовані лікарі та постійний медперсонал (Capital)."

    def interact_with(self, building: HospitalBuilding) -> str:
        return f"Персонал капітальної лікарні працює в умовах: ({building.describe()})"
