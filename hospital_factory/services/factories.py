"""Hospital factories and factory selection.

A factory produces one building and one staff product of the same family.
Selection maps a family tag onto one of the two concrete factories; the tag
space is closed, so an unknown tag is a programming error at the call site.
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Type, Union

from hospital_factory.domain.family import HospitalFamily, UnknownHospitalFamilyError
from hospital_factory.domain.products import (
    HospitalBuilding,
    HospitalStaff,
    FieldHospitalBuilding,
    FieldHospitalStaff,
    CapitalHospitalBuilding,
    CapitalHospitalStaff,
)
from hospital_factory.core.logging import get_logger

logger = get_logger(__name__)


class HospitalFactory(ABC):
    """Abstract factory for a hospital product family."""

    family: HospitalFamily
    title: str

    @abstractmethod
    def create_building(self) -> HospitalBuilding:
        ...

    @abstractmethod
    def create_staff(self) -> HospitalStaff:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(family={self.family.value!r})"


class FieldHospitalFactory(HospitalFactory):
    """Builds the components of a field hospital."""

    family = HospitalFamily.FIELD
    title = "Створення Польової Лікарні (Field Hospital)"

    def create_building(self) -> HospitalBuilding:
        return FieldHospitalBuilding()

    def create_staff(self) -> HospitalStaff:
        return FieldHospitalStaff()


class CapitalHospitalFactory(HospitalFactory):
    """Builds the components of a capital hospital."""

    family = HospitalFamily.CAPITAL
    title = "Створення Капітальної Лікарні (Capital Hospital)"

    def create_building(self) -> HospitalBuilding:
        return CapitalHospitalBuilding()

    def create_staff(self) -> HospitalStaff:
        return CapitalHospitalStaff()


# Ordered: Field first, then Capital
FACTORIES: Dict[HospitalFamily, Type[HospitalFactory]] = {
    HospitalFamily.FIELD: FieldHospitalFactory,
    HospitalFamily.CAPITAL: CapitalHospitalFactory,
}


def available_families() -> List[HospitalFamily]:
    """Return the supported families in display order."""
    return list(FACTORIES)


def get_factory(family: Union[HospitalFamily, str]) -> HospitalFactory:
    """Return the factory that builds the given family.

    Args:
        family: Family tag, enum member or case-insensitive string

    Returns:
        A new factory for the matching family

    Raises:
        UnknownHospitalFamilyError: If the tag matches no family

    Example:
        >>> factory = get_factory("Capital")
        >>> factory.create_building().describe()
        'Будівля: Багатоповерхова капітальна будівля з відділеннями (Capital).'
    """
    try:
        resolved = HospitalFamily.parse(family)
    except UnknownHospitalFamilyError as e:
        logger.warning(f"Unknown hospital family requested: {family!r}. Suggestions: {e.suggestions}")
        raise

    return FACTORIES[resolved]()
