"""Domain layer - hospital families and the products they are made of.

This package contains the product interfaces and the concrete Field and
Capital products. It is independent of the HTTP and console surfaces.
"""
from hospital_factory.domain.family import HospitalFamily, UnknownHospitalFamilyError
from hospital_factory.domain.products import (
    HospitalBuilding,
    HospitalStaff,
    FieldHospitalBuilding,
    FieldHospitalStaff,
    CapitalHospitalBuilding,
    CapitalHospitalStaff,
)
from hospital_factory.domain.scenario import HospitalScenario

__all__ = [
    "HospitalFamily",
    "UnknownHospitalFamilyError",
    "HospitalBuilding",
    "HospitalStaff",
    "FieldHospitalBuilding",
    "FieldHospitalStaff",
    "CapitalHospitalBuilding",
    "CapitalHospitalStaff",
    "HospitalScenario",
]
