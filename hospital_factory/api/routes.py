"""FastAPI routes exposing the hospital families and their scenarios."""
from fastapi import APIRouter, HTTPException

from hospital_factory.domain.family import UnknownHospitalFamilyError
from hospital_factory.domain.scenario import HospitalScenario
from hospital_factory.services.client import HospitalClient
from hospital_factory.services.factories import available_families, get_factory
from hospital_factory.core.logging import get_logger, LogTimer

logger = get_logger(__name__)
router = APIRouter()


def _client_for(family: str) -> HospitalClient:
    """Build a client for the family or raise a 404 with suggestions."""
    try:
        factory = get_factory(family)
    except UnknownHospitalFamilyError as e:
        raise HTTPException(
            status_code=404,
            detail={
                "error": str(e),
                "suggestions": e.suggestions,
            }
        )
    return HospitalClient(factory)


@router.get("/families")
def list_families():
    """List the supported hospital families in display order."""
    families = []
    for family in available_families():
        factory = get_factory(family)
        families.append({
            "family": family.value,
            "name": family.display_name,
            "title": factory.title,
        })
    return {"families": families}


@router.get("/hospitals/{family}", response_model=HospitalScenario)
def hospital_scenario(family: str):
    """Return the building, staff and interaction descriptions for a family.

    Example:
        GET /api/v1/hospitals/capital
    """
    with LogTimer(logger, f"hospital_scenario:{family}"):
        return _client_for(family).scenario()


@router.get("/hospitals/{family}/lines")
def hospital_lines(family: str):
    """Return the display block the console client prints for a family."""
    return {"lines": _client_for(family).lines()}
