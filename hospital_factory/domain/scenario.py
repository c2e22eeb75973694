"""Read model for one assembled hospital."""
from pydantic import BaseModel, Field

from hospital_factory.domain.family import HospitalFamily


class HospitalScenario(BaseModel):
    """Descriptions produced by a matched building and staff pair.

    Attributes:
        family: Family both products belong to
        building: Building description
        staff: Staff description
        interaction: Staff working in the building, building text embedded
    """
    family: HospitalFamily
    building: str
    staff: str
    interaction: str = Field(description="Staff/building interaction text")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "family": "field",
                "building": "Будівля: Намет/тимчасова споруда для польового госпіталю (Field).",
                "staff": "Персонал: Польові хірурги та медсестри (швидке розгортання) (Field).",
                "interaction": (
                    "Персонал польового госпіталю працює в умовах: "
                    "(Будівля: Намет/тимчасова споруда для польового госпіталю (Field).)"
                ),
            }
        }
