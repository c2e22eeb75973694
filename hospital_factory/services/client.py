"""Hospital client that consumes an abstract factory.

The client only knows the factory and product interfaces. Its building and
staff are obtained once, from the same factory, when it is constructed.
"""
import sys
from typing import List, Optional, TextIO

from hospital_factory.domain.products import HospitalBuilding, HospitalStaff
from hospital_factory.domain.scenario import HospitalScenario
from hospital_factory.services.factories import HospitalFactory
from hospital_factory.core.logging import get_logger

HEADER = "--- Конфігурація Лікарні ---"
SEPARATOR = "-----------------------------"


class HospitalClient:
    """Holds one matched building/staff pair and displays it.

    Args:
        factory: Factory providing both products

    Example:
        >>> client = HospitalClient(get_factory("field"))
        >>> client.run()
    """

    def __init__(self, factory: HospitalFactory):
        self._building = factory.create_building()
        self._staff = factory.create_staff()
        self.logger = get_logger(__name__, {"family": self._building.family.value})
        self.logger.debug(f"Hospital assembled by {factory!r}")

    @property
    def building(self) -> HospitalBuilding:
        return self._building

    @property
    def staff(self) -> HospitalStaff:
        return self._staff

    def scenario(self) -> HospitalScenario:
        """Describe the building, the staff and how they interact."""
        return HospitalScenario(
            family=self._building.family,
            building=self._building.describe(),
            staff=self._staff.describe(),
            interaction=self._staff.interact_with(self._building),
        )

    def lines(self) -> List[str]:
        """Return the display block: header, three descriptions, separator."""
        scenario = self.scenario()
        return [
            HEADER,
            scenario.building,
            scenario.staff,
            scenario.interaction,
            SEPARATOR,
        ]

    def run(self, stream: Optional[TextIO] = None) -> None:
        """Print the display block to stdout (or the given stream)."""
        out = stream or sys.stdout
        for line in self.lines():
            print(line, file=out)
