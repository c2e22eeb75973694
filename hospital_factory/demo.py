"""Console demonstration of the hospital abstract factory.

Runs one scenario per hospital family:

    $ hospital-demo
    $ python -m hospital_factory.demo
"""
import sys
from typing import List, Optional, TextIO

from hospital_factory.core.config import settings
from hospital_factory.core.logging import get_logger, setup_logging
from hospital_factory.services.client import HospitalClient
from hospital_factory.services.factories import available_families, get_factory

logger = get_logger(__name__)

BANNER_RULE = "================================================="
BANNER_TITLE = "    Демонстрація Абстрактної Фабрики (Python)        "


def render_demo() -> List[str]:
    """Return the full demo output as a list of lines."""
    lines = [BANNER_RULE, BANNER_TITLE, BANNER_RULE]

    for number, family in enumerate(available_families(), start=1):
        factory = get_factory(family)
        lines.append("")
        lines.append(f"✅ Сценарій {number}: {factory.title}:")
        lines.extend(HospitalClient(factory).lines())

    return lines


def main(stream: Optional[TextIO] = None) -> int:
    """Print both hospital scenarios and return the process exit code."""
    out = stream or sys.stdout
    if out is sys.stdout and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")

    # Logs go to stderr so they never interleave with the demo text
    setup_logging(level=settings.log_level, json_format=settings.log_json, stream=sys.stderr)
    logger.debug("Running hospital factory demo", extra={"operation": "demo"})

    for line in render_demo():
        print(line, file=out)

    return 0


if __name__ == "__main__":
    sys.exit(main())
