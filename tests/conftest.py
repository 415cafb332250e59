import json
from pathlib import Path
from typing import Any

import pytest


def _unit(type_name: str, si_name: str, short: str, **extra: Any) -> dict[str, Any]:
    return {"typeName": type_name, "siUnit": {"name": si_name, "short": short}, **extra}


@pytest.fixture
def units_document() -> dict[str, Any]:
    return {
        "namespace": "Example.Units",
        "baseUnits": [
            _unit(
                "Duration",
                "Seconds",
                "s",
                additionalUnits=[
                    {"name": "Minutes", "short": "min", "factor": 60},
                    {"name": "Hours", "short": "h", "factor": 3600},
                ],
                generateExtensions=True,
            ),
            _unit("Length", "Meters", "m"),
            _unit("Mass", "Kilograms", "kg"),
        ],
        "mulUnits": [
            _unit("Volume", "CubicMeters", "m³", primary="Area", secondary="Length"),
            _unit("Area", "SquareMeters", "m²", primary="Length", secondary="Length"),
            _unit("Force", "Newton", "N", primary="Mass", secondary="Acceleration"),
        ],
        "divUnits": [
            _unit("Velocity", "MetersPerSecond", "m/s", primary="Length", secondary="Duration"),
            _unit(
                "Acceleration",
                "MetersPerSecondSquared",
                "m/s²",
                primary="Velocity",
                secondary="Duration",
            ),
        ],
    }


@pytest.fixture
def units_file(tmp_path: Path, units_document: dict[str, Any]) -> Path:
    path = tmp_path / "physics.units.json"
    path.write_text(json.dumps(units_document), encoding="utf-8")
    return path
