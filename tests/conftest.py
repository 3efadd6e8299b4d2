import json
from pathlib import Path

import pytest

DATA = Path(__file__).parent / "data"


@pytest.fixture
def forecast_payload():
    return json.loads((DATA / "forecast_example.json").read_text())


@pytest.fixture
def current_payload():
    return json.loads((DATA / "current_example.json").read_text())
