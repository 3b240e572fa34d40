import copy
from typing import Any

import pytest

from changetrack import ChangeRecorder

PROFILE: dict[str, Any] = {
    "name": "furqan",
    "age": 30,
    "is_smart": False,
    "address": {
        "geo": {
            "lat": 23.56,
            "lon": 56.78,
            "encoding": {"type": "map"},
        },
        "city": "bangalore",
        "zipcode": "56004",
    },
    "companies": {
        "professional": [
            {"name": "Amazon", "title": "Software Engineer"},
            {"name": "Microsoft", "title": "Technical Lead"},
        ],
        "freelancing": [
            {"name": "Reverse Current", "title": "Consultant"},
        ],
    },
    "hobbies": ["tennis"],
}


@pytest.fixture
def profile() -> dict[str, Any]:
    """Fresh copy of the sample profile for each test."""
    return copy.deepcopy(PROFILE)


@pytest.fixture
def recorder() -> ChangeRecorder:
    return ChangeRecorder()
