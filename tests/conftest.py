from __future__ import annotations

import pytest

from api.services.flag_store import InMemoryFlagStore
from api.services.prescription_store import PrescriptionStore
from knowledge.demo_data import SAMPLE_PRESCRIPTIONS


@pytest.fixture
def flags() -> InMemoryFlagStore:
    return InMemoryFlagStore()


@pytest.fixture
def store() -> PrescriptionStore:
    return PrescriptionStore(SAMPLE_PRESCRIPTIONS)
