import os

# Environment setup for testing; read when spykit builds its global settings
os.environ.setdefault("SPYKIT_LOG_CALLS", "true")
os.environ.setdefault("SPYKIT_LOG_LEVEL", "DEBUG")

import pytest

from spykit.core.config import SpyKitSettings
from spykit.dispenser.return_value_dispenser import ReturnValueDispenser
from spykit.ledger.call_ledger import CallLedger
from utils import SameWhenEqualId


@pytest.fixture
def verbose_settings():
    """Settings that log every call, return and resolution"""
    return SpyKitSettings(_env_file=None, LOG_CALLS=True, VALUE_REPR_LIMIT=20)


@pytest.fixture
def ledger():
    """A ledger without a dispenser"""
    return CallLedger()


@pytest.fixture
def dispenser():
    return ReturnValueDispenser()


@pytest.fixture
def wired_ledger(dispenser):
    """A ledger with the ``dispenser`` fixture attached"""
    ledger = CallLedger()
    ledger.use_dispenser(dispenser)
    return ledger


@pytest.fixture
def equal_but_distinct():
    """Two instances that are == but not the same object"""
    return SameWhenEqualId(1), SameWhenEqualId(1)
