"""Pytest configuration for pycgate tests."""

import sys
from pathlib import Path

import pytest

# Allow running the suite from a checkout without installing the package
_repo_root = Path(__file__).parent.parent
sys.path.insert(0, str(_repo_root))


# Lines captured from a C-Gate session
LEVEL_CHANGE_LINE = (
    "#e# 20170204-160545.608 730 //SHAC/254/56/116 "
    "3df8bcf0-c4aa-1034-9f0a-fbb6c098d608 new level=43 sourceunit=74 ramptime=10"
)
SYNC_STATE_LINE = (
    "#e# 20170204-160655.767 756 //SHAC/254 "
    "3dfc3f60-c4aa-1034-9e98-fbb6c098d608 SyncState=syncing"
)
HEARTBEAT_LINE = "#e# 20170206-134427.023 700 cgate - Heartbeat."
ZONE_SEALED_LINE = "#e# 20170204-130934.821 702 //BVC13/254/208/3 - [security] zone_sealed sourceUnit=8"


@pytest.fixture
def level_change_line():
    """Return a lighting level change event line."""
    return LEVEL_CHANGE_LINE


@pytest.fixture
def sync_state_line():
    """Return a network sync state event line."""
    return SYNC_STATE_LINE


@pytest.fixture
def heartbeat_line():
    """Return a heartbeat event line."""
    return HEARTBEAT_LINE


@pytest.fixture
def zone_sealed_line():
    """Return a security zone sealed event line."""
    return ZONE_SEALED_LINE
