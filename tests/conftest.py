from pathlib import Path
import sys

import pytest

# Allow running tests without installing the package in editable mode.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dropzone.planning.descent.configs import PlannerConfig  # noqa: E402


@pytest.fixture
def default_config() -> PlannerConfig:
    return PlannerConfig()
