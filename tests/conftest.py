import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


DEMO_TEXT = (
    "Title: Demo Board\n"
    "Rev: A\n"
    "---\n"
    "Resistors:\n"
    "R1,R2 10k 0805 pull-ups\n"
)


@pytest.fixture
def demo_text() -> str:
    """The minimal two-property, one-category document."""
    return DEMO_TEXT
