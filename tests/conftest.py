import sys
from pathlib import Path

import pytest

# Make the src/ layout importable when the package is not installed
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


@pytest.fixture(scope="session")
def full_song() -> str:
    from bottles import Bottles

    return Bottles().song()
