import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path so config and src can be imported
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def noise_signal():
    """Deterministic 64-sample noise signal."""
    rng = np.random.default_rng(42)
    return rng.standard_normal(64)
