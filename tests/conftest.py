import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from tests.factories import pruned  # noqa: E402


@pytest.fixture
def pruned_graph():
    return pruned(4, seed=42)
