import matplotlib

matplotlib.use("Agg")

import pytest

from dccirc.circuit_elements import example_circuit


@pytest.fixture
def example_tree():
    """The mixed series/parallel example network (2.4 Ω)."""
    return example_circuit()


@pytest.fixture
def close_figures():
    import matplotlib.pyplot as plt

    yield
    plt.close("all")
