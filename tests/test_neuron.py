import pytest

from decidemodel.config.settings import LIFParams
from decidemodel.features.neuron import LIFNeuron, lif_and, lif_nand, lif_not, lif_or, update_neuron

IDEAL = LIFParams(leak_rate=0.0)

def test_integrates_with_leak():
    n = LIFNeuron()
    update_neuron(n, 0.5)
    assert n.membrane_potential == pytest.approx(0.4)
    assert not n.fired
    update_neuron(n, 0.8)
    assert n.membrane_potential == pytest.approx(1.1)
    assert n.fired

def test_resets_after_firing_and_stays_latched():
    n = update_neuron(LIFNeuron(), 2.0)
    assert n.fired
    update_neuron(n, 5.0)
    assert n.membrane_potential == 0.0
    assert n.fired

def test_unit_drive_does_not_fire_with_default_leak():
    assert not update_neuron(LIFNeuron(), 1.0).fired
    assert update_neuron(LIFNeuron(), 2.0).fired

def test_default_gates_never_fire_output():
    # one step of 1.0 - 0.1 stays under the 1.0 threshold
    for a in (0, 1, 2):
        for b in (0, 1, 2):
            assert lif_and(a, b) is False
            assert lif_or(a, b) is False
            assert lif_nand(a, b) is True

@pytest.mark.parametrize("a,b,and_,or_", [(0, 0, False, False), (0, 1, False, True), (1, 0, False, True), (1, 1, True, True)])
def test_truth_tables_without_leak(a, b, and_, or_):
    assert lif_and(a, b, IDEAL) is and_
    assert lif_or(a, b, IDEAL) is or_
    assert lif_nand(a, b, IDEAL) is (not and_)

def test_not():
    assert lif_not(0) is True
    assert lif_not(1) is False
