from __future__ import annotations

from dataclasses import dataclass

from decidemodel.config.settings import LIFParams

DEFAULT_PARAMS = LIFParams()


@dataclass
class LIFNeuron:
    membrane_potential: float = 0.0
    fired: bool = False


def update_neuron(neuron: LIFNeuron, value: float, params: LIFParams = DEFAULT_PARAMS) -> LIFNeuron:
    """
    One leaky integrate-and-fire step.

    A neuron that already fired is reset to params.reset_v instead of
    integrating; the fired flag stays set.
    """
    if neuron.fired:
        neuron.membrane_potential = params.reset_v
    else:
        neuron.membrane_potential += value - params.leak_rate

    if neuron.membrane_potential >= params.threshold:
        neuron.fired = True
    return neuron


def _drive(value: float, params: LIFParams) -> bool:
    return update_neuron(LIFNeuron(), value, params).fired


def lif_and(a: float, b: float, params: LIFParams = DEFAULT_PARAMS) -> bool:
    both = _drive(a, params) and _drive(b, params)
    return _drive(1.0 if both else 0.0, params)


def lif_or(a: float, b: float, params: LIFParams = DEFAULT_PARAMS) -> bool:
    fired_a = _drive(a, params)
    fired_b = _drive(b, params)
    return _drive(1.0 if (fired_a or fired_b) else 0.0, params)


def lif_nand(a: float, b: float, params: LIFParams = DEFAULT_PARAMS) -> bool:
    return not lif_and(a, b, params)


def lif_not(a: float) -> bool:
    return not a
