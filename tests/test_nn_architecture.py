import json

import pytest

from snakeai.nn_architecture import (
    INPUT_SIZE,
    OUTPUT_SIZE,
    Activation,
    LayerConfig,
    NNArchitecture,
    default_layers,
)


def test_default_layers_dimensions():
    layers = default_layers()
    assert [(l.input_dim, l.output_dim) for l in layers] == [(7, 32), (32, 64), (64, 3)]


def test_default_layers_activations():
    activations = [l.activation for l in default_layers()]
    assert activations == [Activation.RELU, Activation.RELU, Activation.SIGMOID]


def test_layers_chain_from_input_to_output():
    layers = NNArchitecture().layers
    assert layers[0].input_dim == INPUT_SIZE
    assert layers[-1].output_dim == OUTPUT_SIZE
    for prev, nxt in zip(layers, layers[1:]):
        assert prev.output_dim == nxt.input_dim


def test_architectures_do_not_share_layer_lists():
    a = NNArchitecture()
    b = NNArchitecture()
    a.layers.append(LayerConfig(3, 3, Activation.RELU))
    assert len(b.layers) == len(default_layers())


def test_custom_layers():
    arch = NNArchitecture([LayerConfig(2, 1, Activation.RELU)])
    assert arch.to_dict() == {
        "layers": [{"input_dim": 2, "output_dim": 1, "activation": "Relu"}]
    }


def test_to_dict_is_json_serialisable_and_round_trips():
    arch = NNArchitecture()
    data = json.loads(json.dumps(arch.to_dict()))
    rebuilt = [
        LayerConfig(d["input_dim"], d["output_dim"], Activation(d["activation"]))
        for d in data["layers"]
    ]
    assert rebuilt == arch.layers


def test_activation_names_match_serialised_form():
    assert Activation("Sigmoid") is Activation.SIGMOID
    with pytest.raises(ValueError):
        Activation("Tanh")


def test_layer_config_is_frozen():
    layer = LayerConfig(2, 1, Activation.RELU)
    with pytest.raises(AttributeError):
        layer.input_dim = 5  # type: ignore[misc]
    assert layer.input_dim == 2
    assert layer.output_dim == 1