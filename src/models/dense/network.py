"""Feed-forward network built from a chain of dense layers."""

import os
import time

from src.utils.csv_logger import CSVLogger

from .activation import activation_name, get_activation
from .errors import check_length
from .layer import Layer
from .neuron import Neuron
from .vector import NumericVector


class Network:
    """Ordered chain of layers; each layer's output feeds the next."""

    def __init__(self, layers):
        """
        Args:
            layers: Sequence of Layer, first to last
        """
        self._layers = list(layers)
        if not self._layers:
            raise ValueError("Network needs at least one layer")

        for prev, layer in zip(self._layers, self._layers[1:]):
            check_length('Network', prev.output_size(), layer.input_size())

    @property
    def layers(self):
        return tuple(self._layers)

    def input_size(self):
        return self._layers[0].input_size()

    def output_size(self):
        return self._layers[-1].output_size()

    def num_layers(self):
        return len(self._layers)

    def num_parameters(self):
        return sum(layer.num_parameters() for layer in self._layers)

    def forward(self, inputs, logger=None):
        """
        Run every layer in order.

        Args:
            inputs: NumericVector of length input_size()
            logger: Optional CSVLogger receiving one row per layer

        Returns:
            output: NumericVector of length output_size()
        """
        x = NumericVector(inputs)
        run_id = logger.new_run() if logger is not None else None

        for index, layer in enumerate(self._layers):
            y = layer.forward(x)
            if logger is not None:
                logger.log_layer(run_id, index, layer, x, y, _layer_activation(layer))
            x = y

        return x

    def summary(self):
        """Text table of layer shapes and parameter counts."""
        lines = [
            "Layer   Shape            Params   Activation",
            "=" * 50,
        ]
        for index, layer in enumerate(self._layers):
            shape = f"({layer.input_size()} -> {layer.output_size()})"
            lines.append(
                f"{index:<7} {shape:<16} {layer.num_parameters():>6}   {_layer_activation(layer)}"
            )
        lines.append("=" * 50)
        lines.append(f"Total params: {self.num_parameters()}")
        return "\n".join(lines)

    def __repr__(self):
        sizes = [self.input_size()] + [layer.output_size() for layer in self._layers]
        return f"Network({' -> '.join(str(size) for size in sizes)})"


def _layer_activation(layer):
    names = []
    for neuron in layer.neurons:
        name = activation_name(neuron.activation)
        if name not in names:
            names.append(name)
    return ','.join(names)


def build_network(config):
    """
    Build a zero-initialized network from a config.

    Every neuron gets zero weights and bias with its layer's configured activation.

    Args:
        config: Object with input_size, layer_sizes, activations

    Returns:
        network: Network
    """
    layer_sizes = list(config.layer_sizes)
    activations = config.activations
    if isinstance(activations, str):
        activations = [activations] * len(layer_sizes)
    activations = list(activations)

    if len(activations) != len(layer_sizes):
        raise ValueError(
            f"Got {len(activations)} activations for {len(layer_sizes)} layers"
        )

    layers = []
    width = config.input_size
    for size, activation in zip(layer_sizes, activations):
        if size < 1:
            raise ValueError(f"Layer needs at least one neuron, got {size}")
        fn = get_activation(activation)
        layers.append(Layer.from_neurons(
            Neuron(NumericVector.zeros(width), 0.0, fn) for _ in range(size)
        ))
        width = size

    return Network(layers)


def create_trace_logger(config):
    """
    Create a CSV forward trace logger if config.trace_forward is set.

    Returns:
        logger: CSVLogger, or None when tracing is disabled
    """
    if not getattr(config, 'trace_forward', False):
        return None

    log_dir = getattr(config, 'log_dir', 'logs')
    os.makedirs(log_dir, exist_ok=True)
    timestamp = time.strftime('%Y%m%d_%H%M%S')
    csv_path = os.path.join(log_dir, f'forward_trace_{timestamp}.csv')
    logger = CSVLogger(csv_path, config)
    print(f"✓ Forward trace logging enabled: {csv_path}")
    return logger
