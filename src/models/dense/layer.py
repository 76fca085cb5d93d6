"""Dense layer of neurons sharing one input width."""

import numpy as np

from .activation import get_activation
from .errors import check_length
from .neuron import Neuron
from .vector import NumericVector


class Layer:
    """Ordered collection of neurons; output[i] = neurons[i].forward(inputs)."""

    def __init__(self, input_size, output_size):
        """
        Build a layer of zero-initialized neurons.

        Args:
            input_size: Width of the input vector
            output_size: Number of neurons (must be at least 1)
        """
        if output_size < 1:
            raise ValueError(f"Layer needs at least one neuron, got output_size={output_size}")
        if input_size < 0:
            raise ValueError(f"input_size must be non-negative, got {input_size}")

        self._neurons = [Neuron.zeros(input_size) for _ in range(output_size)]

    @classmethod
    def from_neurons(cls, neurons):
        """
        Build a layer from explicit neurons.

        All neurons must share the same input size.
        """
        neurons = list(neurons)
        if not neurons:
            raise ValueError("Layer needs at least one neuron")

        width = neurons[0].input_size()
        for neuron in neurons[1:]:
            check_length('Layer.from_neurons', width, neuron.input_size())

        layer = cls.__new__(cls)
        layer._neurons = neurons
        return layer

    @classmethod
    def from_weights(cls, weights, biases, activation='identity'):
        """
        Build a layer from a weight matrix.

        Args:
            weights: [output_size, input_size] nested sequence or array
            biases: One bias per neuron
            activation: Activation shared by every neuron

        Returns:
            layer: Layer with one neuron per weight row
        """
        weights = np.asarray(weights, dtype=np.float64)
        if weights.ndim != 2:
            raise ValueError(f"Weight matrix must be 2-D, got shape {weights.shape}")

        biases = NumericVector(biases)
        check_length('Layer.from_weights', weights.shape[0], biases.length())

        fn = get_activation(activation)
        return cls.from_neurons(
            Neuron(row, bias, fn) for row, bias in zip(weights, biases)
        )

    @property
    def neurons(self):
        return tuple(self._neurons)

    def input_size(self):
        return self._neurons[0].input_size()

    def output_size(self):
        return len(self._neurons)

    def num_parameters(self):
        return sum(neuron.num_parameters() for neuron in self._neurons)

    def weight_matrix(self):
        """Weights as an [output_size, input_size] array (copy)."""
        return np.stack([neuron.weights.to_numpy() for neuron in self._neurons])

    def biases(self):
        return NumericVector([neuron.bias for neuron in self._neurons])

    def forward(self, inputs):
        """
        Args:
            inputs: NumericVector of length input_size()

        Returns:
            output: NumericVector of length output_size()
        """
        check_length('Layer.forward', self.input_size(), len(inputs))

        output = NumericVector.zeros(self.output_size())
        for i, neuron in enumerate(self._neurons):
            output[i] = neuron.forward(inputs)
        return output

    def __repr__(self):
        return f"Layer(input_size={self.input_size()}, output_size={self.output_size()})"
