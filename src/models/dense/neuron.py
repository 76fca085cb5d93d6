"""Single dense neuron."""

from .activation import get_activation, identity
from .errors import check_length
from .vector import NumericVector


class Neuron:
    """Computes activation(weights · inputs + bias)."""

    def __init__(self, weights, bias=0.0, activation=identity):
        """
        Args:
            weights: Weight values (copied)
            bias: Bias scalar
            activation: Callable float -> float, or activation name
        """
        self._weights = NumericVector(weights)
        self._bias = float(bias)
        self._activation = get_activation(activation)

    @classmethod
    def zeros(cls, input_size):
        """Zero weights, zero bias, identity activation."""
        return cls(NumericVector.zeros(input_size), 0.0, identity)

    @property
    def weights(self):
        return self._weights.copy()

    @property
    def bias(self):
        return self._bias

    @property
    def activation(self):
        return self._activation

    def input_size(self):
        return self._weights.length()

    def num_parameters(self):
        return self.input_size() + 1

    def forward(self, inputs):
        """
        Args:
            inputs: NumericVector of length input_size()

        Returns:
            output: Activated scalar
        """
        check_length('Neuron.forward', self.input_size(), len(inputs))
        return float(self._activation(self._weights.dot(inputs) + self._bias))

    def __repr__(self):
        return (f"Neuron(weights={self._weights.tolist()}, bias={self._bias}, "
                f"activation={getattr(self._activation, '__name__', self._activation)})")
