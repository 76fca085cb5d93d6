"""Activation functions for dense neurons."""

import math


def identity(x):
    """Linear activation: returns its input unchanged."""
    return x


def relu(x):
    """max(0, x)."""
    return max(0.0, x)


def sigmoid(x):
    """Logistic function 1 / (1 + e^-x)."""
    # Evaluate on the side where exp() cannot overflow
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def tanh(x):
    return math.tanh(x)


ACTIVATIONS = {
    'identity': identity,
    'linear': identity,
    'relu': relu,
    'sigmoid': sigmoid,
    'tanh': tanh,
}


def get_activation(activation):
    """
    Resolve an activation to a callable.

    Args:
        activation: Callable float -> float, or registry name (case-insensitive)

    Returns:
        fn: Activation callable
    """
    if callable(activation):
        return activation
    if isinstance(activation, str):
        fn = ACTIVATIONS.get(activation.lower())
        if fn is None:
            raise ValueError(
                f"Unknown activation: {activation} (choose from {sorted(ACTIVATIONS)})"
            )
        return fn
    raise ValueError(f"Activation must be a callable or a name, got {type(activation).__name__}")


def activation_name(fn):
    """Return the registry name of fn, or its __name__ if unregistered."""
    for name, registered in ACTIVATIONS.items():
        if registered is fn:
            return name
    return getattr(fn, '__name__', repr(fn))
