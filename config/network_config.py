"""Dense network configuration."""

from .base_config import BaseConfig


class NetworkConfig(BaseConfig):
    """Configuration for a zero-initialized dense network."""

    # Architecture
    input_size = 2            # Width of the network input vector
    layer_sizes = [3, 1]      # Neurons per layer, first to last
    activations = ["relu", "identity"]  # One per layer, or a single name for all
