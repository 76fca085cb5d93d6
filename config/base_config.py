"""Base configuration for all networks."""

class BaseConfig:
    """Shared configuration across all networks."""

    # Forward trace logging
    trace_forward = False  # Record every layer's inputs/outputs to CSV
    log_dir = "logs"
