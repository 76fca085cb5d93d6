"""CSV logger for network forward passes."""

import csv
import uuid
from datetime import datetime
from pathlib import Path

from src.models.dense.activation import activation_name


class CSVLogger:
    """Logger for writing per-layer forward pass records to a CSV file."""

    def __init__(self, log_path, config=None):
        """
        Initialize CSV logger.

        Args:
            log_path: Path to CSV file
            config: Network configuration object (optional)
        """
        self.log_path = Path(log_path)
        self.config = config
        self.log_path.parent.mkdir(parents=True, exist_ok=True)

        # Check if file exists to determine if we need to write header
        self.file_exists = self.log_path.exists()

        self.columns = self._get_columns()

        if not self.file_exists:
            self._write_header()

    def _get_columns(self):
        """Define all columns for the CSV file."""
        columns = [
            # Timestamp and identification
            'timestamp',
            'run_id',
            'layer_index',

            # Layer shape
            'input_size',
            'output_size',
            'activation',

            # Values, rendered as '(v0, v1, ...)'
            'inputs',
            'outputs',

            # Network architecture (from config)
            'input_size_config',
            'layer_sizes',
            'activations',
        ]

        return columns

    def _write_header(self):
        """Write CSV header."""
        with open(self.log_path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=self.columns)
            writer.writeheader()

    def new_run(self):
        """Return an identifier grouping the rows of one forward pass."""
        return uuid.uuid4().hex[:12]

    def log(self, record):
        """
        Log one record to the CSV file.

        Args:
            record: Dictionary of column values
        """
        record = dict(record)
        if 'timestamp' not in record:
            record['timestamp'] = datetime.now().strftime('%Y-%m-%d %H:%M:%S')

        for key, value in self._get_config_params().items():
            if key not in record:
                record[key] = value

        # Missing columns are written as empty strings
        row = {col: record.get(col, '') for col in self.columns}

        with open(self.log_path, 'a', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=self.columns)
            writer.writerow(row)

    def log_layer(self, run_id, layer_index, layer, inputs, outputs, activation=''):
        """
        Convenience method to log one layer of a forward pass.

        Args:
            run_id: Identifier from new_run()
            layer_index: Position of the layer in the network
            layer: Layer that produced the outputs
            inputs: NumericVector fed to the layer
            outputs: NumericVector produced by the layer
            activation: Activation name(s) of the layer's neurons
        """
        self.log({
            'run_id': run_id,
            'layer_index': layer_index,
            'input_size': layer.input_size(),
            'output_size': layer.output_size(),
            'activation': activation,
            'inputs': inputs.display(),
            'outputs': outputs.display(),
        })

    def _get_config_params(self):
        """Extract relevant parameters from config."""
        params = {}

        if hasattr(self.config, 'input_size'):
            params['input_size_config'] = self.config.input_size
        if hasattr(self.config, 'layer_sizes'):
            params['layer_sizes'] = ' '.join(str(size) for size in self.config.layer_sizes)
        if hasattr(self.config, 'activations'):
            activations = self.config.activations
            if isinstance(activations, str):
                activations = [activations]
            params['activations'] = ' '.join(
                activation if isinstance(activation, str) else activation_name(activation)
                for activation in activations
            )

        return params

    def read_rows(self):
        """Read back all logged rows as dictionaries."""
        with open(self.log_path, 'r', newline='', encoding='utf-8') as f:
            return list(csv.DictReader(f))
