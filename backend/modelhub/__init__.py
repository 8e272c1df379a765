"""ModelHub backend: hyperparameter schemas, configurations and dashboard APIs."""

__version__ = "1.0.0"
