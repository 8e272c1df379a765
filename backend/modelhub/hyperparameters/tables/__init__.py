"""Static hyperparameter tables, one module per model category."""

from .classification import CLASSIFICATION_MODELS
from .clustering import CLUSTERING_MODELS
from .naive_bayes import NAIVE_BAYES_MODELS
from .neural import NEURAL_MODELS
from .regression import REGRESSION_MODELS

MODEL_TABLES = {
    "classification": CLASSIFICATION_MODELS,
    "clustering": CLUSTERING_MODELS,
    "naive_bayes": NAIVE_BAYES_MODELS,
    "regression": REGRESSION_MODELS,
    "neural": NEURAL_MODELS,
}

__all__ = [
    "CLASSIFICATION_MODELS",
    "CLUSTERING_MODELS",
    "MODEL_TABLES",
    "NAIVE_BAYES_MODELS",
    "NEURAL_MODELS",
    "REGRESSION_MODELS",
]
