"""Pydantic request and response schemas for the HTTP API."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ConfigurationState(BaseModel):
    """Current values of a configuration, as held by the client."""

    hyperparameter_values: Dict[str, Any] = Field(default_factory=dict)


class ParameterUpdate(ConfigurationState):
    """Set one hyperparameter from a raw form value."""

    value: Any = None


class LayerFieldUpdate(ConfigurationState):
    """Set one field of one neural network layer."""

    field: str
    value: Any = None


class ModelSelection(BaseModel):
    """A model picked for a classification, optionally with edited values."""

    category: str
    name: str
    hyperparameter_values: Dict[str, Any] = Field(default_factory=dict)


class ClassificationCreate(BaseModel):
    classification_name: str
    models: List[ModelSelection] = Field(default_factory=list)


class ClassificationRename(BaseModel):
    classification_name: str


class ModelSubmission(BaseModel):
    """A finalized model configuration to persist on the backend."""

    model_config = ConfigDict(protected_namespaces=())

    category: Optional[str] = None
    model_name: str
    hyperparameter_values: Dict[str, Any] = Field(default_factory=dict)


class ModelUpdate(ModelSubmission):
    classification_id: str


class ModelMetricsCreate(BaseModel):
    name: str
    modelType: Optional[str] = None
    accuracy: Optional[float] = None
    precision: Optional[float] = None
    recall: Optional[float] = None
    f1Score: Optional[float] = None
    trainingTime: Optional[float] = None
    parameters: Optional[Dict[str, Any]] = None
    userId: Optional[str] = None
    datasetName: Optional[str] = None
    status: str = "completed"


class TrainingRequest(BaseModel):
    modelType: str
    category: Optional[str] = None
    datasetId: Optional[str] = None
    userId: Optional[str] = None
    hyperparameters: Dict[str, Any] = Field(default_factory=dict)


class TrainingJobUpdate(BaseModel):
    status: Optional[str] = None
    progress: Optional[float] = Field(default=None, ge=0.0, le=100.0)
    error: Optional[str] = None
    metrics: Optional[ModelMetricsCreate] = None
