"""Neural network architectures, their hyperparameters and layer fields."""

from ..spec import ARRAY, BOOL, FLOAT, INT, STR, ParamSpec, model_schema

ACTIVATIONS = ("relu", "sigmoid", "tanh", "linear")

LAYERS = ParamSpec(type=ARRAY, default=())
LEARNING_RATE = ParamSpec(type=FLOAT, default=0.01, min=0.0, max=1.0)
REGULARIZATION = ParamSpec(type=FLOAT, default=0.1, min=0.0, max=1.0)
OPTIMIZER = ParamSpec(type=STR, default="adam", options=("adam", "sgd", "rmsprop"))
BATCH_SIZE = ParamSpec(type=INT, default=32, min=1)
EPOCHS = ParamSpec(type=INT, default=100, min=1)
LOSS = ParamSpec(
    type=STR,
    default="mse",
    options=("mse", "mae", "categorical_crossentropy", "binary_crossentropy"),
)
DROPOUT_RATE = ParamSpec(type=FLOAT, default=0.0, min=0.0, max=1.0)
MOMENTUM = ParamSpec(type=FLOAT, default=0.9, min=0.0, max=1.0)
EARLY_STOPPING = ParamSpec(type=BOOL, default=False)
VALIDATION_SPLIT = ParamSpec(type=FLOAT, default=0.2, min=0.0, max=0.5)

NEURAL_MODELS = {
    "multilayer_perceptron": model_schema({
        "layers": LAYERS,
        "learning_rate": LEARNING_RATE,
        "regularization": REGULARIZATION,
        "optimizer": OPTIMIZER,
        "batch_size": BATCH_SIZE,
        "epochs": EPOCHS,
        "activation": ParamSpec(type=STR, default="relu", options=ACTIVATIONS),
        "loss": LOSS,
        "dropout_rate": DROPOUT_RATE,
        "momentum": MOMENTUM,
        "early_stopping": EARLY_STOPPING,
        "validation_split": VALIDATION_SPLIT,
    }),
    "convolutional_neural_network": model_schema({
        "layers": LAYERS,
        "learning_rate": LEARNING_RATE,
        "regularization": REGULARIZATION,
        "optimizer": OPTIMIZER,
        "batch_size": BATCH_SIZE,
        "epochs": EPOCHS,
        "loss": LOSS,
        "dropout_rate": DROPOUT_RATE,
        "momentum": MOMENTUM,
        "filters": ParamSpec(type=INT, default=32, min=1),
        "kernel_size": ParamSpec(type=INT, default=3, min=1),
        "pool_size": ParamSpec(type=INT, default=2, min=1),
        "padding": ParamSpec(type=STR, default="valid", options=("valid", "same")),
        "strides": ParamSpec(type=INT, default=1, min=1),
        "early_stopping": EARLY_STOPPING,
        "validation_split": VALIDATION_SPLIT,
    }),
    "recurrent_neural_network": model_schema({
        "layers": LAYERS,
        "learning_rate": LEARNING_RATE,
        "regularization": REGULARIZATION,
        "optimizer": OPTIMIZER,
        "batch_size": BATCH_SIZE,
        "epochs": EPOCHS,
        "loss": LOSS,
        "dropout_rate": DROPOUT_RATE,
        "momentum": MOMENTUM,
        "rnn_type": ParamSpec(type=STR, default="lstm", options=("lstm", "gru", "simple")),
        "return_sequences": ParamSpec(type=BOOL, default=False),
        "bidirectional": ParamSpec(type=BOOL, default=False),
        "early_stopping": EARLY_STOPPING,
        "validation_split": VALIDATION_SPLIT,
    }),
}

# Fields every layer carries, then the extra fields per architecture.
LAYER_FIELDS = {
    "units": ParamSpec(type=INT, default=64, min=1),
    "activation": ParamSpec(type=STR, default="relu", options=ACTIVATIONS),
}

ARCHITECTURE_LAYER_FIELDS = {
    "multilayer_perceptron": {},
    "convolutional_neural_network": {
        "filters": ParamSpec(type=INT, default=32, min=1),
        "kernel_size": ParamSpec(type=INT, default=3, min=1),
        "pool_size": ParamSpec(type=INT, default=2, min=1),
    },
    "recurrent_neural_network": {
        "return_sequences": ParamSpec(type=BOOL, default=False),
    },
}
