"""Classification estimators and their hyperparameters."""

from ..spec import BOOL, FLOAT, INT, NONE, STR, ParamSpec, model_schema
from .common import (
    C,
    CACHE_SIZE,
    CCP_ALPHA,
    CLASS_WEIGHT,
    COEF0,
    DEGREE,
    FIT_INTERCEPT,
    GAMMA,
    KERNEL,
    LEAF_SIZE,
    MAX_DEPTH,
    MAX_FEATURES,
    MAX_LEAF_NODES,
    MIN_IMPURITY_DECREASE,
    MIN_SAMPLES_LEAF,
    MIN_SAMPLES_SPLIT,
    MIN_WEIGHT_FRACTION_LEAF,
    N_JOBS,
    NEIGHBORS_ALGORITHM,
    RANDOM_STATE,
    SVM_MAX_ITER,
    VERBOSE,
    VERBOSE_FLAG,
    WARM_START,
    max_iter,
    n_estimators,
    tol,
)

TREE_CRITERION = ParamSpec(type=STR, default="gini", options=("gini", "entropy", "log_loss"))

CLASSIFICATION_MODELS = {
    "logistic_regression": model_schema({
        "penalty": ParamSpec(type=STR, default="l2", options=("l1", "l2", "elasticnet", "none")),
        "dual": ParamSpec(type=BOOL, default=False),
        "tol": tol(1e-4),
        "C": C,
        "fit_intercept": FIT_INTERCEPT,
        "intercept_scaling": ParamSpec(type=FLOAT, default=1.0, min=0.0),
        "class_weight": CLASS_WEIGHT,
        "random_state": RANDOM_STATE,
        "solver": ParamSpec(type=STR, default="lbfgs", options=("liblinear", "lbfgs", "newton-cg", "sag", "saga")),
        "max_iter": max_iter(100),
        "multi_class": ParamSpec(type=STR, default="auto", options=("auto", "ovr", "multinomial")),
        "verbose": VERBOSE,
        "warm_start": WARM_START,
        "n_jobs": N_JOBS,
        "l1_ratio": ParamSpec(type=(FLOAT, NONE), default=None, min=0.0, max=1.0),
    }),
    "decision_tree_classifier": model_schema({
        "criterion": TREE_CRITERION,
        "splitter": ParamSpec(type=STR, default="best", options=("best", "random")),
        "max_depth": MAX_DEPTH,
        "min_samples_split": MIN_SAMPLES_SPLIT,
        "min_samples_leaf": MIN_SAMPLES_LEAF,
        "min_weight_fraction_leaf": MIN_WEIGHT_FRACTION_LEAF,
        "max_features": MAX_FEATURES,
        "random_state": RANDOM_STATE,
        "max_leaf_nodes": MAX_LEAF_NODES,
        "min_impurity_decrease": MIN_IMPURITY_DECREASE,
        "class_weight": CLASS_WEIGHT,
        "ccp_alpha": CCP_ALPHA,
    }),
    "random_forest_classifier": model_schema({
        "n_estimators": n_estimators(100),
        "criterion": TREE_CRITERION,
        "max_depth": MAX_DEPTH,
        "min_samples_split": MIN_SAMPLES_SPLIT,
        "min_samples_leaf": MIN_SAMPLES_LEAF,
        "min_weight_fraction_leaf": MIN_WEIGHT_FRACTION_LEAF,
        "max_features": ParamSpec(type=(STR, NONE), default="sqrt", options=("sqrt", "log2")),
        "max_leaf_nodes": MAX_LEAF_NODES,
        "min_impurity_decrease": MIN_IMPURITY_DECREASE,
        "bootstrap": ParamSpec(type=BOOL, default=True),
        "oob_score": ParamSpec(type=BOOL, default=False),
        "n_jobs": N_JOBS,
        "random_state": RANDOM_STATE,
        "verbose": VERBOSE,
        "warm_start": WARM_START,
        "class_weight": CLASS_WEIGHT,
        "ccp_alpha": CCP_ALPHA,
        "max_samples": ParamSpec(type=(INT, NONE), default=None, min=1),
    }),
    "gradient_boosting_classifier": model_schema({
        "loss": ParamSpec(type=STR, default="log_loss", options=("log_loss", "exponential")),
        "learning_rate": ParamSpec(type=FLOAT, default=0.1, min=0.0, max=1.0),
        "n_estimators": n_estimators(100),
        "subsample": ParamSpec(type=FLOAT, default=1.0, min=0.0, max=1.0),
        "criterion": ParamSpec(type=STR, default="friedman_mse", options=("friedman_mse", "squared_error")),
        "min_samples_split": MIN_SAMPLES_SPLIT,
        "min_samples_leaf": MIN_SAMPLES_LEAF,
        "min_weight_fraction_leaf": MIN_WEIGHT_FRACTION_LEAF,
        "max_depth": ParamSpec(type=(INT, NONE), default=3, min=1),
        "min_impurity_decrease": MIN_IMPURITY_DECREASE,
        "random_state": RANDOM_STATE,
        "max_features": MAX_FEATURES,
        "verbose": VERBOSE,
        "max_leaf_nodes": MAX_LEAF_NODES,
        "warm_start": WARM_START,
        "validation_fraction": ParamSpec(type=FLOAT, default=0.1, min=0.0, max=1.0),
        "n_iter_no_change": ParamSpec(type=(INT, NONE), default=None, min=1),
        "tol": tol(1e-4),
        "ccp_alpha": CCP_ALPHA,
    }),
    "ada_boost_classifier": model_schema({
        "n_estimators": n_estimators(50),
        "learning_rate": ParamSpec(type=FLOAT, default=1.0, min=0.0, max=10.0),
        "algorithm": ParamSpec(type=STR, default="SAMME", options=("SAMME", "SAMME.R")),
        "random_state": RANDOM_STATE,
    }),
    "k_nearest_neighbors_classifier": model_schema({
        "n_neighbors": ParamSpec(type=INT, default=5, min=1),
        "weights": ParamSpec(type=STR, default="uniform", options=("uniform", "distance")),
        "algorithm": NEIGHBORS_ALGORITHM,
        "leaf_size": LEAF_SIZE,
        "p": ParamSpec(type=INT, default=2, min=1),
        "metric": ParamSpec(type=STR, default="minkowski", options=("minkowski", "euclidean", "manhattan")),
        "n_jobs": N_JOBS,
    }),
    "support_vector_classifier": model_schema({
        "C": C,
        "kernel": KERNEL,
        "degree": DEGREE,
        "gamma": GAMMA,
        "coef0": COEF0,
        "shrinking": ParamSpec(type=BOOL, default=True),
        "probability": ParamSpec(type=BOOL, default=False),
        "tol": tol(1e-3),
        "cache_size": CACHE_SIZE,
        "class_weight": CLASS_WEIGHT,
        "verbose": VERBOSE_FLAG,
        "max_iter": SVM_MAX_ITER,
        "decision_function_shape": ParamSpec(type=STR, default="ovr", options=("ovo", "ovr")),
        "break_ties": ParamSpec(type=BOOL, default=False),
        "random_state": RANDOM_STATE,
    }),
}
