"""Regression estimators and their hyperparameters."""

from ..spec import BOOL, FLOAT, INT, NONE, STR, ParamSpec, model_schema
from .common import (
    C,
    CACHE_SIZE,
    COEF0,
    COPY_X,
    DEGREE,
    FIT_INTERCEPT,
    GAMMA,
    KERNEL,
    N_JOBS,
    POSITIVE,
    RANDOM_STATE,
    SVM_MAX_ITER,
    VERBOSE_FLAG,
    WARM_START,
    max_iter,
    n_estimators,
    tol,
)

ALPHA = ParamSpec(type=FLOAT, default=1.0, min=0.0, max=10.0)
SELECTION = ParamSpec(type=STR, default="cyclic", options=("cyclic", "random"))
PRECOMPUTE = ParamSpec(type=BOOL, default=False)

REGRESSION_MODELS = {
    "linear_regression": model_schema({
        "fit_intercept": FIT_INTERCEPT,
        "copy_X": COPY_X,
        "n_jobs": N_JOBS,
        "positive": POSITIVE,
    }),
    "ridge": model_schema({
        "alpha": ALPHA,
        "fit_intercept": FIT_INTERCEPT,
        "copy_X": COPY_X,
        "max_iter": ParamSpec(type=(INT, NONE), default=None, min=1),
        "tol": tol(1e-4),
        "solver": ParamSpec(type=STR, default="auto", options=("auto", "svd", "cholesky", "lsqr", "sag")),
        "positive": POSITIVE,
        "random_state": RANDOM_STATE,
    }),
    "lasso": model_schema({
        "alpha": ALPHA,
        "fit_intercept": FIT_INTERCEPT,
        "precompute": PRECOMPUTE,
        "copy_X": COPY_X,
        "max_iter": max_iter(1000),
        "tol": tol(1e-4),
        "warm_start": WARM_START,
        "positive": POSITIVE,
        "random_state": RANDOM_STATE,
        "selection": SELECTION,
    }),
    "elastic_net": model_schema({
        "alpha": ALPHA,
        "l1_ratio": ParamSpec(type=FLOAT, default=0.5, min=0.0, max=1.0),
        "fit_intercept": FIT_INTERCEPT,
        "precompute": PRECOMPUTE,
        "copy_X": COPY_X,
        "max_iter": max_iter(1000),
        "tol": tol(1e-4),
        "warm_start": WARM_START,
        "positive": POSITIVE,
        "random_state": RANDOM_STATE,
        "selection": SELECTION,
    }),
    "svr": model_schema({
        "kernel": KERNEL,
        "degree": DEGREE,
        "gamma": GAMMA,
        "coef0": COEF0,
        "tol": tol(1e-3),
        "C": C,
        "epsilon": ParamSpec(type=FLOAT, default=0.1, min=0.0, max=1.0),
        "shrinking": ParamSpec(type=BOOL, default=True),
        "cache_size": CACHE_SIZE,
        "verbose": VERBOSE_FLAG,
        "max_iter": SVM_MAX_ITER,
    }),
    "adaboost_regressor": model_schema({
        "n_estimators": n_estimators(50),
        "learning_rate": ParamSpec(type=FLOAT, default=1.0, min=0.0, max=10.0),
        "loss": ParamSpec(type=STR, default="linear", options=("linear", "square", "exponential")),
        "random_state": RANDOM_STATE,
    }),
}
