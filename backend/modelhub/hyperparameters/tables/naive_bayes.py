"""Naive Bayes estimators and their hyperparameters."""

from ..spec import ARRAY, BOOL, FLOAT, INT, NONE, ParamSpec, model_schema

ALPHA = ParamSpec(type=FLOAT, default=1.0, min=0.0, max=10.0)
FORCE_ALPHA = ParamSpec(type=BOOL, default=True)
FIT_PRIOR = ParamSpec(type=BOOL, default=True)
CLASS_PRIOR = ParamSpec(type=(ARRAY, NONE), default=None)

NAIVE_BAYES_MODELS = {
    "bernoulli_nb": model_schema({
        "alpha": ALPHA,
        "force_alpha": FORCE_ALPHA,
        "binarize": ParamSpec(type=(FLOAT, NONE), default=0.0, min=0.0, max=1.0),
        "fit_prior": FIT_PRIOR,
        "class_prior": CLASS_PRIOR,
    }),
    "categorical_nb": model_schema({
        "alpha": ALPHA,
        "force_alpha": FORCE_ALPHA,
        "fit_prior": FIT_PRIOR,
        "class_prior": CLASS_PRIOR,
        "min_categories": ParamSpec(type=(INT, NONE), default=None, min=1),
    }),
    "complement_nb": model_schema({
        "alpha": ALPHA,
        "force_alpha": FORCE_ALPHA,
        "fit_prior": FIT_PRIOR,
        "class_prior": CLASS_PRIOR,
        "norm": ParamSpec(type=BOOL, default=False),
    }),
    "gaussian_nb": model_schema({
        "priors": ParamSpec(type=(ARRAY, NONE), default=None),
        "var_smoothing": ParamSpec(type=FLOAT, default=1e-9, min=0.0),
    }),
    "multinomial_nb": model_schema({
        "alpha": ALPHA,
        "force_alpha": FORCE_ALPHA,
        "fit_prior": FIT_PRIOR,
        "class_prior": CLASS_PRIOR,
    }),
}
