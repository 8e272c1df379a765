"""Parameters shared by several scikit-learn estimators."""

from ..spec import BOOL, FLOAT, INT, NONE, STR, ParamSpec

RANDOM_STATE = ParamSpec(type=(INT, NONE), default=None, min=0)
N_JOBS = ParamSpec(type=(INT, NONE), default=None)
VERBOSE = ParamSpec(type=INT, default=0, min=0)
VERBOSE_FLAG = ParamSpec(type=BOOL, default=False)
WARM_START = ParamSpec(type=BOOL, default=False)
FIT_INTERCEPT = ParamSpec(type=BOOL, default=True)
COPY_X = ParamSpec(type=BOOL, default=True)
POSITIVE = ParamSpec(type=BOOL, default=False)
CLASS_WEIGHT = ParamSpec(type=(STR, NONE), default=None, options=("balanced",))
MAX_FEATURES = ParamSpec(type=(STR, NONE), default=None, options=("sqrt", "log2"))
MAX_DEPTH = ParamSpec(type=(INT, NONE), default=None, min=1)
MAX_LEAF_NODES = ParamSpec(type=(INT, NONE), default=None, min=2)
MIN_SAMPLES_SPLIT = ParamSpec(type=INT, default=2, min=2)
MIN_SAMPLES_LEAF = ParamSpec(type=INT, default=1, min=1)
MIN_WEIGHT_FRACTION_LEAF = ParamSpec(type=FLOAT, default=0.0, min=0.0, max=0.5)
MIN_IMPURITY_DECREASE = ParamSpec(type=FLOAT, default=0.0, min=0.0, max=1.0)
CCP_ALPHA = ParamSpec(type=FLOAT, default=0.0, min=0.0, max=1.0)
C = ParamSpec(type=FLOAT, default=1.0, min=0.0, max=10.0)
KERNEL = ParamSpec(type=STR, default="rbf", options=("rbf", "linear", "poly", "sigmoid"))
GAMMA = ParamSpec(type=(STR, FLOAT), default="scale", options=("scale", "auto"), min=0.0)
DEGREE = ParamSpec(type=INT, default=3, min=1)
COEF0 = ParamSpec(type=FLOAT, default=0.0, min=0.0, max=10.0)
CACHE_SIZE = ParamSpec(type=FLOAT, default=200.0, min=1.0)
SVM_MAX_ITER = ParamSpec(type=INT, default=-1, min=-1)
NEIGHBORS_ALGORITHM = ParamSpec(type=STR, default="auto", options=("auto", "ball_tree", "kd_tree", "brute"))
LEAF_SIZE = ParamSpec(type=INT, default=30, min=1)
KMEANS_INIT = ParamSpec(type=STR, default="k-means++", options=("k-means++", "random"))
KMEANS_N_INIT = ParamSpec(type=(STR, INT), default="auto", options=("auto",), min=1)
N_CLUSTERS = ParamSpec(type=INT, default=8, min=1)


def tol(default: float) -> ParamSpec:
    return ParamSpec(type=FLOAT, default=default, min=0.0, max=1.0)


def max_iter(default: int) -> ParamSpec:
    return ParamSpec(type=INT, default=default, min=1)


def n_estimators(default: int) -> ParamSpec:
    return ParamSpec(type=INT, default=default, min=1)
