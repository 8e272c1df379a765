"""Clustering estimators and their hyperparameters."""

from ..spec import BOOL, FLOAT, INT, NONE, STR, ParamSpec, model_schema
from .common import (
    COPY_X,
    KMEANS_INIT,
    KMEANS_N_INIT,
    LEAF_SIZE,
    N_CLUSTERS,
    N_JOBS,
    NEIGHBORS_ALGORITHM,
    RANDOM_STATE,
    VERBOSE,
    VERBOSE_FLAG,
    max_iter,
    tol,
)

DISTANCE_METRIC = ParamSpec(type=STR, default="euclidean", options=("euclidean", "manhattan", "cosine"))

CLUSTERING_MODELS = {
    "agglomerative_clustering": model_schema({
        "n_clusters": ParamSpec(type=(INT, NONE), default=2, min=1),
        "metric": DISTANCE_METRIC,
        "compute_full_tree": ParamSpec(type=(STR, BOOL), default="auto", options=("auto",)),
        "linkage": ParamSpec(type=STR, default="ward", options=("ward", "complete", "average", "single")),
        "distance_threshold": ParamSpec(type=(FLOAT, NONE), default=None, min=0.0),
        "compute_distances": ParamSpec(type=BOOL, default=False),
    }),
    "birch_clustering": model_schema({
        "threshold": ParamSpec(type=FLOAT, default=0.5, min=0.0),
        "branching_factor": ParamSpec(type=INT, default=50, min=2),
        "n_clusters": ParamSpec(type=(INT, NONE), default=3, min=1),
        "compute_labels": ParamSpec(type=BOOL, default=True),
        "copy": ParamSpec(type=BOOL, default=True),
    }),
    "dbscan": model_schema({
        "eps": ParamSpec(type=FLOAT, default=0.5, min=0.0),
        "min_samples": ParamSpec(type=INT, default=5, min=1),
        "metric": DISTANCE_METRIC,
        "algorithm": NEIGHBORS_ALGORITHM,
        "leaf_size": LEAF_SIZE,
        "p": ParamSpec(type=(FLOAT, NONE), default=None, min=1.0),
        "n_jobs": N_JOBS,
    }),
    "k_means_clustering": model_schema({
        "n_clusters": N_CLUSTERS,
        "init": KMEANS_INIT,
        "n_init": KMEANS_N_INIT,
        "max_iter": max_iter(300),
        "tol": tol(1e-4),
        "verbose": VERBOSE,
        "random_state": RANDOM_STATE,
        "copy_x": COPY_X,
        "algorithm": ParamSpec(type=STR, default="lloyd", options=("lloyd", "elkan")),
    }),
    "mean_shift_clustering": model_schema({
        "bandwidth": ParamSpec(type=(FLOAT, NONE), default=None, min=0.0),
        "bin_seeding": ParamSpec(type=BOOL, default=False),
        "min_bin_freq": ParamSpec(type=INT, default=1, min=1),
        "cluster_all": ParamSpec(type=BOOL, default=True),
        "n_jobs": N_JOBS,
        "max_iter": max_iter(300),
    }),
    "mini_batch_kmeans": model_schema({
        "n_clusters": N_CLUSTERS,
        "init": KMEANS_INIT,
        "max_iter": max_iter(100),
        "batch_size": ParamSpec(type=INT, default=1024, min=1),
        "verbose": VERBOSE,
        "compute_labels": ParamSpec(type=BOOL, default=True),
        "random_state": RANDOM_STATE,
        "tol": tol(0.0),
        "max_no_improvement": ParamSpec(type=(INT, NONE), default=10, min=1),
        "init_size": ParamSpec(type=(INT, NONE), default=None, min=1),
        "n_init": KMEANS_N_INIT,
        "reassignment_ratio": ParamSpec(type=FLOAT, default=0.01, min=0.0, max=1.0),
    }),
    "spectral_clustering": model_schema({
        "n_clusters": N_CLUSTERS,
        "eigen_solver": ParamSpec(type=(STR, NONE), default=None, options=("arpack", "lobpcg", "amg")),
        "n_components": ParamSpec(type=(INT, NONE), default=None, min=1),
        "random_state": RANDOM_STATE,
        "n_init": ParamSpec(type=INT, default=10, min=1),
        "gamma": ParamSpec(type=FLOAT, default=1.0, min=0.0, max=10.0),
        "affinity": ParamSpec(type=STR, default="rbf", options=("rbf", "nearest_neighbors")),
        "n_neighbors": ParamSpec(type=INT, default=10, min=1),
        "eigen_tol": ParamSpec(type=(STR, FLOAT), default="auto", options=("auto",), min=0.0),
        "assign_labels": ParamSpec(type=STR, default="kmeans", options=("kmeans", "discretize", "cluster_qr")),
        "degree": ParamSpec(type=INT, default=3, min=1),
        "coef0": ParamSpec(type=FLOAT, default=1.0, min=0.0, max=10.0),
        "n_jobs": N_JOBS,
        "verbose": VERBOSE_FLAG,
    }),
}
