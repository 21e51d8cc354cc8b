# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any
import numpy as np
import scipy.sparse as sp
import array_api_compat as api
from array_api_compat import to_device, device

from .array_namespace import ArrayNamespace, ArrayLike


def get_namespace(obj: Any) -> ArrayNamespace:
    if not api.is_array_api_obj(obj):
        try:
            obj = obj.zeros(1)
        except AttributeError:
            raise TypeError("Provided object is not a recognized array or namespace.")
    return api.array_namespace(obj) # type: ignore

def namespace_of_arrays[T: ArrayLike](*arrays: T) -> ArrayNamespace[T]:
    return api.array_namespace(*arrays) # type: ignore

def is_sparse(mat: Any) -> bool:
    return sp.issparse(mat)

def namespace_of_matrix(mat: Any) -> ArrayNamespace:
    """Namespace of a weight matrix. Sparse scipy matrices live in the numpy namespace."""
    if is_sparse(mat):
        return api.array_namespace(np.empty(0))
    return api.array_namespace(mat) # type: ignore

def is_numpy_namespace(xp: ArrayNamespace) -> bool:
    return api.is_numpy_namespace(xp)

def matrix_shape(mat: Any) -> tuple[int, int]:
    shp = mat.shape
    if len(shp) != 2 or any(s is None for s in shp):
        raise ValueError(f"Expected a matrix with known shape, got shape {shp}.")
    return int(shp[0]), int(shp[1])

def densify[T: ArrayLike](mat: Any) -> T:
    """Dense copy of the weight matrix in its own namespace."""
    if is_sparse(mat):
        return np.asarray(mat.toarray()) # type: ignore
    xp = namespace_of_arrays(mat)
    return xp.asarray(mat, copy=True)

def to_host(array: Any) -> np.ndarray:
    return np.asarray(to_device(array, "cpu"))
