from typing import Sequence
import numpy as np
import array_api_compat as api

backends = [api.array_namespace(np.zeros(1))]

#import torch as tr
#tr.set_default_dtype(tr.float64)
#backends.append(api.array_namespace(tr.zeros(1)))

#import cupy as cp
#backends.append(api.array_namespace(cp.zeros(1)))

def rand_data(xp, *shape: int, seed: int = 0):
    data = np.random.default_rng(seed).random(shape)
    if api.is_cupy_namespace(xp):
        return xp.asarray(data)
    elif api.is_torch_namespace(xp):
        return xp.asarray(data)
    else:
        return data

def sample_symmetric(xp, dim: int, eigvals: Sequence[float] | None = None, seed: int = 0):
    """Random symmetric matrix with the given eigenvalues, normally distributed ones if None."""
    rng = np.random.default_rng(seed)
    q, r = np.linalg.qr(rng.standard_normal((dim, dim)))
    q *= np.sign(np.diagonal(r))[np.newaxis, :]
    if eigvals is None:
        e = rng.normal(0.0, 10.0, dim)
    else:
        e = np.asarray(eigvals, dtype=np.float64)
    mat = q @ np.diag(e) @ q.T
    return xp.asarray(0.5 * (mat + mat.T))

def reference_eigh(mat):
    vals, vecs = np.linalg.eigh(np.asarray(mat))
    return vals, vecs

def orthonormality_error(xp, vecs) -> float:
    gram = vecs.T @ vecs
    return float(xp.max(xp.abs(gram - xp.eye(gram.shape[0], dtype=gram.dtype))))

def residual(xp, mat, vals, vecs) -> float:
    return float(xp.max(xp.abs(mat @ vecs - vecs * vals[xp.newaxis, :])))
