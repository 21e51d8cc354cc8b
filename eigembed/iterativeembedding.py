# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Optional
from dataclasses import dataclass
import logging
import os
import time
import numpy as np
import scipy.sparse.linalg as spla

from .backend import namespace_of_matrix, is_numpy_namespace
from .eighsolver import EigHSolver
from .eigenmethod import EigenMethod
from .embeddingresult import EmbeddingResult
from .errors import FeatureUnavailable, InvalidArgument, SolverFailure
from .matrixoperation import MatrixOperation
from .utils import check_embedding_input, check_non_neg, check_pos

logger = logging.getLogger(__name__)

#: Environment variable disabling the iterative solver.
DISABLE_ENV = "EIGEMBED_NO_ARPACK"

def iterative_available() -> bool:
    """Whether the iterative eigensolver may be used."""
    return os.environ.get(DISABLE_ENV, "") in ("", "0")

@dataclass
class IterativeEmbedding:
    """
    Embedding by the implicitly restarted Lanczos method of ARPACK. Only the operation is used to
    access the weight matrix. Product operations ("LA") yield the largest eigenpairs, solve
    operations ("SM") are run in inverse mode and yield the smallest eigenpairs. The computed
    eigenpairs are sorted ascending and the first skip of them are discarded, so skip drops the
    smallest of the computed pairs for both spectrum codes.
    """

    #: Relative accuracy of the eigenvalues, 0 means machine precision.
    tol: float = 0.0

    #: Maximum number of Arnoldi update iterations, None uses the ARPACK default.
    max_iter: Optional[int] = None

    #: Number of Lanczos vectors, None uses the ARPACK default.
    ncv: Optional[int] = None

    #: Seed or generator of the starting vector. None lets ARPACK pick a random one.
    seed: Optional[int | np.random.Generator] = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "tol":
            check_non_neg(name, value)
        elif name in ("max_iter", "ncv") and value is not None:
            check_pos(name, value)
        elif name == "seed" and not (value is None or isinstance(value, (int, np.random.Generator))):
            raise InvalidArgument(f"seed must be an integer, a numpy Generator or None, got {value!r}")
        super().__setattr__(name, value)

    def embed(
            self,
            mat: Any,
            operation: Optional[MatrixOperation],
            target_dimension: int,
            skip: int = 0, /) -> EmbeddingResult:
        size = check_embedding_input(mat, operation, target_dimension, skip)
        if operation is None:
            raise InvalidArgument("The iterative eigensolver requires a matrix operation.")
        if operation.which not in ("LA", "SM"):
            raise InvalidArgument(f"Unknown spectrum code {operation.which!r}, expected 'LA' or 'SM'.")
        if not iterative_available():
            raise FeatureUnavailable(f"The iterative eigensolver is disabled by {DISABLE_ENV}.")
        if not is_numpy_namespace(namespace_of_matrix(mat)):
            raise FeatureUnavailable("The iterative eigensolver only supports numpy and scipy.sparse matrices.")

        stamp = time.time()
        nev = target_dimension + skip
        dtype = np.result_type(mat.dtype, np.float64)
        if nev < size - 1:
            vals, vecs = self._arpack(operation, size, nev, dtype)
        else:
            vals, vecs = self._materialized(operation, size, nev, dtype)

        order = np.argsort(vals)
        vals, vecs = vals[order], vecs[:, order]
        keep = slice(skip, nev)

        elapsed = time.time() - stamp
        logger.debug("ARPACK eigendecomposition of %d eigenpairs took %.6f seconds", nev, elapsed)
        return EmbeddingResult(embedding=vecs[:, keep],
                               eigenvalues=vals[keep],
                               method=EigenMethod.ITERATIVE,
                               rank=nev,
                               requested=nev,
                               time=elapsed)

    def _arpack(
            self,
            operation: MatrixOperation,
            size: int,
            nev: int,
            dtype: Any) -> tuple[np.ndarray, np.ndarray]:
        op = spla.LinearOperator((size, size), matvec=operation, matmat=operation, dtype=dtype)
        kwargs: dict[str, Any] = dict(k=nev, tol=self.tol, maxiter=self.max_iter)
        if self.ncv is not None:
            # recommended minimum of 2*k+1, hard maximum of N
            kwargs["ncv"] = min(max(self.ncv, 2 * nev + 1), size)
        if isinstance(self.seed, np.random.Generator):
            kwargs["v0"] = self.seed.uniform(-1.0, 1.0, size)
        elif self.seed is not None:
            kwargs["v0"] = np.random.default_rng(self.seed).uniform(-1.0, 1.0, size)
        kwargs["which"] = "LA" if operation.which == "LA" else "LM"

        try:
            vals, vecs = spla.eigsh(op, **kwargs)
        except spla.ArpackNoConvergence as err:
            raise SolverFailure(
                f"ARPACK did not converge, {len(err.eigenvalues)} of {nev} eigenpairs found.") from err
        except spla.ArpackError as err:
            raise SolverFailure(f"ARPACK failed: {err}") from err

        if operation.which == "SM":
            # inverse mode, eigenvalues of the inverse are reciprocal
            vals = 1.0 / vals
        return vals, vecs

    def _materialized(
            self,
            operation: MatrixOperation,
            size: int,
            nev: int,
            dtype: Any) -> tuple[np.ndarray, np.ndarray]:
        # ARPACK needs nev < size - 1, decompose the operation applied to the identity instead
        dense = np.asarray(operation(np.eye(size, dtype=dtype)))
        vals, vecs = EigHSolver()(0.5 * (dense + dense.T))
        if operation.which == "SM":
            select = np.argsort(-np.abs(vals))[:nev]
            return 1.0 / vals[select], vecs[:, select]
        return vals[size - nev:], vecs[:, size - nev:]
