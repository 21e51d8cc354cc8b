# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Optional
from dataclasses import dataclass, field
import logging
import time
import numpy as np

from .backend import ArrayLike, ArrayNamespace, device, is_sparse, namespace_of_arrays, namespace_of_matrix
from .eighsolver import EigHSolver
from .eigenmethod import EigenMethod
from .embeddingresult import EmbeddingResult
from .errors import InvalidArgument
from .matrixeigenvaluedecomposition import MatrixEigenvalueDecomposition
from .matrixleastsquares import MatrixLeastSquares
from .matrixoperation import MatrixOperation
from .qrdecomposition import QRLstsqSolver
from .utils import check_embedding_input, check_non_neg

logger = logging.getLogger(__name__)

type SeedLike = int | np.random.Generator | None

def gaussian_sketch(rng: np.random.Generator, rows: int, cols: int) -> np.ndarray:
    """
    Matrix of independent standard normal samples drawn by the Box-Muller transform.
    Every pair of columns shares one draw of two uniforms from the open interval (0, 1),
    a trailing odd column only uses the cosine term.
    """
    pairs = (cols + 1) // 2
    lower = np.nextafter(0.0, 1.0)
    v1 = rng.uniform(lower, 1.0, size=(rows, pairs))
    v2 = rng.uniform(lower, 1.0, size=(rows, pairs))
    length = np.sqrt(-2.0 * np.log(v1))
    angle = 2.0 * np.pi * v2

    sketch = np.empty((rows, cols), dtype=np.float64)
    sketch[:, 0::2] = length * np.cos(angle)
    sketch[:, 1::2] = (length * np.sin(angle))[:, :cols // 2]
    return sketch

def gram_schmidt[T: ArrayLike](basis: T, threshold: float) -> int:
    """
    Orthonormalize the columns of basis in place with the modified Gram-Schmidt process.
    If the residual of a column drops below threshold, this column and all following ones
    are set to zero. Returns the number of orthonormal columns.
    """
    xp = namespace_of_arrays(basis)
    ncols = basis.shape[1]
    for i in range(ncols):
        col = basis[:, i]
        for j in range(i):
            col = col - xp.sum(col * basis[:, j]) * basis[:, j]
        norm = float(xp.linalg.vector_norm(col))
        if norm < threshold or not norm > 0.0:
            basis[:, i:] = 0.0
            return i
        basis[:, i] = col / norm
    return ncols

@dataclass
class RandomizedEmbedding:
    """
    Randomized eigendecomposition. The range of the operation is sampled with a Gaussian
    sketch, orthonormalized, and the operation is projected onto this subspace. The small
    projected problem is solved exactly and its eigenvectors are lifted back
    (Rayleigh-Ritz). Only the product with the operation is used, the eigenpairs are those
    of the operation in ascending order.

    The random stream is explicit: an integer seed makes every call reproducible, a
    :class:`numpy.random.Generator` is advanced by every call, None draws fresh entropy.
    """

    #: Source of the random sketch.
    seed: SeedLike = None

    #: Residual norm below which a sketch column is treated as numerically zero.
    rank_tol: float = 1e-4

    #: Scale rank_tol by the largest column norm of the sampled range.
    relative_tol: bool = False

    #: Eigenvalue solver for the projected matrix.
    solver: MatrixEigenvalueDecomposition = EigHSolver()

    #: Least squares solver for the projection.
    lstsq: MatrixLeastSquares = field(default_factory=QRLstsqSolver)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "rank_tol":
            check_non_neg(name, value)
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
            raise InvalidArgument("The randomized eigensolver requires a matrix operation.")

        stamp = time.time()
        xp = namespace_of_matrix(mat)
        nev = target_dimension + skip

        sketch = self._sketch(xp, mat, size, nev)
        basis = xp.asarray(operation(sketch), copy=True)

        threshold = self.rank_tol
        if self.relative_tol:
            threshold *= float(xp.max(xp.linalg.vector_norm(basis, axis=0)))
        rank = gram_schmidt(basis, threshold)
        if rank < nev:
            logger.warning("Randomized sketch has rank %d, %d eigenpairs requested. "
                           "Trailing eigenpairs are not meaningful.", rank, nev)

        image = operation(basis)
        reduced = xp.zeros((nev, nev), dtype=basis.dtype, device=device(basis))
        if rank > 0:
            reduced[:rank, :rank] = self.lstsq(basis[:, :rank], image[:, :rank])
        reduced = 0.5 * (reduced + reduced.T)
        vals, vecs = self.solver(reduced)

        elapsed = time.time() - stamp
        logger.debug("Randomized eigendecomposition of %d eigenpairs took %.6f seconds", nev, elapsed)
        return EmbeddingResult(embedding=(basis @ vecs)[:, skip:nev],
                               eigenvalues=vals[skip:nev],
                               method=EigenMethod.RANDOMIZED,
                               rank=rank,
                               requested=nev,
                               time=elapsed)

    def generator(self) -> np.random.Generator:
        """Random generator used for the next sketch."""
        if isinstance(self.seed, np.random.Generator):
            return self.seed
        return np.random.default_rng(self.seed)

    def _sketch(self, xp: ArrayNamespace, mat: Any, size: int, nev: int) -> Any:
        sketch = gaussian_sketch(self.generator(), size, nev)
        dtype = mat.dtype if xp.isdtype(mat.dtype, "real floating") else xp.float64
        if is_sparse(mat):
            return sketch.astype(dtype)
        return xp.asarray(sketch, dtype=dtype, device=device(mat))
