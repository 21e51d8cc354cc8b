# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Optional
from dataclasses import dataclass
import h5py

from .backend import ArrayNamespace, get_namespace, is_sparse
from .eigenmethod import EigenMethod
from .embeddingresult import EmbeddingResult
from .matrixoperation import MatrixOperation
from .denseembedding import DenseEmbedding
from .iterativeembedding import IterativeEmbedding
from .randomizedembedding import RandomizedEmbedding, SeedLike
from .eigenembedding import eigen_embedding
from .operations import (
    DenseMatrixOperation,
    DenseImplicitSquareMatrixOperation,
    DenseImplicitSquareSymmetricMatrixOperation,
    DenseInverseMatrixOperation,
    SparseInverseMatrixOperation,
)
from .options import EmbeddingOptions, get_options as _get_options, set_options as _set_options
from .io import write as _write, read as _read

@dataclass(frozen=True)
class EigEmbed[NDArray: Any]:
    """
    Entry point of eigembed, bound to one array namespace. It creates operations and
    eigensolvers and computes embeddings with the options active for its namespace.
    """

    #: Array namespace for the underlying array library.
    namespace: ArrayNamespace[NDArray]

    def __init__(self, namespace: Any) -> None:
        object.__setattr__(self, "namespace", get_namespace(namespace))
        _set_options(self.options())

    #-------------------------------------------------------------------------------------------------
    # operations

    def dense_operation(self, mat: NDArray) -> DenseMatrixOperation[NDArray]:
        """
        :math:`x \\mapsto Mx`.\n
        Product with the weight matrix, targets the largest eigenvalues.
        """
        return DenseMatrixOperation(mat)

    def square_operation(self, mat: NDArray, symmetric: bool = True) -> MatrixOperation[NDArray]:
        """
        :math:`x \\mapsto M(Mx)` or :math:`x \\mapsto M^T(Mx)`.\n
        Product with the square of the weight matrix without forming it, targets the largest
        eigenvalues. With symmetric=False the Gram matrix :math:`M^TM` is used.
        """
        if symmetric:
            return DenseImplicitSquareSymmetricMatrixOperation(mat)
        return DenseImplicitSquareMatrixOperation(mat)

    def inverse_operation(self, mat: Any) -> MatrixOperation:
        """
        :math:`x \\mapsto M^{-1}x`.\n
        Solution of a linear system with the weight matrix, targets the smallest eigenvalues.
        Sparse matrices use a sparse LU factorization, dense ones a dense LU factorization.
        """
        if is_sparse(mat):
            return SparseInverseMatrixOperation(mat)
        return DenseInverseMatrixOperation(mat)

    #-------------------------------------------------------------------------------------------------
    # eigensolvers

    def iterative(
            self,
            tol: float = 0.0,
            max_iter: Optional[int] = None,
            ncv: Optional[int] = None,
            seed: SeedLike = None) -> IterativeEmbedding:
        """
        Iterative eigensolver (ARPACK) computing only the requested eigenpairs.
        """
        return IterativeEmbedding(tol=tol, max_iter=max_iter, ncv=ncv, seed=seed)

    def dense(self) -> DenseEmbedding:
        """
        Full dense eigendecomposition, cubic in the size of the matrix.
        """
        return DenseEmbedding()

    def randomized(
            self,
            seed: SeedLike = None,
            rank_tol: float = 1e-4,
            relative_tol: bool = False) -> RandomizedEmbedding:
        """
        Randomized eigensolver sampling the range of the operation with a Gaussian sketch.
        """
        return RandomizedEmbedding(seed=seed, rank_tol=rank_tol, relative_tol=relative_tol)

    def embed(
            self,
            mat: Any,
            operation: Optional[MatrixOperation],
            target_dimension: int,
            skip: int = 0,
            method: Optional[EigenMethod | str] = None,
            seed: SeedLike = None) -> EmbeddingResult[NDArray]:
        """
        Compute target_dimension eigenpairs of the weight matrix after discarding skip of them.
        Without a method, the method of the active options is used.
        """
        return eigen_embedding(method, mat, operation, target_dimension, skip, seed=seed)

    #-------------------------------------------------------------------------------------------------
    # options

    def options(
            self,
            method: EigenMethod | str = EigenMethod.DENSE,
            rank_tol: float = 1e-4,
            relative_tol: bool = False,
            tol: float = 0.0,
            max_iter: Optional[int] = None,
            ncv: Optional[int] = None) -> EmbeddingOptions:
        """
        Default parameters for embeddings computed in this namespace. Use as context manager or
        install them with :meth:`set_options`.
        """
        return EmbeddingOptions(namespace=self.namespace, method=method,
                                rank_tol=rank_tol, relative_tol=relative_tol,
                                tol=tol, max_iter=max_iter, ncv=ncv)

    def set_options(self, opts: EmbeddingOptions) -> None:
        """Install the options for the current thread."""
        _set_options(opts)

    def get_options(self) -> EmbeddingOptions:
        """Options active for the current thread."""
        return _get_options(self.namespace)

    #-------------------------------------------------------------------------------------------------
    # io

    def write(self, group: h5py.Group, obj: EmbeddingResult[NDArray]) -> None:
        """Write an embedding result to a hdf5 group."""
        _write(group, obj)

    def read(self, group: h5py.Group) -> EmbeddingResult[NDArray]:
        """Read an embedding result from a hdf5 group into this namespace."""
        return _read(group, self.namespace)