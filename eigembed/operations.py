# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Literal
import numpy as np
import scipy.linalg as sla
import scipy.sparse.linalg as spla

from .backend import ArrayLike, is_sparse, matrix_shape, namespace_of_matrix, is_numpy_namespace
from .errors import FeatureUnavailable, InvalidArgument, SolverFailure
from .utils import check_square

class _BoundOperation:

    shape: tuple[int, int]
    which: Literal["LA", "SM"]

    def __init__(self, mat: Any) -> None:
        check_square(mat)
        self.shape = matrix_shape(mat)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(shape={self.shape}, which={self.which!r})"

class DenseMatrixOperation[T: ArrayLike](_BoundOperation):
    """
    Right product with the weight matrix, :math:`x \\mapsto Mx`. Targets the largest
    eigenvalues. Sparse scipy matrices are multiplied without densifying them.
    """

    which = "LA"

    def __init__(self, mat: T) -> None:
        super().__init__(mat)
        self._mat = mat

    def __call__(self, rhs: T) -> T:
        return self._mat @ rhs

class DenseImplicitSquareSymmetricMatrixOperation[T: ArrayLike](_BoundOperation):
    """Product with the square of a symmetric weight matrix, :math:`x \\mapsto M(Mx)`."""

    which = "LA"

    def __init__(self, mat: T) -> None:
        super().__init__(mat)
        self._mat = mat

    def __call__(self, rhs: T) -> T:
        return self._mat @ (self._mat @ rhs)

class DenseImplicitSquareMatrixOperation[T: ArrayLike](_BoundOperation):
    """Product with the Gram matrix of the weight matrix, :math:`x \\mapsto M^T(Mx)`."""

    which = "LA"

    def __init__(self, mat: T) -> None:
        super().__init__(mat)
        self._mat = mat

    def __call__(self, rhs: T) -> T:
        return self._mat.T @ (self._mat @ rhs)

class DenseInverseMatrixOperation(_BoundOperation):
    """
    Solution of :math:`Mx=b` with a dense weight matrix. The LU factorization is computed
    once on construction. Targets the smallest eigenvalues.
    """

    which = "SM"

    def __init__(self, mat: Any) -> None:
        super().__init__(mat)
        xp = namespace_of_matrix(mat)
        if not is_numpy_namespace(xp) or is_sparse(mat):
            raise FeatureUnavailable(
                "DenseInverseMatrixOperation requires a dense numpy matrix.")
        try:
            self._lu = sla.lu_factor(np.asarray(mat))
        except ValueError as err:
            raise InvalidArgument(f"Cannot factorize weight matrix: {err}") from err
        if np.any(np.diagonal(self._lu[0]) == 0.0):
            raise SolverFailure("Weight matrix is singular, cannot solve with it.")

    def __call__(self, rhs: np.ndarray) -> np.ndarray:
        return sla.lu_solve(self._lu, rhs)

class SparseInverseMatrixOperation(_BoundOperation):
    """
    Solution of :math:`Mx=b` with a sparse weight matrix. The sparse LU factorization is
    computed once on construction. Targets the smallest eigenvalues.
    """

    which = "SM"

    def __init__(self, mat: Any) -> None:
        super().__init__(mat)
        if not is_sparse(mat):
            raise InvalidArgument("SparseInverseMatrixOperation requires a scipy sparse matrix.")
        try:
            self._lu = spla.splu(mat.tocsc())
        except RuntimeError as err:
            raise SolverFailure(f"Weight matrix is singular, cannot solve with it: {err}") from err

    def __call__(self, rhs: np.ndarray) -> np.ndarray:
        return self._lu.solve(np.asarray(rhs))
