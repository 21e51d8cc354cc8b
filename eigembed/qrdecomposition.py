# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from dataclasses import dataclass

from .backend import ArrayLike
from .backend import namespace_of_arrays
from .errors import FeatureUnavailable, SolverFailure
from .utils import check_non_neg

@dataclass(kw_only=True)
class QRDecompositionResult[T: ArrayLike]:
    #: Matrix with orthonormal columns.
    q: T
    #: Upper triangular matrix.
    r: T

class QRDecomposition[T: ArrayLike]:
    """
    QR decomposition. Decomposes a matrix into an orthonormal matrix and an upper triangular matrix.
    """

    def __call__(self, mat: T) -> QRDecompositionResult[T]:
        """Calculate :math:`M=QR` and return :math:`Q` and :math:`R`."""
        xp = namespace_of_arrays(mat)
        if not hasattr(xp, "linalg"):
            raise FeatureUnavailable("Linalg extension missing on this backend, implement your own QRDecomposition!.")
        q, r = xp.linalg.qr(mat, mode='reduced')
        return QRDecompositionResult(q=q, r=r)

    def shape(self, shape: tuple[int, int]) -> tuple[tuple[int, int], tuple[int, int]]:
        """Calculate the shapes of :math:`Q` and :math:`R`."""
        m, n = shape
        k = min(m, n)
        return (m, k), (k, n)

    def __repr__(self) -> str:
        return f"QRDecomposition()"

@dataclass
class QRLstsqSolver:
    """
    Least squares solver based on a QR decomposition. Solves :math:`AX=B` for a matrix
    :math:`A` with full column rank by :math:`X = R^{-1} Q^T B`.
    """

    #: Relative size of the smallest admissible diagonal entry of R.
    cutoff: float = 1e-12

    #: Decomposition of the system matrix.
    decomposition: QRDecomposition = QRDecomposition()

    def __setattr__(self, name: str, value) -> None:
        if name == "cutoff":
            check_non_neg(name, value)
        super().__setattr__(name, value)

    def __call__[T: ArrayLike](self, A: T, B: T) -> T:
        xp = namespace_of_arrays(A, B)
        res = self.decomposition(A)
        diag = xp.abs(xp.linalg.diagonal(res.r))
        if diag.shape[0] > 0:
            scale = float(xp.max(diag))
            if not scale > 0.0 or float(xp.min(diag)) <= self.cutoff * scale:
                raise SolverFailure("Least squares system is rank deficient or ill-conditioned.")
        return xp.linalg.solve(res.r, res.q.T @ B)

    def __repr__(self) -> str:
        return f"QRLstsqSolver(cutoff={self.cutoff})"
