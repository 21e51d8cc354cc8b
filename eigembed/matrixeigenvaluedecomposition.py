# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Protocol
from .backend import ArrayLike

class MatrixEigenvalueDecomposition(Protocol):
    """Protocol for the eigendecomposition of a dense symmetric matrix."""
    
    def __call__(self, mat: ArrayLike, /) -> tuple[ArrayLike, ArrayLike]:
        """
        Decompose a symmetric matrix into its eigenvalues in ascending order and
        the matching orthonormal eigenvectors stored as columns.
        """
        ...
