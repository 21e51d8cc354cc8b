# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Protocol
from .backend import ArrayLike

class MatrixLeastSquares(Protocol):
    """
    Protocol for the least squares solver projecting an operation onto a subspace. Given a basis
    with full column rank and the image of the operation on it, the solver returns the small
    matrix B minimizing ||basis B - image||.
    """

    def __call__(self, basis: ArrayLike, image: ArrayLike, /) -> ArrayLike:
        ...
