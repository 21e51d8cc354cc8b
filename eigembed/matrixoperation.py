# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Literal, Protocol
from .backend import ArrayLike

type SpectrumCode = Literal["LA", "SM"]

class MatrixOperation[T: ArrayLike](Protocol):
    """
    Protocol for an operation bound to a weight matrix. Calling the operation with a block of
    column vectors either right-multiplies them with the weight matrix or solves the linear
    system with the weight matrix for them.
    """

    #: Spectral end the operation targets. "LA" (largest algebraic) for product
    #: operations, "SM" (smallest magnitude) for solve operations.
    which: SpectrumCode

    #: Shape of the bound weight matrix.
    shape: tuple[int, int]

    def __call__(self, rhs: T, /) -> T:
        """Apply the operation to a vector or to every column of a matrix."""
        ...
