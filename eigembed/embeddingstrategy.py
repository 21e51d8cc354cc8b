# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Optional, Protocol

from .embeddingresult import EmbeddingResult
from .matrixoperation import MatrixOperation

class EmbeddingStrategy(Protocol):
    """Protocol for a strategy computing the extremal eigenpairs of a weight matrix."""

    def embed(
            self,
            mat: Any,
            operation: Optional[MatrixOperation],
            target_dimension: int,
            skip: int = 0, /) -> EmbeddingResult:
        """
        Compute target_dimension + skip eigenpairs of the weight matrix, discard the first skip
        of them and return the remaining ones with eigenvalues in ascending order.
        """
        ...
