# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from dataclasses import dataclass

from .backend import ArrayLike
from .eigenmethod import EigenMethod

@dataclass(kw_only=True)
class EmbeddingResult[T: ArrayLike]:
    #: Embedding matrix, one (approximate) eigenvector per column.
    embedding: T
    #: Eigenvalues in ascending order, aligned with the columns of the embedding.
    eigenvalues: T
    #: Method that produced the result.
    method: EigenMethod
    #: Numerical rank of the subspace the eigenpairs were extracted from.
    rank: int
    #: Number of eigenpairs that were computed, i.e. target dimension plus skip.
    requested: int
    #: Time taken to compute the embedding.
    time: float = 0.0

    @property
    def target_dimension(self) -> int:
        return int(self.embedding.shape[1]) # type: ignore

    @property
    def degenerate(self) -> bool:
        """True if the subspace had lower rank than requested. Trailing eigenpairs are then not meaningful."""
        return self.rank < self.requested
