# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Optional
from dataclasses import dataclass
import logging
import time

from .backend import densify
from .eighsolver import EigHSolver
from .eigenmethod import EigenMethod
from .embeddingresult import EmbeddingResult
from .matrixeigenvaluedecomposition import MatrixEigenvalueDecomposition
from .matrixoperation import MatrixOperation
from .utils import check_embedding_input

logger = logging.getLogger(__name__)

@dataclass
class DenseEmbedding:
    """
    Embedding by a full eigendecomposition of the densified weight matrix. The cost is cubic in
    the size of the matrix, use it for small problems or as a reference. The operation is not used.
    """

    #: Eigenvalue solver for the dense weight matrix.
    solver: MatrixEigenvalueDecomposition = EigHSolver()

    def embed(
            self,
            mat: Any,
            operation: Optional[MatrixOperation],
            target_dimension: int,
            skip: int = 0, /) -> EmbeddingResult:
        check_embedding_input(mat, operation, target_dimension, skip)
        stamp = time.time()

        dense = densify(mat)
        vals, vecs = self.solver(dense)
        nev = target_dimension + skip

        elapsed = time.time() - stamp
        logger.debug("Dense eigendecomposition of size %d took %.6f seconds", dense.shape[0], elapsed)
        return EmbeddingResult(embedding=vecs[:, skip:nev],
                               eigenvalues=vals[skip:nev],
                               method=EigenMethod.DENSE,
                               rank=nev,
                               requested=nev,
                               time=elapsed)
