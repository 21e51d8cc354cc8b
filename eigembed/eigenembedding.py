# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Optional
import logging

from .backend import namespace_of_matrix
from .denseembedding import DenseEmbedding
from .eigenmethod import EigenMethod, eigen_method
from .embeddingresult import EmbeddingResult
from .embeddingstrategy import EmbeddingStrategy
from .errors import UnsupportedMethod
from .iterativeembedding import IterativeEmbedding
from .matrixoperation import MatrixOperation
from .options import EmbeddingOptions, get_options, has_options
from .randomizedembedding import RandomizedEmbedding, SeedLike

logger = logging.getLogger(__name__)

def strategy(
        method: EigenMethod | str,
        options: Optional[EmbeddingOptions] = None,
        seed: SeedLike = None) -> EmbeddingStrategy:
    """
    Create the strategy implementing the given method. Parameters not given by the options
    keep the defaults of the strategy.
    """
    method = eigen_method(method)
    if method is EigenMethod.ITERATIVE:
        solver = IterativeEmbedding(seed=seed)
        if options is not None:
            solver.tol = options.tol
            solver.max_iter = options.max_iter
            solver.ncv = options.ncv
        return solver
    elif method is EigenMethod.DENSE:
        return DenseEmbedding()
    elif method is EigenMethod.RANDOMIZED:
        solver = RandomizedEmbedding(seed=seed)
        if options is not None:
            solver.rank_tol = options.rank_tol
            solver.relative_tol = options.relative_tol
        return solver
    raise UnsupportedMethod(f"No strategy implements method {method}.")

def eigen_embedding(
        method: Optional[EigenMethod | str],
        mat: Any,
        operation: Optional[MatrixOperation],
        target_dimension: int,
        skip: int = 0,
        *,
        seed: SeedLike = None) -> EmbeddingResult:
    """
    Compute an embedding from the eigenvectors of the weight matrix with the given method.

    target_dimension + skip eigenpairs are computed and sorted ascending, the first skip of them
    are discarded. The operation is bound to mat and
    either multiplies with it or solves with it. If method is None the method of the active
    :class:`EmbeddingOptions` is used. The seed determines the random streams of the randomized
    method and the starting vector of the iterative one.
    """
    options = None
    xp = namespace_of_matrix(mat)
    if has_options(xp):
        options = get_options(xp)
    if method is None:
        method = options.method if options is not None else EigenMethod.DENSE

    solver = strategy(method, options, seed)
    logger.debug("Computing %s embedding with target dimension %s and skip %s",
                 eigen_method(method).value, target_dimension, skip)
    return solver.embed(mat, operation, target_dimension, skip)
