# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""typing has all classes used in the external API of eigembed."""

from .eigenmethod import EigenMethod
from .embeddingresult import EmbeddingResult
from .embeddingstrategy import EmbeddingStrategy
from .matrixoperation import MatrixOperation, SpectrumCode
from .matrixeigenvaluedecomposition import MatrixEigenvalueDecomposition
from .matrixleastsquares import MatrixLeastSquares

from .operations import (
    DenseMatrixOperation,
    DenseImplicitSquareMatrixOperation,
    DenseImplicitSquareSymmetricMatrixOperation,
    DenseInverseMatrixOperation,
    SparseInverseMatrixOperation,
)
from .denseembedding import DenseEmbedding
from .iterativeembedding import IterativeEmbedding
from .randomizedembedding import RandomizedEmbedding
from .eighsolver import EigHSolver
from .qrdecomposition import QRDecomposition, QRDecompositionResult, QRLstsqSolver

from .options import Options, EmbeddingOptions

from .eigembed import EigEmbed
