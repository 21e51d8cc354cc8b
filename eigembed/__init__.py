# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .eigembed import EigEmbed
from .eigenmethod import EigenMethod, eigen_method
from .embeddingresult import EmbeddingResult
from .eigenembedding import eigen_embedding, strategy
from .iterativeembedding import iterative_available
from .errors import (
    EmbeddingError,
    InvalidArgument,
    UnsupportedMethod,
    FeatureUnavailable,
    SolverFailure,
)
