# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""Exceptions raised by eigembed. All of them derive from :class:`EmbeddingError`."""

class EmbeddingError(Exception):
    """Base class of all eigembed errors."""

class InvalidArgument(EmbeddingError, ValueError):
    """Arguments are rejected before any solver is invoked."""

class UnsupportedMethod(EmbeddingError, ValueError):
    """The requested eigendecomposition method is not known."""

class FeatureUnavailable(EmbeddingError, NotImplementedError):
    """The requested solver cannot run in the current installation or backend."""

class SolverFailure(EmbeddingError, RuntimeError):
    """An underlying eigensolver or linear solve failed."""
