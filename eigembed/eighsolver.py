# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

import numpy as np

from .backend import ArrayLike, namespace_of_arrays
from .errors import FeatureUnavailable, SolverFailure

class EigHSolver:
    """Full eigendecomposition of a dense symmetric matrix, eigenvalues in ascending order."""

    def __call__[T: ArrayLike](self, mat: T) -> tuple[T, T]:
        xp = namespace_of_arrays(mat)
        if not hasattr(xp, "linalg"):
            raise FeatureUnavailable(
                f"Extension linalg is missing from namespace {xp}.")
        try:
            vals, vecs = xp.linalg.eigh(mat)
        except np.linalg.LinAlgError as err:
            raise SolverFailure(f"Dense eigendecomposition failed: {err}") from err
        if not bool(xp.all(xp.isfinite(vals))):
            raise SolverFailure("Dense eigendecomposition produced non-finite eigenvalues.")
        return vals, vecs

    def __repr__(self) -> str:
        return "EigHSolver()"
