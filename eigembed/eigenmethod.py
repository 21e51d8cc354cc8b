# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any
from enum import Enum

from .errors import UnsupportedMethod

class EigenMethod(Enum):
    """Eigendecomposition methods available for computing an embedding."""
    #: Iterative sparse eigensolver (ARPACK).
    ITERATIVE = "iterative"
    #: Full dense symmetric eigendecomposition.
    DENSE = "dense"
    #: Randomized range finder followed by a Rayleigh-Ritz projection.
    RANDOMIZED = "randomized"

_ALIASES = {
    "iterative": EigenMethod.ITERATIVE,
    "arpack": EigenMethod.ITERATIVE,
    "dense": EigenMethod.DENSE,
    "randomized": EigenMethod.RANDOMIZED,
}

def eigen_method(tag: Any) -> EigenMethod:
    """Convert a method tag to an :class:`EigenMethod`. Strings are matched case insensitive."""
    if isinstance(tag, EigenMethod):
        return tag
    if isinstance(tag, str) and tag.lower() in _ALIASES:
        return _ALIASES[tag.lower()]
    raise UnsupportedMethod(
        f"Unsupported eigendecomposition method {tag!r}, expected one of {[m.value for m in EigenMethod]}.")
