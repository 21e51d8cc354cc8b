# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Hashable, Any, Optional, Self
import threading

from .backend import ArrayNamespace
from .eigenmethod import EigenMethod, eigen_method
from .utils import check_non_neg, check_pos

class Options:

    key: Hashable

    def __init__(self, namespace: ArrayNamespace):
        self.key = (namespace, threading.get_ident())

    def __enter__(self) -> Self:
        global _opts
        if self.key in _opts:
            self._tmp = _opts[self.key]
        else:
            self._tmp = None
        _opts[self.key] = self
        return self

    def __exit__(self, *_) -> None:
        global _opts
        if self._tmp is not None:
            _opts[self.key] = self._tmp
        else:
            del _opts[self.key]

class EmbeddingOptions(Options):
    """
    Context manager for the default parameters of eigendecompositions. The options apply to
    the namespace they were created for and only to the current thread.
    """

    #: Method used when no method is given explicitly.
    method: EigenMethod
    #: Rank tolerance of the randomized eigensolver.
    rank_tol: float
    #: Scale the rank tolerance by the norm of the sampled range.
    relative_tol: bool
    #: Relative accuracy of the iterative eigensolver, 0 means machine precision.
    tol: float
    #: Maximum number of iterations of the iterative eigensolver.
    max_iter: Optional[int]
    #: Number of Lanczos vectors of the iterative eigensolver.
    ncv: Optional[int]

    def __init__(
            self, *,
            namespace: ArrayNamespace,
            method: EigenMethod | str = EigenMethod.DENSE,
            rank_tol: float = 1e-4,
            relative_tol: bool = False,
            tol: float = 0.0,
            max_iter: Optional[int] = None,
            ncv: Optional[int] = None):
        self.method = eigen_method(method)
        self.rank_tol = rank_tol
        self.relative_tol = relative_tol
        self.tol = tol
        self.max_iter = max_iter
        self.ncv = ncv
        super().__init__(namespace)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in ("rank_tol", "tol"):
            check_non_neg(name, value)
        elif name in ("max_iter", "ncv") and value is not None:
            check_pos(name, value)
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return (f"EmbeddingOptions(method={self.method}, rank_tol={self.rank_tol}, "
                f"relative_tol={self.relative_tol}, tol={self.tol}, "
                f"max_iter={self.max_iter}, ncv={self.ncv})")

_opts: dict[Any, Options] = {}

def get_options(namespace: ArrayNamespace) -> EmbeddingOptions:
    global _opts
    key = (namespace, threading.get_ident())
    if key in _opts:
        return _opts[key] # type: ignore
    else:
        raise KeyError("No options set for the current thread.")

def has_options(namespace: ArrayNamespace) -> bool:
    return (namespace, threading.get_ident()) in _opts

def set_options(opts: EmbeddingOptions) -> None:
    global _opts
    _opts[opts.key] = opts
