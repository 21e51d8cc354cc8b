# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Protocol

class ArrayLike(Protocol):
    """Minimal structural type of the arrays handled by eigembed."""

    @property
    def shape(self) -> tuple[int | None, ...]: ...

    @property
    def dtype(self) -> Any: ...

    @property
    def ndim(self) -> int: ...

    @property
    def T(self) -> Any: ...

    def __matmul__(self, other: Any, /) -> Any: ...

class ArrayNamespace[T](Protocol):
    """Array API namespace returning arrays of type T."""

    def __getattr__(self, name: str) -> Any: ...
