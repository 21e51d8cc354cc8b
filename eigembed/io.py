# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any
import h5py
import numpy as np

from .backend import ArrayNamespace, to_host
from .eigenmethod import EigenMethod
from .embeddingresult import EmbeddingResult

def write(group: h5py.Group, obj: EmbeddingResult) -> None:
    if not isinstance(obj, EmbeddingResult):
        raise ValueError("Invalid class.")
    group.attrs["method"] = obj.method.value
    group.attrs["rank"] = obj.rank
    group.attrs["requested"] = obj.requested
    group.attrs["time"] = obj.time
    group.create_dataset("embedding", data=to_host(obj.embedding))
    group.create_dataset("eigenvalues", data=to_host(obj.eigenvalues))

def read(group: h5py.Group, xp: ArrayNamespace) -> EmbeddingResult:
    embedding = get_dataset(group, "embedding")
    eigenvalues = get_dataset(group, "eigenvalues")
    return EmbeddingResult(embedding=xp.asarray(np.asarray(embedding)),
                           eigenvalues=xp.asarray(np.asarray(eigenvalues)),
                           method=EigenMethod(str(get_attr(group, "method"))),
                           rank=int(get_attr(group, "rank")),
                           requested=int(get_attr(group, "requested")),
                           time=float(get_attr(group, "time")))

def get_attr(group: h5py.Group, name: str) -> Any:
    return group.attrs[name]

def get_dataset(group: h5py.Group, name: str) -> h5py.Dataset:
    data = group.get(name)
    if not isinstance(data, h5py.Dataset):
        raise ValueError(f"Group has no dataset {name!r}.")
    return data
