# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any

from .backend import matrix_shape
from .errors import InvalidArgument

def check_pos(msg: str, value: int | float):
    if value <= 0:
        raise InvalidArgument(f"{msg} must be above zero, got {value}")

def check_non_neg(msg: str, value: int | float):
    if value < 0:
        raise InvalidArgument(f"{msg} must be a positive, got {value}")

def check_int(msg: str, value: Any):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{msg} must be an integer, got {value!r}")

def check_square(mat: Any) -> int:
    try:
        rows, cols = matrix_shape(mat)
    except ValueError as err:
        raise InvalidArgument(str(err)) from err
    if rows != cols:
        raise InvalidArgument(f"Weight matrix must be square, got shape ({rows}, {cols})")
    return rows

def check_embedding_input(mat: Any, operation: Any, target_dimension: int, skip: int) -> int:
    """Validate the arguments of an embedding and return the size of the matrix."""
    check_int("target_dimension", target_dimension)
    check_int("skip", skip)
    check_pos("target_dimension", target_dimension)
    check_non_neg("skip", skip)
    size = check_square(mat)
    if target_dimension + skip > size:
        raise InvalidArgument(
            f"target_dimension + skip = {target_dimension + skip} exceeds the matrix size {size}")
    if operation is not None and tuple(operation.shape) != (size, size):
        raise InvalidArgument(
            f"Operation of shape {tuple(operation.shape)} is not bound to a matrix of size {size}")
    return size
