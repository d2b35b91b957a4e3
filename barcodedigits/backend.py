# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any
from types import ModuleType
import array_api_compat as api

ArrayNamespace = ModuleType
ArrayLike = Any

def is_array(obj: Any) -> bool:
    return api.is_array_api_obj(obj)

def get_namespace(obj: Any) -> ArrayNamespace:
    if not api.is_array_api_obj(obj):
        try:
            obj = obj.zeros(1)
        except AttributeError:
            raise TypeError("Provided object is not a recognized array or namespace.")
    return api.array_namespace(obj)

def namespace_of_arrays(*arrays: ArrayLike) -> ArrayNamespace:
    return api.array_namespace(*arrays)

def get_index_dtype(xp: ArrayNamespace) -> Any:
    info = xp.__array_namespace_info__()
    dtypes = info.dtypes(kind=None)
    for name in ["uint8", "int8", "int16", "int32", "int64"]:
        if name in dtypes:
            return dtypes[name]
    raise ValueError("No suitable index dtype found")

def shape(array: ArrayLike) -> tuple[int, ...]:
    shp = array.shape
    if any(s is None for s in shp):
        raise ValueError("Array shape contains None dimension(s).")
    return shp

def array_digit_values(array: ArrayLike) -> list[int] | None:
    """
    Plain integers of a one dimensional integer array, or None if the array
    has another rank or a non-integer dtype.
    """
    xp = namespace_of_arrays(array)
    shp = shape(array)
    if len(shp) != 1 or not xp.isdtype(array.dtype, "integral"):
        return None
    return [int(array[i]) for i in range(shp[0])]
