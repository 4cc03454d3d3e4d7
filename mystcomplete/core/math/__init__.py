from __future__ import annotations

from mystcomplete.core.math.completions import (
    build_math_catalog,
    infer_macro_arg_count,
    math_sort_text,
    parse_macros,
)
from mystcomplete.core.math.environment import math_environment_at

__all__ = [
    "build_math_catalog",
    "infer_macro_arg_count",
    "math_environment_at",
    "math_sort_text",
    "parse_macros",
]
