"""MONAD optimizer package."""

from .optimizer import remove_no_op_redundancies, optimize_traced  # noqa: F401
from .parser import parse_program, render_program  # noqa: F401
from .api import (  # noqa: F401
    parse_source,
    optimize_source,
    dump_optimized,
    trace_source,
    analyze_source,
)
