from .measures import Angle, Length, MeasureDivisionError
from .errors import ErrorKind, ErrorSet
from .pair import OpposingPair, PairStatus
from .validate import validate_values, ValidationError
from .numbers import parse_measure, format_measure, format_input
from .printer import result_lines, format_errors
from .solver import (
    solve,
    solve_values,
    SolveResult,
    Strategy,
    TriangleSolver,
    SolverConfig,
    get_solver_config,
    set_solver_config,
)

__all__ = [
    'Angle',
    'Length',
    'MeasureDivisionError',
    'ErrorKind',
    'ErrorSet',
    'OpposingPair',
    'PairStatus',
    'validate_values',
    'ValidationError',
    'parse_measure',
    'format_measure',
    'format_input',
    'result_lines',
    'format_errors',
    'solve',
    'solve_values',
    'SolveResult',
    'Strategy',
    'TriangleSolver',
    'SolverConfig',
    'get_solver_config',
    'set_solver_config',
]
