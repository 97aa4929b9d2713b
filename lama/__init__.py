'''
Common operations on higher order functions: currying and composition.
'''
from .arity import arity
from .curried import curry, compose, compose_left, compose_right, compose_all, pipe
from .decorators import curried
from .exceptions import (
    LamaError,
    ArityExceeded,
    ZeroArityCurry,
    ArityMismatchCompose,
    ArityNotIntrospectable,
)
from .logger import logger, setup_logger


__all__ = [
    'arity',
    'curry',
    'compose',
    'compose_left',
    'compose_right',
    'compose_all',
    'pipe',
    'curried',
    'LamaError',
    'ArityExceeded',
    'ZeroArityCurry',
    'ArityMismatchCompose',
    'ArityNotIntrospectable',
    'logger',
    'setup_logger',
]
