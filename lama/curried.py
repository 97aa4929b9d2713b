'''
Currying and composition of plain Python callables.

    >>> add = lambda x, y: x + y
    >>> curry(add, 1)(1)
    2
    >>> curry(add, [1, 2])
    3
    >>> compose(lambda x: x + 2, lambda x: x * 3)(2)
    8
'''
import inspect
import funcy as fn

from .arity import arity
from .exceptions import ArityExceeded, ZeroArityCurry, ArityMismatchCompose, ArityNotIntrospectable
from .logger import logger


__all__ = ['curry', 'compose', 'compose_left', 'compose_right', 'compose_all', 'pipe']

# Distinguishes curry(f) from curry(f, None)
_missing = object()

UNARY = inspect.Signature([inspect.Parameter('arg', inspect.Parameter.POSITIONAL_ONLY)])
NAMING = ('__module__', '__name__', '__qualname__', '__doc__')


# (a -> b) -> (a -> b) -> (a -> b)
def unary(step, func):
    ''' Give a one-argument closure the name and doc of the function it stands
    for, and a signature that introspects as 1-arity '''
    for attr in NAMING:
        value = getattr(func, attr, None)
        if value is not None:
            setattr(step, attr, value)
    step.__signature__ = UNARY
    return step


def curry(func, args=_missing):
    ''' Curry a function, optionally applying one or more arguments.

    curry(func) turns func into a chain of 1-arity functions. It raises
    ZeroArityCurry for functions taking no arguments and returns 1-arity
    functions unchanged.

    curry(func, args) applies args, a list/tuple of arguments or a single
    value, to func. func is called right away when args saturate it, otherwise
    a 1-arity function waiting for the next argument is returned. Passing more
    arguments than func accepts raises ArityExceeded.
    '''
    if args is _missing:
        return curry_chain(func)
    if not isinstance(args, (list, tuple)):
        args = [args]
    return curry_args(func, list(args))


# (a, b, ...) -> z -> (a -> b -> ... -> z)
def curry_chain(func):
    n = arity(func)
    if n == 0:
        logger.debug('refusing to curry 0-arity function %r', func)
        raise ZeroArityCurry('cannot curry 0-arity function')
    if n == 1:
        return func
    return unary(lambda arg: curry_args(func, [arg]), func)


# (a, b, ...) -> z -> [a, ...] -> z | (x -> ...)
def curry_args(func, args):
    n = arity(func)
    if n == len(args):
        return func(*args)
    if n > len(args):
        # args is captured and never mutated: every step builds a new list
        return unary(lambda arg: curry_args(func, args + [arg]), func)
    logger.debug('curry received %d arguments for %r of arity %d', len(args), func, n)
    raise ArityExceeded('curry cannot receive more arguments than function arity')


# (b -> c) -> (a -> b) -> (a -> c)
def compose(f, g):
    ''' compose(f, g)(x) is f(g(x)). Both functions must take exactly one
    argument. '''
    if not (is_unary(f) and is_unary(g)):
        logger.debug('cannot compose %r with %r', f, g)
        raise ArityMismatchCompose('compose accepts only 1-arity functions as arguments')

    def composed(x):
        return f(g(x))
    return composed


# (b -> c) -> (a -> b) -> (a -> c)
def compose_left(f, g):
    ''' Same as compose, with the same order of arguments: f is applied last '''
    return compose(f, g)


# (a -> b) -> (b -> c) -> (a -> c)
def compose_right(g, f):
    ''' Same as compose, with reversed order of arguments: g is applied first '''
    return compose(f, g)


# [(a -> a)] -> (a -> a)
def compose_all(*funcs):
    ''' compose_all(f, g, h)(x) is f(g(h(x))). No functions means identity. '''
    check_unary(funcs)
    return unary_chain(fn.compose(*funcs), funcs)


# [(a -> a)] -> (a -> a)
def pipe(*funcs):
    ''' pipe(h, g, f)(x) is f(g(h(x))) '''
    check_unary(funcs)
    return unary_chain(fn.rcompose(*funcs), funcs)


# [callable] -> None
def check_unary(funcs):
    if not all(map(is_unary, funcs)):
        logger.debug('cannot compose %r', funcs)
        raise ArityMismatchCompose('compose accepts only 1-arity functions as arguments')


# funcy hands back identity or the function itself for fewer than two
# functions, and a *args lambda otherwise
def unary_chain(composed, funcs):
    if len(funcs) > 1:
        composed.__signature__ = UNARY
    return composed


# callable -> bool
def is_unary(func):
    try:
        return arity(func) == 1
    except ArityNotIntrospectable:
        return False
