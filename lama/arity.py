import inspect
import funcy as fn

from .exceptions import ArityNotIntrospectable
from .logger import logger


POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


# callable -> int
def arity(func):
    ''' Number of positional arguments a callable expects.

    Defaulted positional parameters count, optional keyword-only parameters
    and **kwargs don't. Variadic signatures have no fixed arity and raise
    ArityNotIntrospectable, as do callables without a readable signature.
    '''
    if not callable(func):
        logger.debug('arity requested for non-callable %r', func)
        raise ArityNotIntrospectable('{!r} is not callable'.format(func))

    with fn.reraise((ValueError, TypeError), not_introspectable(func)):
        params = inspect.signature(func).parameters.values()

    if any(p.kind == p.VAR_POSITIONAL for p in params):
        logger.debug('variadic callable %r has no fixed arity', func)
        raise ArityNotIntrospectable('{!r} takes a variable number of arguments'.format(func))

    # Required keyword-only arguments can never be supplied positionally
    if any(p.kind == p.KEYWORD_ONLY and p.default is p.empty for p in params):
        logger.debug('callable %r has required keyword-only arguments', func)
        raise ArityNotIntrospectable('{!r} has required keyword-only arguments'.format(func))

    return fn.count_by(lambda p: p.kind in POSITIONAL, params)[True]


# callable -> exception -> exception
def not_introspectable(func):
    def convert(error):
        logger.debug('no signature for %r: %s', func, error)
        return ArityNotIntrospectable('cannot determine arity of {!r}'.format(func))
    return convert
