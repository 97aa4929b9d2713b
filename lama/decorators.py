import wrapt

from .curried import curry


@wrapt.decorator
def curried(wrapped, instance, args, kwargs):
    ''' Auto-curry a function.

    The decorated function accepts its positional arguments all at once, one
    at a time or in groups:

        @curried
        def add(x, y, z):
            return x + y + z

        add(1, 2, 3) == add(1)(2)(3) == add(1, 2)(3)

    Each later step takes exactly one argument. For methods the bound
    instance is not counted.
    '''
    if kwargs:
        raise TypeError('curried functions accept positional arguments only')
    return curry(wrapped, list(args))
