class LamaError(Exception):
    ''' Base class of every error raised by lama '''


class ArityExceeded(LamaError, ValueError):
    ''' More arguments were given to curry than the function accepts '''


class ZeroArityCurry(LamaError, ValueError):
    ''' A function taking no arguments was curried '''


class ArityMismatchCompose(LamaError, TypeError):
    ''' compose received something other than a 1-arity function '''


class ArityNotIntrospectable(LamaError, TypeError):
    ''' The arity of a callable cannot be determined '''
