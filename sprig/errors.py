

class SprigError(Exception):
    """ Base class for all Sprig errors"""
    pass

class UnboundName(SprigError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""
    pass

class NotCallable(SprigError):
    """ Raised when the operator position holds something other than a function"""

class ArityMismatch(SprigError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class TypeMismatch(SprigError):
    """ Raised when an operand to arithmetic or comparison is not an integer"""

class NonExhaustiveCond(SprigError):
    """ Raised when no cond clause matched and there is no catch-all"""

class SprigSyntaxError(SprigError):
    """ Raised when form data cannot be analyzed into an expression"""
