class MyLispError(Exception):
    """ Base class for all mylisp errors"""
    pass

class MyLispSyntaxError(MyLispError):
    """ Raised when source text cannot be parsed into a form"""

class MyLispArityError(MyLispError):
    """ Raised when the number of arguments passed to a builtin is incorrect"""

class MyLispTypeError(MyLispError):
    """ Raised when the types of arguments passed to a builtin are incorrect"""

class MyLispNameError(MyLispError):
    """ Raised when an operator name is not in the builtin registry"""

class MyLispEvaluationError(MyLispError):
    """ Raised when a value handed to the evaluator is not valid code"""

class MyLispRegistryError(MyLispError):
    """ Raised when the builtin registry is modified after it was frozen"""

class MyLispPreconditionError(MyLispError):
    """ Raised when car/cdr are applied to a non-list at the cell level.

    This signals a defect in the caller; builtins check their arguments
    and raise MyLispTypeError before reaching the cell store.
    """
