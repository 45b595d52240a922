

class SchemeError(Exception):
    """ Base class for all schemelet errors"""
    pass


class SchemeSyntaxError(SchemeError):
    """ Raised when source text cannot be read into a form"""


class SchemeNameError(SchemeError):
    """ Raised when a name cannot be resolved"""


class SchemeTypeError(SchemeError):
    """ Raised when a value has the wrong kind for an operation"""


class SchemeArityError(SchemeError):
    """ Raised when a form or procedure receives the wrong number of operands"""


class SchemeArithmeticError(SchemeError):
    """ Raised when integer arithmetic cannot produce a result"""


# Reader
class EmptyProgram(SchemeSyntaxError):
    pass

class MissingCloseParen(SchemeSyntaxError):
    pass

class UnexpectedCloseParen(SchemeSyntaxError):
    pass

class ExpectedOpenParenAfterQuote(SchemeSyntaxError):
    pass

class IllFormedExpression(SchemeSyntaxError):
    """ Raised when an empty list is evaluated"""


# Names
class UndefinedSymbol(SchemeNameError):
    def __init__(self, name):
        super().__init__(f"Undefined symbol {name}")
        self.name = name


# Kinds
class NotCallable(SchemeTypeError):
    pass

class InvalidDefineTarget(SchemeTypeError):
    pass

class NonSymbolInParameterList(SchemeTypeError):
    pass

class NonBooleanCondition(SchemeTypeError):
    pass

class NotAnInteger(SchemeTypeError):
    pass

class ExpectedPair(SchemeTypeError):
    pass

class NotAList(SchemeTypeError):
    pass


# Operand counts
class ArityMismatch(SchemeArityError):
    def __init__(self, name, expected: int):
        super().__init__(f"{name} requires {expected} arguments")
        self.name = name
        self.expected = expected

class IllFormedDefine(SchemeArityError):
    pass

class TooManyIfBranches(SchemeArityError):
    pass

class InvalidArgumentCount(SchemeArityError):
    pass


# Arithmetic
class DivisionByZero(SchemeArithmeticError):
    pass

class IntegerOverflow(SchemeArithmeticError):
    pass
