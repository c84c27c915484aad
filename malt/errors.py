from __future__ import annotations


class MaltError(Exception):
    """ Base class for all malt errors"""
    pass


# -------------------------------
# Lexer
# -------------------------------
class LexerError(MaltError):
    """ Raised by the tokenizer state machine"""
    pass


class TransitionError(LexerError):
    """ Raised when a character is not valid for the current lexer state"""

    def __init__(self, char: str, buffer: str, state):
        self.char = char
        self.buffer = buffer
        self.state = state
        super().__init__(
            f"Unexpected character: {char}, buffer: {buffer}, state: {state}"
        )


class TokenTerminationError(LexerError):
    """ Raised when a token is flushed in a non-terminating state"""

    def __init__(self, state):
        self.state = state
        super().__init__(f"Non terminating state: {state}")


# -------------------------------
# Reader
# -------------------------------
class ReaderError(MaltError):
    """ Raised when text cannot be read into a form"""
    pass


class UnbalancedError(ReaderError):
    """ Raised on a delimiter mismatch or an unclosed list"""

    def __init__(self, detail: str | None = None):
        self.detail = detail
        super().__init__(f"unbalanced parens: {detail}" if detail else "unbalanced parens")


class ReaderEOFError(ReaderError):
    """ Raised by the reader when the lexer fails"""

    def __init__(self, lexer_error: LexerError):
        self.lexer_error = lexer_error
        super().__init__(f"eof while reading: {lexer_error}")


# -------------------------------
# Evaluation
# -------------------------------
class EvalError(MaltError):
    """ Raised when a form cannot be evaluated"""
    pass


class UnboundSymbolError(EvalError):
    """ Raised when a symbol is not bound in any enclosing frame"""

    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"'{symbol}' not found")


class MaltTypeError(EvalError):
    """ Raised when an operand or operator has the wrong type"""


class MaltArityError(EvalError):
    """ Raised when the number of operands passed is incorrect"""
