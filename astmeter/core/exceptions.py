"""astmeter custom exceptions."""


class AstMeterError(Exception):
    """Base exception for astmeter errors."""


class ParseError(AstMeterError):
    """Error parsing a source file."""


class TraversalError(AstMeterError):
    """A syntax tree node could not be queried during the walk."""


class GraphOutputError(AstMeterError):
    """The graph description file could not be opened or written."""
