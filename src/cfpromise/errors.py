"""Exception taxonomy.

Protocol and schema violations are fatal for the run and propagate out of
:func:`cfpromise.Executor.run`. Outcomes reported by a promise type are
never exceptions; they travel back to the agent as structured data.
"""


class Error(Exception):
    """Base class for all cfpromise errors."""


class ProtocolError(Error):
    """The agent sent something that does not follow the protocol."""


class FramingError(ProtocolError):
    """A record was not terminated by the expected empty line."""


class ParseError(ProtocolError):
    """A header line could not be parsed."""


class IncompatibleVersion(ProtocolError):
    """The agent speaks a protocol version this module does not implement."""


class AttributeValidationError(Error):
    """ The attributes of a request do not satisfy the declared schema.
        Every problem found is listed in *problems*; the request as a whole
        is rejected.
    """

    def __init__(self, problems):
        self.problems = list(problems)
        Error.__init__(self, '; '.join(self.problems))


class LifecycleError(Error):
    """The promise type failed to initialize."""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
