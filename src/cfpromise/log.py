""" Severity-gated status lines for the agent. Lines take the form
    ``log_<level>=<message>`` and are written to a side channel, never to
    the record stream.

    The threshold lives on a :class:`Gate` instance owned by the executor,
    which updates it from the ``log_level`` of each validate or evaluate
    request before the request is dispatched. Promise hooks receive the
    gate as their *log* argument.
"""

import enum
import logging
import sys

from . import errors


class Level(enum.IntEnum):
    """ Agent severity levels, most severe first. The numeric values line
        up with the standard :mod:`logging` levels so that a gate can hand
        emission off to a regular :class:`logging.Handler`.
    """

    CRITICAL = logging.CRITICAL
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    NOTICE = 25
    INFO = logging.INFO
    VERBOSE = 15
    DEBUG = logging.DEBUG

    def __str__(self):
        return self.name.lower()


    @classmethod
    def parse(cls, text):
        """ Return the :class:`Level` named by the wire value *text*, for
            example 'info'. Wire values are the lowercase names only; 'INFO'
            is as unknown as 'loud'.
        """

        if isinstance(text, str):
            for level in cls:
                if str(level) == text:
                    return level

        raise errors.ProtocolError('unknown log level: ' + repr(text))


# end of class Level



class Formatter(logging.Formatter):
    """ Prefix every line of a message with ``log_<level>=``, so that a
        multi-line message cannot be mistaken for anything but log output.
    """

    def format(self, record):

        prefix = 'log_%s=' % (Level(record.levelno))
        message = record.getMessage()
        lines = message.splitlines() or ['']
        return '\n'.join(prefix + line for line in lines)


# end of class Formatter



class Gate:
    """ Hold the current severity *threshold* and the *stream* to which
        status lines are written; *stream* defaults to :data:`sys.stderr`.
        A message is emitted only when its level is at least as severe as
        the current threshold.

        The gate is not thread-safe, nor does it need to be: the executor
        sets the threshold and dispatches the request from the same single
        thread of control.

        Status lines are part of the conversation with the agent, not
        diagnostics; a process-wide :func:`logging.disable` does not mute
        them. Call :func:`close` once the run is over; a closed gate
        discards everything.
    """

    def __init__(self, stream=None, threshold=Level.CRITICAL):

        if stream is None:
            stream = sys.stderr

        self.stream = stream

        # A Logger instantiated directly is not registered with the logging
        # manager; nothing else in the process can reach it, reconfigure it,
        # or receive its records through propagation.

        self._logger = logging.Logger('cfpromise')
        self._logger.setLevel(1)
        self._logger.propagate = False

        self._handler = logging.StreamHandler(stream)
        self._handler.setFormatter(Formatter())
        self._logger.addHandler(self._handler)

        self._threshold = None
        self.threshold = threshold


    @property
    def threshold(self):
        return self._threshold


    @threshold.setter
    def threshold(self, level):
        if isinstance(level, str):
            level = Level.parse(level)
        else:
            level = Level(level)

        self._threshold = level
        self._handler.setLevel(int(level))


    def enabled(self, level):
        """ Return True if a message at *level* would be emitted.
        """

        return Level(level) >= self._threshold


    def close(self):
        """ Detach and close the handler. The stream itself is left open,
            it belongs to the caller.
        """

        self._logger.disabled = True
        self._logger.removeHandler(self._handler)
        self._handler.close()


    @property
    def closed(self):
        return self._logger.disabled


    def log(self, level, message):

        # Logger.log() would consult the process-wide logging.disable()
        # setting; building the record here and handing it straight to
        # Logger.handle() only honors this gate's own state.

        logger = self._logger
        record = logger.makeRecord(logger.name, int(level), __name__, 0, '%s', (message,), None)
        logger.handle(record)


    def critical(self, message):
        self.log(Level.CRITICAL, message)


    def error(self, message):
        self.log(Level.ERROR, message)


    def warning(self, message):
        self.log(Level.WARNING, message)


    def notice(self, message):
        self.log(Level.NOTICE, message)


    def info(self, message):
        self.log(Level.INFO, message)


    def verbose(self, message):
        self.log(Level.VERBOSE, message)


    def debug(self, message):
        self.log(Level.DEBUG, message)


# end of class Gate


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
