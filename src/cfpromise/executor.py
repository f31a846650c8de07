""" The :class:`Executor` drives a :class:`cfpromise.PromiseType` on behalf
    of the agent: it performs the handshake, then reads one request at a
    time, validates it, dispatches it to the promise type, and writes the
    response, until the agent asks it to terminate.
"""

import enum
import io
import os
import sys

from . import attribute
from . import errors
from .log import Gate
from .protocol import fields
from .protocol import header
from .protocol import message
from .protocol import wire


class Phase(enum.Enum):
    """ The lifecycle of one run. The promise type is initialized on the
        transition from READY to RUNNING, which happens exactly once, when
        the first request arrives.
    """

    UNINITIALIZED = 'uninitialized'
    READY = 'ready'
    RUNNING = 'running'
    TERMINATED = 'terminated'


_truthy = set(('1', 'true', 'yes', 'on'))


def _environment_flag(name):
    value = os.environ.get(name, '')
    return value.strip().lower() in _truthy



class Executor:
    """ Handle the communication with the agent over a pair of streams.

        Attributes outside of the schema declared by the promise type are
        an error, unless *ignore_unknown_attributes* is True. If it is not
        specified the CFPROMISE_IGNORE_UNKNOWN environment variable is
        consulted; this is a decision for the executor, not for the
        promise type.

        Any protocol or schema violation raises an exception out of
        :func:`run`, ending the run; nothing is written in response to the
        offending record.

        The first request initializes the promise type once it has been
        decoded and its log level applied, and before its attributes are
        checked against the schema. A first request with bad attributes
        therefore still sees init() called, but never reaches validate(),
        check() or apply(). A record that fails to decode never triggers
        init().
    """

    def __init__(self, ignore_unknown_attributes=None):

        if ignore_unknown_attributes is None:
            ignore_unknown_attributes = _environment_flag('CFPROMISE_IGNORE_UNKNOWN')

        self.ignore_unknown_attributes = ignore_unknown_attributes
        self.phase = Phase.UNINITIALIZED


    def run(self, promise):
        """ Run *promise*, a :class:`cfpromise.PromiseType` instance, for the
            agent on the standard streams of this process. Log lines are
            written to standard error.
        """

        self.run_type(promise, sys.stdin.buffer, sys.stdout.buffer, sys.stderr)


    def run_with_input(self, promise, input):
        """ Run *promise* against the canned agent *input*, returning the
            output that would have been sent to the agent. Useful for
            testing.
        """

        if isinstance(input, str):
            input = input.encode('utf-8')

        output = io.BytesIO()
        log_stream = io.StringIO()

        self.run_type(promise, io.BytesIO(input), output, log_stream)
        return output.getvalue().decode('utf-8')


    def run_type(self, promise, input, output, log_stream):
        """ Run *promise* reading records from the binary *input* stream and
            writing records to the binary *output* stream; log lines go to
            the text *log_stream*.
        """

        self.phase = Phase.UNINITIALIZED

        reader = wire.Reader(input)
        writer = wire.Writer(output)
        log = Gate(log_stream)

        try:
            self._converse(promise, reader, writer, log)
        finally:
            log.close()


    def _converse(self, promise, reader, writer, log):

        header.negotiate(reader, writer, promise.header())
        self.phase = Phase.READY

        while self.phase != Phase.TERMINATED:
            record = reader.read()
            request = message.decode(record)

            # A terminate request carries no log level; whatever was set
            # last stays in effect.

            if request.operation != fields.TERMINATE:
                log.threshold = request.log_level

            if self.phase == Phase.READY:
                self._initialize(promise, log)

            log.debug('handling %s request' % (request.operation))

            if request.operation == fields.VALIDATE:
                result = self._validate(promise, request, log)
            elif request.operation == fields.EVALUATE:
                result = self._evaluate(promise, request, log)
            else:
                result = promise.terminate(log).outcome(log)

            response = message.Response(request, result)
            writer.write(response.encapsulate())

            if request.operation == fields.TERMINATE:
                self.phase = Phase.TERMINATED


    def _initialize(self, promise, log):
        """ Lazily initialize the promise type, in case it is expensive.
        """

        result = promise.init(log)

        if result.kind == 'failure':
            raise errors.LifecycleError('failed to initialize promise type: %s' % (result.reason))

        if result.kind == 'error':
            raise errors.LifecycleError('failed to initialize promise type with unexpected error: %s' % (result.reason))

        self.phase = Phase.RUNNING


    def _check_attributes(self, promise, attributes):

        required = promise.required_attributes()
        optional = promise.optional_attributes()

        attribute.check(attributes, required, optional, self.ignore_unknown_attributes)


    def _validate(self, promise, request, log):

        self._check_attributes(promise, request.attributes)
        result = promise.validate(request.promiser, request.attributes, log)
        return result.outcome(log)


    def _evaluate(self, promise, request, log):
        """ Check first; apply only if the check found the promise not kept,
            and never in check-only mode.
        """

        self._check_attributes(promise, request.attributes)

        check_only = request.check_only
        result = promise.check(request.promiser, request.attributes, log)
        outcome = result.outcome(log, check_only)

        if check_only or outcome != message.EvaluateOutcome.NOT_KEPT:
            return outcome

        result = promise.apply(request.promiser, request.attributes, log)
        return result.outcome(log)


# end of class Executor


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
