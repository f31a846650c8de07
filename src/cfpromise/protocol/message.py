""" Class representations of the requests sent by the agent and the
    responses sent back, together with the coarse outcomes that appear on
    the wire.
"""

import enum

from .. import errors
from .. import json
from ..log import Level
from . import fields


class ValidateOutcome(str, enum.Enum):
    VALID = 'valid'
    INVALID = 'invalid'
    ERROR = 'error'


class EvaluateOutcome(str, enum.Enum):
    KEPT = 'kept'
    REPAIRED = 'repaired'
    NOT_KEPT = 'not_kept'
    ERROR = 'error'


class ProtocolOutcome(str, enum.Enum):
    SUCCESS = 'success'
    FAILURE = 'failure'
    ERROR = 'error'



class ValidateRequest:
    """ A request to validate the *attributes* of a promise about
        *promiser*. The *log_level* is the threshold the agent wants
        applied while the request is handled.
    """

    operation = fields.VALIDATE

    def __init__(self, log_level, promiser, attributes):

        if isinstance(log_level, str):
            log_level = Level.parse(log_level)
        else:
            log_level = Level(log_level)

        self.log_level = log_level
        self.promiser = promiser
        self.attributes = attributes


    def __repr__(self):
        return '%s(%r, %r, %r)' % (self.__class__.__name__, str(self.log_level), self.promiser, self.attributes)


# end of class ValidateRequest



class EvaluateRequest(ValidateRequest):
    """ A request to evaluate a promise. The *action_policy* selects
        between fixing drift ('fix') and only reporting it ('warn').
    """

    operation = fields.EVALUATE
    valid_policies = (fields.FIX, fields.WARN)

    def __init__(self, log_level, promiser, attributes, action_policy=fields.FIX):

        if action_policy in self.valid_policies:
            pass
        else:
            raise ValueError('invalid action policy: ' + repr(action_policy))

        ValidateRequest.__init__(self, log_level, promiser, attributes)
        self.action_policy = action_policy


    @property
    def check_only(self):
        return self.action_policy == fields.WARN


# end of class EvaluateRequest



class TerminateRequest:
    """ The agent is done; no further requests will follow.
    """

    operation = fields.TERMINATE

    def __repr__(self):
        return 'TerminateRequest()'


# end of class TerminateRequest



def decode(record):
    """ Interpret a *record* (bytes) as one of the known request types.
        Anything else raises :class:`cfpromise.errors.ProtocolError`; keys
        the agent adds beyond those used here are ignored.
    """

    try:
        request = json.loads(record)
    except json.DecodeError as e:
        raise errors.ProtocolError('could not parse request %r: %s' % (record, e))

    if not isinstance(request, dict):
        raise errors.ProtocolError('request is not a JSON object: %r' % (record,))

    operation = request.get(fields.OPERATION)

    if operation == fields.TERMINATE:
        return TerminateRequest()

    if operation != fields.VALIDATE and operation != fields.EVALUATE:
        raise errors.ProtocolError('unknown operation in request: %r' % (record,))

    try:
        log_level = request[fields.LOG_LEVEL]
        promiser = request[fields.PROMISER]
        attributes = request[fields.ATTRIBUTES]
    except KeyError as e:
        raise errors.ProtocolError('%s request is missing %s' % (operation, e))

    log_level = Level.parse(log_level)

    if not isinstance(promiser, str):
        raise errors.ProtocolError('promiser must be a string: ' + repr(promiser))

    if not isinstance(attributes, dict):
        raise errors.ProtocolError('attributes must be an object: ' + repr(attributes))

    if operation == fields.VALIDATE:
        return ValidateRequest(log_level, promiser, attributes)

    action_policy = request.get(fields.ACTION_POLICY, fields.FIX)

    if not isinstance(action_policy, str):
        raise errors.ProtocolError('action policy must be a string: ' + repr(action_policy))

    try:
        return EvaluateRequest(log_level, promiser, attributes, action_policy)
    except ValueError as e:
        raise errors.ProtocolError(str(e))



class Response:
    """ The answer to a request. The *request* is echoed back: its
        operation, and for validate and evaluate requests its promiser and
        attributes. The *result* is one of the outcome values above.
    """

    def __init__(self, request, result):

        self.request = request
        self.result = result
        self._encapsulated = None


    def __repr__(self):
        return self.encapsulate().decode()


    def to_dict(self):

        request = self.request
        response = dict()
        response[fields.OPERATION] = request.operation

        if request.operation != fields.TERMINATE:
            response[fields.PROMISER] = request.promiser
            response[fields.ATTRIBUTES] = request.attributes

        response[fields.RESULT] = self.result.value
        return response


    def encapsulate(self):
        ''' Return the JSON encoding of this response. Calling this method
            multiple times will return the cached encapsulation rather than
            generate it anew.
        '''

        if self._encapsulated:
            return self._encapsulated

        self._encapsulated = json.dumps(self.to_dict())
        return self._encapsulated


# end of class Response


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
