""" The results a promise type returns from its hooks. A result is richer
    than what goes on the wire: :func:`outcome` reduces it to the coarse
    outcome of the response, and sends any reason to the log side channel
    at the appropriate severity.

    Results are built with the class methods, for example::

        return CheckResult.not_kept('directory /tmp/x is missing')
"""

from .protocol.message import EvaluateOutcome, ProtocolOutcome, ValidateOutcome


class Result:
    """ Common base: a result *kind* and an optional *reason*. The set of
        valid kinds is defined by each subclass.
    """

    valid_kinds = set()

    def __init__(self, kind, reason=None):

        if kind in self.valid_kinds:
            pass
        else:
            raise ValueError('invalid %s kind: %s' % (self.__class__.__name__, kind))

        self.kind = kind
        self.reason = reason


    def __eq__(self, other):
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self.kind == other.kind and self.reason == other.reason


    def __hash__(self):
        return hash((self.__class__, self.kind, self.reason))


    def __repr__(self):
        if self.reason is None:
            return '%s.%s()' % (self.__class__.__name__, self.kind)
        return '%s.%s(%r)' % (self.__class__.__name__, self.kind, self.reason)


# end of class Result



class ValidateResult(Result):

    valid_kinds = set(('valid', 'invalid', 'error'))

    @classmethod
    def valid(cls):
        return cls('valid')

    @classmethod
    def invalid(cls, reason):
        return cls('invalid', reason)

    @classmethod
    def error(cls, reason):
        return cls('error', reason)


    def outcome(self, log):
        """ Invalid and error reasons are logged at error level.
        """

        if self.kind == 'valid':
            return ValidateOutcome.VALID

        log.error(self.reason)

        if self.kind == 'invalid':
            return ValidateOutcome.INVALID
        return ValidateOutcome.ERROR


# end of class ValidateResult



class CheckResult(Result):
    """ The result of checking whether a promise is kept. *always_apply*
        is for actions without any sensible test: they are reported as not
        kept, so that they get applied.
    """

    valid_kinds = set(('kept', 'always_apply', 'not_kept', 'error'))

    @classmethod
    def kept(cls):
        return cls('kept')

    @classmethod
    def always_apply(cls):
        return cls('always_apply')

    @classmethod
    def not_kept(cls, reason):
        return cls('not_kept', reason)

    @classmethod
    def error(cls, reason):
        return cls('error', reason)


    def outcome(self, log, check_only=False):
        """ A not kept reason is logged at error level when *check_only*
            is True, since nothing will be done about it; otherwise it is
            logged at info level ahead of the repair.
        """

        kind = self.kind

        if kind == 'kept':
            return EvaluateOutcome.KEPT

        if kind == 'always_apply':
            log.info('This promise needs to be applied')
            return EvaluateOutcome.NOT_KEPT

        if kind == 'not_kept':
            if check_only:
                log.error(self.reason)
            else:
                log.info(self.reason)
            return EvaluateOutcome.NOT_KEPT

        log.error(self.reason)
        return EvaluateOutcome.ERROR


# end of class CheckResult



class ApplyResult(Result):
    """ The result of making changes. *audit_only* is for promise types
        that can only ever be checked; applying one is an error.
    """

    valid_kinds = set(('kept', 'repaired', 'not_kept', 'error', 'audit_only'))

    @classmethod
    def kept(cls):
        return cls('kept')

    @classmethod
    def repaired(cls, reason):
        return cls('repaired', reason)

    @classmethod
    def not_kept(cls, reason):
        return cls('not_kept', reason)

    @classmethod
    def error(cls, reason):
        return cls('error', reason)

    @classmethod
    def audit_only(cls):
        return cls('audit_only')


    def outcome(self, log):

        kind = self.kind

        if kind == 'kept':
            return EvaluateOutcome.KEPT

        if kind == 'repaired':
            log.info(self.reason)
            return EvaluateOutcome.REPAIRED

        if kind == 'not_kept':
            log.error(self.reason)
            return EvaluateOutcome.NOT_KEPT

        if kind == 'error':
            log.error(self.reason)
            return EvaluateOutcome.ERROR

        log.error('Should not be applied, audit only promise')
        return EvaluateOutcome.ERROR


# end of class ApplyResult



class ProtocolResult(Result):
    """ The result of the init and terminate hooks.
    """

    valid_kinds = set(('success', 'failure', 'error'))

    @classmethod
    def success(cls):
        return cls('success')

    @classmethod
    def failure(cls, reason):
        return cls('failure', reason)

    @classmethod
    def error(cls, reason):
        return cls('error', reason)


    def outcome(self, log):

        if self.kind == 'success':
            return ProtocolOutcome.SUCCESS

        log.error(self.reason)

        if self.kind == 'failure':
            return ProtocolOutcome.FAILURE
        return ProtocolOutcome.ERROR


# end of class ProtocolResult


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
