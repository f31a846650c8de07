from .protocol import fields
from .protocol.header import Header
from .result import ApplyResult, CheckResult, ProtocolResult, ValidateResult


class PromiseType:
    """ The :class:`PromiseType` is the interface between the executor and
        the domain-specific code of one kind of promise. The developer is
        expected to subclass it, set the :attr:`name` and :attr:`version`
        identity, and override whichever hooks the promise type needs;
        every hook has a reasonable default.

        The executor constructs nothing: the one instance handed to
        :func:`cfpromise.Executor.run` serves every request of the run.
        Each hook receives a :class:`cfpromise.log.Gate` as its *log*
        argument, already set to the threshold requested by the agent.

        Hooks are only invoked with attributes that passed the schema
        declared by :func:`required_attributes` and
        :func:`optional_attributes`, so a required attribute can be read
        without further checking.
    """

    name = None
    version = None

    def header(self):
        """ Return the :class:`Header` this promise module announces.
        """

        if self.name is None or self.version is None:
            raise NotImplementedError('%s must define a name and a version' % (self.__class__.__name__))

        return Header(self.name, self.version, fields.PROTOCOL_VERSION, (fields.JSON_BASED,))


    def required_attributes(self):
        """ Return a list of (name, :class:`cfpromise.AttributeType`)
            pairs for the attributes every promise must have. The list is
            built on demand, so it may depend on the platform.
        """

        return []


    def optional_attributes(self):
        """ Return a list of (name, :class:`cfpromise.AttributeType`)
            pairs for the attributes a promise may have.
        """

        return []


    def init(self, log):
        """ Invoked once, when the first request arrives; put expensive
            set-up here. A failure aborts the run.
        """

        return ProtocolResult.success()


    def validate(self, promiser, attributes, log):
        """ Checks beyond the attribute schema, such as consistency between
            attributes.
        """

        return ValidateResult.valid()


    def check(self, promiser, attributes, log):
        """ Test whether the promise is kept, without changing anything.
            The default suits actions, which are applied every time.
        """

        return CheckResult.always_apply()


    def apply(self, promiser, attributes, log):
        """ Make the changes needed to keep the promise. Only invoked when
            :func:`check` found it was not kept, and never in audit mode.
        """

        return ApplyResult.audit_only()


    def terminate(self, log):
        """ Invoked before normal termination, for any clean-up.
        """

        return ProtocolResult.success()


# end of class PromiseType


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
