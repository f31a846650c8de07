""" Python implementation of custom promise types for a configuration
    management agent. A promise module subclasses :class:`PromiseType`
    and hands an instance to :func:`Executor.run`, which speaks the JSON
    promise protocol with the agent on the standard streams.
"""

# Utility components.

from . import json
from . import errors
from . import log

# Submodules used by multiple other components.

from . import protocol
from . import attribute
from . import result

# Primary public-facing interfaces.

from .attribute import AttributeType
from .log import Level
from .result import ApplyResult, CheckResult, ProtocolResult, ValidateResult
from .promise import PromiseType
from .executor import Executor

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
