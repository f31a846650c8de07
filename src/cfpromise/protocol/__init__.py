from . import fields
from . import header
from . import message
from . import wire


"""
cfpromise Protocol Layer
========================

This package defines the protocol spoken between the agent and a promise
module. It has no knowledge of any particular promise type, nor of the
executor that sequences requests.

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

Executor (cfpromise.executor)
    Lifecycle state machine
    - handshake
    - request loop
    - dispatch to the promise type

    │
    ▼
Header (header.py)
    Identity exchange
    - "<name> <version> <protocol> [flags]"
    - compatibility rule

    │
    ▼
Message Model (message.py)
    Requests, responses and outcomes
    - decode() by the "operation" field
    - encapsulate() to JSON

    │
    ▼
Record Codec (wire.py)
    Moves one record at a time
    - content line + empty line
    - flush after every record

    │
    ▼
Field Vocabulary (fields.py)
    Canonical names for operations and keys
    Prevents string drift across system

---------------------------------------------------------------------

Design Principles
-----------------

1. Stream Agnostic
   The codec works with any binary file-like object, not only the
   standard streams of the process.

2. All or Nothing
   A record that is not one of the known shapes is an error; there is no
   tolerance for unknown messages.

3. Layer Isolation
   Dependencies only flow downward:
       Executor -> Header/Message -> Codec
   Never upward.

---------------------------------------------------------------------
"""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
