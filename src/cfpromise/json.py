''' Wrapper module for the equivalent of :func:`json.loads` and
    :func:`json.dumps`, backed by msgspec. Both directions deal in bytes,
    which is what the record streams carry.
'''

import msgspec


_encoder = msgspec.json.Encoder()
_decoder = msgspec.json.Decoder()

DecodeError = msgspec.DecodeError

dumps = _encoder.encode
loads = _decoder.decode


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
