import io
import cfpromise
import pytest

from cfpromise.protocol import header
from cfpromise.protocol import wire
from cfpromise.protocol.header import Header


def test_parse():

    parsed = Header.parse('cf-agent 3.18.0 v1')
    assert parsed.name == 'cf-agent'
    assert parsed.version == '3.18.0'
    assert parsed.protocol == 'v1'
    assert parsed.flags == ()

    parsed = Header.parse(b'directory_module 0.0.1 v1 json_based')
    assert parsed.name == 'directory_module'
    assert parsed.version == '0.0.1'
    assert parsed.flags == ('json_based',)

    parsed = Header.parse('agent 1.2')
    assert parsed.name == 'agent'
    assert parsed.version == '1.2'
    assert parsed.protocol is None


def test_parse_error():

    for line in ('', 'agent', '   ', b'\xff\xfe 1.0'):
        with pytest.raises(cfpromise.errors.ParseError):
            Header.parse(line)


def test_round_trip():

    for name, version in (('cf-agent', '3.18.0'), ('git_promise_module', '0.0.1'), ('a', 'b')):
        for protocol, flags in (('v1', ()), ('v1', ('json_based',)), (None, ())):
            original = Header(name, version, protocol, flags)
            parsed = Header.parse(str(original))

            assert (parsed.name, parsed.version) == (name, version)
            assert parsed == original


def test_invalid_fields():

    with pytest.raises(ValueError):
        Header('two words', '1.0')

    with pytest.raises(ValueError):
        Header('agent', '')


def test_compatibility():

    Header.parse('cf-agent 3.18.0 v1').compatibility()
    Header.parse('cf-agent 3.18.0').compatibility()

    with pytest.raises(cfpromise.errors.IncompatibleVersion):
        Header.parse('cf-agent 4.0.0 v2').compatibility()


def test_negotiate():

    mine = Header('recorder', '1.0.0', 'v1', ('json_based',))

    reader = wire.Reader(io.BytesIO(b'cf-agent 3.18.0 v1\n\n'))
    output = io.BytesIO()
    writer = wire.Writer(output)

    theirs = header.negotiate(reader, writer, mine)

    assert theirs.name == 'cf-agent'
    assert output.getvalue() == b'recorder 1.0.0 v1 json_based\n\n'


def test_negotiate_incompatible():

    mine = Header('recorder', '1.0.0')

    reader = wire.Reader(io.BytesIO(b'cf-agent 4.0.0 v2\n\n'))
    output = io.BytesIO()
    writer = wire.Writer(output)

    with pytest.raises(cfpromise.errors.IncompatibleVersion):
        header.negotiate(reader, writer, mine)

    # Nothing is sent back to an incompatible peer.

    assert output.getvalue() == b''


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
