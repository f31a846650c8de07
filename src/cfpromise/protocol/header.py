""" The identity line each side sends once, before any request: the agent
    first, then the promise module. The textual form is
    ``<name> <version> <protocol> [flags...]``; the protocol tag and the
    flags are optional when parsing.
"""

from .. import errors
from . import fields


class Header:
    """ The identity of one side of the conversation. A :class:`Header` is
        not modified after the handshake; :func:`parse` and :func:`str`
        are inverses of each other.
    """

    def __init__(self, name, version, protocol=fields.PROTOCOL_VERSION, flags=()):

        name = str(name)
        version = str(version)

        for field in (name, version):
            if field == '' or len(field.split()) != 1:
                raise ValueError('header fields must be single words: ' + repr(field))

        self.name = name
        self.version = version
        self.protocol = protocol
        self.flags = tuple(flags)


    def __eq__(self, other):
        if not isinstance(other, Header):
            return NotImplemented
        return (self.name, self.version, self.protocol, self.flags) == \
               (other.name, other.version, other.protocol, other.flags)


    def __repr__(self):
        return 'Header(%r)' % (str(self))


    def __str__(self):
        parts = [self.name, self.version]

        if self.protocol is not None:
            parts.append(self.protocol)
            parts.extend(self.flags)

        return ' '.join(parts)


    @classmethod
    def parse(cls, line):
        """ Parse a header *line*, as bytes or str. A :class:`ParseError`
            is raised if it does not have at least a name and a version.
        """

        if isinstance(line, bytes):
            try:
                line = line.decode('utf-8')
            except UnicodeDecodeError:
                raise errors.ParseError('header is not valid UTF-8: ' + repr(line))

        words = line.split()

        if len(words) < 2:
            raise errors.ParseError('malformed header: ' + repr(line))

        name = words[0]
        version = words[1]

        if len(words) > 2:
            protocol = words[2]
            flags = words[3:]
        else:
            protocol = None
            flags = ()

        return cls(name, version, protocol, flags)


    def compatibility(self):
        """ Raise :class:`IncompatibleVersion` unless this header is for
            the one protocol version implemented here. A header without a
            protocol tag is taken to mean the first version.
        """

        protocol = self.protocol

        if protocol is None:
            protocol = fields.PROTOCOL_VERSION

        if protocol != fields.PROTOCOL_VERSION:
            raise errors.IncompatibleVersion("peer %s %s speaks protocol %s, expected %s" % (self.name, self.version, protocol, fields.PROTOCOL_VERSION))


# end of class Header



def negotiate(reader, writer, mine):
    """ Perform the handshake: read the agent header from *reader*, check
        its compatibility, and answer with the *mine* header via *writer*.
        The agent header is returned.
    """

    line = reader.read()
    theirs = Header.parse(line)
    theirs.compatibility()

    writer.write(str(mine))
    return theirs


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
