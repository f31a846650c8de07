""" Attribute typing for promise parameters. A promise type declares its
    required and optional attributes as sequences of (name, type) pairs;
    :func:`check` verifies the attributes of each request against that
    schema before any promise hook sees them.
"""

import os

from . import errors


_int64_min = -(2 ** 63)
_int64_max = 2 ** 63 - 1


class AttributeType:
    """ First-level type of an attribute value, as decoded from JSON. The
        common types are available as class attributes (:attr:`Bool`,
        :attr:`String`, :attr:`Integer`, :attr:`Float`, :attr:`List`,
        :attr:`Data`, :attr:`AbsolutePath`); an enumerated string type is
        built with :func:`StringEnum`.
    """

    kinds = set(('bool', 'string', 'integer', 'float', 'list', 'data', 'absolute_path', 'string_enum'))

    def __init__(self, kind, variants=None):

        if kind in self.kinds:
            pass
        else:
            raise ValueError('invalid attribute type: ' + repr(kind))

        if kind == 'string_enum':
            if variants is None:
                raise ValueError('an enumerated string type needs its variants')
            variants = tuple(variants)
        elif variants is not None:
            raise ValueError('only enumerated string types have variants')

        self.kind = kind
        self.variants = variants


    def __eq__(self, other):
        if not isinstance(other, AttributeType):
            return NotImplemented
        return self.kind == other.kind and self.variants == other.variants


    def __hash__(self):
        return hash((self.kind, self.variants))


    def __repr__(self):
        if self.variants is None:
            return 'AttributeType(%s)' % (self.kind)
        return 'AttributeType(%s, %s)' % (self.kind, list(self.variants))


    @classmethod
    def StringEnum(cls, variants):
        """ Return a type matching a string equal to one of *variants*.
        """

        return cls('string_enum', variants)


    def has_type(self, value):
        """ Return True if *value* is of this type.
        """

        kind = self.kind

        # bool is a subclass of int in Python, but never a JSON number.

        if kind == 'bool':
            return isinstance(value, bool)

        if kind == 'string':
            return isinstance(value, str)

        if kind == 'integer':
            if isinstance(value, bool) or not isinstance(value, int):
                return False
            return _int64_min <= value <= _int64_max

        if kind == 'float':
            if isinstance(value, bool):
                return False
            return isinstance(value, (int, float))

        if kind == 'list':
            return isinstance(value, list)

        if kind == 'data':
            return isinstance(value, dict)

        if kind == 'absolute_path':
            return isinstance(value, str) and os.path.isabs(value)

        if kind == 'string_enum':
            return isinstance(value, str) and value in self.variants

        return False


# end of class AttributeType


AttributeType.Bool = AttributeType('bool')
AttributeType.String = AttributeType('string')
AttributeType.Integer = AttributeType('integer')
AttributeType.Float = AttributeType('float')
AttributeType.List = AttributeType('list')
AttributeType.Data = AttributeType('data')
AttributeType.AbsolutePath = AttributeType('absolute_path')



def check(attributes, required=(), optional=(), ignore_unknown=False):
    """ Validate the *attributes* dictionary against the *required* and
        *optional* sequences of (name, :class:`AttributeType`) pairs. Every
        required name must be present, every declared name that is present
        must match its type, and unless *ignore_unknown* is True no other
        names are allowed.

        All problems are collected before raising a single
        :class:`cfpromise.errors.AttributeValidationError`.
    """

    required = list(required)
    optional = list(optional)
    problems = list()

    for name, attribute_type in required:
        if name not in attributes:
            problems.append('missing required attribute ' + repr(name))

    for name, attribute_type in required + optional:
        try:
            value = attributes[name]
        except KeyError:
            continue

        if not attribute_type.has_type(value):
            problems.append('attribute %s should have type %s' % (repr(name), repr(attribute_type)))

    if not ignore_unknown:
        declared = set(name for name, attribute_type in required + optional)

        for name in attributes:
            if name not in declared:
                problems.append('unexpected attribute ' + repr(name))

    if problems:
        raise errors.AttributeValidationError(problems)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
