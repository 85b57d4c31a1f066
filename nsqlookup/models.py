'''Records built out of nsqlookupd's JSON responses'''

from collections import namedtuple

from .exceptions import ProtocolException
from .util import normalize


def string(value):
    '''A string field, defaulting to the empty string'''
    if value is None:
        return ''
    return str(value)


def integer(value):
    '''An integer field, defaulting to zero'''
    if value is None:
        return 0
    # bool is an int, but never a port
    if isinstance(value, bool):
        raise ProtocolException('Expected an integer, got %r' % (value,))
    if isinstance(value, float) and not value.is_integer():
        raise ProtocolException('Expected an integer, got %r' % (value,))
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ProtocolException(
            'Expected an integer, got %r' % (value,)) from exc


def marshal(cls, obj):
    '''Build a cls out of a JSON object, matching keys loosely.

    Keys are compared after folding case and dropping underscores and dashes,
    so `broadcast_address`, `broadcastAddress` and `BroadcastAddress` all fill
    the same field. Unknown keys are ignored and missing keys take the field's
    zero value.'''
    if not isinstance(obj, dict):
        raise ProtocolException('Expected a JSON object, got %r' % (obj,))
    values = dict((normalize(key), value) for key, value in obj.items())
    return cls(*[
        convert(values.get(normalize(name)))
        for name, convert in cls.converters])


class Producer(namedtuple('Producer', [
        'address', 'hostname', 'broadcast_address',
        'tcp_port', 'http_port', 'version'])):
    '''An nsqd instance as advertised to nsqlookupd'''
    __slots__ = ()

    converters = (
        ('address', string),
        ('hostname', string),
        ('broadcast_address', string),
        ('tcp_port', integer),
        ('http_port', integer),
        ('version', string),
    )

    @classmethod
    def from_json(cls, obj):
        return marshal(cls, obj)


class ServerInfo(namedtuple('ServerInfo', ['version'])):
    '''What nsqlookupd reports about itself'''
    __slots__ = ()

    converters = (
        ('version', string),
    )

    @classmethod
    def from_json(cls, obj):
        return marshal(cls, obj)
