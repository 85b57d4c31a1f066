'''Some utilities used around town'''

from urllib.parse import quote

from .exceptions import ProtocolException


def querystring(params):
    '''Encode params as key=value pairs, percent-encoding only the values'''
    pairs = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bytes):
            value = value.decode('utf-8')
        pairs.append('%s=%s' % (key, quote(str(value), safe='')))
    return '&'.join(pairs)


def url(host, port, path, params=None):
    '''The absolute url of path on host:port, with an optional query string'''
    if path.startswith('/'):
        path = path[1:]
    host = str(host)
    # IPv6 literals need brackets
    if ':' in host and not host.startswith('['):
        host = '[%s]' % host
    target = 'http://%s:%s/%s' % (host, port, path)
    query = querystring(params or {})
    if query:
        return '%s?%s' % (target, query)
    return target


def normalize(key):
    '''Fold a JSON key so that snake_case, camelCase and PascalCase agree'''
    return str(key).replace('_', '').replace('-', '').lower()


def listing(data, key):
    '''The list stored under key, or an empty list if it's absent or null'''
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ProtocolException('Expected a list for %r, got %r' % (key, value))
    return value


def names(data, key):
    '''The list of strings stored under key, or an empty list'''
    values = listing(data, key)
    for value in values:
        if not isinstance(value, str):
            raise ProtocolException(
                'Expected a string in %r, got %r' % (key, value))
    return values
