'''Our clients for interacting with nsqlookupd over http'''

import asyncio
import functools
from urllib.parse import urlsplit

from decorator import decorator
import requests
import simplejson as json

from .. import logger
from ..exceptions import (
    ClientException, ConfigurationException, ProtocolException,
    TimeoutException, TransportException)
from ..util import url


def _run(function, *args, **kwargs):
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(function(*args, **kwargs))
    raise RuntimeError(
        'Cannot block inside a running event loop, await %s instead' %
        function.__name__)


def blocking(function):
    '''A synchronous twin of the provided coroutine function.

    The twin runs the coroutine to completion on a fresh event loop, returning
    its result or raising its exception unchanged. Like `asyncio.run`, it
    cannot be used from inside a running event loop.'''
    return decorator(_run, function)


@decorator
async def wrap(function, *args, **kwargs):
    '''Wrap a coroutine that returns a response with some exception handling'''
    try:
        response = await function(*args, **kwargs)
    except requests.Timeout as exc:
        raise TimeoutException(exc) from exc
    except requests.RequestException as exc:
        raise TransportException(exc) from exc
    logger.debug('Got %s: %s', response.status_code, response.text)
    return response


@decorator
async def json_wrap(function, *args, **kwargs):
    '''Return the `data` of the JSON body of a coroutine returning a response'''
    response = await function(*args, **kwargs)
    if not 200 <= response.status_code < 300:
        raise ProtocolException(
            response.status_code, response.reason, response.text)
    try:
        body = json.loads(response.text)
    except ValueError as exc:
        raise ProtocolException('Malformed JSON: %s' % exc) from exc
    if not isinstance(body, dict):
        raise ProtocolException('Expected a JSON object, got %r' % (body,))
    # Since nsqlookupd 1.0, responses are no longer wrapped in an envelope
    data = body['data'] if 'data' in body else body
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ProtocolException('Expected a JSON object, got %r' % (data,))
    return data


@decorator
async def ok_check(function, *args, **kwargs):
    '''Whether a coroutine's response is a 200 with an OK body'''
    response = await function(*args, **kwargs)
    return (
        response.status_code == 200 and
        response.text.lower() == 'ok')


class BaseClient(object):
    '''Base client class'''
    def __init__(self, host=None, port=None, timeout=None, **params):
        if isinstance(host, (tuple, list)):
            host, port = host
        elif isinstance(host, str) and '://' in host:
            split = urlsplit(host)
            try:
                port = port or split.port
            except ValueError as exc:
                raise ConfigurationException('Bad port in %r' % host) from exc
            host = split.hostname
        elif host is not None and not isinstance(host, str):
            raise TypeError('Host must be a string or tuple')
        self.host = host
        self.port = port
        self.timeout = timeout
        self._params = params

    def _url(self, path, params=None):
        '''The url for path, checking that we know where to send it'''
        if not self.host or not str(self.host).strip():
            raise ConfigurationException('Host must be set')
        if not self.port:
            raise ConfigurationException('Port must be set')
        if not path or not path.strip():
            raise ConfigurationException('Path cannot be empty')
        merged = dict(self._params)
        merged.update(params or {})
        return url(self.host, self.port, path, merged)

    @wrap
    async def get_async(self, path, params=None, timeout=None):
        '''GET the provided endpoint without blocking the event loop'''
        target = self._url(path, params)
        if timeout is None:
            timeout = self.timeout
        logger.debug('GET %s', target)
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, functools.partial(requests.get, target, timeout=timeout))

    @json_wrap
    async def get_json_async(self, path, params=None, timeout=None):
        '''GET the provided endpoint and return the data in its JSON body'''
        return await self.get_async(path, params=params, timeout=timeout)

    @ok_check
    async def get_ok_async(self, path, params=None, timeout=None):
        '''GET the provided endpoint and report whether it answered OK'''
        return await self.get_async(path, params=params, timeout=timeout)
