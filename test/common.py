import mock
import unittest

from contextlib import contextmanager
from http.server import BaseHTTPRequestHandler, HTTPServer
import threading

from nsqlookup.http import nsqlookupd


class FakeServer(object):
    '''A fake nsqlookupd that answers GETs with canned responses'''
    def __init__(self):
        # Map of path (without query) to (status, body)
        self.routes = {}
        # Every request line path we've been sent, query included
        self.requests = []
        server = self

        class Handler(BaseHTTPRequestHandler):
            def do_GET(self):
                server.requests.append(self.path)
                status, body = server.routes.get(
                    self.path.split('?')[0], (404, '404 page not found'))
                body = body.encode('utf-8')
                self.send_response(status)
                self.send_header('Content-Length', str(len(body)))
                self.end_headers()
                self.wfile.write(body)

            def log_message(self, *args):
                pass

        self._server = HTTPServer(('127.0.0.1', 0), Handler)
        self.port = self._server.server_address[1]
        self._thread = threading.Thread(target=self._server.serve_forever)
        self._thread.daemon = True

    def respond(self, path, body, status=200):
        '''Answer GETs to path with the provided body and status'''
        self.routes[path] = (status, body)

    def __enter__(self):
        self._thread.start()
        return self

    def __exit__(self, typ, value, trace):
        self._server.shutdown()
        self._server.server_close()
        self._thread.join()


class FakeServerTest(unittest.TestCase):
    '''Run a fake nsqlookupd and point a client at it'''
    def setUp(self):
        self.server = FakeServer().__enter__()
        self.client = nsqlookupd.Client('127.0.0.1', self.server.port)

    def tearDown(self):
        self.server.__exit__(None, None, None)


class ClientTest(unittest.TestCase):
    '''Talk to a client whose requests never leave the process'''
    def setUp(self):
        self.client = nsqlookupd.Client('http://foo:1')

    @contextmanager
    def patched_get(self, text='', status_code=200, reason='OK'):
        with mock.patch('nsqlookup.http.requests.get') as get:
            get.return_value = mock.Mock(
                status_code=status_code, text=text, reason=reason)
            yield get
