'''Exception classes'''


class NSQException(Exception):
    '''Base class for all exceptions in this library'''


class ClientException(NSQException):
    '''An exception class for all client errors'''


class ConfigurationException(ClientException):
    '''The client is missing its host, its port or a path to request'''


class TransportException(ClientException):
    '''The request never got a response: DNS, connection or I/O failures'''


class TimeoutException(TransportException):
    '''Exception for failing a timeout'''


class ProtocolException(ClientException):
    '''A response that could not be understood'''
