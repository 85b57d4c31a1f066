'''A class for interacting with a nsqlookupd instance over http'''

from . import BaseClient, blocking
from ..models import Producer, ServerInfo
from ..util import listing, names


class Client(BaseClient):
    '''A client for talking to nsqlookupd over http.

    Every endpoint comes in two flavors: a coroutine named `<name>_async`, and
    a blocking `<name>` that runs it to completion. All of them accept an
    optional `timeout` in seconds, overriding the client's default.'''

    async def ping_async(self, timeout=None):
        '''Ping the server'''
        return await self.get_ok_async('ping', timeout=timeout)

    async def info_async(self, timeout=None):
        '''Get info about this instance'''
        data = await self.get_json_async('info', timeout=timeout)
        return ServerInfo.from_json(data)

    async def producers_for_topic_async(self, topic, timeout=None):
        '''Look up which producers serve a particular topic'''
        data = await self.get_json_async(
            'lookup', params={'topic': topic}, timeout=timeout)
        return [Producer.from_json(p) for p in listing(data, 'producers')]

    async def topics_async(self, timeout=None):
        '''Get a list of topics'''
        data = await self.get_json_async('topics', timeout=timeout)
        return names(data, 'topics')

    async def channels_for_topic_async(self, topic, timeout=None):
        '''Get a list of channels for a given topic'''
        data = await self.get_json_async(
            'channels', params={'topic': topic}, timeout=timeout)
        return names(data, 'channels')

    async def nodes_async(self, timeout=None):
        '''Get information about all the nsqd nodes'''
        data = await self.get_json_async('nodes', timeout=timeout)
        return [Producer.from_json(p) for p in listing(data, 'producers')]

    async def delete_topic_async(self, topic, timeout=None):
        '''Delete a topic'''
        return await self.get_ok_async(
            'delete_topic', params={'topic': topic}, timeout=timeout)

    async def delete_channel_async(self, channel, node, timeout=None):
        '''Delete a channel on the provided node'''
        return await self.get_ok_async(
            'delete_channel', params={'channel': channel, 'node': node},
            timeout=timeout)

    async def tombstone_producer_async(self, topic, node, timeout=None):
        '''Tombstone a node's registration for a topic.

        The topic is sent under the `channel` query key. nsqlookupd reads
        `topic`, so prefer `tombstone_topic_producer`.'''
        return await self.get_ok_async(
            'tombstone_topic_producer', params={'channel': topic, 'node': node},
            timeout=timeout)

    async def tombstone_topic_producer_async(self, topic, node, timeout=None):
        '''Tombstone a node's registration for a topic'''
        return await self.get_ok_async(
            'tombstone_topic_producer', params={'topic': topic, 'node': node},
            timeout=timeout)

    async def create_topic_async(self, topic, timeout=None):
        '''Create a topic'''
        return await self.get_ok_async(
            'create_topic', params={'topic': topic}, timeout=timeout)

    async def create_channel_async(self, topic, channel, timeout=None):
        '''Create a channel in the provided topic'''
        return await self.get_ok_async(
            'create_channel', params={'topic': topic, 'channel': channel},
            timeout=timeout)

    async def debug_async(self, timeout=None):
        '''Get debugging information'''
        return await self.get_json_async('debug', timeout=timeout)

    ping = blocking(ping_async)
    info = blocking(info_async)
    producers_for_topic = blocking(producers_for_topic_async)
    topics = blocking(topics_async)
    channels_for_topic = blocking(channels_for_topic_async)
    nodes = blocking(nodes_async)
    delete_topic = blocking(delete_topic_async)
    delete_channel = blocking(delete_channel_async)
    tombstone_producer = blocking(tombstone_producer_async)
    tombstone_topic_producer = blocking(tombstone_topic_producer_async)
    create_topic = blocking(create_topic_async)
    create_channel = blocking(create_channel_async)
    debug = blocking(debug_async)
