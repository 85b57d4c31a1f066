'''A client for nsqlookupd, NSQ's discovery daemon'''

import logging

# Logging, obviously
logger = logging.getLogger('nsqlookup')
handler = logging.StreamHandler()
handler.setLevel(logging.DEBUG)
formatter = logging.Formatter(
    '%(asctime)s [%(levelname)s] %(filename)s@%(lineno)d: %(message)s')
handler.setFormatter(formatter)
logger.addHandler(handler)
logger.setLevel(logging.INFO)

# The current version
__version__ = '0.1.0'
