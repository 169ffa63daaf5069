""" LOGGING
"""
import logging

from config import log_level

#
# CONFIG
#
FORMAT = '%(asctime)-15s %(message)s'
logging.basicConfig(format=FORMAT)
logger = logging.getLogger('quickhull')
logger.setLevel(log_level())


#
# PUBLIC
#
def out(message, level='info'):
    getattr(logger, level)(message)
