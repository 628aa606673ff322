import os
import logging

from ephdev import EphemeralError


LOG = logging.getLogger(__name__)

SYS_BLOCK = '/sys/block'


class LinuxError(EphemeralError):
    pass


def block_devices(sys_block=None):
    '''
    Returns names of block devices exposed by the kernel, i.e. set(['xvda', 'xvdb'])
    '''
    sys_block = sys_block or SYS_BLOCK
    try:
        names = os.listdir(sys_block)
    except OSError as e:
        raise LinuxError("Cannot list block devices in '{0}': {1}".format(
                sys_block, e))
    LOG.debug('Block devices in %s: %s', sys_block, sorted(names))
    return set(names)
