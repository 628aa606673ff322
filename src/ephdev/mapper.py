'''
Device names reconciliation.

Servers running on Xen hypervisor expose block devices as /dev/xvdX
while cloud metadata still reports them as /dev/sdX.
'''

import logging
import posixpath
import re

from ephdev import UnresolvedDeviceError
from ephdev.util import unique


LOG = logging.getLogger(__name__)


class Hypervisor(object):
    XEN = 'xen'
    OTHER = 'other'


def hypervisor(node):
    '''
    :type node: ephdev.node.Node
    '''
    if node.virtualization_system == Hypervisor.XEN:
        return Hypervisor.XEN
    return Hypervisor.OTHER


def name2device(name):
    if not name.startswith('/dev'):
        name = posixpath.join('/dev', name)
    return re.sub(r'^/dev/sd', '/dev/xvd', name)


def basename(device):
    # /dev/xvdb -> xvdb
    return posixpath.basename(device)


class DeviceMapper(object):
    LOG = LOG

    def __init__(self, logger=None):
        if logger:
            self.LOG = logger

    def reconcile(self, devices, inventory, hypervisor=Hypervisor.XEN, strict=False):
        '''
        Fixes device mapping on Xen hypervisors. Identifies whether mapping
        is required by checking existence of unmapped device on the guest.

        :type devices: list
        :param devices: Device paths to fix the mapping

        :type inventory: set
        :param inventory: Block device names currently attached to the server

        :param strict: Raise UnresolvedDeviceError when some of devices
            can't be found on the guest
        '''
        if hypervisor != Hypervisor.XEN:
            return list(devices)
        inventory = set(inventory)
        ret = []
        unresolved = []
        for device in devices:
            if basename(device) in inventory:
                ret.append(device)
                continue
            fixed_device = name2device(device)
            if basename(fixed_device) in inventory:
                ret.append(fixed_device)
            else:
                self.LOG.warning('could not find ephemeral device: %s', device)
                unresolved.append(device)
        if strict and unresolved:
            raise UnresolvedDeviceError(unresolved)
        return unique(ret)
