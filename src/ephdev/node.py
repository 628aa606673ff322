'''
Typed view over the node metadata tree.

The tree is an Ohai-like dump collected elsewhere: a mapping keyed by
cloud name ('ec2', 'gce', ...) with provider specific sub-mappings, plus
generic sections like 'virtualization' and 'block_device'. Only the few
shapes recognized here are parsed; everything else stays opaque.
'''

import json
import logging
import re

from ephdev import MetadataError


LOG = logging.getLogger(__name__)

BDM_EPHEMERAL_RE = re.compile(r'^block_device_mapping_ephemeral\d+$')


class BlockDeviceMapping(object):
    '''
    Single 'block_device_mapping_ephemeralN' entry of a cloud metadata
    '''

    def __init__(self, key, device):
        self.key = key
        self.device = device

    @property
    def path(self):
        if '/dev/' in self.device:
            return self.device
        return '/dev/' + self.device

    def __repr__(self):
        return '<BlockDeviceMapping {0}={1}>'.format(self.key, self.device)


class GceDisk(object):
    '''
    GCE attached disk descriptor (attached_disks.disks[])
    '''

    def __init__(self, type, device_name):
        # pylint: disable=W0622
        self.type = type
        self.device_name = device_name

    def __repr__(self):
        return '<GceDisk {0} type={1}>'.format(self.device_name, self.type)


class Node(dict):
    LOG = LOG

    def __init__(self, data=None, logger=None):
        super(Node, self).__init__(data or {})
        if logger:
            self.LOG = logger

    def cloud(self, name):
        '''
        Returns cloud metadata section, empty dict when absent or malformed
        '''
        section = self.get(name)
        if section is None:
            return {}
        if not isinstance(section, dict):
            self.LOG.debug("Metadata for cloud '%s' is not a mapping: %r", name, section)
            return {}
        return section

    def has_block_device_mapping(self, cloud):
        return any(BDM_EPHEMERAL_RE.match(key) for key in self.cloud(cloud)
                if isinstance(key, str))

    def block_device_mappings(self, cloud):
        ret = []
        for key, device in self.cloud(cloud).items():
            if not isinstance(key, str) or not BDM_EPHEMERAL_RE.match(key):
                continue
            if device is None:
                continue
            if not isinstance(device, str) or not device:
                self.LOG.debug('Skipping %s: device should be a non-empty string, got %r',
                        key, device)
                continue
            ret.append(BlockDeviceMapping(key, device))
        return ret

    def gce_disks(self, cloud='gce'):
        attached = self.cloud(cloud).get('attached_disks')
        if not isinstance(attached, dict):
            return []
        disks = attached.get('disks')
        if not isinstance(disks, (list, tuple)):
            return []
        ret = []
        for disk in disks:
            try:
                type_, name = disk['type'], disk['deviceName']
            except (KeyError, TypeError):
                self.LOG.debug('Skipping malformed disk record: %r', disk)
                continue
            if not isinstance(type_, str) or not isinstance(name, str):
                self.LOG.debug('Skipping malformed disk record: %r', disk)
                continue
            ret.append(GceDisk(type_, name))
        return ret

    @property
    def virtualization_system(self):
        virt = self.get('virtualization')
        if isinstance(virt, dict):
            return virt.get('system')
        return None

    @property
    def block_devices(self):
        '''
        Block device names currently exposed by the guest kernel, i.e. 'xvdb'.
        None when metadata has no usable 'block_device' section
        '''
        devices = self.get('block_device')
        if devices is None:
            return None
        if not isinstance(devices, dict):
            self.LOG.debug("Metadata section 'block_device' is not a mapping: %r", devices)
            return None
        return set(devices)


def load(fp):
    '''
    Loads node metadata dump from a file object
    '''
    try:
        data = json.load(fp)
    except ValueError as e:
        raise MetadataError('Cannot parse node metadata: {0}'.format(e))
    if not isinstance(data, dict):
        raise MetadataError('Node metadata should be a mapping, got {0}'.format(
                type(data).__name__))
    return Node(data)
