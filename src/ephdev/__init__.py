import os
import logging

__version__ = open(os.path.join(os.path.dirname(__file__), 'version')).read().strip()


LOG = logging.getLogger(__name__)


class EphemeralError(Exception):
    pass


class MetadataError(EphemeralError):
    pass


class UnresolvedDeviceError(EphemeralError):
    def __init__(self, devices):
        super(UnresolvedDeviceError, self).__init__(devices)
        self.devices = list(devices)

    def __str__(self):
        return 'Could not find ephemeral devices: {0}'.format(
                ', '.join(self.devices))


def ephemeral_devices(cloud, metadata, inventory=None, strict=False, logger=None):
    '''
    Identifies the ephemeral devices available on a cloud server and
    returns them as a list of /dev paths. On Xen guests device names
    reported by metadata are mapped to the names kernel actually exposes
    (/dev/sdX -> /dev/xvdX).

    :type cloud: str
    :param cloud: Cloud name, i.e. 'ec2', 'gce'

    :type metadata: dict
    :param metadata: Node metadata tree (Ohai-like)

    :type inventory: set
    :param inventory: Block device names present on the guest.
        Defaults to the keys of metadata['block_device']. When neither is
        available devices are returned as detected

    :param strict: Raise UnresolvedDeviceError instead of dropping
        devices that can't be found on the guest
    '''
    from ephdev import detect, mapper, node as nodemod

    log = logger or LOG
    node = nodemod.Node(metadata, logger)
    devices = detect.DeviceDetector(logger).detect(cloud, node)
    hypervisor = mapper.hypervisor(node)
    if hypervisor == mapper.Hypervisor.XEN:
        if inventory is None:
            inventory = node.block_devices
        if inventory is None:
            log.warning('No block device inventory for Xen guest, '
                    'ephemeral devices left unmapped: %s', devices)
        else:
            devices = mapper.DeviceMapper(logger).reconcile(
                    devices, inventory, hypervisor, strict=strict)
    log.info("Ephemeral devices found for cloud '%s': %s", cloud, devices)
    return devices
