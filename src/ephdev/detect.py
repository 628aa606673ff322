import logging

from ephdev import clouds
from ephdev import mapper
from ephdev import node as nodemod
from ephdev.util import unique


LOG = logging.getLogger(__name__)


class DeviceDetector(object):
    LOG = LOG

    def __init__(self, logger=None):
        if logger:
            self.LOG = logger

    def detect(self, cloud, metadata):
        '''
        Detects ephemeral devices available on the instance.

        If the cloud supports block device mapping, devices are taken from
        'block_device_mapping_ephemeralN' metadata keys, otherwise cloud
        specific rule is applied.

        :type cloud: str
        :type metadata: dict or ephdev.node.Node
        :return: list of device paths
        '''
        if isinstance(metadata, nodemod.Node):
            node = metadata
        else:
            node = nodemod.Node(metadata, self.LOG)
        if node.has_block_device_mapping(cloud):
            devices = [bdm.path for bdm in node.block_device_mappings(cloud)]
            if mapper.hypervisor(node) == mapper.Hypervisor.XEN:
                self.LOG.debug('Mapping for ephemeral devices: %s', devices)
        else:
            cloud_rule = clouds.rule(cloud)
            if not cloud_rule:
                self.LOG.info("Cloud '%s' is not supported", cloud)
                return []
            devices = cloud_rule.devices(cloud, node)
        return unique(d for d in devices if d)
