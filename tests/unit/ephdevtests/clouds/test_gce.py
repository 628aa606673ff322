from ephdev.clouds import gce
from ephdev.node import Node


def disks_node(*disks):
    return Node({'gce': {'attached_disks': {'disks': list(disks)}}})


class TestGceRule(object):

    def setup_method(self):
        self.rule = gce.GceRule()

    def test_devices(self):
        node = disks_node(
                {'type': 'EPHEMERAL', 'deviceName': 'ephemeral-disk-0'},
                {'type': 'PERSISTENT', 'deviceName': 'root'},
                {'type': 'EPHEMERAL', 'deviceName': 'ephemeral-disk-1'})
        assert self.rule.devices('gce', node) == [
                '/dev/disk/by-id/google-ephemeral-disk-0',
                '/dev/disk/by-id/google-ephemeral-disk-1']

    def test_device_name_pattern(self):
        node = disks_node(
                {'type': 'EPHEMERAL', 'deviceName': 'ephemeral-disk-'},
                {'type': 'EPHEMERAL', 'deviceName': 'ephemeral-disk-0a'},
                {'type': 'EPHEMERAL', 'deviceName': 'my-ephemeral-disk-0'},
                {'type': 'EPHEMERAL', 'deviceName': 'scratch'})
        assert self.rule.devices('gce', node) == []

    def test_persistent_named_like_ephemeral(self):
        node = disks_node({'type': 'PERSISTENT', 'deviceName': 'ephemeral-disk-0'})
        assert self.rule.devices('gce', node) == []

    def test_malformed_records_skipped(self):
        node = disks_node(
                {'type': 'EPHEMERAL'},
                {'deviceName': 'ephemeral-disk-0'},
                {'type': 'EPHEMERAL', 'deviceName': 'ephemeral-disk-1'})
        assert self.rule.devices('gce', node) == ['/dev/disk/by-id/google-ephemeral-disk-1']

    def test_no_attached_disks(self):
        assert self.rule.devices('gce', Node({'gce': {}})) == []
        assert self.rule.devices('gce', Node()) == []
