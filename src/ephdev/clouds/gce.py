import re

from ephdev import clouds


EPHEMERAL_DISK_RE = re.compile(r'^ephemeral-disk-\d+$')


class GceRule(clouds.Rule):
    # Instances have links for ephemeral disks as
    # /dev/disk/by-id/google-ephemeral-disk-*
    # https://developers.google.com/compute/docs/disks#scratchdisks

    def devices(self, cloud, node):
        return ['/dev/disk/by-id/google-%s' % disk.device_name
                for disk in node.gce_disks(cloud)
                if disk.type == 'EPHEMERAL' and EPHEMERAL_DISK_RE.match(disk.device_name)]


clouds.cloud_rules['gce'] = GceRule
