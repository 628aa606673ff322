import logging
import re


LOG = logging.getLogger(__name__)


cloud_rules = dict()

CLOUD_NAME_RE = re.compile(r'^[a-z][a-z0-9_]*$')


def rule(cloud):
    """
    Returns detection rule instance for the cloud
    or None if the cloud is not supported
    """
    if cloud not in cloud_rules and CLOUD_NAME_RE.match(cloud or ''):
        try:
            __import__('ephdev.clouds.%s' % cloud)
        except ImportError:
            LOG.debug("No detection rule module for cloud '%s'", cloud)
    try:
        cls = cloud_rules[cloud]
    except KeyError:
        return None
    return cls()


class Rule(object):
    '''
    Cloud specific ephemeral devices detection, used when the cloud
    doesn't expose block device mapping in metadata
    '''

    def devices(self, cloud, node):
        '''
        :type node: ephdev.node.Node
        :return: list of device paths
        '''
        raise NotImplementedError()
