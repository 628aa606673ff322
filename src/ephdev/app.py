"""
Resolves ephemeral block devices of a cloud server from its node metadata.

Usage:
  ephdev [options] <cloud> [<node-json>]
  ephdev (-h | --help)
  ephdev --version

Options:
  -h, --help                Show this screen.
  --version                 Display version.
  -c, --config=<path>       Configuration file [default: /etc/ephdev/ephdev.ini].
  -s, --strict              Fail when some device can't be found on the guest.
  -f, --format=<format>     Output format: plain, json or yaml.
  --sys-block=<path>        Directory listing guest block devices, used when
                            node metadata has no block_device section.
  -d, --debug               Log debug messages to stderr.

Node metadata is a JSON dump read from <node-json> or stdin.
"""

import io
import sys
import json
import logging
import logging.config

import yaml
from docopt import docopt, DocoptExit

from ephdev import __version__
from ephdev import EphemeralError, MetadataError
from ephdev import ephemeral_devices
from ephdev import config
from ephdev import linux
from ephdev import mapper
from ephdev import node as nodemod


LOG = logging.getLogger(__name__)

LOG_MAX_BYTES = 5242880
LOG_BACKUP_COUNT = 5

LOGGING_CONFIG = r'''
[loggers]
keys=root,ephdev

[handlers]
keys=HANDLERS

[formatters]
keys=debug,user

[logger_root]
level=DEBUG
handlers=HANDLERS

[logger_ephdev]
level=DEBUG
qualname=ephdev
handlers=HANDLERS
propagate=0

[handler_console]
class=StreamHandler
level=CONSOLE_LEVEL
formatter=user
args=(sys.stderr,)

[handler_user_log]
class=ephdev.util.log.RotatingFileHandler
level=INFO
formatter=user
args=(r'LOG_PATH', 'a+', LOG_MAX_BYTES, LOG_BACKUP_COUNT, 0o600)

[handler_debug_log]
class=ephdev.util.log.RotatingFileHandler
level=DEBUG
formatter=debug
args=(r'LOG_DEBUG_PATH', 'a+', LOG_MAX_BYTES, LOG_BACKUP_COUNT, 0o600)

[formatter_debug]
format=%(asctime)s - %(levelname)s - %(name)s - %(message)s
class=ephdev.util.log.DebugFormatter

[formatter_user]
format=%(asctime)s - %(levelname)s - %(name)s - %(message)s
class=ephdev.util.log.UserFormatter
'''


def logging_config(cnf, debug=False):
    handlers = ['console']
    text = LOGGING_CONFIG
    if cnf.log_file:
        handlers.append('user_log')
        text = text.replace('LOG_PATH', cnf.log_file)
    if cnf.debug_log_file:
        handlers.append('debug_log')
        text = text.replace('LOG_DEBUG_PATH', cnf.debug_log_file)
    text = text.replace('HANDLERS', ','.join(handlers))
    text = text.replace('CONSOLE_LEVEL', 'DEBUG' if debug else 'WARNING')
    text = text.replace('LOG_MAX_BYTES', str(LOG_MAX_BYTES))
    text = text.replace('LOG_BACKUP_COUNT', str(LOG_BACKUP_COUNT))
    return text


def init_logging(cnf, debug=False):
    logging.config.fileConfig(io.StringIO(logging_config(cnf, debug)),
            disable_existing_loggers=False)


def load_node(filename=None):
    if not filename or filename == '-':
        return nodemod.load(sys.stdin)
    try:
        with open(filename) as fp:
            return nodemod.load(fp)
    except (IOError, OSError) as e:
        raise MetadataError("Cannot read node metadata '{0}': {1}".format(filename, e))


def format_devices(devices, fmt):
    if fmt == 'json':
        return json.dumps(devices)
    elif fmt == 'yaml':
        return yaml.safe_dump(devices, default_flow_style=False).rstrip()
    return '\n'.join(devices)


def _docopt_out_to_kwds(arguments):
    """
    Renaming arguments from command-line-like to python-like.
    """
    result = {}
    for k, v in arguments.items():
        new_k = k.lstrip('-').replace('-', '_')
        new_k = new_k.replace('<', '').replace('>', '')
        result[new_k] = v
    return result


def run(cnf, cloud, node_json=None, strict=False, format=None, sys_block=None, **kwds):
    # pylint: disable=W0622
    node = load_node(node_json)
    inventory = None
    if node.block_devices is None and mapper.hypervisor(node) == mapper.Hypervisor.XEN:
        inventory = linux.block_devices(sys_block or cnf.sys_block)
    devices = ephemeral_devices(cloud, node, inventory=inventory,
            strict=strict or cnf.strict)
    output = format_devices(devices, format or cnf.format)
    if output:
        print(output)
    return 0


def main(argv=None):
    try:
        kwds = _docopt_out_to_kwds(docopt(__doc__, argv=argv, version=__version__))
    except DocoptExit as e:
        print(e, file=sys.stderr)
        return 2
    if kwds['format'] and kwds['format'] not in config.FORMATS:
        print('ephdev: invalid format {0!r}, should be one of: {1}'.format(
                kwds['format'], ', '.join(config.FORMATS)), file=sys.stderr)
        return 2
    try:
        cnf = config.Configuration(kwds.pop('config'))
        init_logging(cnf, debug=kwds.pop('debug'))
        return run(cnf, **kwds)
    except EphemeralError as e:
        LOG.debug('ephdev failed', exc_info=sys.exc_info())
        print('ephdev: {0}'.format(e), file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
