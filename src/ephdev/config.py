'''
ephdev configuration.

Options are read from INI file (/etc/ephdev/ephdev.ini by default).
Missing file or option means the default value.
'''

import os
import logging
from configparser import RawConfigParser, Error as ConfigParserError

from ephdev import EphemeralError


LOG = logging.getLogger(__name__)

CONFIG_PATH = '/etc/ephdev/ephdev.ini'

SECT_GENERAL = 'general'
OPT_STRICT = 'strict'
OPT_SYS_BLOCK = 'sys_block'
OPT_FORMAT = 'format'

SECT_LOGGING = 'logging'
OPT_LOG_FILE = 'log_file'
OPT_DEBUG_LOG_FILE = 'debug_log_file'

FORMATS = ('plain', 'json', 'yaml')

DEFAULTS = {
    SECT_GENERAL: {
        OPT_STRICT: '0',
        OPT_SYS_BLOCK: '/sys/block',
        OPT_FORMAT: 'plain'
    },
    SECT_LOGGING: {
        OPT_LOG_FILE: '',
        OPT_DEBUG_LOG_FILE: ''
    }
}


class ConfigError(EphemeralError):
    pass


class Configuration(object):

    def __init__(self, filenames=None):
        if filenames is None:
            filenames = [CONFIG_PATH]
        elif isinstance(filenames, str):
            filenames = [filenames]
        self.filenames = filenames
        self.ini = RawConfigParser()
        self.ini.read_dict(DEFAULTS)
        self._reload()

    def _reload(self):
        for filename in self.filenames:
            if os.path.exists(filename):
                LOG.debug('Reading configuration from %s', filename)
                try:
                    self.ini.read(filename, encoding='utf-8')
                except (ConfigParserError, UnicodeDecodeError) as e:
                    raise ConfigError("Cannot read '{0}': {1}".format(filename, e))

    def get(self, section, option):
        return self.ini.get(section, option).strip()

    @property
    def strict(self):
        try:
            return self.ini.getboolean(SECT_GENERAL, OPT_STRICT)
        except ValueError:
            raise ConfigError("Option '{0}.{1}' should be boolean, got '{2}'".format(
                    SECT_GENERAL, OPT_STRICT, self.get(SECT_GENERAL, OPT_STRICT)))

    @property
    def sys_block(self):
        return self.get(SECT_GENERAL, OPT_SYS_BLOCK)

    @property
    def format(self):
        fmt = self.get(SECT_GENERAL, OPT_FORMAT)
        if fmt not in FORMATS:
            raise ConfigError("Option '{0}.{1}' should be one of {2}, got '{3}'".format(
                    SECT_GENERAL, OPT_FORMAT, ', '.join(FORMATS), fmt))
        return fmt

    @property
    def log_file(self):
        return self.get(SECT_LOGGING, OPT_LOG_FILE) or None

    @property
    def debug_log_file(self):
        return self.get(SECT_LOGGING, OPT_DEBUG_LOG_FILE) or None
