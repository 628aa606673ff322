import os
import logging
import logging.handlers


class RotatingFileHandler(logging.handlers.RotatingFileHandler):
    def __init__(self, filename, mode, maxBytes, backupCount, chmod=0o600):
        logging.handlers.RotatingFileHandler.__init__(self, filename, mode, maxBytes, backupCount)
        try:
            os.chmod(self.baseFilename, chmod)
        except OSError:
            pass


class NoStacktraceFormatter(logging.Formatter):

    def formatException(self, exc_info):
        # pylint: disable=W0613
        return ''

    def format(self, record):
        # record.exc_text may hold a traceback cached by another handler
        saved = record.exc_text
        record.exc_text = None
        try:
            return super(NoStacktraceFormatter, self).format(record)
        finally:
            record.exc_text = saved


class UtcOffsetFormatter(logging.Formatter):
    default_time_format = '%Y-%m-%d %H:%M:%S%z'
    default_msec_format = None


class DebugFormatter(UtcOffsetFormatter):
    pass


class UserFormatter(UtcOffsetFormatter, NoStacktraceFormatter):
    pass
