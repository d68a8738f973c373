import logging
import sys

log_format = '%(asctime)s %(levelname)-8s %(name)s: %(message)s'
log_date_format = '%H:%M:%S'

def setup_logging(level=logging.INFO, log_file=None):
    '''Send messages from the `gcube` logger hierarchy at `level` and above
    to stderr, and also to `log_file` if one is given. Calling this again
    replaces the handlers installed by the previous call.'''
    logger = logging.getLogger('gcube')
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(log_format, datefmt=log_date_format)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug('logging to {}'.format(log_file or 'stderr'))
    return logger
