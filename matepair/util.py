from datetime import datetime
import logging

ENV_VAR_PREFIX = 'MATEPAIR_'

logger = logging.getLogger('matepair')


class Log:
    """
    callable front for the matepair logger. Components take one of these as their log argument
    """
    def __init__(self, level=logging.INFO):
        self.level = level

    def __call__(self, *pos, time_stamp=False, level=None, **kwargs):
        if level is None:
            level = self.level
        stamp = datetime.now().strftime('[%Y-%m-%d %H:%M:%S] ') if time_stamp else ''
        logger.log(level, stamp + ' '.join([str(p) for p in pos]), **kwargs)


LOG = Log()


def cast_boolean(input_value):
    value = str(input_value).lower()
    if value in ['t', 'true', '1', 'y', 'yes', '+']:
        return True
    elif value in ['f', 'false', '0', 'n', 'no', '-']:
        return False
    raise TypeError('casting to boolean failed', input_value)


def cast(value, cast_func):
    """
    cast a value to a given type

    Example:
        >>> cast('1', int)
        1
        >>> cast('no', bool)
        False
    """
    if cast_func == bool:
        return cast_boolean(value)
    return cast_func(value)
