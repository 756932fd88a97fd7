"""
controlled vocabulary and the configuration namespace used throughout the matepair package
"""
import os

from .util import ENV_VAR_PREFIX, cast


class MatepairNamespace:
    """
    attribute namespace holding a controlled vocabulary or a set of typed defaults

    Example:
        >>> nspace = MatepairNamespace(thing=1, otherthing=2)
        >>> nspace.thing
        1
        >>> nspace.values()
        [1, 2]
    """

    def __init__(self, **kwargs):
        object.__setattr__(self, '_types', {})
        object.__setattr__(self, '_members', {})
        object.__setattr__(self, '_env_overwritable', set())
        for attr, value in kwargs.items():
            self.add(attr, value)

    def is_env_overwritable(self, attr):
        return attr in self._env_overwritable

    def __getattribute__(self, attr):
        try:
            return object.__getattribute__(self, attr)
        except AttributeError as err:
            members = object.__getattribute__(self, '_members')
            if attr not in members:
                raise err
            if self.is_env_overwritable(attr):
                env = os.environ.get('{}{}'.format(ENV_VAR_PREFIX, attr).upper())
                if env is not None:
                    return cast(env.strip(), self._types[attr])
            return members[attr]

    def __setattr__(self, attr, val):
        if attr.startswith('_'):
            raise ValueError('cannot set private', attr)
        object.__getattribute__(self, '_members')[attr] = val

    def keys(self):
        return list(self._members)

    def values(self):
        return [getattr(self, k) for k in self._members]

    def enforce(self, value):
        """
        checks that the current namespace has a given value

        Returns:
            the input value

        Raises:
            KeyError: the value did not exist

        Example:
            >>> STRAND.enforce('+')
            '+'
        """
        if value not in self.values():
            raise KeyError('value {0} is not a valid member of '.format(repr(value)), self.values())
        return value

    def add(self, attr, value, cast_type=None, env_overwritable=False):
        """
        Args:
            attr (str): name of the attribute being added
            value: the value of the attribute
            cast_type (callable): type environment values are cast to (defaults to the type of the value)
            env_overwritable (bool): True if the MATEPAIR_<ATTR> environment variable overrides this attribute
        """
        self._types[attr] = cast_type if cast_type else type(value)
        if env_overwritable:
            self._env_overwritable.add(attr)
        setattr(self, attr, value)


class WeakMatepairNamespace(MatepairNamespace):
    """
    namespace where every attribute can be overridden by its environment variable
    """

    def is_env_overwritable(self, attr):
        return True


PAIR_POSITION = MatepairNamespace(FIRST='first', SECOND='second')
""":class:`MatepairNamespace`: the mate designation of a read within its template

- ``FIRST``: the first segment in the template (flag 0x40)
- ``SECOND``: the last segment in the template (flag 0x80)
"""

STRAND = MatepairNamespace(POS='+', NEG='-', NS='?')
""":class:`MatepairNamespace`: holds controlled vocabulary for allowed strand values

- ``POS``: the positive/forward strand
- ``NEG``: the negative/reverse strand
- ``NS``: strand is not specified
"""

SAM_FLAG = MatepairNamespace(
    MULTIMAP=1,
    FIRST_IN_PAIR=64,
    LAST_IN_PAIR=128,
    SECONDARY=256,
    SUPPLEMENTARY=2048,
)
""":class:`MatepairNamespace`: Enum-like. For readable SAM flag bits

- ``MULTIMAP``: template having multiple segments in sequencing
- ``FIRST_IN_PAIR``: the first segment in the template
- ``LAST_IN_PAIR``: the last segment in the template
- ``SECONDARY``: secondary alignment
- ``SUPPLEMENTARY``: supplementary alignment

note: descriptions are taken from the `samfile documentation <https://samtools.github.io/hts-specs/SAMv1.pdf>`_
"""
