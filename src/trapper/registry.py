""" Named, shared :class:`trapper.Sender` instances.

    A :class:`Registry` is a factory enforcing a singleton pattern per name:
    if the caller always uses :func:`Registry.get` to retrieve a sender they
    will always receive the same instance. The module-level :data:`default`
    registry backs :func:`trapper.get` and :func:`trapper.Sender.instance`;
    code that wants isolation, such as a test, can construct its own.
"""

import threading

from . import config
from . import sender


def _from_environment(name):
    """ Default factory: a new :class:`Sender` configured from the
        TRAPPER_* environment variables. The *name* is not used.
    """

    return sender.Sender(**config.environment())


class Registry:
    """ A thread-safe mapping of names to lazily created senders. The
        *factory* is called with the name of a missing instance and must
        return the new instance; the default builds a :class:`Sender` from
        the environment.
    """

    def __init__(self, factory=None):

        if factory is None:
            factory = _from_environment

        self.factory = factory
        self._cache = dict()
        self._cache_lock = threading.RLock()


    def __contains__(self, name):
        return name in self._cache


    def __len__(self):
        return len(self._cache)


    def get(self, name='default'):
        """ Return the instance known as *name*, creating it on first use.
            The lock is held while the factory runs, so concurrent first
            calls for the same name cannot create two instances. The lock is
            reentrant; a factory may itself call :func:`get` for other names.
        """

        if name is None:
            raise ValueError('the instance name must be specified')

        with self._cache_lock:
            try:
                instance = self._cache[name]
            except KeyError:
                instance = self.factory(name)
                self._cache[name] = instance

        return instance


    def clear(self, name=None):
        """ Remove the instance known as *name* from the registry. Returns
            None if there was no such instance; otherwise the removed
            instance is returned, largely to allow for inspection. If *name*
            is None every instance is removed and None is returned.
        """

        with self._cache_lock:
            if name is None:
                self._cache.clear()
                return

            try:
                existing = self._cache[name]
            except KeyError:
                return

            del self._cache[name]
            return existing


# end of class Registry


default = Registry()
get = default.get
clear = default.clear


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
