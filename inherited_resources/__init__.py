"""
Inherited Resources, generic CRUD controllers for TurboGears.

Subclass :class:`ResourceController` providing a ``model`` and mount it
in your controllers tree to get the ``index``, ``show``, ``new``,
``edit``, ``create``, ``update`` and ``destroy`` actions for free.
"""
from .base import ResourceController
from .config import resources_config
from .exceptions import ResourceConfigError
from .formats import register_format
from .responder import Responder
from .release import version as __version__

__all__ = ['ResourceController', 'Responder', 'ResourceConfigError',
           'register_format', 'resources_config']
