"""Exceptions raised by resource controllers.

Validation failures of the model are not exceptions: they are the
"failure" branch of every write action and end up re-rendering the
originating form. Only misconfiguration is reported by raising.
"""
from tg.configuration.utils import TGConfigError


class ResourceConfigError(TGConfigError):
    """A resource controller has been declared or configured in a wrong way.

    Raised for unknown formats or actions in the class level declarations
    and when a controller without a ``model`` handles a request.
    """


__all__ = ['ResourceConfigError']
