# -*- coding: utf-8 -*-
"""
Response formats known to resource controllers and content negotiation.

A format is a short name (``html``, ``xml``, ...) bound to the content
types it answers with. Controllers declare which formats each action
offers and :func:`negotiate` picks one of them for the current request
looking, in order, at:

    1. the url extension (``/users/42.xml``) detected by TurboGears
       request extensions.
    2. the ``Accept`` header of the request.
    3. the first offered format.

"""
from collections import OrderedDict

from .exceptions import ResourceConfigError

from logging import getLogger

log = getLogger(__name__)


class Format(object):
    """A response format.

    ``content_types`` are listed by preference, the first one is
    the content type of responses in this format. The others are
    only recognized in requests.

    Navigational formats (``html``, ``js``) answer writes by moving
    the user somewhere else, while API formats answer with status
    codes and serialized data.
    """
    def __init__(self, name, content_types, navigational=False):
        self.name = name
        self.content_types = tuple(content_types)
        self.navigational = navigational

    @property
    def content_type(self):
        return self.content_types[0]

    def __repr__(self):
        return '<Format %s (%s)>' % (self.name, self.content_type)


_registry = OrderedDict()


def register_format(name, content_types, navigational=False):
    """Registers a new format, or replaces an existing one with the same ``name``."""
    if isinstance(content_types, str):
        content_types = (content_types, )

    fmt = Format(name, content_types, navigational)
    _registry[name] = fmt
    log.debug('Registered format %r', fmt)
    return fmt


def get_format(name):
    """Retrieves a registered :class:`Format` by name."""
    try:
        return _registry[name]
    except KeyError:
        raise ResourceConfigError('Unknown format "%s", available formats are: %s' % (
            name, ', '.join(_registry)))


def format_for_content_type(content_type):
    """Name of the first format that accepts ``content_type``, or ``None``."""
    if not content_type:
        return None

    content_type = content_type.split(';')[0].strip().lower()
    for fmt in _registry.values():
        if content_type in fmt.content_types:
            return fmt.name
    return None


def negotiate(request, offered):
    """Picks the format for ``request`` between ``offered`` format names.

    Returns ``None`` when the client explicitly asked for a format
    that is not offered.
    """
    if not offered:
        return None

    response_type = getattr(request, 'response_type', None)
    if response_type:
        requested = format_for_content_type(response_type)
        log.debug('Format %s requested through url extension', requested)
        if requested in offered:
            return requested
        return None

    offers = []
    offer_formats = {}
    for name in offered:
        for content_type in get_format(name).content_types:
            offers.append(content_type)
            offer_formats.setdefault(content_type, name)

    accept = request.accept
    if not accept:
        # No Accept header, the preferred format is the first declared one.
        return offered[0]

    matches = accept.acceptable_offers(offers)
    if not matches:
        return None

    return offer_formats[matches[0][0]]


register_format('html', ('text/html', 'application/xhtml+xml'), navigational=True)
register_format('xml', ('application/xml', 'text/xml'))
register_format('js', ('text/javascript', 'application/javascript',
                       'application/x-javascript'), navigational=True)
register_format('json', ('application/json', 'text/json'))

__all__ = ['Format', 'register_format', 'get_format', 'format_for_content_type',
           'negotiate']
