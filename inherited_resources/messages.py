"""
Flash messages of resource controllers write actions.
"""
from tg.flash import flash
from tg.i18n import gettext_noop as N_, ugettext as _

from logging import getLogger

log = getLogger(__name__)

NOTICE = 'notice'
ALERT = 'alert'

DEFAULT_MESSAGES = {
    'create.notice': N_('%(resource_name)s was successfully created.'),
    'update.notice': N_('%(resource_name)s was successfully updated.'),
    'destroy.notice': N_('%(resource_name)s was successfully destroyed.'),
    'create.alert': N_('%(resource_name)s could not be created.'),
    'update.alert': N_('%(resource_name)s could not be updated.'),
    'destroy.alert': N_('%(resource_name)s could not be destroyed.'),
}


def lookup_message(action, kind, overrides=None):
    """Message template for ``kind`` (notice or alert) of ``action``.

    ``overrides`` is a dictionary in the same form of :data:`DEFAULT_MESSAGES`
    whose entries win over the default ones. Returns ``None`` when there is
    no message for the action.
    """
    key = '%s.%s' % (action, kind)
    if overrides and key in overrides:
        return overrides[key]
    return DEFAULT_MESSAGES.get(key)


def format_message(template, resource_name):
    """Translates and interpolates a message ``template``."""
    return _(str(template)) % dict(resource_name=resource_name)


def flash_message(message, status):
    """Registers ``message`` as the flash for current and next request."""
    if not message:
        return

    log.debug('Flashing "%s" with status %s', message, status)
    flash(message, status)


__all__ = ['NOTICE', 'ALERT', 'DEFAULT_MESSAGES', 'lookup_message', 'format_message',
           'flash_message']
