# -*- coding: utf-8 -*-
"""
This module contains the policy that turns the outcome of a resource
controller action into a response.

Read actions (index, show, new, edit) always succeed and render the
exposed data in the negotiated format. Write actions (create, update,
destroy) branch on the result of the model operation:

+---------+---------+--------------------------------------+-----------------------------------+
| Action  | Outcome | Navigational formats (html, js)      | API formats (xml, json)           |
+=========+=========+======================================+===================================+
| create  | success | notice, redirect to resource         | 201, Location, serialized resource|
|         +---------+--------------------------------------+-----------------------------------+
|         | failure | render ``new`` with 422              | 422, serialized errors            |
+---------+---------+--------------------------------------+-----------------------------------+
| update  | success | notice, redirect to resource         | 204                               |
|         +---------+--------------------------------------+-----------------------------------+
|         | failure | render ``edit`` with 422             | 422, serialized errors            |
+---------+---------+--------------------------------------+-----------------------------------+
| destroy | success | notice, redirect to collection       | 204                               |
|         +---------+--------------------------------------+-----------------------------------+
|         | failure | alert, redirect to collection        | 422, serialized errors            |
+---------+---------+--------------------------------------+-----------------------------------+

The ``resource`` redirect target falls back to the collection when the
controller has no ``show`` action.

HTML redirects are real ``302`` responses, while JS responses are
``200`` with a script that moves the browser to the same location.
Forms are re-rendered in the negotiated format, JS requests get the
``new.js`` and ``edit.js`` templates.
"""
from collections import namedtuple
from xml.etree.ElementTree import Element, SubElement, tostring

import tg
from tg import json_encode
from tg.exceptions import HTTPFound, HTTPNoContent

from .formats import get_format
from .messages import NOTICE, ALERT

from logging import getLogger

log = getLogger(__name__)

READ_ACTIONS = ('index', 'show', 'new', 'edit')
WRITE_ACTIONS = ('create', 'update', 'destroy')
ACTIONS = READ_ACTIONS + WRITE_ACTIONS

#: What to do after a write action.
#:
#: ``flash`` is the kind of flash message to set, ``render`` the template
#: to render, ``location`` the redirect target (``resource`` or ``collection``),
#: ``body`` what to serialize in the response (``resource`` or ``errors``).
Outcome = namedtuple('Outcome', ['status', 'flash', 'render', 'location', 'body'])

NAVIGATION_POLICY = {
    ('create', True): Outcome(302, NOTICE, None, 'resource', None),
    ('create', False): Outcome(422, None, 'new', None, None),
    ('update', True): Outcome(302, NOTICE, None, 'resource', None),
    ('update', False): Outcome(422, None, 'edit', None, None),
    ('destroy', True): Outcome(302, NOTICE, None, 'collection', None),
    ('destroy', False): Outcome(302, ALERT, None, 'collection', None),
}

API_POLICY = {
    ('create', True): Outcome(201, None, None, 'resource', 'resource'),
    ('create', False): Outcome(422, None, None, None, 'errors'),
    ('update', True): Outcome(204, None, None, None, None),
    ('update', False): Outcome(422, None, None, None, 'errors'),
    ('destroy', True): Outcome(204, None, None, None, None),
    ('destroy', False): Outcome(422, None, None, None, 'errors'),
}

JS_REDIRECT = 'window.location.assign(%s);'


def outcome_for(action, success, navigational):
    """Looks up the :class:`Outcome` of a write ``action``."""
    policy = NAVIGATION_POLICY if navigational else API_POLICY
    return policy[(action, bool(success))]


def errors_to_xml(errors):
    """Serializes a mapping of validation errors as XML.

    Each field can map to a single message or to a list of messages::

        <errors><error field="name">can't be blank</error></errors>

    """
    root = Element('errors')
    for field, messages in (errors or {}).items():
        if not isinstance(messages, (list, tuple)):
            messages = [messages]
        for message in messages:
            node = SubElement(root, 'error', field=str(field))
            node.text = str(message)
    return tostring(root, encoding='unicode')


class Responder(object):
    """Builds the response for an action of ``controller``.

    ``target`` is the exposed data: the collection for ``index``, the
    resource for any other action.
    """

    def __init__(self, controller, action, format_name, target, success=True):
        self.controller = controller
        self.action = action
        self.format = get_format(format_name)
        self.target = target
        self.success = success

    def __call__(self):
        if self.action in READ_ACTIONS:
            return self.display()

        outcome = outcome_for(self.action, self.success, self.format.navigational)
        log.debug('%s of %s %s in %s, responding with %s', self.action,
                  self.controller.get_resource_name(), 'succeeded' if self.success else 'failed',
                  self.format.name, outcome)

        if self.format.navigational:
            return self.navigation_behavior(outcome)
        return self.api_behavior(outcome)

    def display(self):
        """Renders the exposed data in the negotiated format."""
        if self.format.navigational:
            return self.controller.render_action(self.action, self.format.name)

        resp = tg.response._current_obj()
        resp.content_type = self.format.content_type
        return self.serialize(self.target)

    def navigation_behavior(self, outcome):
        if outcome.flash is not None:
            self.controller.set_flash(self.action, outcome.flash)

        if outcome.render is not None:
            resp = tg.response._current_obj()
            resp.status_int = outcome.status
            return self.controller.render_action(outcome.render, self.format.name)

        location = self.location_for(outcome.location)
        if self.format.name == 'js':
            resp = tg.response._current_obj()
            resp.content_type = self.format.content_type
            return JS_REDIRECT % json_encode(str(location))

        raise HTTPFound(location=str(location))

    def api_behavior(self, outcome):
        if outcome.body is None:
            raise HTTPNoContent()

        resp = tg.response._current_obj()
        resp.status_int = outcome.status

        if outcome.location is not None:
            resp.location = str(self.location_for(outcome.location))

        resp.content_type = self.format.content_type
        if outcome.body == 'errors':
            return self.serialize_errors(getattr(self.target, 'errors', None) or {})
        return self.serialize(self.target)

    def location_for(self, kind):
        if kind == 'resource':
            return self.controller.smart_resource_url(self.target)
        return self.controller.smart_collection_url()

    def serialize(self, data):
        serializer = getattr(self, 'to_%s' % self.format.name, None)
        if serializer is not None:
            return serializer(data)
        return getattr(data, 'to_%s' % self.format.name)()

    def serialize_errors(self, errors):
        if self.format.name == 'xml':
            return errors_to_xml(errors)
        return json_encode({'errors': dict(errors)})

    def to_xml(self, data):
        if hasattr(data, 'to_xml'):
            return data.to_xml()

        name = self.controller.get_collection_name()
        return '<%s>%s</%s>' % (name, ''.join(item.to_xml() for item in data), name)

    def to_json(self, data):
        if self.action == 'index':
            return json_encode({self.controller.get_collection_name(): list(data)})
        return json_encode(data)


__all__ = ['Responder', 'Outcome', 'outcome_for', 'errors_to_xml',
           'READ_ACTIONS', 'WRITE_ACTIONS', 'ACTIONS']
