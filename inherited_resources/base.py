"""This module contains the ResourceController implementation.

A resource controller is a RestController which already implements the
seven conventional CRUD actions for a model class, so that applications
only have to declare what differs from the conventions.
"""
from urllib.parse import quote

import tg
from tg import RestController, abort, expose, url, render_template
from tg.decorators import decode_params

from .config import resources_config
from .exceptions import ResourceConfigError
from .formats import get_format, negotiate
from .messages import NOTICE, format_message, lookup_message
from .messages import flash_message as send_flash
from .naming import humanize, model_name, pluralize, underscore
from .responder import ACTIONS, Responder

from logging import getLogger

log = getLogger(__name__)


def _as_tuple(value):
    if value is None:
        return None
    if isinstance(value, str):
        return (value, )
    return tuple(value)


def _check_actions(names):
    unknown = [name for name in names if name not in ACTIONS]
    if unknown:
        raise ResourceConfigError('Unknown actions %s, available actions are: %s' % (
            ', '.join(unknown), ', '.join(ACTIONS)))
    return names


class decode_json_params(decode_params):
    """Merges a JSON request body into the action parameters.

    Bodies that are not a JSON object answer with ``400 Bad Request``.
    """
    def __init__(self):
        super(decode_json_params, self).__init__('json')

    def run_hook(self, remainder, params):
        try:
            super(decode_json_params, self).run_hook(remainder, params)
        except (ValueError, TypeError) as e:
            log.warning('Malformed JSON body: %s', e)
            abort(400, detail='Request body is not a valid JSON object')


class ResourceController(RestController):
    """A RestController implementing CRUD actions for ``model``.

    The REST methods dispatched by TurboGears are bound to the
    conventional resource actions:

    +-----------------+---------+--------------------------------------------+
    | Method          | Action  | Example Method(s) / URL(s)                 |
    +=================+=========+============================================+
    | get_all         | index   | GET /users/                                |
    +-----------------+---------+--------------------------------------------+
    | get_one         | show    | GET /users/42                              |
    +-----------------+---------+--------------------------------------------+
    | new             | new     | GET /users/new                             |
    +-----------------+---------+--------------------------------------------+
    | edit            | edit    | GET /users/42/edit                         |
    +-----------------+---------+--------------------------------------------+
    | post            | create  | POST /users/                               |
    +-----------------+---------+--------------------------------------------+
    | put             | update  | PUT /users/42                              |
    |                 |         +--------------------------------------------+
    |                 |         | POST /users/42?_method=PUT                 |
    +-----------------+---------+--------------------------------------------+
    | post_delete     | destroy | DELETE /users/42                           |
    |                 |         +--------------------------------------------+
    |                 |         | POST /users/42?_method=DELETE              |
    +-----------------+---------+--------------------------------------------+

    The data involved in each action is exposed in ``tmpl_context``, using
    the ``resource_name`` for single objects and ``collection_name`` for
    listings, and is also available to templates with the same names.
    HTML responses render the ``<collection_name>/<action>`` template.

    The model is expected to provide ``find(id)``, ``new(attrs[, options])``,
    ``scoped()`` or ``all()`` as class level callables and ``save()``,
    ``update(attrs[, options])``, ``destroy()``, ``errors`` and ``to_xml()``
    on its instances.

    Behaviour is configured through class level declarations::

        class UsersController(ResourceController):
            model = User
            permitted_attributes = ('name', 'email')

        UsersController.respond_to('html', 'xml')
        UsersController.respond_to('js', only=('create', 'update', 'destroy'))
        UsersController.with_role('admin')
        UsersController.actions('all', exclude='destroy')

    and every step of the actions is a method which can be overridden.

    """

    #: The model class of the resources managed by the controller.
    model = None

    #: Names used in templates, urls and messages, derived from
    #: the model class when left to ``None``.
    resource_name = None
    collection_name = None
    resource_human_name = None

    #: Allowed attributes for mass assignment, ``None`` allows everything.
    permitted_attributes = None

    #: Optional hook receiving the beginning of the listing chain and
    #: returning it narrowed. ``index`` uses it when provided.
    apply_scopes = None

    #: Overrides for the flash messages, keys are ``<action>.<kind>``
    #: like ``create.notice`` or ``destroy.alert``.
    flash_messages = None

    #: Those default to the ``resources.`` options of the application config.
    template_engine = None
    template_extension = None
    notice_status = None
    alert_status = None
    id_attribute = None

    #: Class used to turn the result of an action into a response.
    responder_class = Responder

    _format_declarations = ()
    _enabled_actions = ACTIONS
    _role = None
    _without_protection = False

    @classmethod
    def respond_to(cls, *formats, only=None, exclude=None):
        """Declares the formats offered by the controller actions.

        Can be called multiple times, each declaration adds to the
        previous ones. ``only`` and ``exclude`` restrict the declaration
        to a subset of the actions.
        """
        for name in formats:
            get_format(name)

        only = _as_tuple(only)
        exclude = _as_tuple(exclude)
        for restriction in (only, exclude):
            if restriction is not None:
                _check_actions(restriction)

        cls._format_declarations = cls._format_declarations + ((formats, only, exclude), )
        log.debug('%s responds to %s (only: %s, exclude: %s)', cls.__name__,
                  formats, only, exclude)

    @classmethod
    def with_role(cls, role):
        """Passes ``{'as': role}`` to the model when assigning attributes."""
        cls._role = role

    @classmethod
    def without_protection(cls, flag=True):
        """Passes ``{'without_protection': True}`` to the model when assigning
        attributes and skips ``permitted_attributes`` filtering."""
        cls._without_protection = bool(flag)

    @classmethod
    def actions(cls, *names, exclude=()):
        """Restricts the enabled actions, ``'all'`` stands for every action.

        Disabled actions answer with ``404 Not Found``.
        """
        if 'all' in names:
            names = ACTIONS
        exclude = _check_actions(_as_tuple(exclude))
        enabled = _check_actions(tuple(name for name in names if name not in exclude))
        cls._enabled_actions = enabled
        log.debug('%s enabled actions: %s', cls.__name__, enabled)

    def get_resource_name(self):
        if self.resource_name is not None:
            return self.resource_name
        return underscore(model_name(self.get_model()))

    def get_collection_name(self):
        if self.collection_name is not None:
            return self.collection_name
        return pluralize(self.get_resource_name())

    def get_resource_human_name(self):
        if self.resource_human_name is not None:
            return self.resource_human_name
        return humanize(self.get_resource_name())

    def get_model(self):
        if self.model is None:
            raise ResourceConfigError('%s has no model configured' % type(self).__name__)
        return self.model

    def has_action(self, action):
        return action in self._enabled_actions

    def formats_for(self, action):
        """Names of the formats offered by ``action``."""
        if not self._format_declarations:
            return tuple(resources_config.default_formats)

        offered = []
        for formats, only, exclude in self._format_declarations:
            if only is not None and action not in only:
                continue
            if exclude is not None and action in exclude:
                continue
            offered.extend(name for name in formats if name not in offered)
        return tuple(offered)

    def _option(self, name):
        value = getattr(self, name)
        if value is None:
            value = getattr(resources_config, name)
        return value

    def _begin(self, action):
        """Checks that ``action`` can be served and negotiates its format."""
        if not self.has_action(action):
            abort(404)

        offered = self.formats_for(action)
        format_name = negotiate(tg.request, offered)
        if format_name is None:
            log.warning('No acceptable format for %s.%s between %s',
                        type(self).__name__, action, ', '.join(offered))
            abort(406)

        log.debug('Responding to %s.%s with %s', type(self).__name__, action, format_name)
        return format_name

    def respond_with(self, action, format_name, target, success=True):
        return self.responder_class(self, action, format_name, target, success)()

    def expose_data(self, name, value):
        setattr(tg.tmpl_context, name, value)
        return value

    def end_of_association_chain(self):
        """Beginning of the listing, ``model.scoped()`` when available or ``model.all()``."""
        model = self.get_model()
        scoped = getattr(model, 'scoped', None)
        if scoped is not None:
            return scoped()
        return model.all()

    def collection(self):
        chain = self.end_of_association_chain()
        if self.apply_scopes is not None:
            chain = self.apply_scopes(chain)
        return self.expose_data(self.get_collection_name(), chain)

    def resource(self, id):
        return self.expose_data(self.get_resource_name(), self.get_model().find(id))

    def assignment_options(self):
        """Options for the model attributes assignment, ``None`` when there are none."""
        options = {}
        if self._role is not None:
            options['as'] = self._role
        if self._without_protection:
            options['without_protection'] = True
        return options or None

    def build_resource(self, attrs):
        options = self.assignment_options()
        model = self.get_model()
        if options is None:
            resource = model.new(attrs)
        else:
            resource = model.new(attrs, options)
        return self.expose_data(self.get_resource_name(), resource)

    def create_resource(self, resource):
        return resource.save()

    def update_resource(self, resource, attrs):
        options = self.assignment_options()
        if options is None:
            return resource.update(attrs)
        return resource.update(attrs, options)

    def destroy_resource(self, resource):
        return resource.destroy()

    def resource_params(self, params):
        """Attributes submitted for the resource.

        Attributes can be provided as ``<resource_name>.<attribute>``
        parameters (``user.name=John``) or, for JSON requests, as an
        object under the ``<resource_name>`` key of the body.
        """
        name = self.get_resource_name()
        prefix = name + '.'

        attrs = dict((key[len(prefix):], value) for key, value in params.items()
                     if key.startswith(prefix))

        nested = params.get(name)
        if isinstance(nested, dict):
            attrs.update(nested)

        return self.permitted_params(attrs)

    def permitted_params(self, attrs):
        permitted = self.permitted_attributes
        if permitted is None or self._without_protection:
            return attrs

        dropped = [key for key in attrs if key not in permitted]
        if dropped:
            log.debug('Dropping unpermitted attributes for %s: %s',
                      self.get_resource_name(), ', '.join(sorted(dropped)))
        return dict((key, value) for key, value in attrs.items() if key in permitted)

    def resource_id(self, resource):
        return getattr(resource, self._option('id_attribute'))

    def collection_url(self):
        return url(self.mount_point or '/')

    def resource_url(self, resource):
        resource_id = quote(str(self.resource_id(resource)), safe='')
        return url('%s/%s' % (self.mount_point, resource_id))

    def smart_resource_url(self, resource):
        """Where to go after a resource got created or updated.

        The resource itself, or the collection when there is no ``show`` action.
        """
        if self.has_action('show'):
            return self.resource_url(resource)
        return self.collection_url()

    def smart_collection_url(self):
        """Where to go after a resource got destroyed."""
        return self.collection_url()

    def flash_message(self, action, kind):
        template = lookup_message(action, kind, self.flash_messages)
        if template is None:
            return None
        return format_message(template, self.get_resource_human_name())

    def set_flash(self, action, kind):
        if kind == NOTICE:
            status = self._option('notice_status')
        else:
            status = self._option('alert_status')
        send_flash(self.flash_message(action, kind), status)

    def template_for(self, action, format_name='html'):
        """Template rendered for ``action`` in ``format_name``."""
        engine = self._option('template_engine') or tg.config.get('default_renderer')
        if self.template_extension is not None:
            extension = self.template_extension
        else:
            extension = resources_config.extension_for(engine)

        if format_name != 'html':
            extension = '.%s%s' % (format_name, extension)
        return engine, '%s/%s%s' % (self.get_collection_name(), action, extension)

    def template_namespace(self):
        namespace = {}
        for name in (self.get_resource_name(), self.get_collection_name()):
            value = getattr(tg.tmpl_context, name, None)
            if value is not None:
                namespace[name] = value
        return namespace

    def render_action(self, action, format_name='html'):
        engine, template = self.template_for(action, format_name)
        if engine not in tg.config.get('render_functions', {}):
            log.warning('Rendering engine %s is not available to render %s', engine, template)

        tg.response.content_type = get_format(format_name).content_type
        return render_template(self.template_namespace(), engine, template)

    @expose()
    def get_all(self, **kw):
        format_name = self._begin('index')
        return self.respond_with('index', format_name, self.collection())

    @expose()
    def get_one(self, id, **kw):
        format_name = self._begin('show')
        return self.respond_with('show', format_name, self.resource(id))

    @expose()
    def new(self, **kw):
        format_name = self._begin('new')
        resource = self.build_resource(self.resource_params(kw))
        return self.respond_with('new', format_name, resource)

    @expose()
    def edit(self, id, **kw):
        format_name = self._begin('edit')
        return self.respond_with('edit', format_name, self.resource(id))

    @expose()
    @decode_json_params()
    def post(self, **kw):
        format_name = self._begin('create')
        resource = self.build_resource(self.resource_params(kw))
        success = self.create_resource(resource)
        return self.respond_with('create', format_name, resource, success)

    @expose()
    @decode_json_params()
    def put(self, id, **kw):
        format_name = self._begin('update')
        resource = self.resource(id)
        success = self.update_resource(resource, self.resource_params(kw))
        return self.respond_with('update', format_name, resource, success)

    @expose()
    def post_delete(self, id, **kw):
        format_name = self._begin('destroy')
        resource = self.resource(id)
        success = self.destroy_resource(resource)
        return self.respond_with('destroy', format_name, resource, success)


__all__ = ['ResourceController']
