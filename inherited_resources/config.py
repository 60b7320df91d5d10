"""
Application wide defaults for resource controllers.
"""
from tg.configuration.utils import GlobalConfigurable
from tg.support import converters

from logging import getLogger

log = getLogger(__name__)

#: Template file extension for the rendering engines shipped with TurboGears
TEMPLATE_EXTENSIONS = {'jinja': '.jinja',
                       'kajiki': '.xhtml',
                       'genshi': '.html',
                       'mako': '.mak'}


class ResourcesConfig(GlobalConfigurable):
    """Defaults applied to every :class:`.ResourceController`.

    Options are read from the application configuration, all of them
    live in the ``resources.`` namespace:

    - ``resources.default_formats`` -> Formats offered by controllers that
      never called ``respond_to``. ``html`` by default.
    - ``resources.template_engine`` -> Rendering engine used for HTML
      responses, by default the application ``default_renderer``.
    - ``resources.template_extension`` -> Extension of template files, when
      not provided it is guessed from the template engine.
    - ``resources.notice_status`` -> Flash status of success messages (``ok``).
    - ``resources.alert_status`` -> Flash status of failure messages (``error``).
    - ``resources.id_attribute`` -> Attribute of resources used to build
      their url (``id``).

    Each option can also be overridden by single controllers through
    the class attribute with the same name.
    """

    CONFIG_NAMESPACE = 'resources.'
    CONFIG_OPTIONS = {'default_formats': converters.aslist}

    def __init__(self, **options):
        self.configure(**options)

    def configure(self, default_formats=('html',), template_engine=None,
                  template_extension=None, notice_status='ok',
                  alert_status='error', id_attribute='id'):
        self.default_formats = tuple(default_formats)
        self.template_engine = template_engine
        self.template_extension = template_extension
        self.notice_status = notice_status
        self.alert_status = alert_status
        self.id_attribute = id_attribute
        log.debug('Resources configured with default formats %s', self.default_formats)

    def extension_for(self, engine):
        """Template extension to use for ``engine``."""
        if self.template_extension is not None:
            return self.template_extension
        return TEMPLATE_EXTENSIONS.get(engine, '')


resources_config = ResourcesConfig.create_global()

__all__ = ['ResourcesConfig', 'resources_config', 'TEMPLATE_EXTENSIONS']
