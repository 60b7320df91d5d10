# -*- coding: utf-8 -*-
import pytest

from inherited_resources import ResourceConfigError
from inherited_resources.config import ResourcesConfig

from tests.base import controller_class, make_app, reset_config


class TestResourcesConfig(object):
    def test_defaults(self):
        conf = ResourcesConfig()
        assert conf.default_formats == ('html', )
        assert conf.notice_status == 'ok'
        assert conf.alert_status == 'error'
        assert conf.id_attribute == 'id'

    def test_extension_guessed_from_engine(self):
        conf = ResourcesConfig()
        assert conf.extension_for('jinja') == '.jinja'
        assert conf.extension_for('kajiki') == '.xhtml'
        assert conf.extension_for('unknown') == ''

    def test_explicit_extension(self):
        conf = ResourcesConfig(template_extension='.html')
        assert conf.extension_for('jinja') == '.html'


class TestDeclarations(object):
    def test_unknown_format(self):
        klass = controller_class()
        with pytest.raises(ResourceConfigError):
            klass.respond_to('html', 'yaml')

    def test_unknown_action_in_restriction(self):
        klass = controller_class()
        with pytest.raises(ResourceConfigError):
            klass.respond_to('js', only=('publish', ))

    def test_unknown_action(self):
        klass = controller_class()
        with pytest.raises(ResourceConfigError):
            klass.actions('index', 'publish')

    def test_actions_all(self):
        klass = controller_class()
        klass.actions('all', exclude=('destroy', 'edit'))
        controller = klass()
        assert controller.has_action('index')
        assert not controller.has_action('edit')
        assert not controller.has_action('destroy')

    def test_names_from_model(self):
        controller = controller_class()()
        assert controller.get_resource_name() == 'user'
        assert controller.get_collection_name() == 'users'
        assert controller.get_resource_human_name() == 'User'

    def test_explicit_collection_name(self):
        controller = controller_class(collection_name='people')()
        assert controller.get_resource_name() == 'user'
        assert controller.get_collection_name() == 'people'

    def test_none_names_are_derived(self):
        controller = controller_class(resource_name=None, collection_name=None,
                                      resource_human_name=None)()
        assert controller.get_resource_name() == 'user'
        assert controller.get_collection_name() == 'users'
        assert controller.get_resource_human_name() == 'User'

    def test_names_require_model(self):
        controller = controller_class(model=None)()
        with pytest.raises(ResourceConfigError):
            controller.get_resource_name()

    def test_assignment_options(self):
        klass = controller_class()
        assert klass().assignment_options() is None
        klass.with_role('admin')
        klass.without_protection(True)
        assert klass().assignment_options() == {'as': 'admin', 'without_protection': True}


class TestMissingModel(object):
    def teardown_method(self):
        reset_config()

    def test_request_without_model(self):
        app = make_app(controller_class(model=None))
        with pytest.raises(ResourceConfigError):
            app.get('/users')
