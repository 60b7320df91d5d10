# -*- coding: utf-8 -*-
import pytest
from unittest import mock
from webob import Request

from inherited_resources import ResourceConfigError
from inherited_resources.formats import (get_format, register_format, negotiate,
                                         format_for_content_type, _registry)


def make_request(accept=None, response_type=None):
    headers = {}
    if accept is not None:
        headers['Accept'] = accept
    req = Request.blank('/', headers=headers)
    if response_type is not None:
        req = mock.Mock(response_type=response_type, accept=req.accept)
    return req


class TestFormatsRegistry(object):
    def teardown_method(self):
        _registry.pop('csv', None)

    def test_builtin_formats(self):
        assert get_format('html').content_type == 'text/html'
        assert get_format('html').navigational
        assert get_format('js').navigational
        assert not get_format('xml').navigational
        assert get_format('json').content_type == 'application/json'

    def test_unknown_format(self):
        with pytest.raises(ResourceConfigError):
            get_format('yaml')

    def test_register_format(self):
        fmt = register_format('csv', 'text/csv')
        assert get_format('csv') is fmt
        assert fmt.content_types == ('text/csv', )
        assert format_for_content_type('text/csv; charset=utf-8') == 'csv'

    def test_format_for_content_type(self):
        assert format_for_content_type('text/xml') == 'xml'
        assert format_for_content_type('application/x-javascript') == 'js'
        assert format_for_content_type('image/png') is None
        assert format_for_content_type(None) is None


class TestNegotiate(object):
    def test_first_offered_without_accept(self):
        assert negotiate(make_request(), ('xml', 'html')) == 'xml'

    def test_accept_header(self):
        req = make_request('application/xml')
        assert negotiate(req, ('html', 'xml')) == 'xml'

    def test_accept_quality(self):
        req = make_request('text/html;q=0.5, application/json')
        assert negotiate(req, ('html', 'json')) == 'json'

    def test_browser_accept(self):
        req = make_request('text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8')
        assert negotiate(req, ('html', 'xml')) == 'html'

    def test_accept_not_offered(self):
        assert negotiate(make_request('application/json'), ('html', 'xml')) is None

    def test_url_extension_wins(self):
        req = make_request('text/html', response_type='application/xml')
        assert negotiate(req, ('html', 'xml')) == 'xml'

    def test_url_extension_not_offered(self):
        req = make_request(response_type='application/json')
        assert negotiate(req, ('html', 'xml')) is None

    def test_nothing_offered(self):
        assert negotiate(make_request(), ()) is None
