# -*- coding: utf-8 -*-
from inherited_resources.messages import lookup_message, DEFAULT_MESSAGES, NOTICE, ALERT


class TestLookupMessage(object):
    def test_defaults(self):
        assert lookup_message('create', NOTICE) == DEFAULT_MESSAGES['create.notice']
        assert lookup_message('destroy', ALERT) == '%(resource_name)s could not be destroyed.'

    def test_overrides(self):
        overrides = {'update.notice': 'Saved!'}
        assert lookup_message('update', NOTICE, overrides) == 'Saved!'
        assert lookup_message('update', ALERT, overrides) == DEFAULT_MESSAGES['update.alert']

    def test_missing(self):
        assert lookup_message('show', NOTICE) is None
