# -*- coding: utf-8 -*-
from inherited_resources.naming import underscore, pluralize, humanize, model_name


class BlogPost(object):
    pass


class TestNaming(object):
    def test_underscore(self):
        assert underscore('User') == 'user'
        assert underscore('BlogPost') == 'blog_post'
        assert underscore('HTTPRequest') == 'http_request'

    def test_pluralize(self):
        assert pluralize('user') == 'users'
        assert pluralize('category') == 'categories'
        assert pluralize('day') == 'days'
        assert pluralize('address') == 'addresses'
        assert pluralize('match') == 'matches'
        assert pluralize('') == ''

    def test_humanize(self):
        assert humanize('user') == 'User'
        assert humanize('blog_post') == 'Blog post'
        assert humanize('author_id') == 'Author'

    def test_model_name(self):
        assert model_name(BlogPost) == 'BlogPost'
        assert model_name(BlogPost()) == 'BlogPost'
