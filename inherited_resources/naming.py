"""Helpers to derive resource names from model classes.

Resource controllers need three names for the model they manage:

    - the resource name, used for the single object in ``tmpl_context``
      and as the prefix of submitted attributes (``blog_post``)
    - the collection name, used for the listing in ``tmpl_context``
      and as the templates directory (``blog_posts``)
    - the human name, used in flash messages (``Blog post``)

Only plain english rules are supported, irregular plurals can be
provided explicitly on the controller.
"""
import re

_FIRST_CAP_RE = re.compile(r'(.)([A-Z][a-z]+)')
_ALL_CAP_RE = re.compile(r'([a-z0-9])([A-Z])')
_SIBILANT_RE = re.compile(r'(s|x|z|ch|sh)$')
_CONSONANT_Y_RE = re.compile(r'([^aeiou])y$')


def underscore(name):
    """Convert a CamelCase class name to its snake_case form.

    >>> underscore('BlogPost')
    'blog_post'
    >>> underscore('HTTPRequest')
    'http_request'
    """
    name = _FIRST_CAP_RE.sub(r'\1_\2', name)
    name = _ALL_CAP_RE.sub(r'\1_\2', name)
    return name.replace('-', '_').lower()


def pluralize(word):
    """Pluralize an english ``word``.

    >>> pluralize('user')
    'users'
    >>> pluralize('category')
    'categories'
    >>> pluralize('box')
    'boxes'
    """
    if not word:
        return word

    if _CONSONANT_Y_RE.search(word):
        return _CONSONANT_Y_RE.sub(r'\1ies', word)

    if _SIBILANT_RE.search(word):
        return word + 'es'

    return word + 's'


def humanize(name):
    """Turn an underscored name in a human readable form.

    >>> humanize('blog_post')
    'Blog post'
    """
    if name.endswith('_id'):
        name = name[:-3]
    return name.replace('_', ' ').strip().capitalize()


def model_name(model):
    """Name of the model class, works for classes and their instances."""
    if not isinstance(model, type):
        model = type(model)
    return model.__name__


__all__ = ['underscore', 'pluralize', 'humanize', 'model_name']
