"""Inherited Resources project related information"""
version = "0.1.0"
description = "Generic CRUD resource controllers for TurboGears"
long_description="""
Inherited Resources provides a ``ResourceController`` for TurboGears 2
that implements the seven conventional CRUD actions (index, show, new,
edit, create, update and destroy) for any model class.

Subclass it, point it to a model and mount it in your controllers tree::

    class UsersController(ResourceController):
        model = User

    UsersController.respond_to('html', 'xml')
    UsersController.respond_to('js', only=('create', 'update', 'destroy'))

Every step of the actions can be overridden: scoping of the collection,
how the resource gets built or fetched, where to redirect after a
successful write and which flash message to show.
"""
url="http://www.turbogears.org/"
author= "Inherited Resources contributors"
email = ""
copyright = """Copyright 2026 Inherited Resources contributors"""
license = "MIT"
