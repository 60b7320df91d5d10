import os
here = os.path.abspath(os.path.dirname(__file__))
exec(compile(open(os.path.join(here, 'inherited_resources', 'release.py')).read(), 'release.py', 'exec'), globals(), locals())

from setuptools import find_packages, setup

import sys
py_version = sys.version_info[:2]

if py_version < (3, 7):
    raise RuntimeError('TGInheritedResources requires at least Python3.7')

test_requirements = ['pytest',
                     'WebTest',
                     'jinja2',
                     'coverage']

install_requires=[
    'TurboGears2 >= 2.4.0',
    'WebOb >= 1.8.0',
    'crank >= 0.8.0'
]

setup(
    name='TGInheritedResources',
    version=version,
    description=description,
    long_description=long_description,
    classifiers=[
        'Intended Audience :: Developers',
        'Environment :: Web Environment',
        'Framework :: TurboGears',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Internet :: WWW/HTTP :: WSGI',
    ],
    keywords='turbogears crud rest resources',
    author=author,
    author_email=email,
    url=url,
    license=license,
    packages=find_packages(exclude=('ez_setup', 'examples', 'tests', 'tests.*')),
    include_package_data=True,
    zip_safe=False,
    install_requires=install_requires,
    extras_require={
       'testing':test_requirements,
    },
    tests_require = test_requirements,
)
