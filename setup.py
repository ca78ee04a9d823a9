# -*- coding: utf-8 -*-
from setuptools import setup

packages = \
['expecto',
 'expecto.compare',
 'expecto.util']

package_data = \
{'': ['*']}

install_requires = \
['pydantic>=2.7,<3.0',
 'pydantic-settings>=2.0,<3.0']

extras_require = \
{'test': ['pytest>=7.0',
          'pytest-asyncio>=0.21',
          'pytest-cov>=4.0',
          'nox>=2022.1.7']}

setup_kwargs = {
    'name': 'expecto',
    'version': '1.0.0',
    'description': 'Expectations for your tests: deep equality, partial matching, matchers, call history, awaitables',
    'long_description': None,
    'author': None,
    'author_email': None,
    'maintainer': None,
    'maintainer_email': None,
    'url': None,
    'packages': packages,
    'package_data': package_data,
    'install_requires': install_requires,
    'extras_require': extras_require,
    'python_requires': '>=3.9,<4.0',
}


setup(**setup_kwargs)
