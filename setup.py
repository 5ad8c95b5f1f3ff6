from itertools import chain
from setuptools import setup

extras = {
    'test': ['pytest>=3.10', 'flake8', 'coverage'],
}
# 'all' includes all of the above
extras['all'] = list(chain(*extras.values()))

setup(name='eqset',
      version='2023.0.0',
      description='Sets of elements that only support equality.',
      author='The eqset developers',
      license='LGPL-3.0',
      packages=['eqset'],
      package_dir={'eqset': 'eqset'},
      install_requires=['numpy>=1.17'],
      extras_require=extras
      )
