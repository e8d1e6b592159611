from setuptools import setup, find_packages
from xidgen import __version__

with open('README.rst') as f:
    desc = f.read()

setup(name='xidgen',
      version=__version__,
      description='Generate packed XID_Start/XID_Continue bitmap lookup tables for C sources.',
      long_description=desc,
      license='Apache-2.0',
      packages=find_packages(exclude=['tests']),
      keywords=['unicode', 'identifier', 'generator', 'xid'],
      package_data={'xidgen': ['global.yaml']},
      install_requires=['PyYAML', 'humanize'],
      extras_require={'test': ['pytest']},
      classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
      ],
      entry_points = {
          'console_scripts': [
              'xidgen=xidgen.__main__:main',
          ]
      })
