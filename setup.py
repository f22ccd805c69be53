# Copyright 2016-2026, Pulumi Corporation.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""A Pulumi dynamic provider for Amazon Cognito resource servers."""

from setuptools import find_packages, setup

VERSION = "0.1.0"


def readme():
    try:
        with open('README.md', encoding='utf-8') as f:
            return f.read()
    except FileNotFoundError:
        return "Pulumi dynamic provider for Amazon Cognito resource servers - Development Version"


setup(name='pulumi-cognito-resource-server',
      version=VERSION,
      description='Pulumi dynamic provider for Amazon Cognito user pool resource servers',
      long_description=readme(),
      long_description_content_type='text/markdown',
      license='Apache 2.0',
      packages=find_packages(include=("pulumi_cognito", "pulumi_cognito.*")),
      package_data={
          'pulumi_cognito': [
              'py.typed'
          ]
      },
      python_requires='>=3.9',
      install_requires=[
          'pulumi>=3.130.0,<4.0.0',
          'boto3>=1.28',
          'botocore>=1.31',
      ],
      extras_require={
          'test': [
              'pytest>=7.0',
              'pytest-timeout>=2.1',
              'dill>=0.3',
          ],
      },
      zip_safe=False)
