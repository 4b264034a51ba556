# Copyright 2026 The kanopy Authors.
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

"""kanopy API."""

# Do NOT add anything here !!
# Importing a single sub-module (e.g. `kanopy.trees.paths`) should not trigger
# the import of the full codebase.
# Instead, the public API is exposed in `kt.py`

# A new PyPI release will be pushed everytime `__version__` is increased
__version__ = '0.1.0'


def __getattr__(name: str):  # pylint: disable=invalid-name
  """Catches `import kanopy as kt` errors."""
  del name
  raise AttributeError(
      'Please always use "from kanopy import kt", '
      'never "import kanopy as kt".'
  )
