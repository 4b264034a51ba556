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

"""kanopy public API.

```python
from kanopy import kt

tree = {}
kt.set_branch(tree, 'a.b', 1)
assert kt.follow(tree, 'a.b') == 1
```
"""

# pylint: disable=unused-import,g-importing-member,g-import-not-at-top

from etils import epy as _epy

# Namespaces
with _epy.lazy_api_imports(globals()):
  from kanopy import trees
  from kanopy.utils import char_predicates
  from kanopy.utils import lists
  from kanopy.utils import sets
  from kanopy.utils import streams

  # Paths
  from kanopy.trees.paths import Key
  from kanopy.trees.paths import Path

  # Containers and default policies
  from kanopy.trees.nodes import add_edge
  from kanopy.trees.nodes import drop_edge
  from kanopy.trees.nodes import has_key
  from kanopy.trees.nodes import is_container
  from kanopy.trees.nodes import Node
  from kanopy.trees.nodes import set_leaf
  from kanopy.trees.refs import Ref

  # Walk
  from kanopy.trees.walk import branches
  from kanopy.trees.walk import count_leaves
  from kanopy.trees.walk import count_nodes
  from kanopy.trees.walk import flatten_with_path
  from kanopy.trees.walk import leaves
  from kanopy.trees.walk import max_depth
  from kanopy.trees.walk import walk_branches
  from kanopy.trees.walk import walk_nodes

  # Branches
  from kanopy.trees.branch import follow
  from kanopy.trees.branch import follow_nodes
  from kanopy.trees.branch import path_to_branch
  from kanopy.trees.branch import set_branch
  from kanopy.trees.remove import remove_branch
  from kanopy.trees.remove import remove_branches
  from kanopy.trees.remove import remove_last_edge
  from kanopy.trees.remove import remove_last_edges
  from kanopy.trees.remove import Removal

  # Update
  from kanopy.trees.update import create_missing_key
  from kanopy.trees.update import ignore_missing_key
  from kanopy.trees.update import merge
  from kanopy.trees.update import MissingKeyError
  from kanopy.trees.update import raise_missing_key
  from kanopy.trees.update import update_recursive

  # Other containers
  from kanopy.utils.optional import OptionalValue
  from kanopy.utils.sets import BooleanSet

__apitree__ = dict(
    is_package=True,
)
