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

"""Trees is a small self-contained library to manipulate nested trees.

A tree is a nested structure of containers (`dict`, `list`, any
`MutableMapping`, `ConfigDict`). Containers are the nodes, everything else
is a leaf. Locations are addressed with `Path` objects.

* Walk the nodes and leaves (breadth-first)
* Follow, set and remove branches
* Recursively update a tree
"""

# pylint: disable=g-importing-member,unused-import

from kanopy.trees.branch import follow
from kanopy.trees.branch import follow_nodes
from kanopy.trees.branch import path_to_branch
from kanopy.trees.branch import set_branch
from kanopy.trees.nodes import add_edge
from kanopy.trees.nodes import drop_edge
from kanopy.trees.nodes import has_key
from kanopy.trees.nodes import is_container
from kanopy.trees.nodes import Leaf
from kanopy.trees.nodes import Node
from kanopy.trees.nodes import set_leaf
from kanopy.trees.paths import Key
from kanopy.trees.paths import Path
from kanopy.trees.paths import PathLike
from kanopy.trees.refs import Ref
from kanopy.trees.remove import remove_branch
from kanopy.trees.remove import remove_branches
from kanopy.trees.remove import remove_last_edge
from kanopy.trees.remove import remove_last_edges
from kanopy.trees.remove import Removal
from kanopy.trees.update import create_missing_key
from kanopy.trees.update import ignore_missing_key
from kanopy.trees.update import merge
from kanopy.trees.update import MissingKeyError
from kanopy.trees.update import raise_missing_key
from kanopy.trees.update import update_recursive
from kanopy.trees.walk import branches
from kanopy.trees.walk import count_leaves
from kanopy.trees.walk import count_nodes
from kanopy.trees.walk import flatten_with_path
from kanopy.trees.walk import leaves
from kanopy.trees.walk import max_depth
from kanopy.trees.walk import walk_branches
from kanopy.trees.walk import walk_nodes
