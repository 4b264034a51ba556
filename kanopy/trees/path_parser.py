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

"""Parser for string paths such as "cfg.layers[0]['my key']"."""

from __future__ import annotations

import ast
import functools
from typing import Any

from etils import epath
from etils import epy
import lark

Part = int | str


def parse_parts(str_path: str) -> list[Part]:
  """Returns a list of keys from a string.

  Args:
    str_path: The path, like `a.b[0]['c d']`.

  Returns:
    The keys.

  Raises:
    lark.exceptions.LarkError: If the path is malformed. The error message is
      prefixed with the path.
  """
  parser = _path_parser()
  transformer = _PathTransformer()
  try:
    tree = parser.parse(str_path)
    parts = transformer.transform(tree)
  except Exception as e:  # pylint: disable=broad-exception-caught
    epy.reraise(e, f"Could not parse path: {str_path!r}: ")
  else:
    return parts


@functools.cache
def _path_parser() -> lark.Lark:
  grammar_path = epath.resource_path("kanopy.trees") / "path_grammar.lark"
  return lark.Lark(
      grammar=grammar_path.read_text(),
      parser="lalr",
  )


class _PathTransformer(lark.Transformer):
  """Transforms a Lark parse-tree into a list of keys."""

  @staticmethod
  def start(args: list[Any]) -> list[Part]:
    return list(args)

  @staticmethod
  def IDENTIFIER(args: str) -> str:
    return str(args)

  @staticmethod
  def STRING(args: str) -> str:
    return ast.literal_eval(args)

  @staticmethod
  def DEC_NUMBER(args: str) -> int:
    return int(args)
