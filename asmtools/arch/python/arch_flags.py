# Copyright 2023 Google Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Command-line flags for tools that work with instruction set extensions.

This module defines the command-line flag --asmtools_archs and a function for
getting the list of extensions specified by it.
"""

from collections.abc import Sequence

from absl import flags

from asmtools.arch.python import arch
from asmtools.utils.python import flag_utils

_ARCHS = flags.DEFINE_string(
    'asmtools_archs',
    '',
    ('A comma-separated list of x86 instruction set extensions, e.g.'
     ' "SSE4_1,AVX2,AVX512_VL". Names are matched ignoring case and'
     ' underscores.'),
)

flags.register_validator(
    _ARCHS.name,
    flag_utils.is_arch_list,
    flag_utils.MUST_BE_ARCH_LIST_ERROR,
)


def get_archs_from_command_line_flags() -> Sequence[arch.Arch]:
  """Returns the extensions from --asmtools_archs, in the order of the flag."""
  return flag_utils.archs_from_str(_ARCHS.value)


def set_default_archs(archs: Sequence[arch.Arch]) -> None:
  """Overrides the default value of --asmtools_archs."""
  flags.set_default(
      _ARCHS, ','.join(arch.arch_to_string(value) for value in archs)
  )
