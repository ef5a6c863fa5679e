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
"""Helper functions for defining and validating command-line flags."""

from collections.abc import Sequence

from asmtools.arch.python import arch

# Common error messages for flag validators.
MUST_BE_ARCH_LIST_ERROR = (
    'Flag must contain a comma-separated list of instruction set extensions.')


def _split_list(values: str) -> Sequence[str]:
  return tuple(filter(None, (value.strip() for value in values.split(','))))


def archs_from_str(values: str, warn: bool = False) -> Sequence[arch.Arch]:
  """Converts a comma-separated list of extension names to a list of Arch.

  Empty entries are skipped; names that are not recognized are returned as
  Arch.NONE.

  Args:
    values: The comma-separated list of names, e.g. 'sse4_1, AVX2'.
    warn: When True, a warning is logged for each name that is not recognized.

  Returns:
    The parsed extensions in the order in which they appear in `values`.
  """
  return tuple(
      arch.parse_arch(value, warn=warn) for value in _split_list(values)
  )


def is_arch_list(values: str) -> bool:
  """Checks that all values in the input parse as instruction set extensions."""
  # The empty string is a valid empty list.
  if values.isspace() or not values:
    return True
  for value in _split_list(values):
    parsed = arch.parse_arch(value, warn=False)
    if parsed is arch.Arch.NONE and value.replace('_', '').upper() != 'NONE':
      return False
  return True
