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
import itertools

from absl.testing import absltest

from asmtools.arch.python import arch
from asmtools.utils.python import flag_utils

Arch = arch.Arch


class FlagUtilsTest(absltest.TestCase):

  def test_archs_from_str(self):
    values = ('', ' ', 'SSE2', 'sse4_1,AVX2', 'AVX512_VL, 386, ,3DNOW')
    expected_archs = (
        (),
        (),
        (Arch.SSE2,),
        (Arch.SSE4_1, Arch.AVX2),
        (Arch.AVX512_VL, Arch.ARCH_386, Arch.ARCH_3DNOW),
    )
    for value, expected in itertools.zip_longest(values, expected_archs):
      self.assertSequenceEqual(expected, flag_utils.archs_from_str(value))

  def test_archs_from_str_unknown(self):
    self.assertSequenceEqual(
        (Arch.MMX, Arch.NONE), flag_utils.archs_from_str('MMX,foo')
    )

  def test_is_arch_list(self):
    values = (
        'SSE2',
        'sse4_1,AVX2',
        'NONE, MMX',
        '',
        'AVX2,foo',
        'AVX-512',
        '1, 2, 3',
    )
    expected_outputs = (True, True, True, True, False, False, False)
    for value, expected in itertools.zip_longest(values, expected_outputs):
      self.assertEqual(expected, flag_utils.is_arch_list(value))


if __name__ == '__main__':
  absltest.main()
