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
from unittest import mock

from absl import flags
from absl.testing import absltest
from absl.testing import flagsaver

from asmtools.arch.python import arch
from asmtools.arch.python import arch_flags

FLAGS = flags.FLAGS

Arch = arch.Arch


class GetArchsFromCommandLineFlagsTest(absltest.TestCase):

  @classmethod
  def setUpClass(cls):
    super().setUpClass()
    if not FLAGS.is_parsed():
      FLAGS.mark_as_parsed()

  @flagsaver.flagsaver
  def test_default(self):
    self.assertEmpty(arch_flags.get_archs_from_command_line_flags())

  @flagsaver.flagsaver(asmtools_archs='sse4_1, AVX512_VL,386')
  def test_some_archs(self):
    self.assertSequenceEqual(
        arch_flags.get_archs_from_command_line_flags(),
        (Arch.SSE4_1, Arch.AVX512_VL, Arch.ARCH_386),
    )

  @flagsaver.flagsaver
  def test_invalid_value(self):
    with self.assertRaises(flags.IllegalFlagValueError):
      FLAGS.asmtools_archs = 'AVX2,not-a-real-extension'

  @flagsaver.flagsaver(asmtools_archs='NONE')
  @mock.patch('absl.logging.warning')
  def test_none_does_not_warn(self, mock_logging_warning):
    self.assertSequenceEqual(
        arch_flags.get_archs_from_command_line_flags(), (Arch.NONE,)
    )
    self.assertFalse(mock_logging_warning.called)

  @flagsaver.flagsaver
  def test_set_default_archs(self):
    arch_flags.set_default_archs((Arch.ARCH_3DNOW, Arch.AVX2))
    self.assertEqual(FLAGS.asmtools_archs, '3DNOW,AVX2')
    self.assertSequenceEqual(
        arch_flags.get_archs_from_command_line_flags(),
        (Arch.ARCH_3DNOW, Arch.AVX2),
    )


if __name__ == '__main__':
  absltest.main()
