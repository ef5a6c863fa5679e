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
"""Names of x86 instruction set extensions and CPU generations.

The module defines the enum Arch and three lookups over it:
  - parse_arch() converts a free-form name, e.g. 'avx512_vl', to an Arch.
  - arch_to_string() and archs_to_string() produce display strings.
  - arch_documentation() returns a human-readable description.

All tables in this module are constant; the functions never raise and never
modify any state. Unknown names are mapped to Arch.NONE.
"""

from collections.abc import Iterable, Mapping
import enum
import types

from absl import logging


@enum.unique
class Arch(enum.Enum):
  """An x86 instruction set extension or CPU generation.

  Values:
    NONE: No extension. Also used for names that are not recognized.
    ARCH_8086 ... ARCH_486: The instruction sets of the early Intel CPUs.
    PENT: The Pentium instruction set (also known as i586).
    P6: The Pentium Pro instruction set (also known as i686).
    AVX512_*: The subsets of AVX-512. The Knights Landing and Intel Xeon
      subsets come first, followed by Cannon Lake, Knights Mill and Ice Lake.
    UNDOC: Undocumented instructions.
    AMD, TBM, ARCH_3DNOW: AMD-specific extensions.
    CYRIX, CYRIXM: Cyrix-specific extensions.
  """

  NONE = 0

  ARCH_8086 = 1
  ARCH_186 = 2
  ARCH_286 = 3
  ARCH_386 = 4
  ARCH_486 = 5
  PENT = 6
  P6 = 7

  MMX = 8

  SSE = 9
  SSE2 = 10
  SSE3 = 11
  SSSE3 = 12
  SSE4_1 = 13
  SSE4_2 = 14
  SSE4A = 15
  SSE5 = 16

  AVX = 17
  AVX2 = 18

  AVX512_F = 19
  AVX512_CD = 20
  AVX512_ER = 21
  AVX512_PF = 22
  AVX512_BW = 23
  AVX512_DQ = 24
  AVX512_VL = 25
  AVX512_IFMA = 26
  AVX512_VBMI = 27
  AVX512_VPOPCNTDQ = 28
  AVX512_4VNNIW = 29
  AVX512_4FMAPS = 30
  AVX512_VBMI2 = 31
  AVX512_VNNI = 32
  AVX512_BITALG = 33
  AVX512_GFNI = 34
  AVX512_VAES = 35
  AVX512_VPCLMULQDQ = 36

  ADX = 37
  AES = 38
  VMX = 39
  BMI1 = 40
  BMI2 = 41
  F16C = 42
  FMA = 43
  FSGSBASE = 44
  HLE = 45
  INVPCID = 46
  SHA = 47
  RTM = 48
  MPX = 49
  PCLMULQDQ = 50
  LZCNT = 51
  PREFETCHWT1 = 52
  PRFCHW = 53
  RDPID = 54
  RDRAND = 55
  RDSEED = 56
  XSAVEOPT = 57

  SGX1 = 58
  SGX2 = 59
  SMX = 60

  X64 = 61
  IA64 = 62
  UNDOC = 63

  AMD = 64
  TBM = 65
  ARCH_3DNOW = 66

  CYRIX = 67
  CYRIXM = 68


def _normalize(value: str) -> str:
  return value.replace('_', '').upper()


# Maps normalized names to Arch values. Keys must be in the form produced by
# _normalize(), i.e. upper case and without underscores.
_ARCH_BY_NAME: Mapping[str, Arch] = types.MappingProxyType({
    'NONE': Arch.NONE,
    '8086': Arch.ARCH_8086,
    '186': Arch.ARCH_186,
    '286': Arch.ARCH_286,
    '386': Arch.ARCH_386,
    '486': Arch.ARCH_486,
    'PENT': Arch.PENT,
    'P6': Arch.P6,
    'MMX': Arch.MMX,
    'SSE': Arch.SSE,
    'SSE2': Arch.SSE2,
    'SSE3': Arch.SSE3,
    'SSSE3': Arch.SSSE3,
    'SSE41': Arch.SSE4_1,
    'SSE42': Arch.SSE4_2,
    'SSE4A': Arch.SSE4A,
    'SSE5': Arch.SSE5,
    'AVX': Arch.AVX,
    'AVX2': Arch.AVX2,
    'AVX512F': Arch.AVX512_F,
    'AVX512CD': Arch.AVX512_CD,
    'AVX512ER': Arch.AVX512_ER,
    'AVX512PF': Arch.AVX512_PF,
    'AVX512BW': Arch.AVX512_BW,
    'AVX512DQ': Arch.AVX512_DQ,
    'AVX512VL': Arch.AVX512_VL,
    'AVX512IFMA': Arch.AVX512_IFMA,
    'AVX512VBMI': Arch.AVX512_VBMI,
    'AVX512VPOPCNTDQ': Arch.AVX512_VPOPCNTDQ,
    'AVX5124VNNIW': Arch.AVX512_4VNNIW,
    'AVX5124FMAPS': Arch.AVX512_4FMAPS,
    # The Ice Lake subsets are also known under their short names.
    'VBMI2': Arch.AVX512_VBMI2,
    'AVX512VBMI2': Arch.AVX512_VBMI2,
    'VNNI': Arch.AVX512_VNNI,
    'AVX512VNNI': Arch.AVX512_VNNI,
    'BITALG': Arch.AVX512_BITALG,
    'AVX512BITALG': Arch.AVX512_BITALG,
    'GFNI': Arch.AVX512_GFNI,
    'AVX512GFNI': Arch.AVX512_GFNI,
    'VAES': Arch.AVX512_VAES,
    'AVX512VAES': Arch.AVX512_VAES,
    'VPCLMULQDQ': Arch.AVX512_VPCLMULQDQ,
    'AVX512VPCLMULQDQ': Arch.AVX512_VPCLMULQDQ,
    'ADX': Arch.ADX,
    'AES': Arch.AES,
    'VMX': Arch.VMX,
    'BMI1': Arch.BMI1,
    'BMI2': Arch.BMI2,
    'F16C': Arch.F16C,
    'FMA': Arch.FMA,
    'FSGSBASE': Arch.FSGSBASE,
    'HLE': Arch.HLE,
    'INVPCID': Arch.INVPCID,
    'SHA': Arch.SHA,
    'RTM': Arch.RTM,
    'MPX': Arch.MPX,
    'PCLMULQDQ': Arch.PCLMULQDQ,
    'LZCNT': Arch.LZCNT,
    'PREFETCHWT1': Arch.PREFETCHWT1,
    'PRFCHW': Arch.PRFCHW,
    'RDPID': Arch.RDPID,
    'RDRAND': Arch.RDRAND,
    'RDSEED': Arch.RDSEED,
    # All XSAVE variants are tracked as a single extension.
    'XSAVEOPT': Arch.XSAVEOPT,
    'XSS': Arch.XSAVEOPT,
    'XSAVE': Arch.XSAVEOPT,
    'XSAVEC': Arch.XSAVEOPT,
    'SGX1': Arch.SGX1,
    'SGX2': Arch.SGX2,
    'SMX': Arch.SMX,
    'X64': Arch.X64,
    'IA64': Arch.IA64,
    'UNDOC': Arch.UNDOC,
    'AMD': Arch.AMD,
    'TBM': Arch.TBM,
    '3DNOW': Arch.ARCH_3DNOW,
    'CYRIX': Arch.CYRIX,
    'CYRIXM': Arch.CYRIXM,
})

# Display strings of values whose names can't be used directly. All other
# values are displayed using their name.
_DISPLAY_NAMES: Mapping[Arch, str] = types.MappingProxyType({
    Arch.ARCH_8086: '8086',
    Arch.ARCH_186: '186',
    Arch.ARCH_286: '286',
    Arch.ARCH_386: '386',
    Arch.ARCH_486: '486',
    Arch.ARCH_3DNOW: '3DNOW',
})

# Human-readable descriptions. Values that are not in the table do not have a
# description.
_DOCUMENTATION: Mapping[Arch, str] = types.MappingProxyType({
    Arch.PENT: 'Instruction set of the Pentium, 1993 (also known as i586)',
    Arch.P6: 'Instruction set of the Pentium Pro, 1995 (also known as i686)',
    Arch.SSE4A: 'Instruction set SSE4A, AMD',
    Arch.SSE5: 'Instruction set SSE5, AMD',
    Arch.AVX512_F: 'AVX512-F - Foundation',
    Arch.AVX512_CD: 'AVX512-CD - Conflict Detection',
    Arch.AVX512_ER: 'AVX512-ER - Exponential and Reciprocal',
    Arch.AVX512_PF: 'AVX512-PF - Prefetch',
    Arch.AVX512_BW: 'AVX512-BW - Byte and Word',
    Arch.AVX512_DQ: 'AVX512-DQ - Doubleword and Quadword',
    Arch.AVX512_VL: 'AVX512-VL - Vector Length Extensions',
    Arch.AVX512_IFMA: 'AVX512-IFMA - Integer Fused Multiply Add',
    Arch.AVX512_VBMI: 'AVX512-VBMI - Vector Byte Manipulation Instructions',
    Arch.AVX512_VPOPCNTDQ: (
        'AVX512-VPOPCNTDQ - Vector Population Count instructions for Dwords'
        ' and Qwords'
    ),
    Arch.AVX512_4VNNIW: (
        'AVX512-4VNNIW - Vector Neural Network Instructions Word variable'
        ' precision'
    ),
    Arch.AVX512_4FMAPS: (
        'AVX512-4FMAPS - Fused Multiply Accumulation Packed Single precision'
    ),
    Arch.AVX512_VBMI2: (
        'AVX512-VBMI2 - Vector Byte Manipulation Instructions 2 (Ice Lake)'
    ),
    Arch.AVX512_VNNI: 'AVX512-VNNI - Vector Neural Network Instructions',
    Arch.AVX512_BITALG: 'AVX512-BITALG - Bit Algorithms (Ice Lake)',
    Arch.AVX512_GFNI: 'AVX512-GFNI - Galois Field New Instructions',
    Arch.AVX512_VAES: 'AVX512-VAES - Vector AES Instructions',
    Arch.AVX512_VPCLMULQDQ: (
        'AVX512-VPCLMULQDQ - Vector Carry-Less Multiplication of Quadwords'
    ),
    Arch.ADX: 'Multi-Precision Add-Carry Instruction Extension',
    Arch.AES: 'Advanced Encryption Standard Extension',
    Arch.VMX: 'Virtual Machine Extension',
    Arch.BMI1: 'Bit Manipulation Instruction Set 1',
    Arch.BMI2: 'Bit Manipulation Instruction Set 2',
    Arch.F16C: 'Half Precision Floating Point Conversion Instructions',
    Arch.FMA: 'Fused Multiply-Add Instructions',
    Arch.HLE: 'Hardware Lock Elision Instructions',
    Arch.INVPCID: 'Invalidate Translation Lookaside Buffers (TLBs)',
    Arch.SHA: 'Secure Hash Algorithm Extensions',
    Arch.RTM: 'Transactional Synchronization Extensions',
    Arch.MPX: 'Memory Protection Extensions',
    Arch.PCLMULQDQ: 'Carry-Less Multiplication Instructions',
    Arch.RDPID: 'Read processor ID',
    Arch.RDRAND: 'Read random number',
    Arch.RDSEED: 'Read random seed',
    Arch.XSAVEOPT: 'Save Processor Extended States Optimized',
    Arch.SGX1: 'Software Guard Extensions 1',
    Arch.SGX2: 'Software Guard Extensions 2',
    Arch.SMX: 'Safer Mode Extensions',
    Arch.X64: '64-bit Mode Instructions',
    Arch.IA64: 'Intel Architecture 64',
    Arch.UNDOC: 'Undocumented Instructions',
    Arch.AMD: 'AMD',
    Arch.TBM: 'Trailing Bit Manipulation (AMD)',
    Arch.ARCH_3DNOW: '3DNow (AMD)',
    Arch.CYRIX: 'Cyrix Instruction Set',
    Arch.CYRIXM: 'Cyrix M Instruction Set',
})


def parse_arch(value: str, warn: bool = True) -> Arch:
  """Parses the name of an instruction set extension.

  The name is matched ignoring case and underscores, i.e. 'avx_512_vl',
  'AVX512VL' and 'Avx512Vl' are all parsed as Arch.AVX512_VL.

  Args:
    value: The name of the extension.
    warn: When True, a warning is logged if `value` is not a known name.

  Returns:
    The extension with the given name, or Arch.NONE when the name is not
    recognized.
  """
  arch = _ARCH_BY_NAME.get(_normalize(value))
  if arch is None:
    if warn:
      logging.warning('parse_arch: no arch for string %r', value)
    return Arch.NONE
  return arch


def arch_to_string(arch: Arch) -> str:
  """Returns the display string of `arch`.

  The CPU generations and 3DNow are displayed without the 'ARCH_' prefix, all
  other values use their name, e.g. 'AVX512_VL'.
  """
  return _DISPLAY_NAMES.get(arch, arch.name)


def archs_to_string(archs: Iterable[Arch]) -> str:
  """Returns a display string for a list of extensions.

  Example: archs_to_string((Arch.SSE2, Arch.ARCH_386)) returns ' [SSE2,386]'.

  Args:
    archs: The extensions to display. They are displayed in the order in which
      they appear in the input.

  Returns:
    A comma-separated list of the extensions in square brackets, preceded by a
    space. Returns an empty string when `archs` is empty.
  """
  names = [arch_to_string(arch) for arch in archs]
  if not names:
    return ''
  return ' [' + ','.join(names) + ']'


def arch_documentation(arch: Arch) -> str:
  """Returns a description of `arch`, or an empty string if it has none."""
  return _DOCUMENTATION.get(arch, '')
