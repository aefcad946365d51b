# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import enum

class Tag(enum.IntEnum):
    KEY = 0
    PTX = 1
    CTX = 2
    NCE = 3
    IV = 4
    HDR = 5
    TGL = 6
    TAG = 7
    VEC = 8
    GEN = 9
    END = 10
    ERR = 11

# Positionally aligned with Tag; every name is three characters.
names = ["KEY", "PTX", "CTX", "NCE", "IV ", "HDR", "TGL", "TAG", "VEC", "GEN", "END"]

valid_tags = [Tag(i) for i in range(len(names))]
markers = {Tag.VEC, Tag.GEN, Tag.END}
field_tags = [t for t in valid_tags if t not in markers]

def lookup(prefix):
    """Map a line prefix to a Tag, comparing only its first three characters."""
    p = prefix[:3].upper().ljust(3)
    for t, n in zip(valid_tags, names):
        if n == p:
            return t
    return Tag.ERR

def name(tag):
    return names[tag].rstrip()
