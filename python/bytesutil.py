# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import Cryptodome.Random

import inputgen

max_nbr_bytes = 8

def _check_len(b):
    if len(b) > max_nbr_bytes:
        raise ValueError(f"Can't convert {len(b)} bytes, limit is {max_nbr_bytes}")

def le_bytes_to_nbr(b, length=None):
    if length is not None:
        b = b[:length]
    _check_len(b)
    return int.from_bytes(b, byteorder='little')

def be_bytes_to_nbr(b, length=None):
    if length is not None:
        b = b[:length]
    _check_len(b)
    return int.from_bytes(b, byteorder='big')

def nbr_to_le_bytes(n, length):
    return n.to_bytes(length, byteorder='little')

def nbr_to_be_bytes(n, length):
    return n.to_bytes(length, byteorder='big')

def block_rndfill(buf, length=None, r=None):
    """Overwrite the first length bytes of buf with random bytes.

    Uses the system generator unless a seeded random.Random is passed as r.
    """
    if length is None:
        length = len(buf)
    if length > len(buf):
        raise ValueError(f"Buffer of {len(buf)} bytes can't take {length}")
    if r is None:
        buf[:length] = Cryptodome.Random.get_random_bytes(length)
    else:
        buf[:length] = inputgen.randbytes(length, r)
    return buf
