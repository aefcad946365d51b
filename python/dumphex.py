# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

line_bytes = 32

def groupto(it, l):
    res = []
    for i in it:
        res.append(i)
        if len(res) == l:
            yield res
            res = []
    if res:
        yield res

def hex_out(f, label, b, length=None):
    """Write b as "LABEL hex" lines that a template reader reads back.

    Long values are split over several lines carrying the same label.
    """
    if length is not None:
        b = b[:length]
    if not b:
        f.write(f"{label}\n")
        return
    for l in groupto(b, line_bytes):
        f.write(f"{label} {bytes(l).hex()}\n")

def dumphex(b):
    for i, l in enumerate(groupto(b, 16)):
        print(f"{i*16:8x} {' '.join(f'{e:02x}' for e in l)}")
