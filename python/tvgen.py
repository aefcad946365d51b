# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import logging

import bytesutil
import dumphex
import hexjson
import tags
import tvfile

from tags import Tag

logger = logging.getLogger(__name__)

def apply_tag_length(tv):
    """Truncate TAG to the length TGL gives; an empty TGL leaves TAG alone."""
    if not tv.get(Tag.TGL) or Tag.TAG not in tv:
        return tv
    try:
        n = bytesutil.be_bytes_to_nbr(tv[Tag.TGL])
    except ValueError as e:
        logger.warning(f"Ignoring TGL {tv[Tag.TGL].hex()}: {e}")
        return tv
    tv[Tag.TAG] = tv[Tag.TAG][:n]
    return tv

def generate_vectors(td, compute=None, chain=Tag.CTX):
    """Yield one {Tag: bytes} dict per combination of td's fields.

    compute, if given, is the cryptographic step: it takes the field values
    and returns them completed.  Fields defined as "=" take the chain field
    of the previous vector.
    """
    context = None
    for _ in range(max(td.generate, 1)):
        while td.next():
            tv = td.values(context)
            if compute is not None:
                tv = compute(tv)
            apply_tag_length(tv)
            context = tv.get(chain)
            yield tv

def expand_file(path, compute=None, chain=Tag.CTX, r=None):
    """Yield the vectors of every block in a template file.

    Vectors are numbered from their block's VEC number, or on from the
    previous block when it has none.
    """
    n = 1
    for vec_no, td in tvfile.iter_blocks(path, r):
        if vec_no is not None:
            n = vec_no
        for tv in generate_vectors(td, compute, chain):
            yield {"vector": n, **tv}
            n += 1

def write_vectors(f, vectors):
    for tv in vectors:
        f.write(f"VEC {tv['vector']}\n")
        for k, v in tv.items():
            if type(k) == Tag:
                dumphex.hex_out(f, tags.name(k), v)
        f.write("\n")
    f.write("END\n")

def write_json(path, vectors):
    hexjson.write_using_hex(path, vectors)

def show_vectors(vectors):
    for tv in vectors:
        print(f"======== Vector {tv['vector']} ========")
        for k, v in tv.items():
            if type(k) == Tag:
                print(f"{tags.name(k)} ({len(v)} bytes)")
                dumphex.dumphex(v)

def check_vector(tv, compute):
    """Recompute tv and return the tags whose values differ."""
    inputs = {k: v for k, v in tv.items() if type(k) == Tag}
    got = apply_tag_length(compute(dict(inputs)))
    return [k for k, v in inputs.items() if got.get(k) != v]

def check_file(path, compute, verbose=False):
    """Check every vector of a concrete vector file; returns the failures."""
    failures = []
    for tv in expand_file(path):
        bad = check_vector(tv, compute)
        if bad:
            failures.append((tv["vector"], bad))
            print(f"FAIL: vector {tv['vector']}: {', '.join(tags.name(t) for t in bad)}")
        elif verbose:
            print(f"OK: vector {tv['vector']}")
    return failures
