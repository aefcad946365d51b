#!/usr/bin/env python3
#
# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""Expand test vector templates into concrete vectors."""

import argparse
import logging
import pathlib
import random
import sys

import tvfile
import tvgen

def fail(msg):
    sys.stderr.write(f'Error: {msg}\n')
    sys.exit(1)

def do_expand(args):
    vectors = list(tvgen.expand_file(args.template, r=args.rng))
    if args.json:
        print(f"Writing: {args.json}")
        tvgen.write_json(args.json, vectors)
    if args.output:
        print(f"Writing: {args.output}")
        with args.output.open("w") as f:
            tvgen.write_vectors(f, vectors)
    elif not args.json:
        tvgen.write_vectors(sys.stdout, vectors)

def do_count(args):
    total = 0
    for vec_no, td in tvfile.iter_blocks(args.template, args.rng):
        n = td.count_combinations() * max(td.generate, 1)
        print(f"VEC {vec_no}: {n}")
        total += n
    print(f"Total: {total}")

def do_show(args):
    tvgen.show_vectors(tvgen.expand_file(args.template, r=args.rng))

def parse_args(argv=None):
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument('-v', '--verbose', action='store_true',
                   help='verbose logging')
    p.add_argument('--seed', type=int,
                   help='seed for random bytes, for reproducible output')
    sub = p.add_subparsers(dest='command', required=True)
    e = sub.add_parser('expand', help='write every vector a template describes')
    e.add_argument('template', type=pathlib.Path)
    e.add_argument('-o', '--output', type=pathlib.Path,
                   help='write vectors in template format here (default stdout)')
    e.add_argument('--json', type=pathlib.Path,
                   help='write vectors as hex JSON here')
    e.set_defaults(func=do_expand)
    c = sub.add_parser('count', help='count the vectors of each block')
    c.add_argument('template', type=pathlib.Path)
    c.set_defaults(func=do_count)
    s = sub.add_parser('show', help='hex dump every vector')
    s.add_argument('template', type=pathlib.Path)
    s.set_defaults(func=do_show)
    args = p.parse_args(argv)
    args.rng = None if args.seed is None else random.Random(args.seed)
    return args

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s: %(message)s")
    if not args.template.exists():
        fail(f"No such template: {args.template}")
    args.func(args)

if __name__ == "__main__":
    main()
