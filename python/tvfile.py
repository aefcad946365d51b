# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import logging

import tags
import testdef

from tags import Tag

logger = logging.getLogger(__name__)

class TemplateReader(object):
    """Lines of a template file, with one line of push-back."""

    def __init__(self, f, name="<template>"):
        self._lines = iter(f)
        self._pending = None
        self.name = name
        self.line_no = 0
        self.ended = False

    def readline(self):
        if self._pending is not None:
            l, self._pending = self._pending, None
            return l
        for l in self._lines:
            self.line_no += 1
            l = l.strip()
            if l and not l.startswith("#"):
                return l
        return None

    def unread(self, l):
        self._pending = l

def _parse_count(reader, tag, text, default, minimum=None):
    if not text:
        return default
    try:
        n = int(text)
    except ValueError:
        logger.warning(f"{reader.name}:{reader.line_no}: bad {tag.name} number {text!r}")
        return default
    if minimum is not None and n < minimum:
        logger.warning(f"{reader.name}:{reader.line_no}: bad {tag.name} count {n}, using {default}")
        return default
    return n

def input_test_def(reader, td):
    """Read the next vector block into td.

    Returns (ok, vec_no); ok is False once the file or an END line is
    reached without any block content.
    """
    td.reset()
    vec_no = None
    found = False
    while not reader.ended:
        l = reader.readline()
        if l is None:
            break
        if found and tags.lookup(l[:3]) is Tag.VEC:
            reader.unread(l)
            break
        tag = td.set_tag(l)
        if tag is Tag.ERR:
            logger.warning(f"{reader.name}:{reader.line_no}: ignoring {l!r}")
            continue
        if tag in tags.field_tags:
            td.register_tag(tag)
            found = True
        elif tag is Tag.VEC:
            found = True
            vec_no = _parse_count(reader, tag, td[tag].text, None)
        elif tag is Tag.GEN:
            td.generate = _parse_count(reader, tag, td[tag].text, 1, minimum=1)
            found = True
            break
        else:
            # END
            reader.ended = True
            break
    return found, vec_no

def iter_blocks(path, r=None):
    """Yield (vec_no, TestDef) for each block of a template file."""
    td = testdef.TestDef(r)
    with path.open() as f:
        reader = TemplateReader(f, str(path))
        while True:
            ok, vec_no = input_test_def(reader, td)
            if not ok:
                return
            yield vec_no, td
