# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import re

import tags
import valuerec

from tags import Tag

class TagError(Exception):
    pass

class UnknownTagError(TagError, KeyError):
    pass

class DuplicateTagError(TagError):
    pass

_prefix_re = re.compile(r"\s*([A-Za-z]+)")

class TestDef(object):
    """The fields of one vector block, enumerated like an odometer.

    Fields are digits in the order their tags were first seen: the field
    declared last varies fastest, the one declared first slowest.
    """

    __test__ = False

    def __init__(self, r=None):
        self._r = r
        self._recs = {}
        self.tag_order = []
        self.generate = 0
        self._started = False
        for t in tags.valid_tags:
            self.add_tag(t)

    def add_tag(self, tag):
        if tag in self._recs:
            raise DuplicateTagError(f"Tag already registered: {tag!r}")
        self._recs[tag] = valuerec.ValueRec(self._r)

    def __getitem__(self, tag):
        try:
            return self._recs[tag]
        except KeyError:
            raise UnknownTagError(f"Tag not found: {tag!r}") from None

    def set_tag(self, line):
        """Add the text of a template line to its tag's record."""
        m = _prefix_re.match(line)
        if not m:
            return Tag.ERR
        tag = tags.lookup(m.group(1))
        if tag is not Tag.ERR:
            self._recs[tag].add_to_record(line[m.end():].strip())
        return tag

    def register_tag(self, tag):
        self[tag]
        if tag not in self.tag_order:
            self.tag_order.append(tag)

    def reset(self):
        self.tag_order = []
        self.generate = 0
        self._started = False
        for rec in self._recs.values():
            rec.reset()

    def next(self):
        """Step to the next combination; False once a full cycle is done.

        The first call yields the combination of every field's first
        alternative.
        """
        if not self._started:
            self._started = True
            for t in self.tag_order:
                self._recs[t].parse()
            return bool(self.tag_order)
        for t in reversed(self.tag_order):
            rec = self._recs[t]
            if rec.next():
                return True
            # Rolled over: sit on the first alternative and carry.
            rec.parse()
        self._started = False
        return False

    def values(self, context=None):
        return {t: self._recs[t].get_value(context=context) for t in self.tag_order}

    def count_combinations(self):
        """Count the combinations left in the current cycle."""
        n = 0
        while self.next():
            n += 1
        return n
