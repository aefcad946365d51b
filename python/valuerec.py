# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""One template field: its definition text and the alternatives it yields.

A definition is a comma separated list of alternatives.  Each alternative is
either "=" (take the value from context bytes supplied by the caller, only
valid as the whole definition) or a
concatenation of hex byte pairs and length directives:

    #n   n incrementing bytes 00 01 02 ...
    !n   n zero bytes
    ?n   n random bytes

A directive length may be a range "lo-hi" or "lo-hi/step", in which case the
alternative yields one value per length before the field moves on.
"""

import enum
import logging
import re

import bytesutil
import inputgen

logger = logging.getLogger(__name__)

class Result(enum.Enum):
    VALUE = "value"
    CONTEXT_COPY = "context copy"
    EXHAUSTED = "exhausted"

class Malformed(Exception):
    pass

_item_re = re.compile(
    r"\s*(?:((?:[0-9A-Fa-f]{2})+)|([#!?])(\d+)(?:-(\d+)(?:/(\d+))?)?)")

def parse_items(alt):
    """Split one alternative into hex runs (bytes) and directives (tuples)."""
    items = []
    i = 0
    alt = alt.rstrip()
    while i < len(alt):
        m = _item_re.match(alt, i)
        if not m:
            raise Malformed(f"can't parse {alt[i:]!r}")
        if m.group(1):
            items.append(bytes.fromhex(m.group(1)))
        else:
            lo = int(m.group(3))
            hi = lo if m.group(4) is None else int(m.group(4))
            step = 1 if m.group(5) is None else int(m.group(5))
            if lo > hi:
                raise Malformed(f"empty length range {lo}-{hi}")
            if step == 0:
                raise Malformed("zero step")
            items.append((m.group(2), lo, hi, step))
        i = m.end()
    if len([it for it in items if type(it) == tuple and it[1] != it[2]]) > 1:
        raise Malformed("more than one length range")
    return items

class ValueRec(object):
    def __init__(self, r=None):
        self._r = r
        self._text = ""
        self._rewind()

    def _rewind(self):
        self.pos = 0
        self.next_pos = 0
        self.count = 0
        self.lo = self.hi = self.step = self.length = 0
        self._range_at = None
        self._materialized = False
        self._result = None
        self._value = b''

    @property
    def text(self):
        return self._text

    @property
    def is_empty(self):
        return not self._text.strip()

    @property
    def size(self):
        return len(self._value)

    @property
    def result(self):
        return self._materialize()

    def reset(self):
        self._text = ""
        self._rewind()

    def add_to_record(self, text):
        # Lines are joined with a space so hex may continue on the next line.
        self._text = f"{self._text} {text}" if self._text else text

    def _fill(self, kind, n):
        if kind == "#":
            return inputgen.rangeset(n, 0)
        if kind == "!":
            return inputgen.repeatedbyte(n, 0)
        return bytes(bytesutil.block_rndfill(bytearray(n), r=self._r))

    def _item_bytes(self, item):
        if type(item) == bytes:
            return item
        kind, lo, hi, _ = item
        return self._fill(kind, lo if lo == hi else self.length)

    def _start_range(self, i, lo, hi, step):
        if self._range_at == i:
            self.length += step
        else:
            self.lo, self.hi, self.step, self.length = lo, hi, step, lo
        if self.length + step <= hi:
            # Stay on this alternative until the range is used up.
            self._range_at = i
            self.next_pos = i
        else:
            self._range_at = None

    def _mixes_context_copy(self):
        alts = [a.strip() for a in self._text.split(",")]
        if alts[-1] == "":
            alts.pop()
        return "=" in alts and len(alts) > 1

    def _parse_at(self, i):
        text = self._text
        while i < len(text) and text[i].isspace():
            i += 1
        if i >= len(text):
            self.next_pos = len(text)
            return Result.EXHAUSTED, b''
        if self._mixes_context_copy():
            # "=" must be the whole definition.
            logger.warning(f"Treating field as exhausted: {text!r} mixes \"=\" with values")
            self.next_pos = len(text)
            return Result.EXHAUSTED, b''
        end = text.find(",", i)
        if end < 0:
            end = len(text)
        alt = text[i:end].strip()
        self.next_pos = min(end + 1, len(text))
        if alt == "=":
            return Result.CONTEXT_COPY, b''
        try:
            items = parse_items(alt)
        except Malformed as e:
            logger.warning(f"Treating field as exhausted at {alt!r}: {e}")
            self.next_pos = len(text)
            return Result.EXHAUSTED, b''
        for item in items:
            if type(item) == tuple and item[1] != item[2]:
                self._start_range(i, *item[1:])
        return Result.VALUE, b''.join(self._item_bytes(it) for it in items)

    def _materialize(self):
        if not self._materialized:
            self._result, self._value = self._parse_at(self.pos)
            self._materialized = True
            if self._result is Result.VALUE:
                self.count += 1
        return self._result

    def parse(self):
        """Parse the alternative under the cursor, once per position.

        Returns (result, value); an empty record is exhausted immediately.
        """
        self._materialize()
        return self._result, self._value

    def next(self):
        """Move to the next alternative.

        Returns False, having rewound to the start, when the alternatives run
        out or the next one copies from context: the caller should carry.
        """
        self.pos = self.next_pos
        self._materialized = False
        if self._materialize() is Result.VALUE:
            return True
        self._rewind()
        return False

    def get_value(self, length=None, context=None):
        """The current value, without advancing.

        A context copy field takes length bytes (default all) of context.
        Pass context by keyword: get_value(context=ctx).
        """
        if self._materialize() is not Result.CONTEXT_COPY:
            return self._value
        if context is None:
            return b''
        if length is None:
            length = len(context)
        if length > len(context):
            raise ValueError(f"Asked for {length} bytes of a {len(context)} byte context")
        self._value = bytes(context[:length])
        return self._value
