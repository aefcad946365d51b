# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import logging
import random

import pytest

import inputgen

from valuerec import Result, ValueRec

def rec(text, r=None):
    v = ValueRec(r)
    v.add_to_record(text)
    return v

def values(v):
    res = []
    while v.next():
        res.append(v.get_value())
    return res

def test_alternatives_in_order_then_wrap():
    v = rec("00, 0102, 030405")
    assert v.next()
    assert v.get_value() == b"\x00"
    assert v.next()
    assert v.get_value() == b"\x01\x02"
    assert v.next()
    assert v.get_value() == b"\x03\x04\x05"
    assert v.count == 3
    assert not v.next()
    assert v.pos == 0
    assert v.next_pos == 0
    assert v.count == 0

def test_wrap_starts_a_new_cycle():
    v = rec("aa,bb")
    assert values(v) == [b"\xaa", b"\xbb"]
    assert values(v) == [b"\xaa", b"\xbb"]

def test_read_before_next_is_first_alternative():
    v = rec("00,01")
    assert v.get_value() == b"\x00"
    assert v.next()
    assert v.get_value() == b"\x01"
    assert not v.next()

def test_empty_record():
    v = ValueRec()
    assert v.is_empty
    assert v.parse() == (Result.EXHAUSTED, b"")
    assert v.get_value() == b""
    assert not v.next()

def test_blank_text_is_empty():
    v = rec("   ")
    assert v.is_empty
    assert v.parse() == (Result.EXHAUSTED, b"")

def test_text_accumulates_across_lines():
    v = rec("0001")
    v.add_to_record("0203")
    assert not v.is_empty
    assert values(v) == [b"\x00\x01\x02\x03"]

def test_whitespace_between_items():
    assert values(rec("00 01\t02")) == [b"\x00\x01\x02"]

def test_empty_alternative_and_trailing_comma():
    assert values(rec("00,,01")) == [b"\x00", b"", b"\x01"]
    assert values(rec("00,")) == [b"\x00"]
    assert values(rec(",00")) == [b"", b"\x00"]

def test_length_directives():
    assert values(rec("#4")) == [b"\x00\x01\x02\x03"]
    assert values(rec("!3")) == [b"\x00\x00\x00"]
    assert values(rec("#0")) == [b""]

def test_length_range():
    got = values(rec("#0-32/8"))
    assert got == [inputgen.rangeset(n, 0) for n in [0, 8, 16, 24, 32]]

def test_length_range_default_step():
    assert [len(b) for b in values(rec("!1-3"))] == [1, 2, 3]

def test_range_with_literals_and_more_alternatives():
    got = values(rec("aa#2-3bb, cc"))
    assert got == [b"\xaa\x00\x01\xbb", b"\xaa\x00\x01\x02\xbb", b"\xcc"]

def test_range_parameters():
    v = rec("#2-6/2")
    v.next()
    v.next()
    assert (v.lo, v.hi, v.step, v.length, v.size) == (2, 6, 2, 4, 4)

def test_repeated_reads_do_not_advance():
    v = rec("?8")
    first = v.get_value()
    assert len(first) == 8
    assert v.get_value() == first
    assert v.parse() == (Result.VALUE, first)

def test_seeded_random_is_reproducible():
    a = rec("?16", random.Random(1))
    b = rec("?16", random.Random(1))
    assert a.get_value() == b.get_value()
    assert len(a.get_value()) == 16

def test_context_copy():
    v = rec("=")
    assert v.parse() == (Result.CONTEXT_COPY, b"")
    ctx = bytes(range(10))
    assert v.get_value(context=ctx) == ctx
    assert v.get_value(4, ctx) == ctx[:4]
    assert v.size == 4
    assert v.get_value(context=bytearray(b"xyz")) == b"xyz"

def test_context_copy_bounds():
    v = rec("=")
    assert v.get_value() == b""
    with pytest.raises(ValueError):
        v.get_value(4, b"abc")

def test_context_copy_is_not_a_new_value():
    v = rec("=")
    assert not v.next()
    assert v.result is Result.CONTEXT_COPY

@pytest.mark.parametrize("text", ["0A0", "zz", "=00", "#4-2", "#1-2/0", "#1-2#1-3", "0 0"])
def test_malformed_is_exhausted(text, caplog):
    v = rec(text)
    with caplog.at_level(logging.WARNING):
        assert v.parse() == (Result.EXHAUSTED, b"")
    assert "exhausted" in caplog.text
    assert not v.next()

def test_malformed_alternative_ends_the_field():
    assert values(rec("00, zz, 01")) == [b"\x00"]

def test_reset():
    v = rec("00,01")
    v.next()
    v.next()
    v.reset()
    assert v.is_empty
    assert v.text == ""
    assert v.pos == 0
    assert v.parse() == (Result.EXHAUSTED, b"")

def test_context_copy_with_trailing_comma():
    assert rec("=,").parse() == (Result.CONTEXT_COPY, b"")

@pytest.mark.parametrize("text", ["=,11", "11,=", "11, =, 22"])
def test_context_copy_mixed_with_values(text, caplog):
    v = rec(text)
    with caplog.at_level(logging.WARNING):
        assert v.parse() == (Result.EXHAUSTED, b"")
    assert "mixes" in caplog.text
    assert values(v) == []
