# coding: utf-8

# Copyright (c) jsondime Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
from contextlib import contextmanager

import pytest

from jsondime import make_patch, apply_patch, dumps, loads
from jsondime.patch_format import is_valid_patch
from jsondime.values import values_equal


def check_diff_and_patch(a, b, config=None):
    "Check that patch(a, diff(a,b)) reproduces b, without touching a or b."
    a_orig = copy.deepcopy(a)
    b_orig = copy.deepcopy(b)
    p = make_patch(a, b, config=config)
    assert is_valid_patch(p)
    assert values_equal(apply_patch(a, p), b)
    # The text form must replay the same way
    assert values_equal(apply_patch(a, loads(dumps(p))), b)
    assert a == a_orig
    assert b == b_orig
    return p


def check_symmetric_diff_and_patch(a, b, config=None):
    "Check that patch(a, diff(a,b)) reproduces b and vice versa."
    check_diff_and_patch(a, b, config=config)
    check_diff_and_patch(b, a, config=config)


@contextmanager
def assert_clean_exit():
    """Assert that SystemExit is called with code=0"""
    with pytest.raises(SystemExit) as e:
        yield
    assert e.value.code == 0
