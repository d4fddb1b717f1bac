# coding: utf-8

# Copyright (c) jsondime Development Team.
# Distributed under the terms of the Modified BSD License.

from .generic import diff, make_patch, UnsupportedRootComparison
from .config import DiffConfig

__all__ = ["diff", "make_patch", "DiffConfig", "UnsupportedRootComparison"]
