# -*- coding: utf-8 -*-

# Copyright (c) jsondime Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os

from jsonschema import Draft4Validator as Validator
from pytest import fixture, skip

from jsondime import log


pjoin = os.path.join

schema_dir = os.path.abspath(pjoin(os.path.dirname(__file__), ".."))


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture
def base_doc(filespath):
    with io.open(pjoin(filespath, "base.json"), encoding="utf8") as f:
        return json.load(f)


@fixture
def remote_doc(filespath):
    with io.open(pjoin(filespath, "remote.json"), encoding="utf8") as f:
        return json.load(f)


@fixture
def json_schema_patch(request):
    schema_path = os.path.join(schema_dir, 'patch_format.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def patch_validator(request, json_schema_patch):
    return Validator(json_schema_patch)


@fixture
def reset_log():
    # Restore log levels changed by CLI entry points
    level = log.logger.level
    yield
    log.set_jsondime_log_level(level, set_main=False)
