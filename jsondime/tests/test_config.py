# coding: utf-8

# Copyright (c) jsondime Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import logging

import pytest
from traitlets import Enum, TraitError

from jsondime import log
from jsondime.args import ConfigBackedParser, diff_config_from_args
from jsondime.config import (
    build_config, entrypoint_configurables, config_instance, Global, JsDiff)
from jsondime.jsdiffapp import _build_arg_parser


class FixtureConfig(Global):
    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'WARN',
    ).tag(config=True)


@pytest.fixture
def entrypoint_config():
    entrypoint_configurables['test-prog'] = FixtureConfig
    yield
    del entrypoint_configurables['test-prog']


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _write_config(path, config):
    with io.open(str(path / "jsondime_config.json"), "w", encoding="utf8") as f:
        json.dump(config, f)


def test_build_config_defaults(config_dir):
    config = build_config('jsdiff')
    assert config == {
        'log_level': 'INFO',
        'key_order': 'insertion',
        'atomic_paths': [],
        'indent': 2,
        'color': True,
    }
    config = build_config('jspatch')
    assert config == {
        'log_level': 'INFO',
        'indent': 2,
        'color': True,
    }


def test_build_config_unknown_entrypoint():
    with pytest.raises(ValueError):
        build_config('nope')


def test_build_config_from_file(config_dir):
    _write_config(config_dir, {
        "JsDiff": {"key_order": "sorted"},
        "_Output": {"indent": 4},
        "Global": {"log_level": "ERROR"},
    })
    config = build_config('jsdiff')
    assert config['key_order'] == 'sorted'
    assert config['indent'] == 4
    assert config['log_level'] == 'ERROR'
    assert build_config('jspatch')['indent'] == 4


def test_config_parser(entrypoint_config, reset_log):
    parser = ConfigBackedParser('test-prog')
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="Set the log level by name.",
    )
    # Check that log level default is taken from config
    args = parser.parse_args([])
    assert args.log_level == 'WARN'
    # Check that it can be overridden
    args = parser.parse_args(['--log-level', 'ERROR'])
    assert args.log_level == 'ERROR'


def test_config_file_sets_parser_defaults(config_dir):
    _write_config(config_dir, {
        "JsDiff": {"key_order": "sorted", "atomic_paths": ["/items/*"], "color": False},
    })
    args = _build_arg_parser().parse_args(['a.json', 'b.json'])
    assert args.key_order == 'sorted'
    assert args.atomic_paths == ['/items/*']
    assert args.color is False

    diff_config = diff_config_from_args(args)
    assert diff_config.key_order == 'sorted'
    assert diff_config.is_atomic('/items/3')
    assert not diff_config.is_atomic('/items')


def test_atomic_paths_need_leading_slash():
    instance = config_instance(JsDiff)
    with pytest.raises(TraitError):
        instance.atomic_paths = ['items/*']
    assert instance.atomic_paths == []


def test_config_file_sets_log_level(config_dir, reset_log):
    _write_config(config_dir, {"Global": {"log_level": "ERROR"}})
    args = _build_arg_parser().parse_args(['a.json', 'b.json'])
    assert args.log_level == 'ERROR'
    assert log.logger.level == logging.ERROR

    # The command line still wins
    _build_arg_parser().parse_args(['a.json', 'b.json', '--log-level', 'DEBUG'])
    assert log.logger.level == logging.DEBUG


def test_log_level_names():
    assert log.as_level('WARN') == logging.WARNING
    assert log.as_level('debug') == logging.DEBUG
    assert log.as_level(logging.ERROR) == logging.ERROR
    with pytest.raises(ValueError):
        log.as_level('LOUD')


def test_set_log_level_by_name(reset_log):
    log.set_jsondime_log_level('CRITICAL', set_main=False)
    assert log.logger.level == logging.CRITICAL
