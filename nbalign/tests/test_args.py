# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging

import pytest

from traitlets import Enum

import nbalign.log
from nbalign.args import ConfigBackedParser, LogLevelAction, add_generic_args
from nbalign.config import (
    entrypoint_configurables, build_config, Global, NbDiff, recursive_update,
)


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


def test_config_parser(entrypoint_config):
    parser = ConfigBackedParser('test-prog')
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="Set the log level by name.",
        action=LogLevelAction,
    )

    arguments = parser.parse_args([])
    assert arguments.log_level == 'WARN'

    arguments = parser.parse_args(['--log-level', 'ERROR'])
    assert arguments.log_level == 'ERROR'
    assert nbalign.log.logger.level == logging.ERROR


def test_config_parser_unknown_entrypoint():
    parser = ConfigBackedParser('not-an-entrypoint')
    parser.add_argument('--flag', default='x')
    assert parser.parse_args([]).flag == 'x'


def test_build_config_defaults():
    config = build_config('nbalign-diff')
    assert config['log_level'] == 'INFO'
    assert config['granularity'] == 'lines'
    assert config['side_by_side'] is False
    assert config['color'] is True


def test_build_config_unknown_entrypoint():
    with pytest.raises(ValueError):
        build_config('nbmerge')


def test_config_file_in_cwd(tmpdir, monkeypatch):
    tmpdir.join('nbalign_config.json').write(json.dumps({
        'NbDiff': {'granularity': 'words', 'side_by_side': True},
    }))
    monkeypatch.chdir(str(tmpdir))
    config = build_config('nbalign-diff')
    assert config['granularity'] == 'words'
    assert config['side_by_side'] is True

    parser = ConfigBackedParser('nbalign-diff')
    parser.add_argument('-g', '--granularity', default='lines')
    assert parser.parse_args([]).granularity == 'words'
    assert parser.parse_args(['-g', 'lines']).granularity == 'lines'


def test_config_help(entrypoint_config, capsys):
    parser = ConfigBackedParser('test-prog')
    add_generic_args(parser)
    with pytest.raises(SystemExit) as e:
        parser.parse_args(['--config'])
    assert e.value.code == 1
    err = capsys.readouterr().err
    assert 'FixtureConfig' in err
    assert 'log_level: "WARN"' in err


def test_nbdiff_configurable_traits():
    traits = NbDiff.class_traits(config=True)
    assert set(traits) >= {
        'log_level', 'granularity', 'side_by_side', 'show_unchanged', 'color', 'width'}


def test_recursive_update():
    target = {'a': {'b': 1}, 'c': 2}
    recursive_update(target, {'a': {'d': 3}, 'c': None}, False)
    assert target == {'a': {'b': 1, 'd': 3}}
