
import argparse
import json

import pytest
from traitlets import Enum, TraitError

from patchguard.args import ConfigBackedParser, LogLevelAction, add_forbidden_args
from patchguard.config import (
    entrypoint_configurables, build_config, Global, Check, recursive_update,
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


def test_config_parser(entrypoint_config, reset_log):
    parser = ConfigBackedParser('test-prog')
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="Set the log level by name.",
        action=LogLevelAction,
    )

    # Check that log level default is taken from FixtureConfig
    arguments = parser.parse_args([])
    assert arguments.log_level == 'WARN'

    arguments = parser.parse_args(['--log-level', 'ERROR'])
    assert arguments.log_level == 'ERROR'


def test_unknown_entrypoint():
    with pytest.raises(ValueError):
        build_config('no-such-prog')

    # Parsers for unconfigured programs fall back to argparse defaults
    parser = ConfigBackedParser('no-such-prog')
    parser.add_argument('--flag', default='x')
    assert parser.parse_args([]).flag == 'x'


def test_default_check_config(tmpdir):
    with tmpdir.as_cwd():
        config = build_config('patchguard-check')
    assert config == {
        'log_level': 'INFO',
        'forbidden_paths': ['/metadata/resourceVersion'],
    }


def test_check_config_from_file(tmpdir):
    tmpdir.join('patchguard_config.json').write_text(
        json.dumps({
            'Global': {
                'log_level': 'ERROR',
            },
            'Check': {
                'forbidden_paths': ['/metadata/uid', '/metadata/generation'],
            },
        }),
        encoding='utf-8'
    )
    with tmpdir.as_cwd():
        config = build_config('patchguard-check')

    # Lists are not merged:
    assert config['forbidden_paths'] == ['/metadata/uid', '/metadata/generation']
    assert config['log_level'] == 'ERROR'


def test_check_config_invalid_pointer(tmpdir):
    tmpdir.join('patchguard_config.json').write_text(
        json.dumps({
            'Check': {
                'forbidden_paths': ['metadata/uid'],
            },
        }),
        encoding='utf-8'
    )
    with tmpdir.as_cwd():
        with pytest.raises(TraitError):
            build_config('patchguard-check')


def test_forbidden_paths_trait():
    assert Check().forbidden_paths == ['/metadata/resourceVersion']
    assert Check(forbidden_paths=['', '/a~1b']).forbidden_paths == ['', '/a~1b']
    with pytest.raises(TraitError):
        Check(forbidden_paths=['a'])


def test_forbidden_args_extend_config(tmpdir):
    parser = ConfigBackedParser('patchguard-check')
    add_forbidden_args(parser)
    with tmpdir.as_cwd():
        arguments = parser.parse_args(['--forbidden-path', '/metadata/uid'])
    assert arguments.forbidden_paths == ['/metadata/resourceVersion', '/metadata/uid']

    parser = argparse.ArgumentParser()
    add_forbidden_args(parser)
    assert parser.parse_args([]).forbidden_paths is None


def test_recursive_update():
    target = {'a': {'b': 1, 'c': 2}, 'd': [1]}
    recursive_update(target, {'a': {'b': None, 'e': 3}, 'd': [2]}, False)
    assert target == {'a': {'c': 2, 'e': 3}, 'd': [2]}

    target = {}
    recursive_update(target, {'a': {'b': None}}, True)
    assert target == {'a': {'b': None}}
