# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os

import pytest

from jsoncpatch import __version__
from jsoncpatch import jsoncshowapp, jsoncpatchapp
from jsoncpatch.__main__ import main_dispatch
from jsoncpatch.config import CONFIG_BASENAME

from .utils import read_file, write_file


QUIET = ['--log-level=CRITICAL', '--no-color']


def test_jsoncshow_app(filespath, capsys):
    fn = os.path.join(filespath, "settings.jsonc")
    args = jsoncshowapp._build_arg_parser().parse_args([fn, '$["theme"]'] + QUIET)
    assert 0 == jsoncshowapp.main_show(args)
    out, err = capsys.readouterr()
    assert out == (
        '## content:\n'
        '  {\n'
        '    "name": "light",\n'
        '    "color": "#ffffff"\n'
        '  }\n'
        '## json path:\n'
        '  $["theme"]\n'
    )


def test_jsoncshow_pointer_path(filespath, capsys):
    fn = os.path.join(filespath, "settings.jsonc")
    assert 0 == jsoncshowapp.main([fn, '/theme/fonts/0'] + QUIET)
    out, err = capsys.readouterr()
    assert out == '## content:\n  Fira Code\n## json path:\n  $["theme"]["fonts"][0]\n'


def test_jsoncshow_root(filespath, capsys):
    fn = os.path.join(filespath, "settings.jsonc")
    assert 0 == jsoncshowapp.main([fn] + QUIET)
    out, err = capsys.readouterr()
    assert '  {\n    "count": 3\n  }\n' in out
    assert out.endswith('## json path:\n  $\n')


def test_jsoncshow_color(filespath, capsys):
    fn = os.path.join(filespath, "settings.jsonc")
    assert 0 == jsoncshowapp.main([fn, '--log-level=CRITICAL'])
    out, err = capsys.readouterr()
    assert '\x1b[' in out


def test_jsoncshow_failures(filespath, tmpdir):
    fn = os.path.join(filespath, "settings.jsonc")
    assert 1 == jsoncshowapp.main([os.path.join(filespath, 'missing.json')] + QUIET)
    assert 1 == jsoncshowapp.main([fn, '/theme/fonts'] + QUIET)

    broken = str(tmpdir.join('broken.json'))
    write_file(broken, '{"a": ')
    assert 1 == jsoncshowapp.main([broken] + QUIET)


def test_jsoncpatch_output_file(tempfiles, settings_text):
    fn = os.path.join(tempfiles, "settings.jsonc")
    out = os.path.join(tempfiles, "out.jsonc")
    args = jsoncpatchapp._build_arg_parser().parse_args([
        fn, '$["plugins"][1]',
        '--set', 'name=eslint',
        '--set', 'color=#00ff00',
        '-o', out,
    ] + QUIET)
    assert 0 == jsoncpatchapp.main_patch(args)
    assert read_file(out) == settings_text.replace(
        '"name": "lint",\n      "enabled": false,\n',
        '"name": "eslint",\n      "enabled": false,\n      "color": "#00ff00",\n')
    # Input is left alone
    assert read_file(fn) == settings_text


def test_jsoncpatch_in_place(tempfiles, settings_text):
    fn = os.path.join(tempfiles, "settings.jsonc")
    assert 0 == jsoncpatchapp.main([fn, '/theme', '-s', 'name=dark', '-i'] + QUIET)
    assert read_file(fn) == settings_text.replace('"light"', '"dark"')


def test_jsoncpatch_stdout(filespath, settings_text, capsys):
    fn = os.path.join(filespath, "settings.jsonc")
    assert 0 == jsoncpatchapp.main([fn, '/plugins/0', '-s', 'color=#123456'] + QUIET)
    out, err = capsys.readouterr()
    assert out == settings_text.replace(
        '{"name": "git", "enabled": true}',
        '{"name": "git", "enabled": true, "color": "#123456"}')
    assert '## edits at $["plugins"][0]:\n+  color\n' in err


def test_jsoncpatch_formatting_args(tmpdir, capsys):
    fn = str(tmpdir.join('doc.json'))
    write_file(fn, '{"a": {}}')
    assert 0 == jsoncpatchapp.main([fn, '/a', '-s', 'name=x', '--use-tabs'] + QUIET)
    out, err = capsys.readouterr()
    assert out == '{"a": {\n\t"name": "x"\n}}'


def test_jsoncpatch_failed_field(filespath, settings_text, capsys):
    fn = os.path.join(filespath, "settings.jsonc")
    assert 1 == jsoncpatchapp.main([fn, '/theme/fonts/1', '-s', 'name=x'] + QUIET)
    out, err = capsys.readouterr()
    assert out == settings_text
    assert '-  name: No object at $["theme"]["fonts"][1]' in err


def test_jsoncpatch_rejected_arguments(filespath):
    fn = os.path.join(filespath, "settings.jsonc")
    # Not an editable field
    assert 1 == jsoncpatchapp.main([fn, '/theme', '-s', 'size=10'] + QUIET)
    # No such node
    assert 1 == jsoncpatchapp.main([fn, '/nothing', '-s', 'name=x'] + QUIET)
    assert 1 == jsoncpatchapp.main([os.path.join(filespath, 'missing.json'), '/'] + QUIET)
    assert 1 == jsoncpatchapp.main(['-', '/', '-i'] + QUIET)
    with pytest.raises(SystemExit):
        jsoncpatchapp.main([fn, '/theme', '-s', 'name'] + QUIET)
    with pytest.raises(SystemExit):
        jsoncpatchapp.main([fn, '/theme', '-i', '-o', 'out.json'] + QUIET)


def test_jsoncpatch_config_file(tmpdir, monkeypatch, capsys):
    tmpdir.join(CONFIG_BASENAME + '.json').write_text(json.dumps({
        'Edit': {'fields': ['label']},
        'Formatting': {'tab_size': 4},
    }), encoding='utf-8')
    monkeypatch.chdir(tmpdir)
    write_file('doc.json', '{}')

    assert 1 == jsoncpatchapp.main(['doc.json', '/', '-s', 'name=x'] + QUIET)
    capsys.readouterr()
    assert 0 == jsoncpatchapp.main(['doc.json', '/', '-s', 'label=x'] + QUIET)
    out, err = capsys.readouterr()
    assert out == '{\n    "label": "x"\n}'


def test_main_dispatch(filespath, capsys):
    fn = os.path.join(filespath, "settings.jsonc")
    assert 0 == main_dispatch(['show', fn, '/theme'] + QUIET)
    out, err = capsys.readouterr()
    assert out.endswith('  $["theme"]\n')

    with pytest.raises(SystemExit) as e:
        main_dispatch(['--version'])
    assert e.value.code == __version__

    with pytest.raises(SystemExit):
        main_dispatch(['diff'])

    with pytest.raises(SystemExit):
        main_dispatch([])


def test_jsoncpatch_repeated_field(filespath, settings_text, capsys):
    fn = os.path.join(filespath, "settings.jsonc")
    assert 0 == jsoncpatchapp.main([fn, '/theme', '-s', 'name=a', '-s', 'name=dark'] + QUIET)
    out, err = capsys.readouterr()
    assert out == settings_text.replace('"light"', '"dark"')
    assert err.count('+  name\n') == 1
