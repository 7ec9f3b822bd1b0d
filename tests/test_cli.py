import json

import pytest

import modelprint.__main__ as cli

MODEL = {
    'sense': 'min',
    'variables': ['x', ''],
    'objective': {'terms': [[3, 'x']], 'constant': 1},
    'constraints': [
        {'name': 'cap', 'function': 'x', 'set': {'type': 'less_than', 'upper': 10}},
        {'function': 2, 'set': {'type': 'greater_than', 'lower': 0}},
    ],
}


def _write_model(tmp_path, data=MODEL):
    path = tmp_path / 'model.json'
    path.write_text(json.dumps(data), encoding='utf-8')
    return path


def test_main_prints_terminal_document(tmp_path, capsys):
    cli.main([str(_write_model(tmp_path))])

    assert capsys.readouterr().out == (
        'Min 3 x + 1\nSubject to\n cap : x ≤ 10\n x[2] ≥ 0\n'
    )


def test_main_ascii_and_noname(tmp_path, capsys):
    cli.main([str(_write_model(tmp_path)), '--ascii', '--noname'])

    out = capsys.readouterr().out
    assert ' cap : x <= 10\n' in out
    assert ' noname >= 0\n' in out


def test_main_latex(tmp_path, capsys):
    cli.main([str(_write_model(tmp_path)), '--latex'])

    out = capsys.readouterr().out
    assert out.startswith('$$ \\begin{alignat*}{1}\\min\\quad & 3 x + 1')
    assert 'cap' not in out
    assert out.endswith(' $$\n')


def test_main_writes_output_file(tmp_path, capsys):
    output = tmp_path / 'out' / 'model.txt'

    cli.main([str(_write_model(tmp_path)), '--output', str(output)])

    assert output.read_text(encoding='utf-8').startswith('Min 3 x + 1\n')
    assert capsys.readouterr().out == ''


def test_main_passes_loaded_model_to_renderer(tmp_path, monkeypatch, capsys):
    rendered = []

    def _model_string(mode, model, variable_name):
        rendered.append((mode, model))
        return 'document\n'

    monkeypatch.setattr(cli, 'load_model_file', lambda path: 'model')
    monkeypatch.setattr(cli, 'model_string', _model_string)

    cli.main([str(tmp_path / 'unused.json')])

    assert rendered == [(cli.TERMINAL, 'model')]
    assert capsys.readouterr().out == 'document\n'


@pytest.mark.parametrize('content', ['{"sense": ', '{"sense": "sideways"}'])
def test_main_exits_on_bad_model(tmp_path, content):
    path = tmp_path / 'bad.json'
    path.write_text(content, encoding='utf-8')

    with pytest.raises(SystemExit) as exc:
        cli.main([str(path)])
    assert exc.value.code == 1


def test_main_exits_on_invalid_utf8(tmp_path):
    path = tmp_path / 'binary.json'
    path.write_bytes(b'\xff')

    with pytest.raises(SystemExit) as exc:
        cli.main([str(path)])
    assert exc.value.code == 1


def test_main_exits_on_missing_file(tmp_path):
    with pytest.raises(SystemExit) as exc:
        cli.main([str(tmp_path / 'missing.json')])
    assert exc.value.code == 1
