import json

import pytest

from loxcore.__main__ import main


def test_runs_script(tmp_path, capsys):
    script = tmp_path / 'hello.lox'
    script.write_text('print "hi";\nprint 1 + 1;\n', encoding='utf-8')
    main([str(script)])
    assert capsys.readouterr().out == 'hi\n2\n'


def test_runtime_error_exit_code(tmp_path, capsys):
    script = tmp_path / 'bad.lox'
    script.write_text('print "a";\nprint -"b";\nprint "c";\n', encoding='utf-8')
    with pytest.raises(SystemExit) as excinfo:
        main([str(script)])
    assert excinfo.value.code == 70
    captured = capsys.readouterr()
    assert captured.out == 'a\n'
    assert captured.err == 'Operand must be a number.\n[line 2]\n'


def test_syntax_error_exit_code(tmp_path, capsys):
    script = tmp_path / 'broken.lox'
    script.write_text('print (1;\n', encoding='utf-8')
    with pytest.raises(SystemExit) as excinfo:
        main([str(script)])
    assert excinfo.value.code == 65
    assert capsys.readouterr().err.startswith('[line 1] Error: ')


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / 'nope.lox')])
    assert excinfo.value.code == 1
    assert 'not found' in capsys.readouterr().err


def test_emit_then_execute_ast(tmp_path, capsys):
    script = tmp_path / 'prog.lox'
    script.write_text('print 3 * 4;\n', encoding='utf-8')
    main(['--emit-ast', str(script)])
    out_path = tmp_path / 'prog.lox.ast.json'
    assert capsys.readouterr().out.strip() == str(out_path)
    assert json.loads(out_path.read_text(encoding='utf-8'))['type'] == 'Program'
    main(['--ast', str(out_path)])
    assert capsys.readouterr().out == '12\n'


def test_invalid_ast_file(tmp_path, capsys):
    bad = tmp_path / 'bad.json'
    bad.write_text('{"type": "Nope"}', encoding='utf-8')
    with pytest.raises(SystemExit) as excinfo:
        main(['--ast', str(bad)])
    assert excinfo.value.code == 1
    assert 'invalid AST file' in capsys.readouterr().err


def test_prompt_keeps_going_after_errors(monkeypatch, capsys):
    lines = iter(['print 1 + "x";', 'print (;', 'print "still here";'])

    def fake_input(prompt=''):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr('builtins.input', fake_input)
    main([])
    captured = capsys.readouterr()
    assert captured.out == 'still here\n\n'
    assert 'Operands must be two numbers or two strings.' in captured.err
    assert '[line 1] Error: ' in captured.err


@pytest.mark.parametrize('obj', [
    {"type": "Program", "body": [{
        "type": "Print",
        "expression": {
            "type": "Unary",
            "operator": {"type": "PLUS", "lexeme": "+", "line": 1},
            "right": {"type": "Literal", "value": {"kind": "number", "value": 1}},
        },
    }]},
    {"type": "Program", "body": [{"type": "Literal", "value": {"kind": "number", "value": 1}}]},
    {"type": "Print", "expression": {"type": "Literal", "value": {"kind": "nil"}}},
    {"type": "Program", "body": [{"type": "Print", "expression": {"type": "Literal", "value": 5}}]},
])
def test_badly_shaped_ast_file(tmp_path, capsys, obj):
    bad = tmp_path / 'shape.json'
    bad.write_text(json.dumps(obj), encoding='utf-8')
    with pytest.raises(SystemExit) as excinfo:
        main(['--ast', str(bad)])
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'invalid AST file' in captured.err
