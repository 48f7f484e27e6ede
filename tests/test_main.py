"""
Tests for the mdl-dump command line tool
"""
import json
import logging

import pytest

from mdl_parser.main import main

@pytest.fixture(autouse=True)
def restore_logging():
    """Undo the handlers installed by setup_logging"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)

def write_parts(tmp_path, builder):
    definition_path = tmp_path / 'part1.bin'
    formats_path = tmp_path / 'part0.bin'
    definition_path.write_bytes(builder.build())
    formats_path.write_bytes(builder.build_formats())
    return definition_path, formats_path

def test_writes_summary(tmp_path, builder):
    definition_path, formats_path = write_parts(tmp_path, builder)
    output = tmp_path / 'summary.json'

    result = main([str(definition_path), str(formats_path),
                   '--path', 'chara/equipment/e0001/model/c0101e0001_top.mdl',
                   '--quality', 'high',
                   '--output', str(output)])

    assert result == 0
    summary = json.loads(output.read_text(encoding='utf-8'))
    assert summary['path'] == 'chara/equipment/e0001/model/c0101e0001_top.mdl'
    assert summary['bones'] == ['n_root', 'j_kosi', 'j_sebo_a']
    assert summary['model']['quality'] == 'HIGH'
    assert summary['model']['header']['mesh_count'] == 2
    assert len(summary['model']['meshes']) == 2

def test_prints_to_stdout(tmp_path, builder, capsys):
    definition_path, formats_path = write_parts(tmp_path, builder)
    assert main([str(definition_path), str(formats_path)]) == 0
    summary = json.loads(capsys.readouterr().out)
    assert summary['path'] == definition_path.as_posix()
    assert 'model' not in summary

def test_invalid_definition(tmp_path, builder):
    definition_path, formats_path = write_parts(tmp_path, builder)
    definition_path.write_bytes(b'\0' * 64)
    assert main([str(definition_path), str(formats_path)]) == 1

def test_missing_file(tmp_path):
    assert main([str(tmp_path / 'missing.bin'), str(tmp_path / 'formats.bin')]) == 1

def test_log_dir(tmp_path, builder):
    definition_path, formats_path = write_parts(tmp_path, builder)
    log_dir = tmp_path / 'logs'
    assert main([str(definition_path), str(formats_path),
                 '--output', str(tmp_path / 'out.json'),
                 '--log-dir', str(log_dir), '-v']) == 0
    assert list(log_dir.glob('mdl_parser_*.log'))
