import json
import sys

import pytest
from loguru import logger

from chemformula.cli import main, render


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)
    logger.disable("chemformula")


def test_render_lines_in_atomic_number_order():
    assert render({"O": 9, "Cu": 1, "H": 10, "S": 1}) == "H: 10\nO: 9\nS: 1\nCu: 1"


def test_render_json():
    assert json.loads(render({"O": 1, "H": 2}, as_json=True)) == {"H": 2, "O": 1}


def test_main_prints_counts(capsys):
    main("Al2(SO4)3")
    assert capsys.readouterr().out == "O: 12\nAl: 2\nS: 3\n"


def test_main_json(capsys):
    main("CuSO4·5H2O", as_json=True)
    assert json.loads(capsys.readouterr().out) == {"H": 10, "O": 9, "S": 1, "Cu": 1}


def test_main_exits_on_malformed_formula(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main("Ca(OH")
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Unmatched parentheses" in captured.err
