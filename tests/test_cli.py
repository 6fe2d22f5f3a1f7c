import json

import pytest

from turtleplotter.cli import build_parser, load_program, main, settings_from_args
from turtleplotter.combinators import reference_program, square
from turtleplotter.operations import program_to_dict


def test_default_run_prints_reference_log(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 22
    assert lines[0] == "Опускаем каретку"
    assert lines[1] == "...Чертим линию из (0, 0) в (100, 0) используя чёрный цвет."
    assert lines[-2] == ""
    assert lines[-1] == "Итоговое состояние: позиция (10, 10), угол 0.0, цвет красный, каретка поднята"


def test_json_output(capsys):
    assert main(["--json", "--summary"]) == 0
    records = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert records[0] == {"event": "pen", "to": "down"}
    assert records[-2] == {
        "state": {"position": {"x": 10, "y": 10}, "heading": 0.0, "color": "red", "pen": "up"}
    }
    assert records[-1]["summary"]["strokes"] == 2


def test_program_file_and_initial_state(tmp_path, capsys):
    program = tmp_path / "program.json"
    program.write_text(json.dumps(program_to_dict(square(10.0))), encoding="utf-8")
    code = main(["--program", str(program), "--x", "5", "--y", "5", "--color", "green", "--locale", "en"])
    assert code == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "...Drawing a line from (5, 5) to (15, 5) using green color."
    assert lines[-1] == "Final state: position (5, 5), heading 0.0, color green, pen up"


def test_trace_prints_states(capsys):
    assert main(["--trace", "--locale", "en"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Lowering the pen"
    assert json.loads(out[1].strip())["pen"] == "down"


def test_svg_option(tmp_path, capsys):
    svg = tmp_path / "line.svg"
    svg.write_text(
        '<svg xmlns="http://www.w3.org/2000/svg"><path d="M 0 0 L 30 0" stroke="red"/></svg>',
        encoding="utf-8",
    )
    assert main(["--svg", str(svg), "--json"]) == 0
    records = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert records[0] == {"event": "color", "to": "red"}
    assert {"event": "line", "from": {"x": 0, "y": 0}, "to": {"x": 30, "y": 0}, "color": "red"} in records


@pytest.mark.parametrize(
    "content",
    ["not json", json.dumps({"operations": [{"op": "set_color", "color": "blue"}]}), json.dumps([])],
)
def test_bad_program_reports_error(tmp_path, capsys, content: str) -> None:
    program = tmp_path / "bad.json"
    program.write_text(content, encoding="utf-8")
    assert main(["--program", str(program)]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error: ")


def test_missing_file_reports_error(tmp_path, capsys):
    assert main(["--program", str(tmp_path / "missing.json")]) == 2
    assert capsys.readouterr().err.startswith("error: ")


def test_invalid_arguments_exit():
    with pytest.raises(SystemExit):
        main(["--color", "blue"])
    with pytest.raises(SystemExit):
        main(["--program", "a.json", "--svg", "b.svg"])


def test_settings_default_to_reference_program():
    settings = settings_from_args(build_parser().parse_args([]))
    assert settings.defaults.to_state().color.value == "black"
    assert load_program(settings) == reference_program()


def test_truncated_svg_reports_error(tmp_path, capsys):
    svg = tmp_path / "bad.svg"
    svg.write_text("<svg><path d='M0 0 L10 10'", encoding="utf-8")
    assert main(["--svg", str(svg)]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error: Cannot read SVG ")
