import pytest

from iterweave.iris import Iris, IrisParseError, load_irises, main, parse_iris, render

SAMPLE = [
    "5.1,3.5,1.4,0.2,Iris-setosa",
    "7.0,3.2,4.7,1.4,Iris-versicolor",
    "6.3,3.3,6.0,2.5,Iris-virginica",
    "4.9,3.0,1.4,0.2,Iris-setosa",
]


def test_parse_iris_reads_name_and_values():
    iris = parse_iris("5.1,3.5,1.4,0.2,Iris-setosa")
    assert iris.name == "Iris-setosa"
    assert iris.data == pytest.approx((5.1, 3.5, 1.4, 0.2), rel=1e-6)


def test_parse_iris_trims_fields_and_ignores_extra():
    iris = parse_iris(" 1 , 2 ,3, 4 , setosa , extra")
    assert iris.name == "setosa"
    assert iris.data == (1.0, 2.0, 3.0, 4.0)


def test_parse_iris_missing_name():
    with pytest.raises(IrisParseError, match="Missing name"):
        parse_iris("1,2,3,4")


def test_parse_iris_bad_number():
    with pytest.raises(IrisParseError, match="Numeric"):
        parse_iris("1,x,3,4,setosa")


def test_parse_iris_empty_line_is_numeric_error():
    with pytest.raises(IrisParseError, match="Numeric"):
        parse_iris("")


def test_load_irises_keeps_order():
    irises = load_irises(line + "\n" for line in SAMPLE)
    assert [iris.name for iris in irises] == [line.split(",")[4] for line in SAMPLE]


def test_load_irises_stops_on_error():
    with pytest.raises(IrisParseError):
        load_irises(["1,2,3,4,a", "bad", "1,2,3,4,b"])


def test_render_small_report():
    irises = [Iris("B", (1.0, 1.0, 1.0, 1.0)), Iris("A", (0.0, 0.0, 0.0, 0.0))]
    text = render(irises, 3)
    plot = ["    o", "     ", "+    "]
    expected = ["A (symbol=+)", "0.0, 0.0, 0.0, 0.0", "B (symbol=o)", "1.0, 1.0, 1.0, 1.0"]
    for a, b in [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]:
        expected.append(f"Column {a} vs {b}:")
        expected.extend(plot)
    assert text == "".join(line + "\n" for line in expected)


def test_render_plot_shape_and_symbols():
    irises = load_irises(SAMPLE)
    size = 10
    lines = render(irises, size).splitlines()
    headers = [i for i, line in enumerate(lines) if line.startswith("Column ")]
    assert len(headers) == 6
    for index in headers:
        rows = lines[index + 1 : index + 1 + size]
        assert len(rows) == size
        assert all(len(row) == 2 * size - 1 for row in rows)
        cells = "".join(rows).replace(" ", "")
        assert set(cells) <= {"+", "o", "x"}
        assert {"o", "x"} <= set(cells)


def test_render_assigns_symbols_in_sorted_species_order():
    lines = render(load_irises(SAMPLE), 5).splitlines()
    assert lines[0] == "Iris-setosa (symbol=+)"
    assert "Iris-versicolor (symbol=o)" in lines
    assert "Iris-virginica (symbol=x)" in lines


def test_render_empty_raises():
    with pytest.raises(ValueError):
        render([], 5)


def test_render_rejects_zero_size():
    with pytest.raises(ValueError):
        render(load_irises(SAMPLE), 0)


def test_main_prints_report(tmp_path, capsys):
    path = tmp_path / "iris.data"
    path.write_text("\n".join(SAMPLE) + "\n", encoding="utf-8")
    assert main([str(path), "--size", "6"]) == 0
    out = capsys.readouterr().out
    assert out == render(load_irises(SAMPLE), 6)


def test_main_reports_parse_error(tmp_path, capsys):
    path = tmp_path / "iris.data"
    path.write_text("1,2,3,4\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out.startswith("Error parsing:")