import pytest

from hitcluster.cli import main
from hitcluster.kmeans import kmeans
from hitcluster.points import format_cluster, read_points

CSV = "x,y,class\n0,0,0\n1,0,0\n0,1,0\n10,10,1\n11,10,1\n10,11,1\n"


def _expected(path, k, print_all=False, seed=12345):
    clusters = kmeans(read_points(path), k, seed)
    return "".join(format_cluster(c, print_all) + "\n" for c in clusters)


def test_main_prints_one_line_per_cluster(tmp_path, capsys):
    path = tmp_path / "data.csv"
    path.write_text(CSV, encoding="utf-8")
    assert main([str(path), "-k", "2"]) == 0
    out = capsys.readouterr().out
    assert out == _expected(path, 2)
    assert len(out.splitlines()) == 2


def test_main_print_all_lists_points(tmp_path, capsys):
    path = tmp_path / "data.csv"
    path.write_text(CSV, encoding="utf-8")
    assert main([str(path), "-k", "1", "--all"]) == 0
    out = capsys.readouterr().out
    assert out == _expected(path, 1, print_all=True)
    assert len(out.splitlines()) == 7


def test_main_resolves_dataset_in_data_dir(tmp_path, capsys):
    (tmp_path / "banana.csv").write_text(CSV, encoding="utf-8")
    assert main(["--data-dir", str(tmp_path), "--dataset", "banana.csv", "-k", "3"]) == 0
    assert capsys.readouterr().out == _expected(tmp_path / "banana.csv", 3)


def test_main_missing_file_reports_error(tmp_path, capsys):
    missing = tmp_path / "absent.csv"
    assert main([str(missing)]) == 1
    assert "Error opening file" in capsys.readouterr().err


def test_main_empty_dataset_fails(tmp_path, capsys):
    path = tmp_path / "data.csv"
    path.write_text("x,y\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert str(path) in capsys.readouterr().err


def test_main_rejects_non_positive_k(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text(CSV, encoding="utf-8")
    with pytest.raises(SystemExit):
        main([str(path), "-k", "0"])


def test_main_rejects_unknown_dataset():
    with pytest.raises(SystemExit):
        main(["--dataset", "unknown.csv"])