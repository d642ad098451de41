"""Tests for the command line entry point."""

import pytest

from geopartition import main as main_module
from geopartition.main import format_box, main


class TestMain:
    """Tests for main()."""

    def test_lists_all_partitions(self, capsys):
        assert main(["0", "0", "4", "4", "--n_partitions", "4"]) == 0
        out = capsys.readouterr().out
        assert "Created 4 partitions (2x2 grid):" in out
        assert "0: (0.0, 0.0) (2.0, 2.0)" in out
        assert "3: (2.0, 2.0) (4.0, 4.0)" in out

    def test_default_partition_count(self, capsys):
        assert main(["0", "0", "4", "4"]) == 0
        out = capsys.readouterr().out
        assert "Created 16 partitions (4x4 grid):" in out
        assert "15: (3.0, 3.0) (4.0, 4.0)" in out

    def test_single_index(self, capsys):
        assert main(["0", "0", "10", "5", "--n_partitions", "2", "--index", "1"]) == 0
        assert capsys.readouterr().out.strip() == "1: (5.0, 0.0) (10.0, 5.0)"

    def test_negative_coordinates(self, capsys):
        assert main(["-4", "-2", "4", "2", "--n_partitions", "2"]) == 0
        out = capsys.readouterr().out
        assert "(2x1 grid)" in out
        assert "0: (-4.0, -2.0) (0.0, 2.0)" in out

    def test_point_lookup(self, capsys):
        assert main(["0", "0", "4", "4", "--n_partitions", "4", "--point", "3", "1"]) == 0
        assert "Point (3.0, 1.0) is in partition 1" in capsys.readouterr().out

    def test_point_outside(self, capsys):
        assert main(["0", "0", "4", "4", "--n_partitions", "4", "--point", "9", "9"]) == 0
        assert "Point (9.0, 9.0) is outside the box" in capsys.readouterr().out

    @pytest.mark.parametrize("extra", [
        ["--n_partitions", "5"],
        ["--n_partitions", "0"],
        ["--n_partitions", "3", "--index", "5"],
    ])
    def test_errors_exit_with_status_two(self, capsys, extra):
        assert main(["0", "0", "4", "4"] + extra) == 2
        captured = capsys.readouterr()
        assert captured.err.startswith("error:")
        assert captured.out == ""

    def test_plot(self, monkeypatch, capsys):
        shown = []

        class FakeFigure:
            def show(self):
                shown.append(True)

        def fake_plot(boxes):
            assert boxes.shape == (8, 2, 2)
            return FakeFigure()

        monkeypatch.setattr(main_module, "get_partition_plot", fake_plot)
        assert main(["0", "0", "8", "4", "--n_partitions", "8", "--plot"]) == 0
        assert shown == [True]

    def test_index_with_plot(self, monkeypatch, capsys):
        """--plot draws all partitions even when one index is printed."""
        plotted = []

        class FakeFigure:
            def show(self):
                plotted.append("shown")

        def fake_plot(boxes):
            plotted.append(boxes.shape)
            return FakeFigure()

        monkeypatch.setattr(main_module, "get_partition_plot", fake_plot)
        assert main(["0", "0", "4", "4", "--n_partitions", "4", "--index", "1", "--plot"]) == 0
        assert plotted == [(4, 2, 2), "shown"]
        assert capsys.readouterr().out.startswith("1: (2.0, 0.0) (4.0, 2.0)")

    def test_index_with_point(self, capsys):
        assert main(["0", "0", "4", "4", "--n_partitions", "4", "--index", "1", "--point", "3", "3"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == ["1: (2.0, 0.0) (4.0, 2.0)", "Point (3.0, 3.0) is in partition 3"]

    def test_format_box(self):
        assert format_box(2, ((1, 2), (3, 4))) == "2: (1, 2) (3, 4)"
