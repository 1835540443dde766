"""Tests for the command line entry point."""
import json

from windrose_layout.main import main, render
from windrose_layout.models.geometry import Point


class TestMain:
    """Tests for the wind rose CLI."""

    def test_render_sample(self, tmp_path):
        """Test rendering the sample data of each style."""
        for style in ("frequency", "telescope", "mean-directional"):
            output = tmp_path / f"{style}.svg"
            surface = render(style, output)
            assert output.exists()
            assert surface.primitives

    def test_render_from_file(self, tmp_path):
        """Test rendering a dataset read from JSON."""
        data_file = tmp_path / "data.json"
        data_file.write_text(json.dumps({"N": 12, "E": 4}))
        output = tmp_path / "rose.svg"

        surface = render("mean-directional", output, data_file=data_file, center=Point(50, 50))
        titles = [p.title for p in surface.primitives if getattr(p, "title", None)]
        assert titles == ["N average wind speed is 12m/s", "E average wind speed is 4m/s"]

    def test_main_invalid_data(self, tmp_path):
        """Test that invalid data exits with status 1 and writes nothing."""
        data_file = tmp_path / "bad.json"
        data_file.write_text(json.dumps({"calm": 3}))
        output = tmp_path / "rose.svg"

        assert main(["--style", "frequency", "--data", str(data_file), "--output", str(output)]) == 1
        assert not output.exists()

    def test_main_success(self, tmp_path):
        """Test a successful run."""
        output = tmp_path / "rose.svg"
        assert main(["--style", "telescope", "--output", str(output)]) == 0
        assert output.exists()
