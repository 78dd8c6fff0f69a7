"""Tests for the command line entry point."""

import json

import pytest

from filter_grid.main import main, setup_argument_parser


@pytest.fixture
def config_file(tmp_path):
    return tmp_path / "config.json"


class TestArgumentParser:
    """Test argument parsing."""

    def test_defaults(self):
        args = setup_argument_parser().parse_args([])
        assert args.no_gui is False
        assert args.seed is None
        assert args.code == ""
        assert args.description == ""

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            setup_argument_parser().parse_args(["--version"])
        assert exc_info.value.code == 0
        assert "filter-grid" in capsys.readouterr().out


class TestCliMode:
    """Test --no-gui searches."""

    def test_search_default_records(self, capsys, config_file):
        code = main(["--no-gui", "--description", "fox", "--config", str(config_file)])

        assert code == 0
        lines = capsys.readouterr().out.splitlines()
        assert [line[14:] for line in lines] == [
            "Quick Brown Fox",
            "Brown Fox Jumps",
            "Fox Jumps Over",
        ]

    def test_search_seed_file(self, capsys, tmp_path, config_file):
        seed = tmp_path / "seed.yaml"
        seed.write_text(
            "records:\n"
            "  - code: A-1\n    description: Alpha\n"
            "  - code: B-2\n    description: Beta\n"
        )

        code = main([
            "--no-gui", "--seed", str(seed), "--code", "b",
            "--config", str(config_file)
        ])

        assert code == 0
        assert capsys.readouterr().out.split() == ["B-2", "Beta"]

    def test_page_size_from_config(self, capsys, config_file):
        config_file.write_text(json.dumps({"page_size": 2}))
        assert main(["--no-gui", "--config", str(config_file)]) == 0
        assert len(capsys.readouterr().out.splitlines()) == 2

    def test_missing_seed_file(self, tmp_path, config_file):
        code = main(["--no-gui", "--seed", str(tmp_path / "nope.yaml"), "--config", str(config_file)])
        assert code == 1

    def test_invalid_config(self, config_file):
        config_file.write_text(json.dumps({"debounce_ms": -5}))
        assert main(["--no-gui", "--config", str(config_file)]) == 1

    def test_wrong_type_config(self, config_file):
        config_file.write_text(json.dumps({"page_size": "ten"}))
        assert main(["--no-gui", "--config", str(config_file)]) == 1
