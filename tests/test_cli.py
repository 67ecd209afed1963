"""Tests for the command line entry point."""

import json

import pytest

from recommender.cli import build_parser, main, rank_file


@pytest.fixture
def request_file(tmp_path):
    path = tmp_path / "request.json"
    path.write_text(json.dumps({
        "query": {"phrase": "mug", "maxShippingTime": 3},
        "products": [
            {"name": "Plate", "type": "dish", "price": 4, "stock": 1, "shipping_time": 1},
            {"name": "Café Mug", "type": "mug", "price": 10, "stock": 2, "shipping_time": 1},
            {"name": "Slow Mug", "type": "mug", "price": 8, "stock": 2, "shipping_time": 9},
        ],
    }), encoding="utf-8")
    return path


class TestParser:
    @pytest.mark.parametrize("args", [["rank", "-1", "3", "x.json"], ["serve", "0", "ten"]])
    def test_rejects_invalid_ranking_arguments(self, args):
        with pytest.raises(SystemExit):
            build_parser().parse_args(args)

    def test_serve_arguments(self):
        args = build_parser().parse_args(["serve", "0", "10", "--port", "9000"])
        assert (args.minimum_utility, args.result_limit, args.port) == (0, 10, 9000)


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    # main() reconfigures the root logger; keep it out of the test session
    monkeypatch.setattr("recommender.cli.configure_logging", lambda level: None)


class TestRank:
    def test_rank_file(self, request_file):
        result = rank_file(request_file, minimum_utility=0, limit=5)
        assert [p.name for p in result.products] == ["Café Mug", "Plate"]

    def test_main_prints_json(self, request_file, capsys):
        assert main(["rank", "1", "5", str(request_file)]) == 0
        out = json.loads(capsys.readouterr().out)
        assert [p["name"] for p in out["products"]] == ["Café Mug"]

    def test_main_missing_file(self, tmp_path):
        assert main(["rank", "0", "5", str(tmp_path / "nope.json")]) == 2
