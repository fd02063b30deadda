"""
CLI Tests

Runs cli.main() in-process with patched argv.
"""

import json
import sys

import pytest

import cli


def run_cli(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["cli.py", *args])
    return cli.main()


class TestCli:

    def test_no_command(self, monkeypatch, capsys):
        assert run_cli(monkeypatch) == 1

    def test_relics_json(self, monkeypatch, capsys):
        assert run_cli(monkeypatch, "relics", "--category", "cursed", "--json") == 0
        data = json.loads(capsys.readouterr().out)
        assert [r["id"] for r in data] == ["berserkers-rage", "greedy-goblin", "desperate-measures"]
        assert data[0]["curse"]["stat"] == "max_hp_multiplier"

    def test_relics_text(self, monkeypatch, capsys):
        assert run_cli(monkeypatch, "relics", "--rarity", "common") == 0
        assert "3 relic(s)" in capsys.readouterr().out

    def test_offer_deterministic(self, monkeypatch, capsys):
        run_cli(monkeypatch, "offer", "--seed", "ABC123", "--class", "ice", "--json")
        first = json.loads(capsys.readouterr().out)
        run_cli(monkeypatch, "offer", "--seed", "ABC123", "--class", "ice", "--json")
        second = json.loads(capsys.readouterr().out)
        assert first == second
        assert len(first["relics"]) == 3
        assert first["rng_counter"] == 3

    def test_offer_excludes_owned(self, monkeypatch, capsys):
        run_cli(monkeypatch, "offer", "--seed", "7", "--count", "50", "--owned", "iron-hide", "--json")
        data = json.loads(capsys.readouterr().out)
        ids = [r["id"] for r in data["relics"]]
        assert len(ids) == 16
        assert "iron-hide" not in ids

    def test_offer_seed_from_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("FORTRESS_SEED", "ENVSEED")
        run_cli(monkeypatch, "offer", "--json")
        assert json.loads(capsys.readouterr().out)["seed"] == "ENVSEED"

    def test_odds_json(self, monkeypatch, capsys):
        assert run_cli(monkeypatch, "odds", "--trials", "200", "--seed", "1", "--json") == 0
        data = json.loads(capsys.readouterr().out)
        assert sum(data["first_draw"].values()) == pytest.approx(1.0)
        assert set(data["rarity_share"]) == {"common", "rare", "epic", "legendary"}

    def test_build(self, monkeypatch, capsys):
        assert run_cli(monkeypatch, "build", "gold-rush", "iron-hide") == 0
        assert capsys.readouterr().out.strip() == "tank"

    def test_validate(self, monkeypatch, capsys):
        assert run_cli(monkeypatch, "validate") == 0
        assert "Catalog OK" in capsys.readouterr().out

    @pytest.mark.parametrize("trials", ["0", "-5", "many"])
    def test_odds_rejects_non_positive_trials(self, monkeypatch, capsys, trials):
        """Bad --trials values are argparse usage errors, not tracebacks."""
        with pytest.raises(SystemExit) as excinfo:
            run_cli(monkeypatch, "odds", "--trials", trials)
        assert excinfo.value.code == 2
        assert "--trials" in capsys.readouterr().err
