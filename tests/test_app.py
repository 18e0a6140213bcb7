"""
Smoke tests for the command line interface.
"""

import json

import pytest

from ideamatch import __version__
from ideamatch.app import main
from ideamatch.catalog import IDEA_IDS


@pytest.fixture(autouse=True)
def cli_env(tmp_path, monkeypatch):
    """Run from an empty directory with a throwaway database."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("IDEAMATCH_DB", str(tmp_path / "cli.db"))
    monkeypatch.setenv("IDEAMATCH_LOG_LEVEL", "WARNING")
    monkeypatch.delenv("IDEAMATCH_LOG_DIR", raising=False)


@pytest.fixture
def answers_file(tmp_path, questionnaire_answers):
    path = tmp_path / "answers.json"
    path.write_text(json.dumps(questionnaire_answers))
    return str(path)


@pytest.fixture
def onboarded(answers_file, capsys):
    main(["onboard", "--user", "u1", "--answers", answers_file])
    capsys.readouterr()
    return "u1"


class TestBasics:
    """Test top-level flags."""

    def test_version(self, capsys):
        main(["--version"])
        assert capsys.readouterr().out.strip() == __version__

    def test_no_command_prints_help(self, capsys):
        main([])
        assert "usage: ideamatch" in capsys.readouterr().out

    def test_catalog(self, capsys):
        main(["catalog"])
        out = capsys.readouterr().out
        assert "5 ideas in catalog" in out
        for idea_id in IDEA_IDS:
            assert f"ID: {idea_id}" in out


class TestProfileCommands:
    """Test commands that read a profile JSON file."""

    def test_validate_valid(self, profile_file, capsys):
        main(["validate", "--input", str(profile_file)])
        assert capsys.readouterr().out.strip() == "Valid"

    def test_validate_invalid(self, tmp_path, valid_profile_dict, capsys):
        valid_profile_dict["risk_tolerance"] = 42
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(valid_profile_dict))

        with pytest.raises(SystemExit) as exc:
            main(["validate", "--input", str(path)])

        assert exc.value.code == 2
        assert "Field 'risk_tolerance' must be <= 10" in capsys.readouterr().out

    def test_validate_strict(self, tmp_path, valid_profile_dict, capsys):
        valid_profile_dict["favourite_colour"] = "blue"
        path = tmp_path / "extra.json"
        path.write_text(json.dumps(valid_profile_dict))

        main(["validate", "--input", str(path)])
        assert capsys.readouterr().out.strip() == "Valid"

        with pytest.raises(SystemExit):
            main(["validate", "--input", str(path), "--strict"])
        assert "Unknown field: favourite_colour" in capsys.readouterr().out

    def test_validate_not_an_object(self, tmp_path, capsys):
        path = tmp_path / "list.json"
        path.write_text(json.dumps([1, 2]))

        with pytest.raises(SystemExit) as exc:
            main(["validate", "--input", str(path)])

        assert exc.value.code == 2
        assert "Profile must be a JSON object" in capsys.readouterr().out

    def test_malformed_json(self, tmp_path, capsys):
        path = tmp_path / "broken.json"
        path.write_text("{\"hours_per_week\": ")

        with pytest.raises(SystemExit) as exc:
            main(["summarize", "--input", str(path)])

        assert exc.value.code == 2
        assert "Invalid JSON in" in capsys.readouterr().out

    def test_missing_input_file(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["summarize", "--input", str(tmp_path / "missing.json")])
        assert "Input file not found" in str(exc.value.code)

    def test_summarize(self, profile_file, capsys):
        main(["summarize", "--input", str(profile_file)])
        summary = json.loads(capsys.readouterr().out)
        assert summary["founder_type"] == "Bootstrap No-Code Builder"
        assert 0 <= summary["weekly_capacity_score"] <= 10

    def test_match(self, profile_file, capsys):
        main(["match", "--input", str(profile_file)])
        out = capsys.readouterr().out
        assert "% match" in out
        assert "Why you:" in out

    def test_match_all_excluded(self, profile_file, capsys):
        main(["match", "--input", str(profile_file), "--exclude", ",".join(IDEA_IDS)])
        assert "No more ideas" in capsys.readouterr().out

    def test_breakdown(self, profile_file, capsys):
        main(["breakdown", "--input", str(profile_file), "--idea", "productized-service"])
        out = capsys.readouterr().out
        assert "Productized Service (productized-service)" in out
        assert "Total score:" in out
        assert "Time & Capacity / Time Availability" in out

    def test_breakdown_unknown_idea(self, profile_file):
        with pytest.raises(SystemExit) as exc:
            main(["breakdown", "--input", str(profile_file), "--idea", "nope"])
        assert exc.value.code == "Unknown idea id: nope"

    def test_compare(self, profile_file, capsys):
        main(["compare", "--input", str(profile_file), "--ideas", "newsletter-niche,digital-templates"])
        out = capsys.readouterr().out
        assert out.count("Total score:") == 2

    def test_compare_too_many(self, profile_file):
        with pytest.raises(SystemExit) as exc:
            main(["compare", "--input", str(profile_file), "--ideas", ",".join(IDEA_IDS)])
        assert "at most 4" in exc.value.code


class TestUserCommands:
    """Test commands backed by the database."""

    def test_onboard(self, answers_file, capsys):
        main(["onboard", "--user", "u1", "--answers", answers_file])
        out = capsys.readouterr().out
        assert "Profile: u1 (new)" in out
        assert "Founder type: Bootstrap No-Code Builder" in out
        assert "% match" in out

    def test_onboard_again_updates(self, onboarded, answers_file, capsys):
        main(["onboard", "--user", onboarded, "--answers", answers_file])
        assert "Profile: u1 (updated)" in capsys.readouterr().out

    def test_next_without_profile(self):
        with pytest.raises(SystemExit) as exc:
            main(["next", "--user", "ghost"])
        assert "No profile stored for user: ghost" in exc.value.code

    def test_dismiss_everything(self, onboarded, capsys):
        for idea_id in IDEA_IDS:
            main(["dismiss", "--user", onboarded, "--idea", idea_id])
        main(["dismiss", "--user", onboarded, "--idea", IDEA_IDS[0]])
        out = capsys.readouterr().out
        assert f"[no-change] dismissed {IDEA_IDS[0]}" in out

        main(["next", "--user", onboarded])
        assert "No more ideas" in capsys.readouterr().out

    def test_save_and_list(self, onboarded, capsys):
        main(["save", "--user", onboarded, "--idea", "newsletter-niche"])
        main(["save", "--user", onboarded, "--idea", "newsletter-niche"])
        main(["note", "--user", onboarded, "--idea", "newsletter-niche", "--text", "Try HR ops niche"])
        main(["collect", "--user", onboarded, "--idea", "newsletter-niche", "--name", "Shortlist"])
        out = capsys.readouterr().out
        assert "[new] newsletter-niche" in out
        assert "[no-change] newsletter-niche" in out
        assert "[new] newsletter-niche -> Shortlist" in out

        main(["saved", "--user", onboarded])
        out = capsys.readouterr().out
        assert "Found 1 saved ideas" in out
        assert "Note: Try HR ops niche" in out
        assert "Collections: Shortlist" in out

    def test_saved_empty(self, capsys):
        main(["saved", "--user", "u1"])
        assert "No saved ideas." in capsys.readouterr().out

    def test_checklist(self, onboarded, capsys):
        main(["checklist", "--user", onboarded, "--idea", "digital-templates"])
        out = capsys.readouterr().out
        assert "0/16 validated" in out

    def test_checklist_other_user_cannot_complete_items(self, onboarded, capsys):
        main(["checklist", "--user", onboarded, "--idea", "digital-templates"])
        out = capsys.readouterr().out
        item_id = out.splitlines()[1].rsplit("(", 1)[1].rstrip(")")

        main(["checklist", "--user", "attacker", "--idea", "digital-templates", "--done", item_id])
        assert f"[warn] unknown checklist item: {item_id}" in capsys.readouterr().out

        main(["checklist", "--user", onboarded, "--idea", "digital-templates"])
        assert "0/16 validated" in capsys.readouterr().out

    def test_checklist_done(self, onboarded, capsys):
        main(["checklist", "--user", onboarded, "--idea", "digital-templates"])
        item_id = capsys.readouterr().out.splitlines()[1].rsplit("(", 1)[1].rstrip(")")

        main(["checklist", "--user", onboarded, "--idea", "digital-templates", "--done", item_id])
        assert "1/16 validated" in capsys.readouterr().out

    def test_decision_mode(self, onboarded, capsys):
        main(["status", "--user", onboarded])
        assert "Decision mode: off" in capsys.readouterr().out

        main(["commit", "--user", onboarded, "--idea", "productized-service"])
        main(["status", "--user", onboarded])
        out = capsys.readouterr().out
        assert "Decision mode: active (productized-service)" in out

        main(["exit-decision", "--user", onboarded, "--reason", "changed my mind"])
        main(["status", "--user", onboarded])
        assert "Decision mode: off" in capsys.readouterr().out

    def test_commit_without_profile(self):
        with pytest.raises(SystemExit) as exc:
            main(["commit", "--user", "ghost", "--idea", "newsletter-niche"])
        assert "Run 'onboard' first" in exc.value.code

    def test_exit_decision_without_profile(self):
        with pytest.raises(SystemExit) as exc:
            main(["exit-decision", "--user", "ghost"])
        assert "No profile stored for user: ghost" in exc.value.code
        assert "Run 'onboard' first" in exc.value.code
