"""Tests for the command line interface."""

import json

import pytest

from internship_matcher.cli import main


CATALOG = [
    {"id": "web-1", "title": "Web Intern", "company": "Pixel Software",
     "requirements": ["JavaScript", "React"], "location": "Remote", "type": "remote"},
    {"id": "data-1", "title": "Data Intern", "company": "Numbers Bank",
     "requirements": ["Python", "SQL"], "location": "New York", "type": "on-site"},
    {"id": "old-1", "title": "Closed Intern", "company": "Gone",
     "requirements": ["React"], "status": "closed"},
]


@pytest.fixture
def files(tmp_path):
    profile = tmp_path / "profile.json"
    profile.write_text(json.dumps({
        "skills": ["JavaScript", "React"],
        "preferences": {"location": "remote", "workType": "remote"},
    }))
    catalog = tmp_path / "catalog.json"
    catalog.write_text(json.dumps(CATALOG))
    applications = tmp_path / "applications.json"
    applications.write_text(json.dumps([{"internshipId": "web-1", "appliedAt": "2026-02-01"}]))

    return {
        "config": str(tmp_path / "config.json"),
        "profile": str(profile),
        "catalog": str(catalog),
        "applications": str(applications),
        "dir": tmp_path,
    }


def run_json(capsys, files, *args):
    main(["--config", files["config"], *args,
          "--profile", files["profile"], "--catalog", files["catalog"], "--json"])
    return json.loads(capsys.readouterr().out)


def test_recommend_json(capsys, files):
    data = run_json(capsys, files, "recommend")

    ids = [r["internship"]["id"] for r in data["recommendations"]]
    assert ids == ["web-1", "data-1"]
    assert data["metadata"]["totalInternships"] == 2


def test_recommend_excludes_applied(capsys, files):
    data = run_json(capsys, files, "recommend", "--applications", files["applications"])
    assert [r["internship"]["id"] for r in data["recommendations"]] == ["data-1"]

    data = run_json(capsys, files, "recommend", "--applications", files["applications"],
                    "--include-applied", "--limit", "1")
    assert [r["internship"]["id"] for r in data["recommendations"]] == ["web-1"]


def test_match_json(capsys, files):
    data = run_json(capsys, files, "match", "--internship-id", "web-1")

    assert data["internship"]["id"] == "web-1"
    assert data["match"]["breakdown"]["skillsScore"] == 100
    assert data["match"]["breakdown"]["locationScore"] == 100


def test_match_unknown_internship_exits(capsys, files):
    with pytest.raises(SystemExit) as exc:
        main(["--config", files["config"], "match", "--profile", files["profile"],
              "--catalog", files["catalog"], "--internship-id", "nope"])

    assert exc.value.code == 1
    assert "not found" in capsys.readouterr().out


def test_bulk_json(capsys, files):
    data = run_json(capsys, files, "bulk", "--ids", "data-1,missing,web-1")

    assert [m["internshipId"] for m in data["matches"]] == ["web-1", "data-1"]
    assert data["metadata"] == {"requested": 3, "processed": 2}


def test_insights_writes_output_file(capsys, files):
    output = files["dir"] / "insights.json"
    main(["--config", files["config"], "insights", "--profile", files["profile"],
          "--catalog", files["catalog"], "--applications", files["applications"],
          "--output", str(output)])

    insights = json.loads(output.read_text())["insights"]
    assert insights["applications"]["total"] == 1
    assert insights["profile"]["skillsCount"] == 2


def test_errors_exit_with_status_one(capsys, files):
    with pytest.raises(SystemExit) as exc:
        main(["--config", files["config"], "recommend", "--profile", files["profile"],
              "--catalog", str(files["dir"] / "missing.json")])

    assert exc.value.code == 1
    assert "Error:" in capsys.readouterr().out


def test_bad_log_level_exits_with_status_one(capsys, files):
    with open(files["config"], "w") as f:
        json.dump({"logging": {"level": "loud"}}, f)

    with pytest.raises(SystemExit) as exc:
        main(["--config", files["config"], "recommend", "--profile", files["profile"],
              "--catalog", files["catalog"]])

    assert exc.value.code == 1
    assert "Error:" in capsys.readouterr().out


def test_config_set_and_show(capsys, files):
    main(["--config", files["config"], "config", "--set", "matching.recommendation_limit", "3"])
    main(["--config", files["config"], "config", "--show"])

    out = capsys.readouterr().out
    assert '"recommendation_limit": 3' in out
