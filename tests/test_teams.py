from utils.teams import all_branches, branch_category, team_branch, team_members


def test_known_team_branch_and_members():
    assert team_branch("109") == "CS A"
    assert team_members("109") == ["PARTH YADAV", "AASTHA AGRAWAL"]


def test_unknown_team_falls_back():
    assert team_branch("154") == "Unknown"
    assert team_branch("nope") == "Unknown"
    assert team_members("999") == []


def test_branch_categories():
    assert branch_category("CSBS") == "Computer Science"
    assert branch_category("IT B") == "Information Technology"
    assert branch_category("ETC A") == "Electronics"
    assert branch_category("CS A/IT B") == "Mixed"


def test_unlisted_branch_is_other():
    assert branch_category("Unknown") == "Other"
    # composite branch missing from the Mixed table
    assert branch_category("CSBS/CS B") == "Other"
    assert branch_category("cs a") == "Other"


def test_all_branches_distinct():
    branches = all_branches()
    assert len(branches) == len(set(branches))
    assert "IT B" in branches
