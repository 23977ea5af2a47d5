from ballotbox.services.election import NO_WINNER_DESCRIPTION, Proposal, tally_proposals


def build_proposals(*counts):
    return [
        Proposal(description=chr(ord("A") + index), vote_count=count)
        for index, count in enumerate(counts)
    ]


def test_tally_picks_strict_maximum():
    result = tally_proposals(build_proposals(2, 3, 1))

    assert result["is_tie"] is False
    assert result["winner_id"] == 1
    assert result["winner"] == Proposal(description="B", vote_count=3)
    assert result["top_vote_count"] == 3
    assert result["total_votes"] == 6


def test_tally_declares_no_winner_when_top_count_is_shared():
    result = tally_proposals(build_proposals(3, 5, 5))

    assert result["is_tie"] is True
    assert result["winner_id"] is None
    assert result["winner"] == Proposal(description=NO_WINNER_DESCRIPTION, vote_count=0)


def test_tally_keeps_tie_across_repeated_maximum():
    result = tally_proposals(build_proposals(1, 5, 5, 5))

    assert result["is_tie"] is True
    assert result["winner"].description == "No Winner !"


def test_tally_forgets_lower_tie_when_higher_count_follows():
    # 4 ties 4 before 7 takes the lead, so only the final maximum matters.
    result = tally_proposals(build_proposals(4, 4, 7))

    assert result["is_tie"] is False
    assert result["winner"].description == "C"


def test_tally_ignores_ties_below_current_leader():
    # Only counts equal to the running top raise the flag.
    result = tally_proposals(build_proposals(6, 2, 2))

    assert result["is_tie"] is False
    assert result["winner"].description == "A"


def test_tally_all_zero_counts_is_a_tie():
    result = tally_proposals(build_proposals(0, 0))

    assert result["is_tie"] is True
    assert result["winner"].description == NO_WINNER_DESCRIPTION
    assert all(row["percent"] == 0 for row in result["option_results"])


def test_tally_leading_zero_then_votes_picks_leader():
    result = tally_proposals(build_proposals(0, 3))

    assert result["is_tie"] is False
    assert result["winner_id"] == 1


def test_tally_without_proposals_sets_no_winner():
    result = tally_proposals([])

    assert result["winner"] is None
    assert result["winner_id"] is None
    assert result["is_tie"] is False
    assert result["option_results"] == []


def test_tally_reports_percentages_in_index_order():
    result = tally_proposals(build_proposals(1, 3))

    assert [row["id"] for row in result["option_results"]] == [0, 1]
    assert [row["percent"] for row in result["option_results"]] == [25.0, 75.0]


def test_tally_winner_is_a_snapshot():
    proposals = build_proposals(1, 2)
    result = tally_proposals(proposals)

    proposals[1].vote_count = 10

    assert result["winner"].vote_count == 2


def test_tally_is_deterministic():
    counts = (3, 8, 2, 8, 9)
    first = tally_proposals(build_proposals(*counts))
    second = tally_proposals(build_proposals(*counts))

    assert first == second
