from voteledger.audit import replay_tally, verify_ledger
from voteledger.models.event_model import CandidateAdded, Voted


def test_replayed_tally_matches_ledger(alice_bob):
    alice_bob.vote("V1", 0)
    alice_bob.vote("V2", 0)
    alice_bob.vote("V3", 1)

    replayed = replay_tally(alice_bob.events())
    assert replayed == {0: 2, 1: 1}
    for candidate in alice_bob.get_candidates():
        assert candidate.vote_count == replayed[candidate.index]


def test_candidates_without_votes_replay_as_zero():
    events = [
        CandidateAdded(sequence=1, ledger_id="l", name="Alice", index=0),
        CandidateAdded(sequence=2, ledger_id="l", name="Bob", index=1),
        Voted(sequence=3, ledger_id="l", voter_identity="V1", candidate_index=1),
    ]
    assert replay_tally(events) == {0: 0, 1: 1}


def test_verify_ledger_reports_consistency(alice_bob):
    alice_bob.vote("V1", 1)
    report = verify_ledger(alice_bob)
    assert report.consistent
    assert report.ledger == report.replayed == {0: 0, 1: 1}
    assert report.voters == 1
    assert report.events == 3


def test_verify_ledger_detects_tampered_state(alice_bob):
    alice_bob.vote("V1", 1)
    # Bypass the ledger's own operations to simulate a corrupted tally
    alice_bob._candidates[0].vote_count = 3
    report = verify_ledger(alice_bob)
    assert not report.consistent
    assert report.ledger[0] == 3
    assert report.replayed[0] == 0
