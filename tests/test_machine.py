from spaceind.core.models import ActionRecord, Covenant, Locator, NamedMetaRecord, OutputRecord
from spaceind.replay.events import (
    Bid,
    Register,
    Rejected,
    Revoked,
    Rollout,
    TerminalAction,
    Transfer,
    describe,
)
from spaceind.replay.machine import classify_covenant, replay_entry, replay_history


def _rec(i: int, **covenant) -> OutputRecord:
    return OutputRecord(name="@n", locator=Locator(f"t{i}", 0), covenant=Covenant(**covenant) if covenant else None)


def test_rollout_bid_register() -> None:
    history = [
        _rec(1, type="bid", total_burned=1000, claim_height=500),
        _rec(2, type="bid", total_burned=2000),
        _rec(3, type="transfer"),
    ]
    assert list(replay_history(history)) == [Rollout(claim_height=500), Bid(amount=2000), Register()]


def test_first_bid_without_claim_height_is_a_bid() -> None:
    assert list(replay_history([_rec(1, type="bid", total_burned=7)])) == [Bid(amount=7)]


def test_claim_height_already_seen_makes_a_bid() -> None:
    history = [
        _rec(1, type="bid", total_burned=1, claim_height=10),
        _rec(2, type="bid", total_burned=2, claim_height=10),
    ]
    assert list(replay_history(history)) == [Rollout(claim_height=10), Bid(amount=2)]


def test_transfer_after_transfer_and_register_transitions() -> None:
    history = [
        _rec(1, type="transfer"),
        _rec(2, type="transfer"),
        _rec(3, type="bid", total_burned=3),
        _rec(4, type="transfer"),
        _rec(5, type="transfer"),
    ]
    assert list(replay_history(history)) == [Transfer(), Transfer(), Bid(amount=3), Register(), Transfer()]


def test_opaque_covenants_emit_nothing_but_advance_state() -> None:
    history = [
        _rec(1, type="bid", total_burned=1, claim_height=5),
        _rec(2, type="reserved"),
        _rec(3, type="transfer"),
    ]
    # the opaque covenant sits between the bid and the transfer: no Register
    assert list(replay_history(history)) == [Rollout(claim_height=5), Transfer()]


def test_records_without_covenant_do_not_touch_state() -> None:
    history = [
        _rec(1, type="bid", total_burned=1, claim_height=5),
        _rec(2),
        NamedMetaRecord(name="@n"),
        _rec(3, type="transfer"),
    ]
    assert list(replay_history(history)) == [Rollout(claim_height=5), Register()]


def test_named_meta_records_with_covenant_take_part() -> None:
    history = [
        NamedMetaRecord(name="@n", covenant=Covenant(type="bid", total_burned=9, claim_height=1)),
        _rec(2, type="transfer"),
    ]
    assert list(replay_history(history)) == [Rollout(claim_height=1), Register()]


def test_replay_is_restartable() -> None:
    history = [
        _rec(1, type="bid", total_burned=1000, claim_height=500),
        _rec(2, type="bid", total_burned=2000),
        _rec(3, type="transfer"),
    ]
    first = [describe(e) for e in replay_history(history)]
    second = [describe(e) for e in replay_history(history)]
    assert first == second == ["Rollout", "Bid: 2000 sats", "Register"]


def test_classify_covenant_register_needs_previous_bid() -> None:
    transfer = Covenant(type="transfer")
    assert classify_covenant(transfer, None, None) == Transfer()
    assert classify_covenant(transfer, Covenant(type="bid"), None) == Register()


def test_terminal_entries_report_a_single_notice() -> None:
    assert replay_entry(ActionRecord(action="revoke", target="@n")) == [Revoked()]
    assert replay_entry(ActionRecord(action="reject", target="@n")) == [Rejected()]
    assert replay_entry(ActionRecord(action="burn", target="@n")) == [TerminalAction(action="burn")]
    assert describe(TerminalAction(action="burn")) == "Terminal action: burn"
