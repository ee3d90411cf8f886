import logging

from conftest import make_tx

from spaceind.classification.classifier import classify_meta_output, classify_tx, locator_for
from spaceind.core.models import ActionRecord, Locator, MetaOutput, NamedMetaRecord, OutputRecord


def test_locator_is_txid_and_index_regardless_of_content() -> None:
    tx = make_tx(
        "aa",
        vout=[
            {},
            {"name": "@alice", "covenant": {"type": "bid", "total_burned": 1}},
            {"name": "@bob"},
        ],
    )

    records = classify_tx(tx)

    assert [r.locator for r in records] == [Locator("aa", 1), Locator("aa", 2)]
    assert locator_for(tx, 7) == Locator("aa", 7)
    assert str(Locator("aa", 1)) == "aa:1"


def test_outputs_without_name_are_ignored() -> None:
    tx = make_tx("bb", vout=[{}, {"covenant": {"type": "transfer"}}])
    assert classify_tx(tx) == []


def test_outputs_then_meta_outputs_in_order() -> None:
    tx = make_tx(
        "cc",
        vout=[{"name": "@x", "covenant": {"type": "transfer"}}],
        vmetaout=[
            {"name": "@y", "covenant": {"type": "bid", "total_burned": 5, "claim_height": 10}},
            {"action": "revoke", "target": {"name": "@z"}},
        ],
    )

    records = classify_tx(tx)

    assert isinstance(records[0], OutputRecord)
    assert records[0].name == "@x"
    assert records[1] == NamedMetaRecord(name="@y", covenant=tx.vmetaout[0].covenant)
    assert records[2] == ActionRecord(action="revoke", target="@z")
    assert records[2].name == "@z"


def test_named_meta_output_wins_over_action() -> None:
    meta = MetaOutput.model_validate({"name": "@a", "action": "reject", "target": {"name": "@b"}})
    assert classify_meta_output(meta) == NamedMetaRecord(name="@a")


def test_malformed_meta_output_is_logged_and_skipped(caplog) -> None:
    tx = make_tx(
        "dd",
        vmetaout=[
            {"script_pubkey": "0014"},
            {"name": "@ok"},
            {"action": "revoke"},  # no target to key the action on
        ],
    )

    with caplog.at_level(logging.ERROR, logger="spaceind.classification.classifier"):
        records = classify_tx(tx)

    assert records == [NamedMetaRecord(name="@ok")]
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 2
    assert "dd" in errors[0].getMessage()


def test_classification_is_idempotent_and_does_not_mutate_tx() -> None:
    tx = make_tx(
        "ee",
        vout=[{"name": "@alice", "covenant": {"type": "bid", "total_burned": 1000, "claim_height": 500}}],
        vmetaout=[{"action": "reject", "target": {"name": "@bob"}}],
    )
    before = tx.model_dump()

    assert classify_tx(tx) == classify_tx(tx)
    assert tx.model_dump() == before


def test_unknown_wire_fields_are_ignored() -> None:
    tx = make_tx("ff", vout=[{"name": "@n", "value": 662, "script_pubkey": "5120", "covenant": {"type": "reserved", "expire_height": 3}}])
    (record,) = classify_tx(tx)
    assert record.covenant is not None
    assert record.covenant.type == "reserved"


def test_action_target_without_name_is_malformed(caplog) -> None:
    tx = make_tx("gg", vmetaout=[{"action": "revoke", "target": {}}, {"name": "@kept"}])

    with caplog.at_level(logging.ERROR, logger="spaceind.classification.classifier"):
        records = classify_tx(tx)

    assert records == [NamedMetaRecord(name="@kept")]
    assert len([r for r in caplog.records if r.levelno == logging.ERROR]) == 1
