"""Transaction classifier: wire transaction -> history records.

`classify_tx` is a pure function of one `SpacesTx`. It never reads or
writes the history store; folding the records is the block processor's job.

Emission order
--------------
1. Regular outputs carrying a name, by output index. Each gets the locator
   `(txid, index)`.
2. Meta outputs, in list order:
   - with a name -> `NamedMetaRecord`
   - with an action and a target -> `ActionRecord`
   - anything else is malformed: logged and skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from spaceind.core.models import (
    ActionRecord,
    Locator,
    MetaOutput,
    NamedMetaRecord,
    OutputRecord,
    Record,
    SpacesTx,
)

logger = logging.getLogger(__name__)


def locator_for(tx: SpacesTx, index: int) -> Locator:
    """Return the locator of output `index` of `tx`."""
    return Locator(txid=tx.txid, index=index)


def _iter_output_records(tx: SpacesTx) -> Iterator[OutputRecord]:
    for index, output in enumerate(tx.vout):
        if not output.name:
            continue
        locator = locator_for(tx, index)
        logger.debug("Found %r in %s", output.name, locator)
        yield OutputRecord(name=output.name, locator=locator, covenant=output.covenant)


def classify_meta_output(meta: MetaOutput) -> NamedMetaRecord | ActionRecord | None:
    """Classify one meta output; None means it carries neither name nor action."""
    if meta.name:
        return NamedMetaRecord(name=meta.name, covenant=meta.covenant)
    if meta.action and meta.target is not None and meta.target.name:
        return ActionRecord(action=meta.action, target=meta.target.name)
    return None


def classify_tx(tx: SpacesTx) -> list[Record]:
    """Return the records `tx` contributes, outputs first then meta outputs."""
    records: list[Record] = list(_iter_output_records(tx))

    for position, meta in enumerate(tx.vmetaout):
        record = classify_meta_output(meta)
        if record is None:
            logger.error(
                "Unknown meta output type in %s (vmetaout[%d]): %s",
                tx.txid,
                position,
                meta.model_dump(exclude_none=True),
            )
            continue
        records.append(record)

    return records


def count_malformed(tx: SpacesTx) -> int:
    """Number of meta outputs in `tx` that `classify_tx` would skip."""
    return sum(1 for meta in tx.vmetaout if classify_meta_output(meta) is None)
