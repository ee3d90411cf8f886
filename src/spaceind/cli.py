import asyncio
import logging

import click
import httpx
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)

from .constants import (
    DEFAULT_BITCOIN_RPC_PASSWORD,
    DEFAULT_BITCOIN_RPC_URL,
    DEFAULT_BITCOIN_RPC_USER,
    DEFAULT_SPACED_RPC_URL,
    TESTNET_ACTIVATION_HEIGHT,
)
from .core.config import ConflictPolicy, IndexerConfig, RpcEndpoint
from .core.errors import SpaceIndError
from .orchestration.orchestrator import IndexOutput, run_indexer
from .replay.render import render_event_log

console = Console()


def _setup_logging(verbose: bool) -> None:
    logger = logging.getLogger("spaceind")
    for h in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(h)
    handler = RichHandler(console=console, show_path=False, log_time_format="[%X]")
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


@click.group()
def cli() -> None:
    """SpaceInd — in-memory indexer for the spaces name protocol."""


@cli.command("index")
@click.option("--bitcoin-rpc", default=DEFAULT_BITCOIN_RPC_URL, show_default=True, envvar="SPACEIND_BITCOIN_RPC_URL")
@click.option("--bitcoin-user", default=DEFAULT_BITCOIN_RPC_USER, show_default=True, envvar="SPACEIND_BITCOIN_RPC_USER")
@click.option("--bitcoin-password", default=DEFAULT_BITCOIN_RPC_PASSWORD, envvar="SPACEIND_BITCOIN_RPC_PASSWORD")
@click.option("--spaced-rpc", default=DEFAULT_SPACED_RPC_URL, show_default=True, envvar="SPACEIND_SPACED_RPC_URL")
@click.option(
    "--start-height",
    type=int,
    default=TESTNET_ACTIVATION_HEIGHT,
    show_default=True,
    envvar="SPACEIND_START_HEIGHT",
    help="First block to index (protocol activation height; 0 on regtest)",
)
@click.option("--end-height", type=int, default=None, envvar="SPACEIND_END_HEIGHT", help="Last block (default: chain tip)")
@click.option("--timeout", "timeout_s", type=int, default=20, show_default=True, help="RPC timeout in seconds")
@click.option(
    "--on-conflict",
    type=click.Choice([p.value for p in ConflictPolicy]),
    default=ConflictPolicy.REJECT.value,
    show_default=True,
    help="Record arriving for a revoked/rejected name: reject it or start a fresh history",
)
@click.option("-v", "--verbose", is_flag=True, help="Log every block and discovered output")
def index_cmd(
    bitcoin_rpc: str,
    bitcoin_user: str,
    bitcoin_password: str,
    spaced_rpc: str,
    start_height: int,
    end_height: int | None,
    timeout_s: int,
    on_conflict: str,
    verbose: bool,
) -> None:
    """Walk the chain from --start-height and print each name's lifecycle."""
    _setup_logging(verbose)

    config = IndexerConfig(
        bitcoin=RpcEndpoint(bitcoin_rpc, bitcoin_user or None, bitcoin_password or None),
        spaced=RpcEndpoint(spaced_rpc),
        start_height=start_height,
        end_height=end_height,
        timeout_s=timeout_s,
        conflict_policy=ConflictPolicy(on_conflict),
    )

    progress = Progress(
        SpinnerColumn(),
        TextColumn("[bold]indexing[/]"),
        BarColumn(),
        MofNCompleteColumn(),
        TextColumn("•"),
        TimeElapsedColumn(),
        TextColumn("→"),
        TimeRemainingColumn(),
        TextColumn(" • {task.description}"),
        console=console,
        transient=False,
        expand=True,
    )

    async def run() -> IndexOutput:
        with progress:
            # the walker caps end_height at the chain tip, so the block total is unknown here
            task = progress.add_task(description=f"from {config.start_height:,}", total=None)

            def on_block(height: int, tx_count: int) -> None:
                progress.update(task, advance=1, description=f"height {height:,} ({tx_count} space tx)")

            return await run_indexer(config, on_block=on_block)

    try:
        out = asyncio.run(run())
    except (SpaceIndError, httpx.HTTPError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    console.print(f"Processed up to block: {out.walk.last_height}")
    console.print("Indexed history:")
    for line in render_event_log(out.store):
        console.print(line, markup=False, highlight=False)

    s = out.stats
    console.print(
        f"[bold]summary[/]: "
        f"blocks={s.blocks}  "
        f"names={len(out.store)}  "
        f"[green]spaces_txs[/]={s.spaces_txs}  "
        f"records={s.records_appended}  "
        f"terminal={s.terminal_actions}  "
        f"[yellow]malformed[/]={s.malformed_meta_outputs}  "
        f"[red]conflicts[/]={s.conflicts}"
    )
    halted = out.store.halted()
    if halted:
        console.print(f"[red]halted[/]: {escape(', '.join(halted))}", highlight=False)


if __name__ == "__main__":
    cli()
