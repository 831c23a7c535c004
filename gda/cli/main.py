"""
GDA CLI - Command Line Interface for discrete Gradual Dutch Auctions

Main entry point for all CLI commands.
"""

import logging

import click
from pydantic import ValidationError

from gda.utils.logger import get_logger, setup_logging

logger = get_logger("cli")


def _load_parameters(ctx, start_time: int = 0):
    """Load config and build parameters, reporting errors as click errors."""
    from gda.core import InvalidParameters
    from gda.core.config import load_config

    source = ctx.obj["config_path"] or "environment"
    try:
        config = load_config(ctx.obj["config_path"])
        params = config.to_parameters(now=start_time)
    except (ValidationError, InvalidParameters, ValueError) as e:
        logger.debug(f"Rejected configuration from {source}: {e}")
        raise click.ClickException(f"Invalid configuration: {e}")

    if not ctx.obj["debug"]:
        setup_logging(level=getattr(logging, config.log_level))
    logger.debug(f"Loaded configuration from {source}")
    return config, params


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False),
              help="JSON config file (default: GDA_* environment)")
@click.version_option(version="0.1.0")
@click.pass_context
def cli(ctx, debug, config_path):
    """Discrete Gradual Dutch Auction - pricing and settlement"""
    level = logging.DEBUG if debug else logging.WARNING
    setup_logging(level=level)

    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = config_path


# =============================================================================
# Pricing Commands
# =============================================================================


@cli.command("params")
@click.pass_context
def params_show(ctx):
    """Show the configured auction parameters"""
    config, params = _load_parameters(ctx)

    click.echo("Auction Parameters")
    click.echo("-" * 40)
    for name, value in params.describe().items():
        if name == "start_time" and config.start_time is None:
            value = "at creation"
        click.echo(f"  {name}: {value}")


@cli.command("quote")
@click.option("--quantity", default=1, type=click.IntRange(min=0), help="Units to buy")
@click.option("--num-sold", default=0, type=click.IntRange(min=0), help="Units already sold")
@click.option("--elapsed", default=0, type=click.IntRange(min=0), help="Seconds since auction start")
@click.pass_context
def quote(ctx, quantity, num_sold, elapsed):
    """Price a batch of units"""
    from gda.core import purchase_price
    from gda.math import FixedPointError, to_decimal

    _, params = _load_parameters(ctx)

    try:
        cost = purchase_price(quantity, num_sold, elapsed, params)
    except FixedPointError as e:
        raise click.ClickException(f"Pricing failed: {e}")

    click.echo(f"Quantity: {quantity}  Sold: {num_sold}  Elapsed: {elapsed}s")
    click.echo(f"Price: {to_decimal(cost)}")
    click.echo(f"Price (raw): {cost}")


@cli.command("schedule")
@click.option("--quantity", default=1, type=click.IntRange(min=0), help="Units to buy")
@click.option("--num-sold", default=0, type=click.IntRange(min=0), help="Units already sold")
@click.option("--elapsed", default=0, type=click.IntRange(min=0), help="First sample, seconds")
@click.option("--step", default=1, type=click.IntRange(min=1), help="Seconds between samples")
@click.option("--rows", default=10, type=click.IntRange(min=1), help="Number of samples")
@click.pass_context
def schedule(ctx, quantity, num_sold, elapsed, step, rows):
    """Show how a batch price decays over time"""
    from gda.core import purchase_price
    from gda.math import FixedPointError, to_decimal

    _, params = _load_parameters(ctx)

    click.echo(f"{'elapsed':>10}  price")
    click.echo("-" * 40)
    for i in range(rows):
        t = elapsed + i * step
        try:
            cost = purchase_price(quantity, num_sold, t, params)
        except FixedPointError as e:
            click.echo(f"{t:>10}  overflow ({e})")
            break
        click.echo(f"{t:>10}  {to_decimal(cost)}")


# =============================================================================
# Demo Command
# =============================================================================


@cli.command("demo")
@click.option("--buyers", default=3, type=click.IntRange(min=1), help="Number of buyers")
@click.option("--quantity", default=2, type=click.IntRange(min=1), help="Units per purchase")
@click.option("--interval", default=5, type=click.IntRange(min=0), help="Seconds between purchases")
@click.pass_context
def demo(ctx, buyers, quantity, interval):
    """Simulate purchases against in-memory collaborators"""
    from gda.core import (
        DiscreteGDA,
        InMemoryPaymentChannel,
        InMemoryUnitLedger,
        AuctionError,
    )
    from gda.math import FixedPointError, to_decimal

    _, params = _load_parameters(ctx, start_time=0)
    clock = {"now": params.start_time}

    ledger = InMemoryUnitLedger()
    payments = InMemoryPaymentChannel()
    auction = DiscreteGDA(params, ledger, payments, clock=lambda: clock["now"])

    click.echo("=" * 60)
    click.echo("  DISCRETE GDA - DEMO")
    click.echo("=" * 60)

    for i in range(buyers):
        buyer = f"buyer-{i + 1}"
        try:
            cost = auction.quote(quantity)
        except FixedPointError as e:
            click.echo(f"  t={auction.elapsed():>4}s  {buyer}: pricing failed ({e})")
            logger.warning(f"Demo stopped after {i} buyer(s): {e}")
            break
        # Overpay by 1% so every purchase exercises the refund path
        payment = cost + cost // 100
        payments.deposit(payment)
        try:
            change = auction.purchase(quantity, payment, buyer)
        except AuctionError as e:
            click.echo(f"  t={auction.elapsed():>4}s  {buyer}: failed ({e})")
        else:
            click.echo(
                f"  t={auction.elapsed():>4}s  {buyer}: {quantity} units "
                f"{ledger.units_of(buyer)} for {to_decimal(cost)} (change {to_decimal(change)})"
            )
        clock["now"] += interval

    click.echo()
    click.echo("Final Statistics:")
    stats = auction.stats()
    click.echo(f"  Units sold: {stats['num_sold']}")
    click.echo(f"  Revenue: {to_decimal(stats['total_revenue'])}")
    try:
        click.echo(f"  Next unit: {to_decimal(auction.quote(1))}")
    except FixedPointError as e:
        click.echo(f"  Next unit: overflow ({e})")


if __name__ == "__main__":
    cli()
