"""Command-line interface for passrules.

This module provides commands for checking passwords against the configured
policy and for running the built-in self test.
"""

from typing import NoReturn

import click

from passrules.core.config import Settings, get_settings
from passrules.core.logging import LoggingContext, configure_logging, get_logger
from passrules.domain.services import (
    build_validator,
    build_validator_from_settings,
    run_scenarios,
)


def _load_settings(ctx: click.Context) -> Settings:
    """Load settings and apply the group-level log level override."""
    settings = get_settings()
    log_level = (ctx.obj or {}).get("log_level")
    if log_level is not None:
        settings = settings.model_copy(update={"log_level": log_level})
    configure_logging(settings)
    return settings


@click.group()
@click.version_option(version="0.1.0", prog_name="passrules")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default=None,
    help="Set log level (overrides config)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """passrules - composable password validation.

    Policies combine a minimum length with digit, mixed case and symbol
    requirements.
    """
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level


@cli.command()
@click.argument("password", required=False)
@click.option(
    "--min-length",
    type=click.IntRange(min=0),
    default=None,
    help="Minimum length (overrides config)",
)
@click.option("--digit/--no-digit", default=None, help="Require a digit")
@click.option("--case/--no-case", default=None, help="Require mixed case letters")
@click.option("--symbol/--no-symbol", default=None, help="Require a symbol")
@click.pass_context
def check(
    ctx: click.Context,
    password: str | None,
    min_length: int | None,
    digit: bool | None,
    case: bool | None,
    symbol: bool | None,
) -> None:
    """Check a password against the policy.

    Prompts for the password with hidden input when it is not given.
    Exits with status 1 when the password is rejected.
    """
    settings = _load_settings(ctx)
    logger = get_logger(__name__)

    validator = build_validator(
        min_length=settings.min_length if min_length is None else min_length,
        require_digit=settings.require_digit if digit is None else digit,
        require_case=settings.require_case if case is None else case,
        require_symbol=settings.require_symbol if symbol is None else symbol,
    )

    if password is None:
        password = click.prompt("Password", hide_input=True)

    with LoggingContext(command="check", policy=validator.describe()):
        error = validator.explain(password)
        if error is None:
            click.echo("accepted")
            logger.info("Password accepted")
            return

        click.echo(f"rejected: {error.message}")
        logger.info("Password rejected", code=error.code)
    raise SystemExit(1)


@cli.command()
@click.pass_context
def selftest(ctx: click.Context) -> None:
    """Run the built-in validation scenarios."""
    _load_settings(ctx)
    logger = get_logger(__name__)

    results = run_scenarios()
    failures = [result for result in results if not result.passed]

    for result in failures:
        click.echo(
            f"FAIL {result.policy} {result.password!r}: "
            f"expected {result.expected}, got {result.actual}",
            err=True,
        )

    if failures:
        logger.error("Self test failed", failed=len(failures), total=len(results))
        raise SystemExit(1)

    click.echo(f"{len(results)} scenarios passed")
    logger.info("Self test passed", total=len(results))


@cli.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Display passrules configuration and the effective policy."""
    settings = _load_settings(ctx)
    validator = build_validator_from_settings(settings)

    click.echo(f"""
passrules v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:  {settings.environment}

Policy:
  Min Length:   {settings.min_length}
  Digit:        {settings.require_digit}
  Case:         {settings.require_case}
  Symbol:       {settings.require_symbol}
  Chain:        {validator.describe()}

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `passrules` command is run
    or when using `python -m passrules`.
    """
    cli()


if __name__ == "__main__":
    main()
