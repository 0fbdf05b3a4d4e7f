"""
CLI entry point for ClubUp localization.
"""

import click
import sys

from .config import Settings
from .core import ClubUpLocalization, COMMISSION_RATES
from .errors import LocalizationError
from .localization import LocalizationManager
from .utils import configure_logging, get_logger

logger = get_logger(__name__)


def _load(ctx: click.Context) -> ClubUpLocalization:
    """Build the localization service from the settings on the context."""
    if 'service' not in ctx.obj:
        ctx.obj['service'] = ClubUpLocalization.from_settings(ctx.obj['settings'])
    return ctx.obj['service']


@click.group()
@click.version_option(version='1.0.0')
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR']), default=None,
              help='Override the configured log level')
@click.option('--json-logs', is_flag=True, help='Output logs as JSON (for production)')
@click.pass_context
def cli(ctx: click.Context, log_level: str, json_logs: bool):
    """
    ClubUp Localization

    Inspect and change the saved country and language, translate keys and
    format prices the way the marketplace shows them.
    """
    try:
        settings = Settings()
    except ValueError as e:
        click.echo(f"❌ Configuration error: {e}", err=True)
        sys.exit(1)

    if log_level:
        settings.log_level = log_level
    if json_logs:
        settings.json_logs = True

    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        json_logs=settings.json_logs
    )

    ctx.ensure_object(dict)
    ctx.obj['settings'] = settings


@cli.command()
@click.pass_context
def countries(ctx: click.Context):
    """List supported countries with pricing."""
    manager = LocalizationManager(ctx.obj['settings'].localization_dir)

    click.echo("\n🌍 Supported Countries:\n")
    for config in manager.list_countries():
        symbol = config.currency.symbol
        click.echo(f"  {config.flag} {config.name} ({config.code})")
        click.echo(f"    Currency: {config.currency.code} ({symbol})")
        click.echo(
            f"    Plans: Pro {symbol}{config.pricing.pro:g}, "
            f"Business {symbol}{config.pricing.business:g}, "
            f"PGA Pro {symbol}{config.pricing.pga_pro:g}"
        )
        click.echo(f"    Credential: {config.golf_association}")
        click.echo()


@cli.command()
@click.option('--all', 'show_all', is_flag=True, help='Include locales not offered in the language picker')
@click.pass_context
def locales(ctx: click.Context, show_all: bool):
    """List supported display languages."""
    manager = LocalizationManager(ctx.obj['settings'].localization_dir)
    options = manager.list_locales() if show_all else manager.selectable_locales()

    click.echo("\n🗣️  Languages:\n")
    for config in options:
        click.echo(f"  {config.flag} {config.native_name} ({config.code}) - {config.name}")


@cli.command()
@click.pass_context
def show(ctx: click.Context):
    """Show the active country and language."""
    service = _load(ctx)
    country = service.country
    locale = service.locale

    click.echo(f"\n📍 Country: {country.flag} {country.name} ({country.code})")
    click.echo(f"  Currency: {country.currency.code} ({country.currency.symbol})")
    click.echo(f"🗣️  Language: {locale.native_name} ({locale.code}, {locale.direction})")


@cli.command('set-country')
@click.argument('code')
@click.pass_context
def set_country(ctx: click.Context, code: str):
    """Select and save the active country (e.g. US)."""
    service = _load(ctx)

    try:
        applied = service.set_country(code.upper())
    except LocalizationError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)

    if not applied:
        click.echo(f"❌ Unknown country: {code}", err=True)
        sys.exit(1)

    logger.info("country_selected", country=service.country.code, locale=service.locale.code)
    click.echo(f"✅ Country set to {service.country.name} ({service.country.code})")
    click.echo(f"   Language: {service.locale.code}")


@cli.command('set-locale')
@click.argument('code')
@click.pass_context
def set_locale(ctx: click.Context, code: str):
    """Select and save the display language (e.g. fr-FR)."""
    service = _load(ctx)

    try:
        applied = service.set_locale(code)
    except LocalizationError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)

    if not applied:
        click.echo(f"❌ Unknown language: {code}", err=True)
        sys.exit(1)

    logger.info("locale_selected", locale=service.locale.code)
    click.echo(f"✅ Language set to {service.locale.native_name} ({service.locale.code})")


@cli.command()
@click.argument('key')
@click.option('--fallback', '-f', default=None, help='Text to use when no table has the key')
@click.option('--locale', '-l', 'locale_code', default=None, help='Translate for this locale instead of the saved one')
@click.pass_context
def translate(ctx: click.Context, key: str, fallback: str, locale_code: str):
    """Translate a key such as home.hero.title."""
    service = _load(ctx)

    if locale_code:
        if not service.manager.has_locale(locale_code):
            click.echo(f"❌ Unknown language: {locale_code}", err=True)
            sys.exit(1)
        click.echo(service.manager.resolve(key, locale_code, fallback))
        return

    click.echo(service.t(key, fallback))


@cli.command()
@click.argument('amount', type=float)
@click.option('--from-currency', default='GBP', show_default=True, help='Currency the amount is in')
@click.option('--convert/--no-convert', default=False, help='Convert into the active currency first')
@click.pass_context
def price(ctx: click.Context, amount: float, from_currency: str, convert: bool):
    """Format an amount for the active country."""
    service = _load(ctx)

    if convert:
        click.echo(service.pricing.convert_and_format_price(amount, from_currency.upper()))
    else:
        click.echo(service.format_price(amount))


@cli.command()
@click.pass_context
def pricing(ctx: click.Context):
    """Show plan, shipping and commission pricing for the active country."""
    service = _load(ctx)
    country = service.country
    shipping = service.pricing.get_shipping_info()

    click.echo(f"\n💷 Pricing for {country.name} ({country.currency.code})\n")
    click.echo("📦 Plans (per month):")
    for plan, label_key in (('pro', 'plan.pro'), ('business', 'plan.business'), ('pga_pro', 'plan.pga-pro')):
        click.echo(f"  • {service.t(label_key):<10} {service.pricing.get_formatted_subscription_price(plan)}")
    click.echo()
    click.echo("🚚 Shipping:")
    click.echo(f"  • Free over:  {shipping.formatted['free_threshold']}")
    click.echo(f"  • Standard:   {shipping.formatted['standard']}")
    click.echo(f"  • Express:    {shipping.formatted['express']}")
    click.echo()
    click.echo("🧾 Commission on sales:")
    for tier, rate in COMMISSION_RATES.items():
        click.echo(f"  • {tier:<10} {rate:g}%")


@cli.command()
@click.pass_context
def reset(ctx: click.Context):
    """Forget the saved country and language."""
    service = _load(ctx)

    try:
        service.store.clear()
    except OSError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)

    logger.info("preferences_cleared")
    click.echo("🧹 Saved preferences cleared.")


def main():
    """Main entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
