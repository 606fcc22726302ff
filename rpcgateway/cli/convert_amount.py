import click

from rpcgateway.errors import ConversionError
from qtumgateway.qtum_utils import qtum_to_eth_value, eth_value_to_qtum


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option(
    "--reverse",
    is_flag=True,
    default=False,
    help="Convert a hex wei value back into QTUM",
)
@click.argument("amount", type=str)
def convert_amount(reverse, amount):
    """Convert a QTUM amount into its hex wei value."""
    try:
        if reverse:
            click.echo(str(eth_value_to_qtum(amount)))
        else:
            click.echo(qtum_to_eth_value(amount))
    except ConversionError as e:
        raise click.BadParameter(str(e), param_hint="AMOUNT")
