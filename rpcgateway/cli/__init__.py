import click

from rpcgateway.logging_utils import logging_basic_config
from rpcgateway.cli.get_transaction import get_transaction
from rpcgateway.cli.convert_amount import convert_amount
from rpcgateway.cli.parse_script import parse_script

logging_basic_config()


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(version="v0.1.0")
@click.pass_context
def cli(ctx):
    pass


cli.add_command(get_transaction, "get-transaction")
cli.add_command(convert_amount, "convert-amount")
cli.add_command(parse_script, "parse-script")
