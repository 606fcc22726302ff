import sys
import click

from rpcgateway.cli.utils import qtum_rpc_options, echo_json
from rpcgateway.jsonrpc import JSONRPCRequest
from rpcgateway.transformer.manager import Manager
from qtumgateway.rpc.qtum_rpc import QtumRpc


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@qtum_rpc_options
@click.option(
    "--envelope/--no-envelope",
    default=False,
    show_default=True,
    help="Print the whole JSON-RPC response instead of the transaction only",
)
@click.argument("txhash", type=str)
def get_transaction(provider_uri, timeout, envelope, txhash):
    """Look up a transaction with eth_getTransactionByHash semantics."""
    manager = Manager(QtumRpc(provider_uri, timeout=timeout))
    request = JSONRPCRequest("eth_getTransactionByHash", [txhash], id=1)
    response = manager.handle(request)

    if envelope:
        echo_json(response)
    elif "error" in response:
        error = response["error"]
        click.echo(f"Error {error['code']}: {error['message']}", err=True)
    else:
        echo_json(response["result"])

    if "error" in response:
        sys.exit(1)
