import click

from rpcgateway.cli.utils import echo_json
from rpcgateway.errors import GatewayError
from qtumgateway.service.qtum_script_service import CallScript, parse_contract_asm
from ethgateway.utils import add_hex_prefix, encode_big


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.argument("output_type", type=click.Choice(["call", "create"]))
@click.argument("asm", type=str)
def parse_script(output_type, asm):
    """Parse the scriptPubKey asm of a contract output."""
    try:
        script = parse_contract_asm(output_type, asm)
        item = {
            "type": output_type,
            "vmVersion": script.vm_version,
            "input": add_hex_prefix(script.get_encoded_abi()),
            "gas": encode_big(script.get_gas_limit()),
            "gasPrice": encode_big(script.get_gas_price()),
        }
    except GatewayError as e:
        raise click.BadParameter(str(e), param_hint="ASM")

    if isinstance(script, CallScript):
        item["to"] = add_hex_prefix(script.contract_address)
    echo_json(item)
