from abc import ABC, abstractmethod
from typing import List, Optional

from rpcgateway.errors import ConversionError, ScriptParseError

OP_CALL = "OP_CALL"
OP_CREATE = "OP_CREATE"

# scriptPubKey asm layouts:
#   call:   <version> <gas limit> <gas price> <data> <contract address> OP_CALL
#   create: <version> <gas limit> <gas price> <bytecode> OP_CREATE
CALL_ASM_PARTS = 6
CREATE_ASM_PARTS = 5


def _parse_script_number(name: str, value: str) -> int:
    if not value.isdecimal():
        raise ConversionError(f"{name} '{value}' is not a decimal script number")
    return int(value)


class ContractScript(ABC):
    """An EVM contract interaction embedded in a transaction output."""

    def __init__(self, vm_version: str, gas_limit: str, gas_price: str):
        self.vm_version = vm_version
        self._gas_limit = gas_limit
        self._gas_price = gas_price

    @abstractmethod
    def get_encoded_abi(self) -> str:
        pass

    def get_gas_limit(self) -> int:
        return _parse_script_number("gas limit", self._gas_limit)

    def get_gas_price(self) -> int:
        return _parse_script_number("gas price", self._gas_price)


class CallScript(ContractScript):
    def __init__(
        self,
        vm_version: str,
        gas_limit: str,
        gas_price: str,
        encoded_abi: str,
        contract_address: str,
    ):
        super().__init__(vm_version, gas_limit, gas_price)
        self.encoded_abi = encoded_abi
        self.contract_address = contract_address

    def get_encoded_abi(self) -> str:
        return self.encoded_abi


class CreateScript(ContractScript):
    def __init__(self, vm_version: str, gas_limit: str, gas_price: str, bytecode: str):
        super().__init__(vm_version, gas_limit, gas_price)
        self.bytecode = bytecode

    def get_encoded_abi(self) -> str:
        return self.bytecode


def _split_asm(asm: Optional[str], opcode: str, num_parts: int) -> List[str]:
    if not isinstance(asm, str) or asm.strip() == "":
        raise ScriptParseError(f"{opcode} script is empty")

    parts = asm.split()
    if len(parts) != num_parts:
        raise ScriptParseError(
            f"{opcode} script must have {num_parts} parts, got {len(parts)}: '{asm}'"
        )
    if parts[-1] != opcode:
        raise ScriptParseError(f"script is not terminated by {opcode}: '{asm}'")
    return parts


def parse_call_asm(asm: str) -> CallScript:
    version, gas_limit, gas_price, encoded_abi, contract_address, _ = _split_asm(
        asm, OP_CALL, CALL_ASM_PARTS
    )
    return CallScript(version, gas_limit, gas_price, encoded_abi, contract_address)


def parse_create_asm(asm: str) -> CreateScript:
    version, gas_limit, gas_price, bytecode, _ = _split_asm(
        asm, OP_CREATE, CREATE_ASM_PARTS
    )
    return CreateScript(version, gas_limit, gas_price, bytecode)


_PARSERS = {
    "call": parse_call_asm,
    "create": parse_create_asm,
}


def parse_contract_asm(output_type: Optional[str], asm: str) -> Optional[ContractScript]:
    """Parses asm by the output's type, returns None for non contract outputs."""
    parser = _PARSERS.get(output_type)
    if parser is None:
        return None
    return parser(asm)
