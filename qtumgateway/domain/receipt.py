from typing import Optional


# one entry of `gettransactionreceipt`
class QtumTransactionReceipt(object):
    def __init__(self):
        self.block_hash: Optional[str] = None
        self.block_number: Optional[int] = None
        self.transaction_hash: Optional[str] = None
        self.transaction_index: Optional[int] = None
        self.from_address: Optional[str] = None
        self.to_address: Optional[str] = None
        self.contract_address: Optional[str] = None
        self.cumulative_gas_used: Optional[int] = None
        self.gas_used: Optional[int] = None
        self.excepted: Optional[str] = None
