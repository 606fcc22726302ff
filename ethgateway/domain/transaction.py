# MIT License
#
# Copyright (c) 2018 Evgeny Medvedev, evge.medvedev@gmail.com
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.


from typing import Optional


# response of `eth_getTransactionByHash`, every numeric field is a hex quantity
class EthTransactionResponse(object):
    def __init__(self):
        self.hash: Optional[str] = None
        # qtum has no account nonce, always left empty
        self.nonce: Optional[str] = None
        self.block_hash: Optional[str] = None
        self.block_number: Optional[str] = None
        self.transaction_index: Optional[str] = None
        self.from_address: Optional[str] = None
        self.to_address: Optional[str] = None
        self.value: Optional[str] = None
        self.gas: Optional[str] = None
        self.gas_price: Optional[str] = None
        self.input: Optional[str] = None
