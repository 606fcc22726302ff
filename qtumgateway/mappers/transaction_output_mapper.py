# MIT License
#
# Copyright (c) 2018 Omidiora Samuel, samparsky@gmail.com
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


from typing import Any, List, Dict

from rpcgateway.errors import ValidationError
from qtumgateway.domain.transaction import QtumTransactionOutput


class QtumTransactionOutputMapper(object):
    def vout_to_outputs(self, vout: List[Dict]) -> List[QtumTransactionOutput]:
        outputs = []
        for item in vout or []:
            output = self.json_dict_to_output(item)
            outputs.append(output)
        return outputs

    def json_dict_to_output(self, json_dict: Dict[str, Any]) -> QtumTransactionOutput:
        if not isinstance(json_dict, dict):
            raise ValidationError(f"vout item must be an object, got {json_dict!r}")
        script_pub_key = json_dict.get("scriptPubKey") or {}
        if not isinstance(script_pub_key, dict):
            raise ValidationError(
                f'"scriptPubKey" must be an object in vout, got {script_pub_key!r}'
            )

        output = QtumTransactionOutput()
        output.index = json_dict.get("n", 0)
        output.script_asm = script_pub_key.get("asm")
        output.type = script_pub_key.get("type")

        return output
