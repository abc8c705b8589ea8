"""最小化的合约 ABI，仅包含需要读取的方法"""


def _view(name, inputs=None, output_type="uint256"):
    return {
        "inputs": inputs or [],
        "name": name,
        "outputs": [{"internalType": output_type, "name": "", "type": output_type}],
        "stateMutability": "view",
        "type": "function",
    }


VE_DISTRIBUTOR_ABI = [
    _view("activePeriod"),
    _view("timeCursor"),
    _view("tokenLastBalance"),
    _view("lastTokenTime"),
    _view("tokensPerWeek", [{"internalType": "uint256", "name": "week", "type": "uint256"}]),
]

ERC20_ABI = [
    _view("balanceOf", [{"internalType": "address", "name": "account", "type": "address"}]),
]

LIQUIDATOR_ABI = [
    _view("getPrice", [
        {"internalType": "address", "name": "tokenIn", "type": "address"},
        {"internalType": "address", "name": "tokenOut", "type": "address"},
        {"internalType": "uint256", "name": "amount", "type": "uint256"},
    ]),
]
