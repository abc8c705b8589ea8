"""常量"""

# 一周秒数，分发器按周结算
WEEK = 7 * 24 * 60 * 60

SECONDS_PER_YEAR = 365 * 24 * 60 * 60

# Polygon USDC，作为美元计价参考资产
DEFAULT_USDC_ADDRESS = "0x2791bca1f2de4661ed88a30c99a7a9449aa84174"
