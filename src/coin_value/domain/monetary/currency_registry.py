from coin_value.domain.monetary.currency_definition import CurrencyDefinition


# 10**18 wei per ether
ETH = CurrencyDefinition("ETH", 18)
# 10**8 satoshi per bitcoin
BTC = CurrencyDefinition("BTC", 8)

# Register all predefined currency definitions
CurrencyDefinition.register(ETH, overwrite=True)
CurrencyDefinition.register(BTC, overwrite=True)
