from fx_cur import FxCur

print(FxCur.__version__)  # 0.1.0

# Default usage: cache in the temp directory, rates from the ECB.
# The context manager closes the HTTP session when done.
with FxCur() as fx:
    # Convert 100 USD into JPY, fetching the daily document only when the cache is stale
    print(fx.convert(100, "USD", "JPY"))

    # Publication date of the snapshot in use
    print(fx.publication_date())

    # Full table relative to EUR
    rates = fx.rates()
    print({code: rates[code] for code in rates.codes()})

# Supported currency codes
print(", ".join(FxCur.currencies()))
