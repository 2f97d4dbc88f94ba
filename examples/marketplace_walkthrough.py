"""Deploy a marketplace, mint a token, sell it, then print the event logs."""

import json
import logging

from pokemarket import EventKind, InsufficientFunds, Ledger, Marketplace, MarketplaceSettings

DEPLOYER = "0xdeadbeef"
ALICE = "0xa11ce"
BOB = "0xb0b"


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    ledger = Ledger()
    market = Marketplace.initialize(DEPLOYER, ledger, MarketplaceSettings())
    tokens = market.tokens

    token = tokens.create(ALICE, 3, "Bulbasaur", "Seed Pokemon", 100)
    print(f"Minted {token.short()}: {tokens.get_details(token)}")

    ledger.coins.deposit(BOB, 60)
    try:
        tokens.buy(BOB, token)
    except InsufficientFunds as e:
        print(f"Bob cannot afford it yet ({e.code})")

    ledger.coins.deposit(BOB, 40)
    tokens.buy(BOB, token)
    print(f"Owner is now {tokens.get_owner(token)}, price {tokens.get_price(token)}")

    tokens.list(BOB, token, 250)

    for kind in EventKind:
        for logged in market.events(kind):
            print(json.dumps(logged.to_dict()))


if __name__ == "__main__":
    main()
