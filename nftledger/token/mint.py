from nftledger.token.state import TokenState
from nftledger.token.ledger import Ledger, validate_identity
from nftledger.exceptions import CounterOverflow, InvalidAmount
from nftledger.events import EVENT_MINT
from nftledger import config


class MintEngine:
    def __init__(self, state: TokenState, ledger: Ledger):
        self.state = state
        self.ledger = ledger

    def mint(self, receiver, amount) -> bool:
        """
        Create `amount` new tokens numbered total_minted + 1 .. total_minted + amount
        (inclusive) and give them all to `receiver`. The caller has already been checked
        against the contract owner.
        """
        validate_identity(receiver)

        if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
            raise InvalidAmount(amount=amount)

        total_minted = self.state.total_minted.get()
        new_total = total_minted + amount

        if new_total > config.MAX_UINT64:
            raise CounterOverflow(value=new_total, limit=config.MAX_UINT64)

        self.ledger.assign(receiver, total_minted + 1, amount)
        self.state.total_minted.set(new_total)

        self.state.emit(EVENT_MINT, owner=receiver, value=amount)
        return True
