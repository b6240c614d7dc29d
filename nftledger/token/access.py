from nftledger.token.state import TokenState
from nftledger.exceptions import AlreadyDeployed, NotDeployed


class AccessControl:
    """Holds the contract owner fixed at deploy time. Only minting is gated on it."""
    def __init__(self, state: TokenState):
        self.state = state

    @property
    def owner(self):
        return self.state.owner.get()

    def is_deployed(self) -> bool:
        return self.owner is not None

    def init_owner(self, owner):
        if self.is_deployed():
            raise AlreadyDeployed(contract=self.state.contract)

        self.state.owner.set(owner)

    def require_deployed(self):
        if not self.is_deployed():
            raise NotDeployed(contract=self.state.contract)

    def is_contract_owner(self, caller) -> bool:
        owner = self.owner
        return owner is not None and owner == caller
