from nftledger.db.driver import ContractDriver
from nftledger.db.orm import Variable, Hash
from nftledger.events import EventLog
from nftledger import config


class TokenState:
    """
    Every piece of mutable ledger state for one contract instance, bound to a storage
    driver and an event channel. Nothing here is global, so independent instances only
    share state when they share a driver and a contract name.

    owner                 contract owner, set once at deploy
    total_minted          number of tokens ever created
    id_to_owner           token id -> identity
    owner_to_token_count  identity -> number of tokens held (absent = 0)
    approvals             token id -> approved delegate (absent = unapproved)
    """
    def __init__(self, driver: ContractDriver, events: EventLog = None, contract=config.CONTRACT_NAME):
        self.contract = contract
        self.driver = driver
        self.events = events if events is not None else EventLog()

        self.owner = Variable(contract, config.OWNER_VAR, driver=driver)
        self.total_minted = Variable(contract, config.TOTAL_MINTED_VAR, driver=driver, t=int, default_value=0)

        self.id_to_owner = Hash(contract, config.ID_TO_OWNER_HASH, driver=driver)
        self.owner_to_token_count = Hash(contract, config.OWNER_TO_TOKEN_COUNT_HASH, driver=driver, default_value=0)
        self.approvals = Hash(contract, config.APPROVALS_HASH, driver=driver)

    def emit(self, name, **data):
        return self.events.emit(name, self.contract, data)
