from nftledger.token.state import TokenState
from nftledger.exceptions import BalanceUnderflow, CounterOverflow, InvalidTokenId, InvalidIdentity
from nftledger import config


def validate_token_id(token_id):
    if isinstance(token_id, bool) or not isinstance(token_id, int) or not 0 <= token_id <= config.MAX_UINT64:
        raise InvalidTokenId(token_id=token_id)
    return token_id


def validate_identity(identity):
    if not isinstance(identity, (str, bytes)) or len(identity) == 0:
        raise InvalidIdentity(identity=identity)

    # str identities become storage keys as they are
    if isinstance(identity, str):
        for reserved in (config.DELIMITER, config.INDEX_SEPARATOR, config.BYTES_KEY_MARKER):
            if reserved in identity:
                raise InvalidIdentity(identity=identity)

    return identity


class Ledger:
    """
    Authoritative ownership record: token id -> owner and owner -> token count.

    Ownership entries are only ever created by assign() and reassigned by move(); nothing
    deletes them. Balance changes are always applied together with the ownership change
    they account for, so balance_of(i) stays equal to the number of ids owned by i.
    No method here checks who is asking.
    """
    def __init__(self, state: TokenState):
        self.state = state

    def get_owner(self, token_id):
        return self.state.id_to_owner[validate_token_id(token_id)]

    def get_balance(self, identity) -> int:
        return self.state.owner_to_token_count[validate_identity(identity)]

    def set_owner(self, token_id, identity):
        self.state.id_to_owner[validate_token_id(token_id)] = validate_identity(identity)

    def adjust_balance(self, identity, delta: int) -> int:
        balance = self.get_balance(identity)
        new_balance = balance + delta

        if new_balance < 0:
            raise BalanceUnderflow(identity=identity, balance=balance, delta=delta)

        if new_balance > config.MAX_UINT64:
            raise CounterOverflow(value=new_balance, limit=config.MAX_UINT64)

        self.state.owner_to_token_count[identity] = new_balance
        return new_balance

    def move(self, sender, to, token_id):
        self.set_owner(token_id, to)

        if sender != to:
            self.adjust_balance(sender, -1)
            self.adjust_balance(to, 1)

    def assign(self, receiver, first_id: int, count: int):
        for token_id in range(first_id, first_id + count):
            self.set_owner(token_id, receiver)

        self.adjust_balance(receiver, count)
