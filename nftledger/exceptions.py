class LedgerError(Exception):
    """
    The base exception for the ledger. The fmt directive
    will be overloaded by the inheriting classes

    :ivar msg: The message associated with the error
    """
    fmt = 'An unspecified error occurred'

    def __init__(self, **kwargs):
        msg = self.fmt.format(**kwargs)
        Exception.__init__(self, msg)
        self.kwargs = kwargs


class BalanceUnderflow(LedgerError):
    """
    A balance adjustment would take a token count below zero.
    Balances always mirror ownership records, so this is an
    invariant violation and aborts the whole invocation.

    :ivar identity: The account whose balance was adjusted
    :ivar balance: The balance before the adjustment
    :ivar delta: The attempted adjustment
    """
    fmt = "Balance of '{identity}' would underflow: {balance} + ({delta}) < 0"


class CounterOverflow(LedgerError):
    """
    A counter would exceed the unsigned 64 bit range.

    :ivar value: The value that was about to be stored
    :ivar limit: The largest value allowed
    """
    fmt = "Counter value {value} exceeds limit {limit}"


class InvalidTokenId(LedgerError):
    fmt = "Token id {token_id!r} is not an unsigned 64 bit integer"


class InvalidAmount(LedgerError):
    fmt = "Amount {amount!r} is not an unsigned 64 bit integer"


class AlreadyDeployed(LedgerError):
    """
    The deploy hook runs exactly once per contract instance.

    :ivar contract: The name of the contract instance
    """
    fmt = "Contract '{contract}' has already been deployed"


class NotDeployed(LedgerError):
    fmt = "Contract '{contract}' has not been deployed"


class UnknownOperation(LedgerError):
    """
    The executor was asked to run a function that is not part
    of the exported surface.

    :ivar function: The requested function name
    """
    fmt = "Operation '{function}' is not exported"


class InvalidIdentity(LedgerError):
    fmt = "Identity {identity!r} must be a non-empty str or bytes value, and a str may not contain ':', '.' or '~'"
