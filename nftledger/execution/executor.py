from nftledger.db.driver import ContractDriver
from nftledger.events import EventLog
from nftledger.exceptions import UnknownOperation
from nftledger.token.contract import NFToken
from nftledger.token.state import TokenState
from nftledger.logger import get_logger
from nftledger import config
from copy import deepcopy
import threading
import traceback

log = get_logger('NFTLEDGER')


class Executor:
    """
    Runs one public operation at a time as a single all-or-nothing state transition.

    Invocations are serialized on a lock. An operation that returns normally has its
    pending writes and events committed together; an operation that raises has both
    thrown away, so no half-applied transfer or mint is ever visible afterwards.
    """
    def __init__(self, driver=None, events=None):
        self.driver = driver if driver is not None else ContractDriver()
        self.events = events if events is not None else EventLog()
        self.contracts = {}
        self.lock = threading.RLock()

    def get_contract(self, contract_name=config.CONTRACT_NAME) -> NFToken:
        contract = self.contracts.get(contract_name)
        if contract is None:
            contract = NFToken(TokenState(self.driver, self.events, contract=contract_name))
            self.contracts[contract_name] = contract
        return contract

    def _resolve(self, contract: NFToken, function_name):
        if function_name.startswith(config.PRIVATE_METHOD_PREFIX) or function_name not in NFToken.EXPORTS:
            raise UnknownOperation(function=function_name)

        if function_name != 'deploy':
            contract.access.require_deployed()

        return getattr(contract, function_name)

    def commit(self):
        self.driver.commit()
        self.events.commit()

    def rollback(self):
        self.driver.rollback()
        self.events.rollback()

    def execute(self, sender, contract_name, function_name, kwargs=None, auto_commit=True) -> dict:
        kwargs = kwargs or {}

        with self.lock:
            try:
                contract = self.get_contract(contract_name)
                func = self._resolve(contract, function_name)

                if function_name in NFToken.READ_ONLY:
                    result = func(**kwargs)
                else:
                    result = func(sender, **kwargs)

                status_code = 0
            except Exception as e:
                result = e
                log.error(str(e))
                log.error(traceback.format_exc())
                status_code = 1
                self.rollback()

            output = {
                'status_code': status_code,
                'result': result,
                'events': deepcopy(self.events.pending),
                'writes': deepcopy(self.driver.pending_writes),
            }

            if auto_commit and status_code == 0:
                self.commit()

            return output

    def flush(self):
        with self.lock:
            self.driver.flush()
            self.events.flush()
