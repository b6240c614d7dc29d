from nftledger.execution.executor import Executor
from nftledger.db.driver import ContractDriver
from nftledger.token.contract import NFToken
from nftledger.db.orm import Variable, Hash
from nftledger import config
from functools import partial


class AbstractContract:
    def __init__(self, name, signer, executor: Executor):
        self.name = name
        self.signer = signer
        self.executor = executor

        # set up virtual functions. each one is a partial so the signer can be overridden per call
        for func in sorted(NFToken.EXPORTS - {'deploy'}):
            setattr(self, func, partial(self._abstract_function_call,
                                        signer=self.signer,
                                        contract_name=self.name,
                                        executor=self.executor,
                                        func=func))

    def keys(self):
        return self.executor.driver.get_contract_keys(self.name)

    def quick_read(self, variable, key=None, args=None):
        a = []

        if key is not None:
            a.append(Hash._key_str(key))

        if args is not None and isinstance(args, list):
            for arg in args:
                a.append(Hash._key_str(arg))

        k = self.executor.driver.make_key(contract=self.name, variable=variable, args=a)
        return self.executor.driver.get(k)

    @property
    def events(self):
        return [e for e in self.executor.events if e['contract'] == self.name]

    def __getattr__(self, item):
        # Storage variables are readable as attributes, e.g. contract.owner.get()
        if item == config.OWNER_VAR:
            return Variable(contract=self.name, name=item, driver=self.executor.driver)

        if item in (config.ID_TO_OWNER_HASH, config.OWNER_TO_TOKEN_COUNT_HASH, config.APPROVALS_HASH):
            default_value = 0 if item == config.OWNER_TO_TOKEN_COUNT_HASH else None
            return Hash(contract=self.name, name=item, driver=self.executor.driver, default_value=default_value)

        raise AttributeError(item)

    def _abstract_function_call(self, signer, executor, contract_name, func, **kwargs):
        output = executor.execute(sender=signer,
                                  contract_name=contract_name,
                                  function_name=func,
                                  kwargs=kwargs)

        if output['status_code'] == 1:
            raise output['result']

        return output['result']


class NFTokenClient:
    def __init__(self, signer='sys', driver=None, executor=None):
        if executor is None:
            executor = Executor(driver=driver if driver is not None else ContractDriver())

        self.executor = executor
        self.raw_driver = executor.driver
        self.signer = signer

    def flush(self):
        self.executor.flush()

    def deploy(self, init_value=0, name=config.CONTRACT_NAME, signer=None):
        signer = signer or self.signer

        output = self.executor.execute(sender=signer,
                                       contract_name=name,
                                       function_name='deploy',
                                       kwargs={'init_value': init_value})

        if output['status_code'] == 1:
            raise output['result']

        return self.get_contract(name)

    # Returns abstract contract which has partial methods mapped to each exported function.
    def get_contract(self, name=config.CONTRACT_NAME):
        if not self.executor.get_contract(name).access.is_deployed():
            return None

        return AbstractContract(name=name,
                                signer=self.signer,
                                executor=self.executor)

    def get_contracts(self):
        contracts = []
        suffix = '{}{}'.format(config.INDEX_SEPARATOR, config.OWNER_VAR)
        for key in self.raw_driver.driver.keys():
            if key.endswith(suffix):
                contracts.append(key[:-len(suffix)])
        return contracts

    def get_var(self, contract, variable, arguments=None):
        return self.raw_driver.get_var(contract, variable, [Hash._key_str(a) for a in arguments])
